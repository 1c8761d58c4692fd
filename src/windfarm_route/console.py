"""Line-oriented command console driving the planner."""

import logging
import shlex
from typing import Callable, Dict, List, Optional, TextIO

from .path_planning import path_length, smooth_curve
from .planner import WindFarmPlanner
from .seed import save_seed_file
from .waypoints import PathPoint

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  add X Y Z                   Add a point
  add-front CX CY CZ DX DY DZ Add a point ahead of a camera at C looking along D
  move ID X Y Z               Move a point
  delete ID                   Delete a point
  select ID|none              Select a point (or clear the selection)
  list                        List points
  path                        Generate/update the path
  curve                       Show the smoothed curve through the current path
  save FILE                   Save point positions as a seed file
  help                        Show this help
  quit                        Exit"""


class CommandError(Exception):
    """Invalid console command or arguments."""


def format_point(point: PathPoint, selected: bool = False) -> str:
    x, y, z = point.position
    marker = "*" if selected else " "
    return f"{marker} {point.id}  X: {x:.1f}, Y: {y:.1f}, Z: {z:.1f}"


class CommandConsole:
    """Parses text commands and dispatches them to planner handlers."""

    def __init__(self, planner: WindFarmPlanner, curve_points: int = 100):
        """Initialize console.

        Args:
            planner: Planner receiving the commands
            curve_points: Samples for the ``curve`` command
        """
        self.planner = planner
        self.curve_points = curve_points
        self._running = False
        self._handlers: Dict[str, Callable[[List[str]], str]] = {
            "add": self._cmd_add,
            "add-front": self._cmd_add_front,
            "move": self._cmd_move,
            "delete": self._cmd_delete,
            "select": self._cmd_select,
            "list": self._cmd_list,
            "path": self._cmd_path,
            "curve": self._cmd_curve,
            "save": self._cmd_save,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    @property
    def is_running(self) -> bool:
        return self._running

    def execute(self, line: str) -> str:
        """Run one command line and return its output text.

        Invalid commands are reported in the returned text.
        """
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            return f"Error: {e}"
        if not tokens:
            return ""

        name, args = tokens[0].lower(), tokens[1:]
        handler = self._handlers.get(name)
        if handler is None:
            return f"Error: unknown command '{name}' (try 'help')"

        try:
            return handler(args)
        except (CommandError, ValueError) as e:
            return f"Error: {e}"
        except OSError as e:
            logger.error(f"Command '{name}' failed: {e}")
            return f"Error: {e}"

    def run(self, stdin: TextIO, stdout: TextIO, prompt: Optional[str] = "> "):
        """Read commands until ``quit`` or end of input."""
        self._running = True
        while self._running:
            if prompt:
                stdout.write(prompt)
                stdout.flush()
            line = stdin.readline()
            if not line:
                break
            output = self.execute(line)
            if output:
                stdout.write(output + "\n")
        self._running = False

    def _parse_floats(self, args: List[str], count: int) -> List[float]:
        if len(args) != count:
            raise CommandError(f"expected {count} numbers, got {len(args)}")
        try:
            return [float(a) for a in args]
        except ValueError:
            raise CommandError(f"coordinates must be numbers: {' '.join(args)}") from None

    def _cmd_add(self, args: List[str]) -> str:
        point_id = self.planner.add_point(self._parse_floats(args, 3))
        return f"Added {point_id}"

    def _cmd_add_front(self, args: List[str]) -> str:
        values = self._parse_floats(args, 6)
        point_id = self.planner.add_point_in_front(values[:3], values[3:])
        return f"Added {point_id} at {self._fmt(self.planner.store.get(point_id).position)}"

    def _cmd_move(self, args: List[str]) -> str:
        if not args:
            raise CommandError("usage: move ID X Y Z")
        point_id, coords = args[0], self._parse_floats(args[1:], 3)
        if not self.planner.move_point(point_id, coords):
            return f"Point {point_id} not found"
        return f"Moved {point_id}"

    def _cmd_delete(self, args: List[str]) -> str:
        if len(args) != 1:
            raise CommandError("usage: delete ID")
        if not self.planner.delete_point(args[0]):
            return f"Point {args[0]} not found"
        return f"Deleted {args[0]}"

    def _cmd_select(self, args: List[str]) -> str:
        if len(args) != 1:
            raise CommandError("usage: select ID|none")
        point_id = None if args[0].lower() == "none" else args[0]
        self.planner.select_point(point_id)
        return "Selection cleared" if point_id is None else f"Selected {point_id}"

    def _cmd_list(self, args: List[str]) -> str:
        points = self.planner.store.list()
        if not points:
            return "No points."
        selected = self.planner.store.selected_id
        return "\n".join(format_point(p, p.id == selected) for p in points)

    def _cmd_path(self, args: List[str]) -> str:
        path = self.planner.recompute_path()
        if not path:
            return "Path needs at least 2 points."
        order = " -> ".join(p.id for p in path)
        return f"{order}\nLength: {path_length(path):.2f}"

    def _cmd_curve(self, args: List[str]) -> str:
        positions = self.planner.snapshot().path_positions
        if not positions:
            return "No path. Run 'path' first."
        curve = smooth_curve(positions, num_points=self.curve_points)
        return "\n".join(self._fmt(p) for p in curve)

    def _cmd_save(self, args: List[str]) -> str:
        if len(args) != 1:
            raise CommandError("usage: save FILE")
        save_seed_file(args[0], self.planner.store.positions())
        return f"Saved {len(self.planner.store)} points to {args[0]}"

    def _cmd_help(self, args: List[str]) -> str:
        return HELP_TEXT

    def _cmd_quit(self, args: List[str]) -> str:
        self._running = False
        return ""

    @staticmethod
    def _fmt(position) -> str:
        return f"({position[0]:.2f}, {position[1]:.2f}, {position[2]:.2f})"
