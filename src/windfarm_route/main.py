"""Main application for the wind-farm waypoint planner."""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml

from .console import CommandConsole
from .path_planning import path_length
from .planner import WindFarmPlanner
from .seed import load_seed_file
from .shared_positions import SharedPositionStore
from .waypoints import MalformedSeedError, PathPoint

logger = logging.getLogger(__name__)


def default_config() -> dict:
    """Built-in configuration defaults."""
    return {
        "seed": {
            "path": None,
        },
        "planner": {
            "add_distance": 5.0,
        },
        "path": {
            "curve_points": 100,
        },
        "export": {
            "output_dir": "output",
        },
        "logging": {
            "level": "INFO",
        },
    }


def deep_merge(base: dict, override: dict):
    """Deep merge override into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value


def load_config(config_path: Optional[str]) -> dict:
    """Load configuration from file, falling back to defaults."""
    config = default_config()

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            loaded = yaml.safe_load(f)
            if loaded:
                deep_merge(config, loaded)
    elif config_path:
        logger.debug(f"Config file {config_path} not found, using defaults")

    return config


class WindFarmApplication:
    """Wires the shared position store, planner and console together."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        seed_path: Optional[str] = None,
        config: Optional[dict] = None,
    ):
        """Initialize the application.

        Args:
            config_path: Path to YAML config file
            seed_path: JSON seed file (overrides config)
            config: Already loaded configuration; config_path is ignored when given

        Raises:
            MalformedSeedError: If the seed file fails validation
            OSError: If the seed file cannot be read
        """
        self.config = config if config is not None else load_config(config_path)
        if seed_path is not None:
            self.config["seed"]["path"] = seed_path

        # Upload step: seeds the shared store, which the planner reads once
        self.shared_positions = SharedPositionStore()
        seed = self.config["seed"]["path"]
        if seed:
            self.shared_positions.set_positions(load_seed_file(seed))

        self.planner = WindFarmPlanner(
            shared_positions=self.shared_positions,
            add_distance=float(self.config["planner"]["add_distance"]),
        )
        self.console = CommandConsole(
            self.planner,
            curve_points=int(self.config["path"]["curve_points"]),
        )

    def run_batch(self, output_path: Optional[str] = None) -> List[PathPoint]:
        """Compute the path once, print it and optionally export it."""
        path = self.planner.recompute_path()
        if not path:
            logger.warning(f"Path needs at least 2 points, have {len(self.planner.store)}")
            return path

        for i, point in enumerate(path, start=1):
            x, y, z = point.position
            print(f"{i:3d}. {point.id}  ({x:.2f}, {y:.2f}, {z:.2f})")
        print(f"Length: {path_length(path):.2f}")

        if output_path:
            self.export_path(output_path)
        return path

    def export_path(self, output_path: Optional[str] = None) -> Path:
        """Write the current path and its length as JSON."""
        if output_path:
            target = Path(output_path)
        else:
            target = Path(self.config["export"]["output_dir"]) / "path.json"
        target.parent.mkdir(parents=True, exist_ok=True)

        path = self.planner.path
        data = {
            "path": [{"id": p.id, "position": list(p.position)} for p in path],
            "length": path_length(path),
        }
        with open(target, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Exported path to {target}")
        return target

    def run_interactive(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout):
        """Run the command console until quit or end of input."""
        stdout.write(f"{len(self.planner.store)} points loaded. Type 'help' for commands.\n")
        self.console.run(stdin, stdout)


def setup_logging(level: str = "INFO"):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Wind-farm waypoint planner")
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="config/config.yaml",
        help="Path to config file",
    )
    parser.add_argument(
        "--seed", "-s",
        type=str,
        help="JSON file with turbine records (each with a 'position' [x, y, z])",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write the computed path as JSON to this file",
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Start the command console instead of computing the path once",
    )
    parser.add_argument(
        "--log-level", "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config)",
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(args.log_level or config["logging"]["level"])

    try:
        app = WindFarmApplication(seed_path=args.seed, config=config)
    except MalformedSeedError as e:
        logger.error(f"Failed to load seed: {e}")
        for error in e.errors:
            logger.error(f"  {error}")
        return 1
    except OSError as e:
        logger.error(f"Failed to read seed: {e}")
        return 1

    if args.interactive:
        app.run_interactive()
    else:
        app.run_batch(args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
