"""Command handlers tying the point store, path builder and shared positions."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

import numpy as np

from .path_planning import find_nearest_neighbor_path, path_length, tour_positions
from .shared_positions import SharedPositionStore
from .waypoints import PathPoint, PointStore, Position, to_position

logger = logging.getLogger(__name__)

DEFAULT_ADD_DISTANCE = 5.0


@dataclass
class PlannerSnapshot:
    """What a renderer needs after each command."""
    points: List[PathPoint] = field(default_factory=list)
    selected_id: Optional[str] = None
    path_positions: List[Position] = field(default_factory=list)


SnapshotListener = Callable[[PlannerSnapshot], None]


def position_in_front(
    camera_position: Sequence[float],
    camera_direction: Sequence[float],
    distance: float = DEFAULT_ADD_DISTANCE,
) -> Position:
    """Point ``distance`` units along the camera's view direction.

    Raises:
        ValueError: If the direction has zero length
    """
    origin = np.array(to_position(camera_position))
    direction = np.array(to_position(camera_direction))

    norm = np.linalg.norm(direction)
    if norm == 0:
        raise ValueError("Camera direction must be non-zero")

    return to_position(origin + direction / norm * distance)


class WindFarmPlanner:
    """Synchronous command handlers for waypoint editing and path generation.

    Add and move leave any computed path stale until ``recompute_path`` is
    called. Delete recomputes a held path so it never references a removed
    point. A path over fewer than 2 points is always cleared.
    """

    def __init__(
        self,
        shared_positions: Optional[SharedPositionStore] = None,
        point_store: Optional[PointStore] = None,
        add_distance: float = DEFAULT_ADD_DISTANCE,
    ):
        """Initialize planner.

        Args:
            shared_positions: Cross-view position store; read once here to
                seed the points and written after each collection change
            point_store: Store to operate on (new empty store by default)
            add_distance: Distance ahead of the camera for ``add_point_in_front``
        """
        self.shared_positions = shared_positions if shared_positions is not None else SharedPositionStore()
        self.store = point_store if point_store is not None else PointStore()
        self.add_distance = add_distance
        self._path: List[PathPoint] = []
        self._listeners: List[SnapshotListener] = []

        if len(self.shared_positions):
            self.store.initialize(self.shared_positions.get_positions())

    @property
    def path(self) -> List[PathPoint]:
        """Latest computed tour (may be stale after add/move)."""
        return list(self._path)

    def add_listener(self, listener: SnapshotListener):
        """Register a callback receiving a snapshot after every command."""
        self._listeners.append(listener)

    def snapshot(self) -> PlannerSnapshot:
        return PlannerSnapshot(
            points=self.store.list(),
            selected_id=self.store.selected_id,
            path_positions=tour_positions(self._path),
        )

    def load_positions(self, positions: Sequence[Sequence[float]]) -> List[str]:
        """Replace all points, e.g. after a new upload.

        Raises:
            MalformedSeedError: If positions are invalid (state unchanged)
        """
        ids = self.store.initialize(positions)
        self._path = []
        self._notify()
        return ids

    def reload_from_shared(self) -> List[str]:
        """Re-seed the points from the shared position store."""
        return self.load_positions(self.shared_positions.get_positions())

    def add_point(self, position: Sequence[float]) -> str:
        point_id = self.store.add(position)
        self._after_mutation()
        return point_id

    def add_point_in_front(
        self,
        camera_position: Sequence[float],
        camera_direction: Sequence[float],
    ) -> str:
        """Add a point ahead of the camera."""
        position = position_in_front(camera_position, camera_direction, self.add_distance)
        return self.add_point(position)

    def move_point(self, point_id: str, position: Sequence[float]) -> bool:
        if not self.store.update_position(point_id, position):
            return False
        self._after_mutation()
        return True

    def delete_point(self, point_id: str) -> bool:
        if not self.store.remove(point_id):
            return False
        if self._path:
            self._path = find_nearest_neighbor_path(self.store.list())
        self._after_mutation()
        return True

    def select_point(self, point_id: Optional[str]):
        self.store.select(point_id)
        self._notify()

    def recompute_path(self) -> List[PathPoint]:
        """Rebuild the tour from the current points."""
        points = self.store.list()
        if len(points) < 2:
            self._path = []
        else:
            self._path = find_nearest_neighbor_path(points)
            logger.info(
                f"Path through {len(self._path)} points, length {path_length(self._path):.2f}"
            )
        self._notify()
        return self.path

    def _after_mutation(self):
        if len(self.store) < 2:
            self._path = []
        self.shared_positions.set_positions(self.store.positions())
        self._notify()

    def _notify(self):
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
