"""Ordered waypoint collection with a single selection."""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from .point import IdGenerator, PathPoint, Position, to_position, to_positions

logger = logging.getLogger(__name__)


class PointStore:
    """Owns the canonical, insertion-ordered list of waypoints.

    Operations on unknown ids are no-ops that log and return False, since
    interactive callers can race a delete with a move or a click.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        """Initialize an empty store.

        Args:
            id_generator: Id source; a new session-scoped generator by default
        """
        self._id_generator = id_generator if id_generator is not None else IdGenerator()
        self._points: List[PathPoint] = []
        self._selected_id: Optional[str] = None

    @property
    def selected_id(self) -> Optional[str]:
        """Currently selected id, or None."""
        return self._selected_id

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, point_id: str) -> bool:
        return self._index_of(point_id) is not None

    def initialize(self, positions: Iterable[Sequence[float]]) -> List[str]:
        """Replace the collection with one point per position.

        Does not write back to any shared position store; callers that
        initialize from that store would otherwise loop.

        Args:
            positions: 3-vectors to seed the store with

        Returns:
            Ids of the new points, in input order

        Raises:
            MalformedSeedError: If any position is invalid (store unchanged)
        """
        normalized = to_positions(positions)

        self._points = [
            PathPoint(id=self._id_generator.next_id(), position=position)
            for position in normalized
        ]
        self._selected_id = None
        logger.info(f"Initialized store with {len(self._points)} points")
        return [p.id for p in self._points]

    def add(self, position: Sequence[float]) -> str:
        """Append a new point and return its id."""
        point = PathPoint(id=self._id_generator.next_id(), position=to_position(position))
        self._points.append(point)
        logger.debug(f"Added point {point.id} at {point.position}")
        return point.id

    def update_position(self, point_id: str, position: Sequence[float]) -> bool:
        """Move a point, keeping its place in the collection.

        Returns:
            True if the point existed and was moved
        """
        new_position = to_position(position)
        index = self._index_of(point_id)
        if index is None:
            logger.warning(f"Cannot move point {point_id}: not found")
            return False

        self._points[index] = replace(self._points[index], position=new_position)
        logger.debug(f"Moved point {point_id} to {new_position}")
        return True

    def remove(self, point_id: str) -> bool:
        """Delete a point, clearing the selection if it pointed at it.

        Returns:
            True if the point existed and was removed
        """
        index = self._index_of(point_id)
        if index is None:
            logger.warning(f"Cannot delete point {point_id}: not found")
            return False

        del self._points[index]
        if self._selected_id == point_id:
            self._selected_id = None
        logger.debug(f"Deleted point {point_id}")
        return True

    def select(self, point_id: Optional[str]):
        """Record the current selection (None clears it)."""
        if point_id is not None and point_id not in self:
            logger.debug(f"Selected id {point_id} has no matching point")
        self._selected_id = point_id

    def get(self, point_id: str) -> Optional[PathPoint]:
        index = self._index_of(point_id)
        return None if index is None else self._points[index]

    def list(self) -> List[PathPoint]:
        """Snapshot of the points in insertion order."""
        return list(self._points)

    def positions(self) -> List[Position]:
        """Flat positions in collection order."""
        return [p.position for p in self._points]

    def _index_of(self, point_id: str) -> Optional[int]:
        for i, point in enumerate(self._points):
            if point.id == point_id:
                return i
        return None
