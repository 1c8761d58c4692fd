"""Process-wide holder of turbine positions shared between views."""

import logging
from typing import Callable, List, Optional, Sequence

from .waypoints import Position, to_positions

logger = logging.getLogger(__name__)

PositionsCallback = Callable[[List[Position]], None]


class SharedPositionStore:
    """Holds the raw turbine position list.

    Seeded by the upload step, read once by the planner at start-up and
    written back by it after mutations.
    """

    def __init__(self, positions: Optional[Sequence[Position]] = None):
        self._positions: List[Position] = to_positions(positions if positions is not None else [])
        self._callbacks: List[PositionsCallback] = []

    def get_positions(self) -> List[Position]:
        """Return a copy of the stored positions."""
        return list(self._positions)

    def set_positions(self, positions: Sequence[Position]):
        """Replace the stored positions and notify subscribers.

        Raises:
            MalformedSeedError: If any position is invalid (nothing stored)
        """
        self._positions = to_positions(positions)
        logger.debug(f"Shared positions updated ({len(self._positions)} entries)")
        for callback in list(self._callbacks):
            callback(self.get_positions())

    def subscribe(self, callback: PositionsCallback):
        """Register a callback invoked with the new list on every update."""
        self._callbacks.append(callback)

    def unsubscribe(self, callback: PositionsCallback):
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def __len__(self) -> int:
        return len(self._positions)
