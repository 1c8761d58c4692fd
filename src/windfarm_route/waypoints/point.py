"""Waypoint entity and id generation."""

import itertools
import math
import uuid
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, List, Optional, Sequence, Tuple

Position = Tuple[float, float, float]


class MalformedSeedError(ValueError):
    """Raised when seed positions cannot be turned into valid 3-vectors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass(frozen=True)
class PathPoint:
    """A uniquely identified waypoint."""
    id: str
    position: Position


def to_position(value: Sequence[float]) -> Position:
    """Normalize a 3-component sequence to a tuple of finite floats.

    Args:
        value: Sequence of three real numbers (x, y, z)

    Returns:
        Position tuple

    Raises:
        ValueError: If value is not exactly three finite real numbers
    """
    if isinstance(value, (str, bytes)):
        raise ValueError(f"Position must be a sequence of 3 numbers, got {value!r}")

    try:
        components = list(value)
    except TypeError:
        raise ValueError(f"Position must be a sequence of 3 numbers, got {value!r}") from None

    if len(components) != 3:
        raise ValueError(f"Position must have 3 components, got {len(components)}")

    coords = []
    for component in components:
        # bool is a Real subclass but never a coordinate
        if isinstance(component, bool) or not isinstance(component, Real):
            raise ValueError(f"Position component must be a number, got {component!r}")
        try:
            coord = float(component)
        except OverflowError:
            raise ValueError(f"Position component is too large, got {component!r}") from None
        if not math.isfinite(coord):
            raise ValueError(f"Position component must be finite, got {component!r}")
        coords.append(coord)

    return (coords[0], coords[1], coords[2])


def to_positions(values: Iterable[Sequence[float]]) -> List[Position]:
    """Normalize a whole batch of positions, failing as a unit.

    Raises:
        MalformedSeedError: If any entry is not a valid position
    """
    if values is None or isinstance(values, (str, bytes)):
        raise MalformedSeedError("Positions must be a sequence of 3-vectors")
    try:
        values = list(values)
    except TypeError:
        raise MalformedSeedError("Positions must be a sequence of 3-vectors") from None

    positions = []
    errors = []
    for i, value in enumerate(values):
        try:
            positions.append(to_position(value))
        except ValueError as e:
            errors.append(f"positions[{i}]: {e}")

    if errors:
        raise MalformedSeedError(
            f"{len(errors)} invalid position(s) in seed", errors=errors
        )
    return positions


class IdGenerator:
    """Issues waypoint ids that are never repeated within a session.

    Ids combine a random session token with a monotonically increasing
    counter, so deleting points or re-initializing a store cannot make a
    later id collide with an earlier one.
    """

    def __init__(self, session_token: Optional[str] = None, start: int = 1):
        self.session_token = session_token or uuid.uuid4().hex[:8]
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        """Return a fresh id."""
        return f"{self.session_token}-{next(self._counter)}"
