"""Waypoint entity and store module."""

from .point import IdGenerator, MalformedSeedError, PathPoint, Position, to_position, to_positions
from .store import PointStore

__all__ = [
    "IdGenerator",
    "MalformedSeedError",
    "PathPoint",
    "PointStore",
    "Position",
    "to_position",
    "to_positions",
]
