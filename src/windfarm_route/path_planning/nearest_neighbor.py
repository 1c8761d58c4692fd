"""Greedy nearest-neighbor tour construction over waypoints."""

import logging
from typing import List, Sequence

import numpy as np

from ..waypoints import PathPoint, Position

logger = logging.getLogger(__name__)


def find_nearest_neighbor_path(points: Sequence[PathPoint]) -> List[PathPoint]:
    """Order points into a tour with the nearest-neighbor heuristic.

    The tour starts at the first input point and repeatedly steps to the
    closest unvisited point (Euclidean distance in 3D). Ties go to the
    earliest point in input order, so the result is deterministic. This is
    an O(n^2) heuristic, not an optimal TSP solution.

    Args:
        points: Points to visit, in any order (not modified)

    Returns:
        A new list holding every input point exactly once
    """
    if not points:
        return []
    if len(points) == 1:
        return [points[0]]

    path = [points[0]]
    unvisited = list(points[1:])
    coords = np.array([p.position for p in unvisited], dtype=float)
    current = np.array(points[0].position, dtype=float)

    while unvisited:
        distances = np.sqrt(((coords - current) ** 2).sum(axis=1))
        # argmin returns the first index of the minimum
        nearest = int(np.argmin(distances))

        current = coords[nearest]
        path.append(unvisited.pop(nearest))
        coords = np.delete(coords, nearest, axis=0)

    logger.debug(f"Built nearest-neighbor path through {len(path)} points")
    return path


def path_length(path: Sequence[PathPoint]) -> float:
    """Total Euclidean length of a tour (0.0 for fewer than 2 points)."""
    if len(path) < 2:
        return 0.0
    coords = np.array([p.position for p in path], dtype=float)
    return float(np.linalg.norm(np.diff(coords, axis=0), axis=1).sum())


def tour_positions(path: Sequence[PathPoint]) -> List[Position]:
    """Positions of a tour in visiting order, for line-strip rendering."""
    return [p.position for p in path]
