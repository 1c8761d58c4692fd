"""Path planning module."""

from .curve import linear_curve, smooth_curve
from .nearest_neighbor import find_nearest_neighbor_path, path_length, tour_positions

__all__ = [
    "find_nearest_neighbor_path",
    "linear_curve",
    "path_length",
    "smooth_curve",
    "tour_positions",
]
