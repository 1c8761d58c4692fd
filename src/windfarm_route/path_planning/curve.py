"""Dense curves through tour positions for line-strip rendering."""

import logging
from typing import List, Sequence

import numpy as np
from scipy import interpolate

from ..waypoints import Position

logger = logging.getLogger(__name__)


def smooth_curve(
    positions: Sequence[Position],
    num_points: int = 100,
) -> List[Position]:
    """Generate a smooth 3D curve through positions using spline interpolation.

    Args:
        positions: Tour positions in visiting order
        num_points: Number of points on the curve

    Returns:
        List of (x, y, z) points along the curve
    """
    if len(positions) < 2:
        return [tuple(p) for p in positions]

    coords = np.array(positions, dtype=float)
    # splprep cannot parametrize zero-length segments
    keep = np.concatenate(([True], np.any(np.diff(coords, axis=0) != 0, axis=1)))
    coords = coords[keep]
    if len(coords) < 2:
        return linear_curve(positions, num_points)

    try:
        if len(coords) >= 4:
            # Cubic spline for 4+ points
            tck, _ = interpolate.splprep(coords.T, s=0, k=3)
        else:
            k = min(len(coords) - 1, 2)
            tck, _ = interpolate.splprep(coords.T, s=0, k=k)

        u_new = np.linspace(0, 1, num_points)
        x, y, z = interpolate.splev(u_new, tck)
        if not np.all(np.isfinite([x, y, z])):
            raise ValueError("spline produced non-finite values")

        return [(float(a), float(b), float(c)) for a, b, c in zip(x, y, z)]

    except Exception as e:
        logger.warning(f"Spline interpolation failed: {e}, using linear")
        return linear_curve(positions, num_points)


def linear_curve(
    positions: Sequence[Position],
    num_points: int,
) -> List[Position]:
    """Piecewise linear interpolation fallback."""
    if len(positions) < 2:
        return [tuple(p) for p in positions]

    coords = np.array(positions, dtype=float)
    segment_points = max(num_points // (len(positions) - 1), 1)

    points = []
    for start, end in zip(coords[:-1], coords[1:]):
        for j in range(segment_points):
            t = j / segment_points
            a, b, c = start + t * (end - start)
            points.append((float(a), float(b), float(c)))

    last = coords[-1]
    points.append((float(last[0]), float(last[1]), float(last[2])))
    return points
