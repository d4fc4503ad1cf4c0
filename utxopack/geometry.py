"""
Geometry primitives

Point distance and circle-circle intersection used by the packing engine.
Both work on scalars and, elementwise, on numpy arrays.
"""

from __future__ import annotations
from typing import List, Tuple
import numpy as np

Point = Tuple[float, float]


def distance(x1, y1, x2, y2):
    """Euclidean distance between (x1, y1) and (x2, y2)"""
    return np.hypot(x2 - x1, y2 - y1)


def intersection_points_array(
    x1: np.ndarray, y1: np.ndarray, r1: np.ndarray,
    x2: np.ndarray, y2: np.ndarray, r2: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Intersection points of many circle pairs at once

    With r1 = c1.r + r and r2 = c2.r + r these are exactly the centers at
    which a circle of radius r touches both c1 and c2 from outside.

    a = (r1^2 - r2^2 + d^2) / 2d is the distance from c1 to the chord along
    the c1 -> c2 axis, h = sqrt(r1^2 - a^2) the half chord.

    Args:
        x1, y1, r1: Centers and radii of the first circles, shape (n,)
        x2, y2, r2: Centers and radii of the second circles, shape (n,)

    Returns:
        (px, py, valid): px and py of shape (n, 2) holding both points per
        pair, and a mask of shape (n,) that is False where the centers
        coincide or h is not real. Points of invalid pairs are meaningless.
    """
    dx = x2 - x1
    dy = y2 - y1
    d = np.hypot(dx, dy)

    with np.errstate(divide='ignore', invalid='ignore'):
        a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
        h_squared = r1 * r1 - a * a
        valid = (d > 0) & (h_squared >= 0)

        h = np.sqrt(np.where(valid, h_squared, 0.0))
        ux = np.where(valid, dx / d, 0.0)
        uy = np.where(valid, dy / d, 0.0)

        x3 = x1 + a * ux
        y3 = y1 + a * uy

    px = np.stack([x3 + h * uy, x3 - h * uy], axis=-1)
    py = np.stack([y3 - h * ux, y3 + h * ux], axis=-1)
    return px, py, valid


def intersection_points(
    x1: float, y1: float, r1: float,
    x2: float, y2: float, r2: float
) -> List[Point]:
    """
    Intersection points of two circles

    Returns:
        The two intersection points (equal when the circles touch), or an
        empty list when the centers coincide, the circles are too far apart
        or one contains the other.
    """
    px, py, valid = intersection_points_array(
        *(np.array([v], dtype=float) for v in (x1, y1, r1, x2, y2, r2))
    )
    if not valid[0]:
        return []
    return [(float(px[0, 0]), float(py[0, 0])), (float(px[0, 1]), float(py[0, 1]))]
