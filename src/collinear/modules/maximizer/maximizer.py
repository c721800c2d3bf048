import logging
from typing import Iterable, List, Sequence

import numpy as np

from collinear.core.point import Point
from collinear.modules.grouping.grouper import collinear_group

logger = logging.getLogger(__name__)

def to_points(raw_points: Iterable[Sequence[int]]) -> List[Point]:
    """
    Converts raw (x, y) pairs into Points.

    Args:
        raw_points: Any iterable of 2-element integer sequences, or an integer array of shape (n, 2).

    Returns:
        List of Points in input order.
    """
    if isinstance(raw_points, np.ndarray):
        coords = raw_points
    else:
        # object dtype keeps the original Python values for per-coordinate type checks
        coords = np.asarray(list(raw_points), dtype=object)

    if coords.size == 0:
        raise ValueError("empty input")
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected (x, y) pairs with shape (n, 2), got shape {coords.shape}")
    if coords.dtype != object and not np.issubdtype(coords.dtype, np.integer):
        raise TypeError(f"Point coordinates must be integers, got dtype {coords.dtype}")

    # Point.from_pair converts to Python ints, so later products cannot overflow
    return [Point.from_pair(tuple(row)) for row in coords]

def collinear_groups(points: Sequence[Point]) -> List[List[Point]]:
    """
    Computes the best collinear group for every input element.
    Results are indexed by input position, so duplicate coordinates each keep their own entry.
    """
    return [collinear_group(point, points) for point in points]

def largest_collinear_group(raw_points: Iterable[Sequence[int]]) -> List[Point]:
    """
    Finds the points lying on the most populous single line.

    Args:
        raw_points: Raw (x, y) integer pairs. Must not be empty.

    Returns:
        The winning group, reference point first. Ties between equally large
        groups are resolved in favour of the earliest reference point.
    """
    points = to_points(raw_points)
    groups = collinear_groups(points)
    best = max(groups, key=len)

    logger.debug("Largest collinear group has %d of %d points", len(best), len(points))
    return best

def max_collinear_points(raw_points: Iterable[Sequence[int]]) -> int:
    """
    Maximum number of input points that lie on one common line.
    Raises ValueError on empty input.
    """
    return len(largest_collinear_group(raw_points))
