from typing import Dict, List, Sequence

from collinear.core.line import Line
from collinear.core.point import Point

def lines_containing(point: Point, all_points: Sequence[Point]) -> Dict[Line, List[Point]]:
    """
    Buckets every other point by the line it forms with the reference point.

    Args:
        point: The reference point. Every returned line passes through it.
        all_points: The full point set. Entries equal to the reference point are skipped.

    Returns:
        Mapping from each Line to its points, reference point first, then partners in input order.
    """
    lines: Dict[Line, List[Point]] = {}

    for other in all_points:
        if other == point:
            continue

        line = Line.through(point, other)
        bucket = lines.get(line)
        if bucket is not None:
            bucket.append(other)
        else:
            lines[line] = [point, other]

    return lines

def collinear_group(point: Point, all_points: Sequence[Point]) -> List[Point]:
    """
    Returns the largest set of points lying on one line through the reference point.
    Among equally large groups the winner is unspecified (currently the first line found).
    If no other point exists, the group is just [point].
    """
    lines = lines_containing(point, all_points)
    if not lines:
        return [point]

    # max() keeps the first maximal bucket in insertion order
    return max(lines.values(), key=len)
