from dataclasses import dataclass
from typing import Union

from collinear.core.fraction import ExactFraction
from collinear.core.point import Point

@dataclass(frozen=True)
class Undefined:
    """
    Slope of a vertical line.
    """

    def __str__(self) -> str:
        return "undefined"

UNDEFINED = Undefined()

@dataclass(frozen=True)
class Defined:
    """
    Slope of a non-vertical line, kept as an exact fraction.
    """
    fraction: ExactFraction

    def __str__(self) -> str:
        return str(self.fraction)

Slope = Union[Undefined, Defined]

def slope(a: Point, b: Point) -> Slope:
    """
    Direction of the line through a and b, independent of its position.
    A fraction is only built when a.x != b.x, so its denominator is never zero.
    """
    if a.x == b.x:
        return UNDEFINED
    return Defined(ExactFraction.new(a.y - b.y, a.x - b.x))

@dataclass(frozen=True)
class Line:
    """
    Canonical, hashable descriptor of an infinite line.

    For a vertical line the intercept is its x coordinate. Otherwise, with
    slope p/q (q > 0), the intercept is q*y - p*x, which is the y-intercept
    scaled by q. It is the same integer for every point on the line, so
    any two pairs of points on one line produce equal keys.
    """
    slope: Slope
    intercept: int

    @classmethod
    def through(cls, a: Point, b: Point) -> "Line":
        """
        Builds the line through the reference point a and a partner b.

        Args:
            a: The reference point.
            b: A second point with different coordinates.

        Returns:
            The canonical Line containing both points.
        """
        if a == b:
            raise ValueError(f"A line needs two distinct points, got {a} twice")

        direction = slope(a, b)
        if isinstance(direction, Undefined):
            return cls(slope=direction, intercept=a.x)

        f = direction.fraction
        return cls(slope=direction, intercept=f.denominator * a.y - f.numerator * a.x)
