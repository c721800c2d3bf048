from dataclasses import dataclass
from numbers import Integral
from typing import Sequence

@dataclass(frozen=True)
class Point:
    """
    Represents a single point (x, y) on the integer plane.
    frozen=True makes the class immutable and hashable by its coordinates.
    """
    x: int
    y: int

    @property
    def tuple(self):
        return (self.x, self.y)

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> "Point":
        """
        Builds a Point from a raw (x, y) pair.

        Args:
            pair: A two-element sequence of integers. Numpy integer scalars are accepted.

        Returns:
            The corresponding Point with plain Python int coordinates.
        """
        if len(pair) != 2:
            raise ValueError(f"Point must have exactly 2 coordinates, got {len(pair)}: {pair!r}")

        coords = []
        for value in pair:
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Point coordinates must be integers, got {type(value).__name__}: {value!r}")
            coords.append(int(value))

        return cls(x=coords[0], y=coords[1])
