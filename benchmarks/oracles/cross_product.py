from typing import List, Sequence

import numpy as np

class CrossProductOracle:
    """
    Brute-force collinearity oracle.
    Checks every reference/partner pair against every point with a 2D cross product
    instead of slope keys, so it shares no code with the line canonicalizer.
    O(n^3), only meant for small point sets in tests.
    """

    def process(self, raw_points: Sequence[Sequence[int]]) -> int:
        """
        Args:
            raw_points: (x, y) integer pairs with small magnitudes (int64 arithmetic).

        Returns:
            Size of the largest collinear group. Points equal to the reference are not counted.
        """
        coords = np.asarray(raw_points, dtype=np.int64)
        if coords.size == 0:
            raise ValueError("empty input")

        best = 1
        for i in range(len(coords)):
            offsets = coords - coords[i]
            # Duplicates of the reference point never join its groups
            is_other = np.any(offsets != 0, axis=1)

            for j in np.flatnonzero(is_other):
                dx, dy = offsets[j]
                cross = dx * offsets[:, 1] - dy * offsets[:, 0]
                count = 1 + int(np.count_nonzero(is_other & (cross == 0)))
                best = max(best, count)

        return best
