import logging
import os
import sys

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from collinear import largest_collinear_group, max_collinear_points

EXAMPLES = [
    [(0, 0), (1, 1), (2, 2)],
    [(1, 1), (3, 2), (5, 3), (4, 1), (2, 3), (1, 4)],
    [(5, 0), (5, 3), (5, -2), (1, 1)],
]

def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    assert max_collinear_points([(0, 0), (1, 1), (2, 2)]) == 3

    for points in EXAMPLES:
        group = largest_collinear_group(points)
        print(f"{len(points)} points -> {len(group)} on one line: {[p.tuple for p in group]}")

    print("Done!")

if __name__ == "__main__":
    main()
