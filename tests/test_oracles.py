import numpy as np
import pytest
from collinear import max_collinear_points
from benchmarks.oracles.cross_product import CrossProductOracle

@pytest.fixture
def random_point_sets():
    """
    Small integer point sets on a 7x7 grid, so collinear runs and duplicate
    coordinates both show up regularly.
    """
    rng = np.random.default_rng(2024)
    sets = []
    for _ in range(60):
        n = int(rng.integers(1, 13))
        sets.append(rng.integers(-3, 4, size=(n, 2)))
    return sets

def test_oracle_known_values():
    oracle = CrossProductOracle()
    assert oracle.process([(0, 0)]) == 1
    assert oracle.process([(0, 0), (0, 0)]) == 1
    assert oracle.process([(1, 1), (3, 2), (5, 3), (4, 1), (2, 3), (1, 4)]) == 4
    assert oracle.process([(5, 0), (5, 3), (5, -2)]) == 3

def test_matches_oracle(random_point_sets):
    oracle = CrossProductOracle()
    for coords in random_point_sets:
        assert max_collinear_points(coords) == oracle.process(coords), coords.tolist()

def test_result_bounds(random_point_sets):
    for coords in random_point_sets:
        result = max_collinear_points(coords)
        assert 1 <= result <= len(coords)

def test_shuffled_input_same_result(random_point_sets):
    rng = np.random.default_rng(7)
    for coords in random_point_sets:
        assert max_collinear_points(rng.permutation(coords)) == max_collinear_points(coords)
