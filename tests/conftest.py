import numpy as np
import pytest


def grid_of(rows):
    """Build an (H, W, 3) uint8 grid from nested lists of RGB triples."""
    return np.array(rows, dtype=np.uint8)


@pytest.fixture
def small_grid():
    """4 × 2 panorama with hand-picked colours (see test_sampling)."""
    return grid_of([
        [(10, 10, 10), (20, 20, 20), (0, 0, 77), (100, 0, 77)],
        [(30, 30, 30), (40, 40, 40), (0, 200, 77), (100, 200, 77)],
    ])


@pytest.fixture
def uniform_grid():
    grid = np.empty((16, 32, 3), dtype=np.uint8)
    grid[...] = (128, 64, 32)
    return grid
