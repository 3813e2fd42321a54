import math

import numpy as np
import pytest

from pano2cube.sampling import sample


def rgb(color):
    return tuple(float(c) for c in color)


def test_exact_pixel_hit(small_grid):
    # H = 2: u = 0.5 → x = 1, v = 0.5 → y = 1
    assert rgb(sample(small_grid, 0.5, 0.5)) == (40.0, 40.0, 40.0)


def test_hand_computed_blend(small_grid):
    # xf = 2.5, yf = 0.6: A=(2,0) B=(3,0) C=(2,1) D=(3,1)
    r, g, b = rgb(sample(small_grid, 1.25, 0.3))
    assert r == pytest.approx(50.0)         # 0 → 100 across x, dx = .5
    assert g == pytest.approx(120.0)        # 0 → 200 down y, dy = .6
    assert b == pytest.approx(77.0)


def test_horizontal_wrap(small_grid):
    # u = 2 → xf = 4 = W, wraps to column 0
    assert rgb(sample(small_grid, 2.0, 0.0)) == (10.0, 10.0, 10.0)
    # far beyond the right edge still resolves inside the grid
    assert rgb(sample(small_grid, 4.5, 0.0)) == (20.0, 20.0, 20.0)


def test_right_neighbour_clamps_at_last_column(small_grid):
    # x = 3, x + 1 clamps to 3 rather than wrapping to 0
    assert rgb(sample(small_grid, 1.75, 0.0)) == (100.0, 0.0, 77.0)


def test_vertical_clamp(small_grid):
    assert rgb(sample(small_grid, 0.0, 5.0)) == (30.0, 30.0, 30.0)
    assert rgb(sample(small_grid, 0.0, -3.0)) == (10.0, 10.0, 10.0)


def test_negative_u_stays_in_bounds(small_grid):
    assert rgb(sample(small_grid, -0.5, 0.0)) == (100.0, 0.0, 77.0)


def test_seam_continuity():
    # 8 × 4 panorama whose first and last columns match
    grid = np.zeros((4, 8, 3), dtype=np.uint8)
    for x in range(8):
        grid[:, x] = (x * 30, 255 - x * 30, 60)
    grid[:, 7] = grid[:, 0]

    eps = 1e-9
    left = rgb(sample(grid, eps, 0.5))
    right = rgb(sample(grid, 2.0 - eps, 0.5))
    assert left == pytest.approx(right, abs=1.0)


def test_channels_in_range_for_random_input():
    rng = np.random.default_rng(1234)
    grid = rng.integers(0, 256, size=(16, 32, 3), dtype=np.uint8)
    u = rng.uniform(-3.0, 5.0, size=(64, 64))
    v = rng.uniform(-1.0, 2.0, size=(64, 64))
    for channel in sample(grid, u, v):
        assert channel.shape == (64, 64)
        assert channel.min() >= 0.0
        assert channel.max() <= 255.0


def test_uniform_grid_is_reproduced_exactly(uniform_grid):
    rng = np.random.default_rng(7)
    u = rng.uniform(0.0, 2.0, size=500)
    v = rng.uniform(0.0, 1.0, size=500)
    r, g, b = sample(uniform_grid, u, v)
    assert (r == 128.0).all() and (g == 64.0).all() and (b == 32.0).all()


def test_alpha_channel_is_ignored():
    grid = np.zeros((2, 4, 4), dtype=np.uint8)
    grid[..., :3] = (9, 8, 7)
    grid[..., 3] = 0
    assert rgb(sample(grid, 0.0, 0.0)) == (9.0, 8.0, 7.0)


def test_scalar_matches_vectorised(small_grid):
    u = np.array([0.1, 0.9, 1.3, 1.99])
    v = np.array([0.0, 0.25, 0.7, 1.0])
    vec = sample(small_grid, u, v)
    for k in range(len(u)):
        one = sample(small_grid, u[k], v[k])
        for a, b in zip(one, vec):
            assert float(a) == pytest.approx(float(b[k]))
            assert not math.isnan(float(a))
