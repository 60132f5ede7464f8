import numpy as np
import pytest

from Environment import Grid

WATER_RAW = -2.0
SOIL_RAW = 1.0
MOUNTAIN_RAW = 5.0


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def mixed_grid():
    # 3x3 interior: a column each of water, soil and mountain, ringed by border
    return Grid([[WATER_RAW] * 3, [SOIL_RAW] * 3, [MOUNTAIN_RAW] * 3], tile_size=10)


@pytest.fixture
def soil_grid():
    return Grid([[SOIL_RAW] * 8 for _ in range(8)], tile_size=10)


@pytest.fixture
def water_grid():
    return Grid([[WATER_RAW] * 4 for _ in range(4)], tile_size=10)
