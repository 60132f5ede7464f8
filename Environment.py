import math
from enum import Enum

import numpy as np
from scipy.ndimage import gaussian_filter

import config
from nNet import sigmoid, bound, interpolate


def _blend(percent, low_color, high_color):
    percent = bound(0.0, 1.0, percent)
    return [interpolate(percent, lo, hi) for lo, hi in zip(low_color, high_color)]


class TileType(Enum):
    SOIL = "soil"
    MOUNTAIN = "mountain"
    WATER = "water"
    BORDER = "border"


class Tile:
    def __init__(self, raw_elevation=0.0, is_border=False) -> None:
        self.base_nutrition = 0.0
        self.max_nutrition = 0.0
        self.nutrition = 0.0
        if is_border:
            self.tile_type = TileType.BORDER
            self.elevation = 0.0
            self.energy_use_rate = config.SOIL_ENERGY_USE
            self.base_color = list(config.BORDER_COLOR)
            self.red, self.green, self.blue = self.base_color
            return

        self.elevation = float(sigmoid(raw_elevation,
                                       config.ELEVATION_SIGMOID_SCALE_X, config.ELEVATION_SIGMOID_SCALE_Y,
                                       config.ELEVATION_SIGMOID_SHIFT_X, config.ELEVATION_SIGMOID_SHIFT_Y))

        water, mountain = config.WATER_ELEVATION, config.MOUNTAIN_ELEVATION
        if self.elevation <= water:
            self.tile_type = TileType.WATER
            self.energy_use_rate = config.WATER_ENERGY_USE
            self.base_color = _blend(self.elevation / water,
                                     config.WATER_COLOR_DEEP, config.WATER_COLOR_SHALLOW)
        elif self.elevation >= mountain:
            self.tile_type = TileType.MOUNTAIN
            self.energy_use_rate = config.MOUNTAIN_ENERGY_USE
            self.base_color = _blend((self.elevation - mountain) / (1 - mountain),
                                     config.MOUNTAIN_COLOR_LOW, config.MOUNTAIN_COLOR_HIGH)
        else:
            self.tile_type = TileType.SOIL
            self.energy_use_rate = config.SOIL_ENERGY_USE
            percent = (self.elevation - water) / (mountain - water)
            self.base_color = _blend(percent, config.SOIL_COLOR_LOW, config.SOIL_COLOR_HIGH)
            self.max_nutrition = max(0.0, config.NUTRITION_MAX * (1 - percent))
            self.base_nutrition = self.max_nutrition * config.BASE_NUTRITION_FRACTION
            self.nutrition = self.base_nutrition
        self.red, self.green, self.blue = self.base_color

    @property
    def is_soil(self):
        return self.tile_type == TileType.SOIL

    @property
    def color(self):
        return (int(self.red), int(self.green), int(self.blue))

    def update(self):
        if not self.is_soil:
            return
        growth = config.NUTRITION_REGEN_RATE * math.sqrt(config.MOUNTAIN_ELEVATION - self.elevation)
        self.nutrition = min(self.max_nutrition, self.nutrition + growth)

        gap = self.nutrition - self.base_nutrition
        r, g, b = self.base_color
        if gap < 0:
            # depleted: redden and darken
            deficit = -gap
            r += deficit * config.DEPLETED_TINT
            g -= deficit * config.DEPLETED_TINT
            b -= deficit * config.DEPLETED_TINT * 0.5
        else:
            g += gap * config.RECOVERED_TINT
            b += gap * config.RECOVERED_TINT * 0.5
        self.red = bound(0, 255, r)
        self.green = bound(0, 255, g)
        self.blue = bound(0, 255, b)

    def eat(self):
        '''
            Halves the nutrition and returns what was there before.
        '''
        energy = self.nutrition
        self.nutrition /= 2
        return energy

    def __repr__(self) -> str:
        return f"Tile({self.tile_type.name}, elevation={self.elevation:.3f}, nutrition={self.nutrition:.2f})"


class SmoothNoise:
    '''
        Default terrain noise: noise(seed, x, y) -> float in [-1, 1].
        Each seed gets its own gaussian-smoothed random field, sampled with
        bilinear interpolation and wrapped at the field edges.
    '''
    def __init__(self, size=config.NOISE_FIELD_SIZE, sigma=config.NOISE_SIGMA,
                 resolution=config.NOISE_RESOLUTION) -> None:
        self.size = size
        self.sigma = sigma
        self.resolution = resolution
        self._fields = {}

    def field(self, seed):
        if seed not in self._fields:
            rng = np.random.default_rng(seed)
            f = gaussian_filter(rng.uniform(-1.0, 1.0, (self.size, self.size)), sigma=self.sigma, mode='wrap')
            f -= f.mean()
            peak = np.abs(f).max()
            if peak > 0:
                f /= peak
            self._fields[seed] = f
        return self._fields[seed]

    def __call__(self, seed, x, y):
        f = self.field(seed)
        fx, fy = x * self.resolution, y * self.resolution
        x0, y0 = math.floor(fx), math.floor(fy)
        tx, ty = fx - x0, fy - y0
        x0, y0 = x0 % self.size, y0 % self.size
        x1, y1 = (x0 + 1) % self.size, (y0 + 1) % self.size
        top = f[x0, y0] * (1 - tx) + f[x1, y0] * tx
        bottom = f[x0, y1] * (1 - tx) + f[x1, y1] * tx
        return float(top * (1 - ty) + bottom * ty)


class Grid:
    def __init__(self, elevations, tile_size, border=True) -> None:
        '''
            elevations: raw (pre-sigmoid) elevations indexed [x][y]
            border: ring the given tiles with one tile of BORDER on every side
        '''
        elevations = [list(column) for column in elevations]
        if not elevations or not elevations[0]:
            raise ValueError("Grid needs at least one tile.")
        if any(len(c) != len(elevations[0]) for c in elevations):
            raise ValueError("Elevation columns must all have the same length.")
        if tile_size < 1:
            raise ValueError("tile_size must be at least one pixel.")

        self.tile_size = tile_size
        self.border = border
        pad = 1 if border else 0
        self.num_tiles_x = len(elevations) + 2 * pad
        self.num_tiles_y = len(elevations[0]) + 2 * pad
        self.tiles = []
        for ix in range(self.num_tiles_x):
            column = []
            for iy in range(self.num_tiles_y):
                if border and (ix in (0, self.num_tiles_x - 1) or iy in (0, self.num_tiles_y - 1)):
                    column.append(Tile(is_border=True))
                else:
                    column.append(Tile(elevations[ix - pad][iy - pad]))
            self.tiles.append(column)

    @classmethod
    def generate(cls, num_tiles_x, num_tiles_y, tile_size, noise, seed,
                 scaling_factor=config.NOISE_SCALING_FACTOR, border=True):
        '''
            num_tiles_x, num_tiles_y: total grid size including the border ring
            noise: callable noise(seed, x, y) -> float in [-1, 1]
        '''
        pad = 1 if border else 0
        inner_x, inner_y = num_tiles_x - 2 * pad, num_tiles_y - 2 * pad
        if inner_x < 1 or inner_y < 1:
            raise ValueError("Grid too small for its border.")
        elevations = []
        for ix in range(inner_x):
            column = []
            for iy in range(inner_y):
                n = noise(seed, 0.01 + ix * scaling_factor, 0.01 + iy * scaling_factor)
                column.append(config.ELEVATION_NOISE_AMPLITUDE * n + config.ELEVATION_NOISE_OFFSET)
            elevations.append(column)
        return cls(elevations, tile_size, border)

    @property
    def size_x(self):
        return self.num_tiles_x * self.tile_size

    @property
    def size_y(self):
        return self.num_tiles_y * self.tile_size

    def __iter__(self):
        for ix, column in enumerate(self.tiles):
            for iy, tile in enumerate(column):
                yield ix, iy, tile

    def wrap(self, x, y):
        return self._wrap(x, self.size_x), self._wrap(y, self.size_y)

    @staticmethod
    def _wrap(value, size):
        value = value % size
        # tiny negative values can round up to size
        if value >= size:
            value = 0.0
        return value

    def tile_index(self, x, y):
        ix, iy = int(x) // self.tile_size, int(y) // self.tile_size
        if not (0 <= x and 0 <= y and ix < self.num_tiles_x and iy < self.num_tiles_y):
            raise IndexError(f"Position ({x}, {y}) is outside the {self.size_x}x{self.size_y} world")
        return ix, iy

    def tile_at(self, x, y):
        ix, iy = self.tile_index(x, y)
        return self.tiles[ix][iy]

    def get_tile_color(self, x, y):
        return self.tile_at(x, y).color

    def get_tile_energy_rate(self, x, y):
        return self.tile_at(x, y).energy_use_rate

    def eat(self, x, y):
        return self.tile_at(x, y).eat()

    def update(self):
        for column in self.tiles:
            for tile in column:
                tile.update()
