from __future__ import annotations
from dataclasses import dataclass, fields, asdict
from typing import Dict, Tuple

import config
from nNet import bound, interpolate


# trait name -> (min, max)
TRAIT_BOUNDS: Dict[str, Tuple[float, float]] = {
    'attack': (config.CREATURE_ATTACK_MIN, config.CREATURE_ATTACK_MAX),
    'defense': (config.CREATURE_DEFENSE_MIN, config.CREATURE_DEFENSE_MAX),
    'red': (config.CREATURE_COLOR_MIN, config.CREATURE_COLOR_MAX),
    'green': (config.CREATURE_COLOR_MIN, config.CREATURE_COLOR_MAX),
    'blue': (config.CREATURE_COLOR_MIN, config.CREATURE_COLOR_MAX),
    'size': (config.CREATURE_SIZE_MIN, config.CREATURE_SIZE_MAX),
    'marker_value': (config.CREATURE_MARKER_MIN, config.CREATURE_MARKER_MAX),
    'genetic_variance': (config.CREATURE_VARIANCE_MIN, config.CREATURE_VARIANCE_MAX),
    'max_linear_velocity': (config.CREATURE_LINEAR_V_MIN, config.CREATURE_LINEAR_V_MAX),
    'max_angular_velocity': (config.CREATURE_ANGULAR_V_MIN, config.CREATURE_ANGULAR_V_MAX),
}


@dataclass
class Genome:
    attack: float
    defense: float
    red: float
    green: float
    blue: float
    size: float
    marker_value: float
    genetic_variance: float
    max_linear_velocity: float
    max_angular_velocity: float

    @classmethod
    def random(cls, rng) -> Genome:
        return cls(**{name: float(rng.uniform(lo, hi)) for name, (lo, hi) in TRAIT_BOUNDS.items()})

    def inherit(self, max_variance: float, rng) -> Genome:
        '''
            Every trait is offset independently by a uniform sample in
            [-max_variance, max_variance] and clamped to its bounds.
        '''
        if max_variance < 0:
            raise ValueError("max_variance must not be negative")
        traits = {}
        for f in fields(self):
            lo, hi = TRAIT_BOUNDS[f.name]
            offset = rng.uniform(-max_variance, max_variance) if max_variance > 0 else 0.0
            traits[f.name] = float(bound(lo, hi, getattr(self, f.name) + offset))
        return Genome(**traits)

    def copy(self) -> Genome:
        return Genome(**asdict(self))

    def traits(self) -> Dict[str, float]:
        return asdict(self)

    def within_bounds(self) -> bool:
        return all(lo <= getattr(self, name) <= hi for name, (lo, hi) in TRAIT_BOUNDS.items())

    # Size-derived traits

    def _size_percent(self) -> float:
        return (self.size - config.CREATURE_SIZE_MIN) / (config.CREATURE_SIZE_MAX - config.CREATURE_SIZE_MIN)

    @property
    def max_energy(self) -> float:
        return interpolate(self._size_percent(), config.CREATURE_MAXENERGY_MIN, config.CREATURE_MAXENERGY_MAX)

    @property
    def max_health(self) -> float:
        return interpolate(self._size_percent(), config.CREATURE_MAXHEALTH_MIN, config.CREATURE_MAXHEALTH_MAX)

    @property
    def energy_use_rate(self) -> float:
        return interpolate(self._size_percent(),
                           config.CREATURE_ENERGY_USE_RATE_MIN, config.CREATURE_ENERGY_USE_RATE_MAX)
