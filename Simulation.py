import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

import numpy as np

import config
from Creature import Creature
from Environment import Grid, SmoothNoise

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    grid: Grid
    creatures: List[Creature] = field(default_factory=list)
    paused: bool = False
    tick: int = 0
    births: int = 0
    deaths: int = 0
    injected: int = 0
    max_generation: int = 0
    max_age: int = 0
    # recent population counts, drawn as the on-screen population chart
    population_history: Deque[int] = field(default_factory=lambda: deque(maxlen=config.HISTORY_WINDOW))


class Simulation:
    def __init__(self, grid: Optional[Grid] = None, population_floor=config.POPULATION_FLOOR,
                 rng=None, initial_population=None, noise=None,
                 size_x=config.SIZE_X, size_y=config.SIZE_Y, tile_size=config.TILE_SIZE) -> None:
        '''
            grid: terrain to simulate on; generated from noise when omitted
            population_floor: random creatures are injected whenever the
                population falls below this
            noise: callable noise(seed, x, y) -> float, SmoothNoise by default
        '''
        if population_floor < 0:
            raise ValueError("population_floor must not be negative")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.population_floor = population_floor
        if grid is None:
            self.seed = int(self.rng.integers(0, 10_000_000))
            grid = Grid.generate(size_x // tile_size, size_y // tile_size, tile_size,
                                 noise if noise is not None else SmoothNoise(), self.seed)
            logger.info("Generated %dx%d terrain from seed %d", grid.num_tiles_x, grid.num_tiles_y, self.seed)
        else:
            self.seed = None
        self.state = SimulationState(grid=grid)
        self._request_step = False

        if initial_population is None:
            initial_population = population_floor
        for _ in range(initial_population):
            self.spawn()

    @property
    def grid(self):
        return self.state.grid

    @property
    def creatures(self):
        return self.state.creatures

    @property
    def paused(self):
        return self.state.paused

    @property
    def tick(self):
        return self.state.tick

    def toggle_pause(self):
        self.state.paused = not self.state.paused

    def step(self):
        # Request a single simulation tick while paused
        if self.state.paused:
            self._request_step = True

    def spawn(self):
        return self.add_creature(Creature(self.grid, self.rng))

    def add_creature(self, creature):
        self.state.creatures.append(creature)
        return creature

    def update(self):
        '''
            Runs one tick unless paused. Returns True when a tick ran.
        '''
        state = self.state
        if state.paused and not self._request_step:
            return False
        self._request_step = False

        survivors = []
        for c in state.creatures:
            if c.update():
                survivors.append(c)
            else:
                state.deaths += 1
                state.max_age = max(state.max_age, c.age)

        offspring = [c.reproduce() for c in survivors if c.should_reproduce()]
        state.births += len(offspring)

        state.grid.update()

        population = survivors + offspring
        missing = self.population_floor - len(population)
        if missing > 0:
            if not population:
                logger.info("Population extinct at tick %d", state.tick)
            logger.debug("Injecting %d random creatures at tick %d", missing, state.tick)
            population.extend(Creature(state.grid, self.rng) for _ in range(missing))
            state.injected += missing

        # the only place the population changes
        state.creatures = population
        state.tick += 1
        for c in population:
            state.max_generation = max(state.max_generation, c.generation)
        state.population_history.append(len(population))
        return True

    def stats(self):
        s = self.state
        creatures = s.creatures
        return {
            "tick": s.tick,
            "population": len(creatures),
            "births": s.births,
            "deaths": s.deaths,
            "injected": s.injected,
            "max_generation": s.max_generation,
            "max_age": s.max_age,
            "avg_age": int(sum(c.age for c in creatures) / len(creatures)) if creatures else 0,
            "paused": s.paused,
        }
