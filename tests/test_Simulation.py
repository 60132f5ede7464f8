import numpy as np
import pytest

from Creature import Creature
from Simulation import Simulation


def test_starts_at_population_floor(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=12, rng=rng)
    assert len(sim.creatures) == 12
    assert sim.tick == 0 and not sim.paused


def test_negative_floor_rejected(rng, soil_grid):
    with pytest.raises(ValueError):
        Simulation(soil_grid, population_floor=-1, rng=rng)


def test_update_advances_tick(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=5, rng=rng)
    for i in range(1, 6):
        assert sim.update() is True
        assert sim.tick == i
    assert len(sim.state.population_history) == 5


def test_population_never_below_floor(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=8, rng=rng)
    for _ in range(150):
        sim.update()
        assert len(sim.creatures) >= 8
        assert all(c.alive for c in sim.creatures)


def test_pause_and_step(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=3, rng=rng)
    sim.toggle_pause()
    assert sim.paused
    for _ in range(5):
        assert sim.update() is False
    assert sim.tick == 0

    sim.step()
    assert sim.update() is True
    assert sim.tick == 1
    assert sim.update() is False

    sim.toggle_pause()
    assert sim.update() is True
    assert sim.tick == 2


def test_step_while_running_is_ignored(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=3, rng=rng)
    sim.step()
    sim.update()
    sim.toggle_pause()
    assert sim.update() is False


def test_dead_creatures_are_removed(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=0, initial_population=4, rng=rng)
    doomed = sim.creatures[0]
    doomed.energy = 0
    doomed.network.output_layer().get("eat").value = -50
    sim.update()
    assert doomed not in sim.creatures
    assert not doomed.alive
    assert sim.state.deaths >= 1


def test_extinction_without_floor(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=0, initial_population=3, rng=rng)
    for c in sim.creatures:
        c.health = -1
    sim.update()
    assert sim.creatures == []
    assert sim.state.deaths == 3
    assert sim.update() is True


def test_offspring_join_population(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=0, initial_population=2, rng=rng)
    parents = list(sim.creatures)
    for c in parents:
        c.should_reproduce = lambda: True
    sim.update()
    parents = [c for c in parents if c.alive]
    assert len(sim.creatures) == 2 * len(parents)
    assert sim.state.births == len(parents)
    assert sum(c.generation == 1 for c in sim.creatures) == len(parents)
    assert sim.state.max_generation == (1 if parents else 0)


def test_offspring_do_not_act_on_their_birth_tick(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=0, initial_population=1, rng=rng)
    parent = sim.creatures[0]
    parent.should_reproduce = lambda: True
    sim.update()
    children = [c for c in sim.creatures if c is not parent]
    assert all(c.age == 0 for c in children)


def test_backfill_injects_random_creatures(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=6, initial_population=2, rng=rng)
    sim.update()
    assert len(sim.creatures) >= 6
    assert sim.state.injected >= 4


def test_generates_grid_when_none_given(rng):
    calls = []

    def noise(seed, x, y):
        calls.append(seed)
        return 0.0

    sim = Simulation(population_floor=2, rng=rng, noise=noise, size_x=100, size_y=80, tile_size=10)
    assert (sim.grid.num_tiles_x, sim.grid.num_tiles_y) == (10, 8)
    assert (sim.grid.size_x, sim.grid.size_y) == (100, 80)
    assert len(calls) == 8 * 6
    assert set(calls) == {sim.seed}


def test_default_noise_terrain(rng):
    sim = Simulation(population_floor=1, rng=rng, size_x=200, size_y=120, tile_size=10)
    assert (sim.grid.num_tiles_x, sim.grid.num_tiles_y) == (20, 12)


def test_single_creature_end_to_end(mixed_grid):
    rng = np.random.default_rng(99)
    sim = Simulation(mixed_grid, population_floor=0, initial_population=0, rng=rng)
    creature = sim.add_creature(Creature(mixed_grid, rng))
    for _ in range(100):
        sim.update()
        if not creature.alive:
            assert creature not in sim.creatures
            break
        assert 0 <= creature.energy <= creature.max_energy
        assert creature.health <= creature.max_health
        assert 0 <= creature.x < mixed_grid.size_x and 0 <= creature.y < mixed_grid.size_y


def test_stats(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=4, rng=rng)
    sim.update()
    stats = sim.stats()
    assert set(stats) == {"tick", "population", "births", "deaths", "injected",
                          "max_generation", "max_age", "avg_age", "paused"}
    assert stats["tick"] == 1
    assert stats["population"] == len(sim.creatures)
