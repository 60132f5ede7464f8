import pytest

import config
from Genome import TRAIT_BOUNDS, Genome


def test_random_genome_within_bounds(rng):
    for _ in range(100):
        assert Genome.random(rng).within_bounds()


def test_inherit_zero_variance_is_exact(rng):
    parent = Genome.random(rng)
    assert parent.inherit(0.0, rng) == parent


@pytest.mark.parametrize("variance", [0.0, 0.5, 1.0, 10.0, 500.0])
def test_inherit_stays_within_bounds(rng, variance):
    parent = Genome.random(rng)
    for _ in range(50):
        child = parent.inherit(variance, rng)
        assert child.within_bounds()
        for name, value in child.traits().items():
            assert abs(value - getattr(parent, name)) <= variance + 1e-9


def test_inherit_clamps_at_bounds(rng):
    traits = {name: hi for name, (lo, hi) in TRAIT_BOUNDS.items()}
    parent = Genome(**traits)
    for _ in range(20):
        child = parent.inherit(3.0, rng)
        assert child.size <= config.CREATURE_SIZE_MAX
        assert child.genetic_variance <= config.CREATURE_VARIANCE_MAX


def test_inherit_rejects_negative_variance(rng):
    with pytest.raises(ValueError):
        Genome.random(rng).inherit(-1, rng)


def test_derived_traits_follow_size(rng):
    small = Genome.random(rng)
    small.size = config.CREATURE_SIZE_MIN
    large = small.copy()
    large.size = config.CREATURE_SIZE_MAX
    assert small.max_energy == config.CREATURE_MAXENERGY_MIN
    assert large.max_energy == config.CREATURE_MAXENERGY_MAX
    assert small.max_health == config.CREATURE_MAXHEALTH_MIN
    assert large.max_health == config.CREATURE_MAXHEALTH_MAX
    assert small.energy_use_rate == pytest.approx(config.CREATURE_ENERGY_USE_RATE_MIN)
    assert large.energy_use_rate == pytest.approx(config.CREATURE_ENERGY_USE_RATE_MAX)

    middle = small.copy()
    middle.size = (config.CREATURE_SIZE_MIN + config.CREATURE_SIZE_MAX) / 2
    assert middle.max_energy == pytest.approx((config.CREATURE_MAXENERGY_MIN + config.CREATURE_MAXENERGY_MAX) / 2)
