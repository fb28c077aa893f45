import pytest

from rockblast import effects_util as fx
from rockblast.particle_system import ParticleSystem
from rockblast.rng_service import RNGService


@pytest.fixture
def ps():
    return ParticleSystem()


def kinds(ps):
    return {p.kind for p in ps}


def test_hit_effect_is_small_burst(ps, rng):
    fx.spawn_hit_effect(ps, rng, 10, 10)
    assert len(ps) == 5


def test_shockwave_scales(ps, rng):
    fx.spawn_shockwave(ps, rng, 0, 0, scale=1)
    assert len(ps) == 20
    assert kinds(ps) == {"shockwave"}
    big = ParticleSystem()
    fx.spawn_shockwave(big, rng, 0, 0, scale=3)
    assert len(big) == 60
    assert all(p.color == fx.SHOCKWAVE_PURPLE for p in big)


def test_split_effects_grow_with_tier(rng):
    low = ParticleSystem()
    high = ParticleSystem()
    fx.spawn_dust_cloud(low, rng, 0, 0, tier=0)
    fx.spawn_dust_cloud(high, rng, 0, 0, tier=1)
    assert len(high) > len(low) == 15
    debris = ParticleSystem()
    fx.spawn_fragment_debris(debris, rng, 0, 0, tier=0, scale=2)
    assert len(debris) == 16
    assert kinds(debris) == {"debris"}


def test_final_disintegration_mix(ps, rng):
    fx.spawn_final_disintegration(ps, rng, 0, 0)
    assert kinds(ps) == {"dust", "ember", "spark", "smoke"}
    assert len(ps) == 75
    assert any(p.glow for p in ps)
    assert all(p.expanding for p in ps if p.kind == "smoke")


def test_ground_impact_scales_with_intensity(rng):
    small = ParticleSystem()
    large = ParticleSystem()
    fx.spawn_ground_impact(small, rng, 100, 570, 1)
    fx.spawn_ground_impact(large, rng, 100, 570, 4)
    assert len(small) == 23
    assert len(large) > len(small)


def test_collection_effect_accepts_rgb(ps, rng):
    fx.spawn_collection_effect(ps, rng, 0, 0, (0, 255, 255))
    assert len(ps) == 12
    assert all(p.color == (0, 255, 255, 255) for p in ps)


def test_emitters_are_deterministic_for_a_seed():
    a, b = ParticleSystem(), ParticleSystem()
    fx.spawn_explosion(a, RNGService(5), 0, 0)
    fx.spawn_explosion(b, RNGService(5), 0, 0)
    assert [(p.vx, p.vy, p.size) for p in a] == [(p.vx, p.vy, p.size) for p in b]
