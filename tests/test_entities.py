import pytest

from rockblast.config import GameConfig, RockConfig
from rockblast.entities import Arena, Cannon, Collectible, Projectile, Rock, SplitGhost, tier_multiplier
from rockblast.powerups import PowerUpKind
from rockblast.rng_service import RNGService


@pytest.fixture
def arena():
    return Arena.from_config(GameConfig())


def _flat_rock(y, vy, gravity=0.25, size=60.0):
    cfg = RockConfig(gravity=gravity, bounce_jitter=0.0)
    rock = Rock.create(1, 100.0, y, size, size, vy, cfg, RNGService(1), tier=1)
    rock.vx = 0.0
    rock.vy = vy
    return rock


def test_ground_bounce_exact_boundary(arena):
    rock = _flat_rock(507.75, 2.0)
    assert rock.height == 60
    bounce = rock.update(arena, RNGService(1))
    assert bounce is not None
    assert rock.y + rock.height == arena.ground_y
    assert rock.vy == pytest.approx(-2.25)
    assert bounce.speed == pytest.approx(2.25)
    assert not bounce.heavy


def test_just_above_ground_does_not_bounce(arena):
    rock = _flat_rock(507.7, 2.0)
    assert rock.update(arena, RNGService(1)) is None
    assert rock.vy == pytest.approx(2.25)
    assert rock.y + rock.height < arena.ground_y


def test_upward_rock_on_ground_line_is_not_reflected(arena):
    rock = _flat_rock(arena.ground_y - 60, -5.0, gravity=0.0)
    rock.y = arena.ground_y - 60 + 6
    assert rock.update(arena, RNGService(1)) is None
    assert rock.vy == -5.0


def test_walls_reflect_horizontal_velocity(arena):
    rock = _flat_rock(100.0, 0.0, gravity=0.0)
    rock.vx = -5.0
    rock.x = 2.0
    rock.update(arena, RNGService(1))
    assert rock.x == 0
    assert rock.vx == 5.0

    rock.x = arena.width - rock.width - 1
    rock.update(arena, RNGService(1))
    assert rock.x + rock.width == arena.width
    assert rock.vx == -5.0


def test_ceiling_clamps(arena):
    rock = _flat_rock(2.0, -6.0, gravity=0.0)
    rock.update(arena, RNGService(1))
    assert rock.y == 0
    assert rock.vy == 6.0


def test_heavy_impact_for_fast_elite_tier0(arena):
    cfg = RockConfig(bounce_jitter=0.0)
    rock = Rock.create(1, 100.0, 0.0, 30, 30, 1.0, cfg, RNGService(2), tier=0, elite=True)
    rock.y = arena.ground_y - rock.height - 1
    rock.vy = 4.0
    bounce = rock.update(arena, RNGService(2))
    assert bounce is not None and bounce.heavy
    assert rock.impact_intensity == 1.0


def test_durability_bounds_per_tier():
    cfg = RockConfig()
    rng = RNGService(99)
    for _ in range(200):
        for tier in (0, 1, 2):
            for elite in (False, True):
                rock = Rock.create(1, 0, 0, 40, 40, 1.0, cfg, rng, tier=tier, elite=elite)
                mult = tier_multiplier(tier, elite, cfg)
                factor = mult * 1.5 if elite else mult
                assert rock.health >= 1
                assert rock.health == rock.max_health
                assert int(10 * factor) <= rock.health <= max(1, int(29 * factor))


def test_tier_sizes():
    cfg = RockConfig()
    assert tier_multiplier(0, False, cfg) == 2.0
    assert tier_multiplier(1, False, cfg) == 1.0
    assert tier_multiplier(2, False, cfg) == 0.5
    assert tier_multiplier(0, True, cfg) == 4.0


def test_invalid_tier_rejected():
    with pytest.raises(ValueError):
        Rock.create(1, 0, 0, 40, 40, 1.0, RockConfig(), RNGService(1), tier=3)


def test_hit_sets_flash_and_destroys():
    rock = Rock.create(1, 0, 0, 40, 40, 1.0, RockConfig(), RNGService(1), tier=1)
    rock.health = 1
    rock.hit()
    assert rock.is_destroyed()
    assert rock.hit_flash > 0
    assert not rock.is_off_screen()


def test_cannon_clamps_to_arena(arena):
    cannon = Cannon.spawn(GameConfig().cannon, arena)
    assert cannon.x == 375 and cannon.y == 530
    cannon.move_to(-100)
    assert cannon.x == 0
    cannon.move_to(10_000)
    assert cannon.x == arena.width - cannon.width
    cannon.move_to(None)
    assert cannon.x == arena.width - cannon.width
    cannon.move_to(400)
    assert cannon.center()[0] == 400


def test_projectile_moves_up_and_leaves():
    p = Projectile(10, 40, 16, 16, 50)
    p.update()
    assert p.y == -10
    assert not p.is_off_screen()
    p.update()
    assert p.is_off_screen()


def test_collectible_falls_and_sways(arena):
    item = Collectible(10, arena.height - 2, 30, 30, 3, PowerUpKind.SHIELD)
    item.update()
    assert item.float_offset != 0
    assert item.is_off_screen(arena)


def test_split_ghost_finishes():
    rock = Rock.create(1, 0, 0, 40, 40, 1.0, RockConfig(), RNGService(1))
    ghost = SplitGhost.from_rock(rock, 10)
    done = [ghost.update() for _ in range(10)]
    assert done[:-1] == [False] * 9 and done[-1]
    assert ghost.scale == pytest.approx(1.4)
