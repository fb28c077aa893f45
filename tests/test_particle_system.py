import pytest

from rockblast.constants import PARTICLE_AIR_DRAG, PARTICLE_DEFAULT_GRAVITY, SMOKE_EXPANSION
from rockblast.particle_system import ParticleSystem

WHITE = (255, 255, 255, 255)


def test_particle_lifecycle():
    ps = ParticleSystem()
    ps.spawn(0, 0, 1, 0, life=3, size=2, color=WHITE)
    assert len(ps) == 1
    ps.update()
    ps.update()
    assert len(ps) == 1
    ps.update()
    assert len(ps) == 0


def test_integration_gravity_and_drag():
    ps = ParticleSystem()
    p = ps.spawn(10, 10, 2.0, -1.0, life=10, size=2, color=WHITE)
    ps.update()
    assert p.x == 12 and p.y == 9
    assert p.vy == pytest.approx(-1.0 + PARTICLE_DEFAULT_GRAVITY)
    assert p.vx == pytest.approx(2.0 * PARTICLE_AIR_DRAG)

    own = ps.spawn(0, 0, 0, 0, life=10, size=2, color=WHITE, gravity=0.0)
    ps.update()
    assert own.vy == 0.0


def test_smoke_expands_and_alpha_fades():
    ps = ParticleSystem()
    smoke = ps.spawn(0, 0, 0, 0, life=10, size=5, color=WHITE, kind="smoke", max_life=20, expanding=True)
    assert smoke.alpha == 0.5
    ps.update()
    assert smoke.size == pytest.approx(5 + SMOKE_EXPANSION)
    assert smoke.alpha == pytest.approx(9 / 20)


def test_unknown_kind_falls_back_to_default():
    ps = ParticleSystem()
    assert ps.spawn(0, 0, 0, 0, life=1, size=1, color=WHITE, kind="glitter").kind == "default"


def test_cap_drops_oldest():
    ps = ParticleSystem(max_particles=5)
    for i in range(8):
        ps.spawn(i, 0, 0, 0, life=10, size=1, color=WHITE)
    assert len(ps) == 5
    assert [p.x for p in ps] == [3, 4, 5, 6, 7]


def test_draw_commands_and_clear():
    ps = ParticleSystem()
    ps.spawn(1, 2, 0, 0, life=4, size=3, color=WHITE, kind="ember", glow=True)
    cmds = ps.get_draw_commands()
    assert len(cmds) == 1
    assert (cmds[0].x, cmds[0].y, cmds[0].kind, cmds[0].glow) == (1, 2, "ember", True)
    ps.clear()
    assert len(ps) == 0 and ps.get_draw_commands() == []
