import pygame
import pytest

from rockblast.renderer import Renderer


@pytest.fixture(scope="module")
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


BASE_ORDER = [
    "background",
    "ground",
    "collectibles",
    "rocks",
    "ghosts",
    "projectiles",
    "particles",
    "cannon",
    "hud",
]


def _surface(sim):
    return pygame.Surface((int(sim.state.arena.width), int(sim.state.arena.height)))


def test_renderer_layer_order(pygame_init, sim):
    for _ in range(20):
        sim.step()
    seq = []
    Renderer().render(sim.snapshot(), _surface(sim), capture_sequence=seq)
    assert seq == BASE_ORDER


def test_debug_and_game_over_layers(pygame_init, sim, make_rock):
    c = sim.state.cannon
    rock = make_rock(x=c.x - 15, y=c.y - 50, health=100)
    rock.vx = 0.0
    sim.state.rocks = [rock]
    sim.step()
    assert sim.state.round_over
    sim.handle_actions(["toggle_debug"])
    seq = []
    Renderer().render(sim.snapshot(), _surface(sim), capture_sequence=seq)
    assert seq == BASE_ORDER + ["debug", "game_over"]


def test_render_does_not_mutate_simulation(pygame_init, sim):
    sim.step()
    before = (sim.state.frame, [(r.x, r.y) for r in sim.state.rocks], len(sim.particles))
    Renderer().render(sim.snapshot(), _surface(sim))
    after = (sim.state.frame, [(r.x, r.y) for r in sim.state.rocks], len(sim.particles))
    assert before == after
