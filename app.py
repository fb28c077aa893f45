"""Application entry harness.

One central event poll per frame feeds the InputRouter; the resulting
actions and pointer sample drive ``Simulation.step`` and the Renderer
draws the snapshot. Set ``ROCKBLAST_SEED`` for a reproducible round.
"""

from __future__ import annotations

import os

import pygame

from rockblast.audio_service import AudioService
from rockblast.constants import FPS
from rockblast.input_router import InputRouter
from rockblast.logger import get_logger
from rockblast.renderer import Renderer
from rockblast.simulation import Simulation

log = get_logger("app")


def _seed_from_env():
    raw = os.environ.get("ROCKBLAST_SEED")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return raw


def main():
    pygame.init()
    pygame.display.set_caption("Rock Blast")

    sim = Simulation(seed=_seed_from_env(), audio=AudioService.get())
    arena_w = int(sim.state.arena.width)
    arena_h = int(sim.state.arena.height)
    screen = pygame.display.set_mode((arena_w, arena_h), pygame.RESIZABLE)
    frame = pygame.Surface((arena_w, arena_h))
    clock = pygame.time.Clock()

    router = InputRouter(scale=1.0, arena_width=arena_w)
    renderer = Renderer()

    running = True
    while running:
        # --- Single central event poll ---
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.VIDEORESIZE:
                screen = pygame.display.get_surface()
                router.scale = max(1, screen.get_width()) / arena_w

        sample = router.process(events)
        if "quit" in sample.actions:
            running = False
        sim.handle_actions(sample.actions)

        # --- Update & Render cycle ---
        sim.step(sample.pointer_x)
        renderer.render(sim.snapshot(), frame)
        if screen.get_size() != frame.get_size():
            screen.blit(pygame.transform.scale(frame, screen.get_size()), (0, 0))
        else:
            screen.blit(frame, (0, 0))
        pygame.display.flip()
        clock.tick(FPS)

    log.info(f"Bye! Final score {sim.state.score}")
    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
