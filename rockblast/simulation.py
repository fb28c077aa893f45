"""Frame orchestrator.

``Simulation.step`` advances the whole game by exactly one frame in a fixed
order (the order is part of the contract; replays with the same seed and
pointer samples reproduce the same round):

 1. frame counter, difficulty ramp and level
 2. cannon follows the latest pointer sample (clamped to the arena)
 3. fire cooldown decays; auto-fire when it has expired
 4. projectiles advance, off-screen ones are dropped
 5. rocks advance (gravity, bounces), destroyed ones are dropped
 6. collectibles advance, off-screen ones are dropped
 7. projectile -> rock pass (fragmentation)
 8. cannon -> rock pass (shield absorbs one hit, otherwise the round ends)
 9. cannon -> collectible pass (every overlapping item is collected)
10. power-up timers
11. wave and collectible spawning

Once the round is over only particles and split ghosts keep animating;
gameplay, scoring and spawning stop until ``restart``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from rockblast.config import GameConfig
from rockblast.constants import FPS, ROCK_DUST_TRAIL_CHANCE, ROCK_DUST_TRAIL_SPEED
from rockblast.effects_util import (
    spawn_cannon_explosion,
    spawn_collection_effect,
    spawn_dust_trail,
    spawn_ground_impact,
    spawn_shield_break,
)
from rockblast.fragmentation import FragmentationEngine
from rockblast.geometry import overlaps
from rockblast.logger import get_logger
from rockblast.particle_system import ParticleSystem
from rockblast.projectile_system import ProjectileSystem
from rockblast.rng_service import RNGService, Seed
from rockblast.services import AudioPort, NullAudio, ServiceContainer
from rockblast.snapshot import FrameSnapshot, SnapshotService
from rockblast.spawner import WaveDirector
from rockblast.state import SimulationState

log = get_logger("simulation")

ACTION_RESTART = "restart"
ACTION_TOGGLE_AUDIO = "toggle_audio"
ACTION_TOGGLE_DEBUG = "toggle_debug"

CANNON_HIT_SHIELD = "shield"
CANNON_HIT_FATAL = "round_over"


class Simulation:
    def __init__(
        self,
        config: GameConfig | None = None,
        seed: Seed = None,
        audio: AudioPort | None = None,
        rng: RNGService | None = None,
        fps: int = FPS,
    ):
        self.config = (config or GameConfig()).validate()
        self.rng = rng if rng is not None else RNGService(seed)
        self.fps = fps
        self.particles = ParticleSystem()
        self.services = ServiceContainer(audio if audio is not None else NullAudio(), self.particles)
        self.state = SimulationState.initial(self.config)
        self.engine = FragmentationEngine(self.config, self.rng, self.services)
        self.projectiles = ProjectileSystem(self.config.projectile, self.services)
        self.director = WaveDirector(self.config, self.rng)
        self.debug_overlay = False
        log.info(f"Simulation ready ({self.state.arena.width}x{self.state.arena.height}, seed={self.rng.seed_value!r})")

    # --- Commands -------------------------------------------------------------
    def handle_actions(self, actions: Iterable[str]) -> None:
        """Apply discrete input commands; call between frames."""
        for act in actions:
            if act == ACTION_RESTART:
                if self.state.round_over:
                    self.restart()
            elif act == ACTION_TOGGLE_AUDIO:
                self.services.toggle_audio()
            elif act == ACTION_TOGGLE_DEBUG:
                self.debug_overlay = not self.debug_overlay
                log.info("Debug overlay ON" if self.debug_overlay else "Debug overlay OFF")

    def restart(self) -> None:
        """Reset every collection and counter; the next step starts wave 1."""
        self.state.reset(self.config)
        self.particles.clear()
        self.services.begin_frame()
        log.info("Round restarted")

    # --- Frame step -------------------------------------------------------------
    def step(self, pointer_x: float | None = None) -> Dict[str, Any]:
        s = self.state
        self.services.begin_frame()
        summary: Dict[str, Any] = {
            "fired": 0,
            "hits": 0,
            "destroyed": 0,
            "splits": 0,
            "cannon_hit": None,
            "collected": 0,
            "spawned": 0,
        }
        if not s.round_over:
            self._advance_gameplay(pointer_x, summary)
        self._advance_effects()
        summary["frame"] = s.frame
        summary["score"] = s.score
        summary["round_over"] = s.round_over
        summary["events"] = list(self.services.events)
        return summary

    def _advance_gameplay(self, pointer_x: float | None, summary: Dict[str, Any]) -> None:
        s = self.state
        s.frame += 1
        self.director.apply_difficulty(s)

        s.cannon.move_to(pointer_x)
        if s.fire_cooldown > 0:
            s.fire_cooldown -= 1
        if s.fire_cooldown <= 0 and not s.round_over:
            summary["fired"] = len(self.projectiles.fire(s, s.cannon, s.powerups.double_fire))

        self.projectiles.update(s)
        self._update_rocks()
        self._update_collectibles()

        hits = self.projectiles.resolve_rock_hits(s, self.engine)
        summary["hits"] = hits["hits"]
        summary["destroyed"] = hits["destroyed"]
        summary["splits"] = hits["splits"]

        summary["cannon_hit"] = self.resolve_cannon_collisions()
        if s.round_over:
            return
        summary["collected"] = self.collect_pickups()

        s.powerups.tick(s.cannon)

        summary["spawned"] = len(self.director.update_waves(s))
        self.director.update_collectibles(s)

    def _update_rocks(self) -> None:
        s = self.state
        ps = self.particles
        for rock in s.rocks:
            if rock.elite and rock.tier == 0 and rock.vy > ROCK_DUST_TRAIL_SPEED and self.rng.chance(ROCK_DUST_TRAIL_CHANCE):
                cx, cy = rock.center()
                spawn_dust_trail(ps, self.rng, cx, cy, rock.width * 0.5)
            bounce = rock.update(s.arena, self.rng)
            if bounce is None:
                continue
            if bounce.heavy:
                spawn_ground_impact(ps, self.rng, bounce.x, bounce.y, bounce.width / 30)
            self.services.play("bounce")
        s.rocks = [r for r in s.rocks if not r.is_destroyed() and not r.is_off_screen()]

    def _update_collectibles(self) -> None:
        s = self.state
        for item in s.collectibles:
            item.update()
        s.collectibles = [k for k in s.collectibles if not k.is_off_screen(s.arena)]

    def _advance_effects(self) -> None:
        self.particles.update()
        self.state.ghosts = [g for g in self.state.ghosts if not g.update()]

    # --- Collision passes ---------------------------------------------------------
    def resolve_cannon_collisions(self) -> str | None:
        """Cannon -> rock pass. Handles at most one contact per frame."""
        s = self.state
        if s.round_over:
            return None
        cannon = s.cannon
        for rock in list(s.rocks):
            if not overlaps(cannon, rock):
                continue
            cx, cy = cannon.center()
            if cannon.shielded:
                s.powerups.consume_shield(cannon)
                s.remove_rock(rock)
                spawn_shield_break(self.particles, self.rng, cx, cy)
                self.services.play("shield")
                log.info(f"Shield absorbed rock {rock.id}")
                return CANNON_HIT_SHIELD
            s.round_over = True
            spawn_cannon_explosion(self.particles, self.rng, cx, cy)
            self.services.play("gameOver")
            log.info(f"Round over! Score: {s.score}, wave {s.current_wave}, rocks destroyed {s.destroyed}")
            return CANNON_HIT_FATAL
        return None

    def collect_pickups(self) -> int:
        """Cannon -> collectible pass; every overlapping item is collected."""
        s = self.state
        if s.round_over:
            return 0
        collected = 0
        for item in list(reversed(s.collectibles)):
            if not overlaps(s.cannon, item):
                continue
            s.powerups.activate(item.kind, s.cannon)
            s.score += self.config.collectible.pickup_bonus
            spawn_collection_effect(
                self.particles, self.rng, item.x + item.width / 2, item.y + item.height / 2, item.kind.color
            )
            self.services.play("powerup")
            s.remove_collectible(item)
            collected += 1
        return collected

    # --- Output -------------------------------------------------------------------
    def snapshot(self) -> FrameSnapshot:
        return SnapshotService.capture(
            self.state,
            self.particles,
            self.fps,
            events=self.services.events,
            debug=self.debug_overlay,
            audio_enabled=self.services.audio_enabled,
        )


__all__ = [
    "Simulation",
    "ACTION_RESTART",
    "ACTION_TOGGLE_AUDIO",
    "ACTION_TOGGLE_DEBUG",
    "CANNON_HIT_SHIELD",
    "CANNON_HIT_FATAL",
]
