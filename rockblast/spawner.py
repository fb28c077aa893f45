"""Wave / spawn director.

Decides when rocks and collectibles enter the arena and ramps difficulty.

Waves:
  * a wave is active while any rock is alive or still scheduled
  * once the arena is clear, the next wave starts as soon as the spawn gate
    allows it (at least ``spawn_interval`` frames after the previous
    wave's start)
  * a wave schedules ``rocks_per_wave + wave_number // 2`` rocks, each at
    its own frame, ``stagger_frames`` apart, so rocks never spawn on top of
    each other; the whole schedule is checked by the frame step, there are
    no timers running beside the main loop

Difficulty:
  * every ``interval`` frames the spawn gate shrinks (never below the
    minimum) and the rock speed bonus grows (never above the maximum)
  * level = score // score_per_level + 1 and never goes down
"""

from __future__ import annotations

from typing import List

from rockblast.config import GameConfig
from rockblast.entities import Collectible, Rock
from rockblast.logger import get_logger
from rockblast.powerups import PowerUpKind
from rockblast.rng_service import RNGService
from rockblast.state import PendingSpawn, SimulationState

log = get_logger("waves")


class WaveDirector:
    def __init__(self, config: GameConfig, rng: RNGService):
        self.config = config
        self.rng = rng

    # --- Difficulty ---------------------------------------------------------
    def apply_difficulty(self, state: SimulationState) -> bool:
        """Advance the ramp timer and recompute the level; True if the ramp stepped."""
        d = self.config.difficulty
        stepped = False
        state.difficulty_timer += 1
        if state.difficulty_timer >= d.interval:
            state.difficulty_timer = 0
            state.spawn_interval = max(d.spawn_interval_min, state.spawn_interval - d.spawn_interval_step)
            state.speed_bonus = min(d.speed_bonus_max, state.speed_bonus + d.speed_bonus_step)
            stepped = True
            log.info(f"Difficulty increased! Spawn gate: {state.spawn_interval}, speed: +{state.speed_bonus:.1f}")

        new_level = state.score // d.score_per_level + 1
        if new_level > state.level:
            state.level = new_level
            log.info(f"Level {state.level}!")
        return stepped

    # --- Rocks ----------------------------------------------------------------
    def elite_chance(self, wave_number: int) -> float:
        w = self.config.wave
        return min(w.elite_base_chance + wave_number * w.elite_chance_per_wave, w.elite_max_chance)

    def create_rock(self, state: SimulationState) -> Rock:
        r = self.config.rock
        base_w = r.min_size + self.rng.random() * (r.max_size - r.min_size)
        base_h = r.min_size + self.rng.random() * (r.max_size - r.min_size)
        speed = r.base_speed + self.rng.random() * r.speed_variation + state.speed_bonus
        elite = self.rng.chance(self.elite_chance(state.wave_number))
        rock = Rock.create(state.allocate_rock_id(), 0.0, 0.0, base_w, base_h, speed, r, self.rng, tier=0, elite=elite)
        rock.x = self.rng.random() * (state.arena.width - rock.width)
        rock.y = -rock.height
        if elite:
            log.info(f"Elite rock {rock.id} spawned (health {rock.health})")
        state.rocks.append(rock)
        return rock

    def start_wave(self, state: SimulationState) -> int:
        w = self.config.wave
        count = w.rocks_per_wave + state.wave_number // 2
        for i in range(count):
            state.pending_spawns.append(PendingSpawn(state.frame + i * w.stagger_frames))
        log.info(f"Starting wave {state.wave_number} with {count} rocks")
        state.last_wave_frame = state.frame
        state.wave_number += 1
        state.wave_active = True
        return count

    def gate_open(self, state: SimulationState) -> bool:
        if state.last_wave_frame is None:
            return True
        return state.frame - state.last_wave_frame >= state.spawn_interval

    def release_due(self, state: SimulationState) -> List[Rock]:
        due = [p for p in state.pending_spawns if p.spawn_at_frame <= state.frame]
        if not due:
            return []
        state.pending_spawns = [p for p in state.pending_spawns if p.spawn_at_frame > state.frame]
        return [self.create_rock(state) for _ in due]

    def update_waves(self, state: SimulationState) -> List[Rock]:
        if not state.rocks and not state.pending_spawns:
            state.wave_active = False
            if self.gate_open(state):
                self.start_wave(state)
        spawned = self.release_due(state)
        state.wave_active = bool(state.rocks or state.pending_spawns)
        return spawned

    # --- Collectibles ---------------------------------------------------------
    def update_collectibles(self, state: SimulationState) -> Collectible | None:
        k = self.config.collectible
        state.collectible_timer += 1
        if state.collectible_timer < k.spawn_interval:
            return None
        state.collectible_timer = 0
        if not self.rng.chance(k.spawn_chance):
            return None
        kind = PowerUpKind.SHIELD if self.rng.chance(0.5) else PowerUpKind.RAPID_FIRE
        item = Collectible(
            x=self.rng.random() * (state.arena.width - k.size),
            y=-k.size,
            width=k.size,
            height=k.size,
            speed=k.speed,
            kind=kind,
        )
        state.collectibles.append(item)
        log.debug(f"Power-up spawned: {kind.value}")
        return item


__all__ = ["WaveDirector"]
