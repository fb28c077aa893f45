"""Explicit simulation state.

Every mutable piece of a round (entity lists and session counters) lives
in one ``SimulationState`` owned by ``Simulation``. Components receive it
by reference and mutate it only from inside ``Simulation.step``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import List

from rockblast.config import GameConfig
from rockblast.entities import Arena, Cannon, Collectible, Projectile, Rock, SplitGhost
from rockblast.powerups import PowerUpState


@dataclass
class PendingSpawn:
    """A tier-0 rock scheduled to enter the arena at ``spawn_at_frame``."""

    spawn_at_frame: int


@dataclass
class SimulationState:
    arena: Arena
    cannon: Cannon
    powerups: PowerUpState
    spawn_interval: int
    rocks: List[Rock] = field(default_factory=list)
    projectiles: List[Projectile] = field(default_factory=list)
    collectibles: List[Collectible] = field(default_factory=list)
    ghosts: List[SplitGhost] = field(default_factory=list)
    pending_spawns: List[PendingSpawn] = field(default_factory=list)
    score: int = 0
    level: int = 1
    frame: int = 0
    difficulty_timer: int = 0
    speed_bonus: float = 0.0
    wave_number: int = 1  # number the next wave will carry
    wave_active: bool = False
    last_wave_frame: int | None = None
    destroyed: int = 0
    fire_cooldown: int = 0
    collectible_timer: int = 0
    round_over: bool = False
    next_rock_id: int = 1

    @classmethod
    def initial(cls, config: GameConfig) -> "SimulationState":
        arena = Arena.from_config(config)
        return cls(
            arena=arena,
            cannon=Cannon.spawn(config.cannon, arena),
            powerups=PowerUpState(
                double_fire_frames_total=config.collectible.double_fire_frames,
                shield_frames_total=config.collectible.shield_frames,
            ),
            spawn_interval=config.difficulty.spawn_interval_start,
        )

    def reset(self, config: GameConfig) -> None:
        """Return every collection and counter to its starting value in place."""
        fresh = SimulationState.initial(config)
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))

    @property
    def current_wave(self) -> int:
        """The wave most recently started (0 before the first one)."""
        return self.wave_number - 1

    def allocate_rock_id(self) -> int:
        rid = self.next_rock_id
        self.next_rock_id += 1
        return rid

    # Identity-guarded removal: removing twice in one pass is a no-op.
    def remove_rock(self, rock: Rock) -> bool:
        return _remove_identity(self.rocks, rock)

    def remove_projectile(self, projectile: Projectile) -> bool:
        return _remove_identity(self.projectiles, projectile)

    def remove_collectible(self, collectible: Collectible) -> bool:
        return _remove_identity(self.collectibles, collectible)


def _remove_identity(items: list, obj) -> bool:
    for i, item in enumerate(items):
        if item is obj:
            del items[i]
            return True
    return False


__all__ = ["SimulationState", "PendingSpawn"]
