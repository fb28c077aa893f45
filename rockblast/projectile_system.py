"""ProjectileSystem.

Owns the cannon's projectiles: the cooldown-gated fire routine, movement,
off-screen cleanup and the projectile -> rock collision pass.

Fire rules:
  * single shot: one projectile centered on the cannon
  * rapid-fire active: two projectiles at 1/4 and 3/4 of the cannon width
  * projectiles spawn at the cannon's top edge and travel straight up

Collision rules:
  * first match wins: a projectile damages at most one rock per frame and
    the inner scan stops at its first overlap
  * damage, scoring and splitting are delegated to FragmentationEngine
  * rocks and projectiles are matched by identity, so entities removed
    earlier in the same pass are simply skipped

The system does not draw; the renderer reads projectile snapshots.
"""

from __future__ import annotations

from typing import Any, Dict, List

from rockblast.config import ProjectileConfig
from rockblast.entities import Cannon, Projectile
from rockblast.fragmentation import FragmentationEngine, HitResult
from rockblast.geometry import overlaps
from rockblast.services import ServiceContainer
from rockblast.state import SimulationState


class ProjectileSystem:
    def __init__(self, config: ProjectileConfig, services: ServiceContainer):
        self.config = config
        self.services = services

    # --- Fire -----------------------------------------------------------------
    def spawn(self, state: SimulationState, x: float, y: float) -> Projectile:
        cfg = self.config
        proj = Projectile(x, y, cfg.width, cfg.height, cfg.speed)
        state.projectiles.append(proj)
        return proj

    def fire(self, state: SimulationState, cannon: Cannon, double: bool) -> List[Projectile]:
        half = self.config.width / 2
        if double:
            xs = [cannon.x + cannon.width / 4 - half, cannon.x + cannon.width * 3 / 4 - half]
        else:
            xs = [cannon.x + cannon.width / 2 - half]
        shots = [self.spawn(state, x, cannon.y) for x in xs]
        self.services.play("shoot")
        state.fire_cooldown = self.config.cooldown
        return shots

    # --- Simulation -------------------------------------------------------------
    def update(self, state: SimulationState) -> int:
        """Advance all projectiles one frame; returns how many left the arena."""
        before = len(state.projectiles)
        for proj in state.projectiles:
            proj.update()
        state.projectiles = [p for p in state.projectiles if not p.is_off_screen()]
        return before - len(state.projectiles)

    def resolve_rock_hits(self, state: SimulationState, engine: FragmentationEngine) -> Dict[str, Any]:
        hits = 0
        destroyed = 0
        splits = 0
        for proj in list(reversed(state.projectiles)):
            if not any(p is proj for p in state.projectiles):
                continue
            for rock in reversed(state.rocks):
                if overlaps(proj, rock):
                    outcome = engine.apply_hit(state, rock, proj)
                    hits += 1
                    if outcome.result is not HitResult.HIT:
                        destroyed += 1
                    if outcome.result is HitResult.SPLIT:
                        splits += 1
                    break

        return {
            "hits": hits,
            "destroyed": destroyed,
            "splits": splits,
            "active": len(state.projectiles),
        }


__all__ = ["ProjectileSystem"]
