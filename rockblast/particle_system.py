"""Central ParticleSystem.

Owns every decorative particle (dust, embers, sparks, debris, shockwave
rings, smoke). Particles are purely observational: gameplay never reads
them back, and they keep animating after the round ends.

Per-frame update rules:
  * integrate position by velocity
  * ``vy += gravity`` (the particle's own override, else the default)
  * horizontal air drag
  * expanding smoke grows a little every frame
  * ``life -= 1``; the particle is dropped once life reaches zero

Spawning goes through the named emitters in ``rockblast.effects_util``;
``spawn`` / ``extend`` are the low-level entry points they use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from rockblast.constants import (
    MAX_PARTICLES,
    PARTICLE_AIR_DRAG,
    PARTICLE_DEFAULT_GRAVITY,
    SMOKE_EXPANSION,
)

PARTICLE_KINDS = ("dust", "ember", "spark", "debris", "shockwave", "smoke", "default")

Color = Tuple[int, int, int, int]


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    max_life: float
    size: float
    color: Color
    kind: str = "default"
    gravity: float | None = None
    glow: bool = False
    expanding: bool = False

    def update(self) -> bool:
        """Advance one frame. Returns True when the particle is dead."""
        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity if self.gravity is not None else PARTICLE_DEFAULT_GRAVITY
        self.vx *= PARTICLE_AIR_DRAG
        if self.expanding and self.kind == "smoke":
            self.size += SMOKE_EXPANSION
        self.life -= 1
        return self.life <= 0

    @property
    def alpha(self) -> float:
        if self.max_life <= 0:
            return 0.0
        return min(max(self.life / self.max_life, 0.0), 1.0)


@dataclass
class ParticleDrawCommand:
    x: float
    y: float
    size: float
    color: Color
    alpha: float
    kind: str
    glow: bool


class ParticleSystem:
    def __init__(self, max_particles: int = MAX_PARTICLES):
        self.max_particles = max_particles
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    # ---- Spawn helpers ----
    def spawn(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        life: float,
        size: float,
        color: Color,
        kind: str = "default",
        max_life: float | None = None,
        gravity: float | None = None,
        glow: bool = False,
        expanding: bool = False,
    ) -> Particle:
        if kind not in PARTICLE_KINDS:
            kind = "default"
        p = Particle(
            x,
            y,
            vx,
            vy,
            life,
            life if max_life is None else max_life,
            size,
            color,
            kind=kind,
            gravity=gravity,
            glow=glow,
            expanding=expanding,
        )
        self.particles.append(p)
        self._enforce_cap()
        return p

    def extend(self, items: Iterable[Particle]) -> None:
        self.particles.extend(items)
        self._enforce_cap()

    def _enforce_cap(self) -> None:
        overflow = len(self.particles) - self.max_particles
        if overflow > 0:
            # oldest first
            del self.particles[:overflow]

    # ---- Update & draw collection ----
    def update(self) -> None:
        self.particles = [p for p in self.particles if not p.update()]

    def get_draw_commands(self) -> List[ParticleDrawCommand]:
        return [ParticleDrawCommand(p.x, p.y, p.size, p.color, p.alpha, p.kind, p.glow) for p in self.particles]

    def clear(self) -> None:
        self.particles.clear()


__all__ = ["Particle", "ParticleSystem", "ParticleDrawCommand", "PARTICLE_KINDS"]
