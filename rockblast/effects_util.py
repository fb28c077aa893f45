"""Named particle emitters.

One helper per simulation event so gameplay code calls a single function
and every burst of the same kind has the same count and tuning. Each
emitter takes the ParticleSystem and the simulation's RNGService.
"""

from __future__ import annotations

import math

from rockblast.particle_system import ParticleSystem
from rockblast.rng_service import RNGService

GOLD = (255, 215, 0, 255)
ORANGE = (255, 140, 0, 255)
CANNON_ORANGE = (255, 107, 53, 255)
WHITE = (255, 255, 255, 255)
CYAN = (0, 255, 255, 255)
SPARK_WHITE = (255, 248, 220, 255)
SHOCKWAVE_BLUE = (100, 200, 255, 204)
SHOCKWAVE_PURPLE = (157, 143, 255, 230)
DUST_GREY = (150, 150, 150, 153)
DISINTEGRATION_DUST = (180, 180, 180, 178)
TRAIL_DUST = (180, 180, 180, 77)
DEBRIS_GREY = (160, 160, 160, 255)
DEBRIS_PURPLE = (128, 112, 192, 255)
GROUND_DUST = (160, 140, 100, 178)
GROUND_DEBRIS = (107, 91, 60, 255)
SMOKE_GREY = (100, 100, 100, 102)


def _polar(angle: float, speed: float):
    return math.cos(angle) * speed, math.sin(angle) * speed


def spawn_hit_effect(ps: ParticleSystem, rng: RNGService, x: float, y: float) -> None:
    """Small gold burst when a rock is damaged but survives."""
    for _ in range(5):
        vx, vy = _polar(rng.random() * math.tau, 1 + rng.random() * 2)
        ps.spawn(x, y, vx, vy, life=15, size=2, color=GOLD)


def spawn_shockwave(ps: ParticleSystem, rng: RNGService, x: float, y: float, scale: float = 1) -> None:
    count = math.floor(20 * scale)
    life = math.floor(12 * scale)
    color = SHOCKWAVE_PURPLE if scale > 2 else SHOCKWAVE_BLUE
    for i in range(count):
        vx, vy = _polar(math.tau * i / count, (3 + rng.random() * 2) * scale)
        ps.spawn(x, y, vx, vy, life=life, size=(2 + rng.random()) * scale, color=color, kind="shockwave")


def spawn_dust_cloud(ps: ParticleSystem, rng: RNGService, x: float, y: float, tier: int, scale: float = 1) -> None:
    for _ in range(math.floor((15 + tier * 5) * scale)):
        vx, vy = _polar(rng.random() * math.tau, (0.5 + rng.random() * 1.5) * scale)
        ps.spawn(
            x + rng.spread(20 * scale),
            y + rng.spread(20 * scale),
            vx,
            vy - 0.5,
            life=math.floor((25 + rng.random() * 15) * scale),
            max_life=math.floor(40 * scale),
            size=(3 + rng.random() * 4) * scale,
            color=DUST_GREY,
            kind="dust",
        )


def spawn_fragment_debris(ps: ParticleSystem, rng: RNGService, x: float, y: float, tier: int, scale: float = 1) -> None:
    color = DEBRIS_PURPLE if scale > 2 else DEBRIS_GREY
    for _ in range(math.floor((8 + tier * 3) * scale)):
        vx, vy = _polar(rng.random() * math.tau, (2 + rng.random() * 3) * scale)
        ps.spawn(
            x,
            y,
            vx,
            vy - 1,
            life=math.floor((20 + rng.random() * 15) * scale),
            max_life=math.floor(35 * scale),
            size=(1.5 + rng.random() * 2.5) * scale,
            color=color,
            kind="debris",
            gravity=0.1,
        )


def spawn_ground_impact(ps: ParticleSystem, rng: RNGService, x: float, y: float, intensity: float) -> None:
    """Dust fan and ground chunks under a heavy elite rock landing."""
    for _ in range(math.ceil(15 * intensity)):
        angle = -math.pi * 0.5 + rng.spread(math.pi)
        vx, vy = _polar(angle, 2 + rng.random() * 4)
        ps.spawn(
            x + rng.spread(40 * intensity),
            y,
            vx,
            vy,
            life=30,
            size=(2 + rng.random() * 3) * intensity,
            color=GROUND_DUST,
            kind="dust",
            gravity=0.12,
        )
    for _ in range(math.ceil(8 * intensity)):
        ps.spawn(
            x + rng.spread(30 * intensity),
            y - 5,
            rng.spread(4),
            -2 - rng.random() * 3,
            life=25,
            size=(2 + rng.random() * 2) * intensity,
            color=GROUND_DEBRIS,
            kind="debris",
            gravity=0.15,
        )


def spawn_final_disintegration(ps: ParticleSystem, rng: RNGService, x: float, y: float) -> None:
    """Terminal burst for a rock that does not split: dust, embers, sparks, smoke."""
    for _ in range(30):
        vx, vy = _polar(rng.random() * math.tau, 1 + rng.random() * 2)
        ps.spawn(
            x + rng.spread(15),
            y + rng.spread(15),
            vx,
            vy - 1,
            life=30 + rng.random() * 20,
            max_life=50,
            size=2 + rng.random() * 3,
            color=DISINTEGRATION_DUST,
            kind="dust",
        )
    for _ in range(15):
        vx, vy = _polar(rng.random() * math.tau, 2 + rng.random() * 3)
        ps.spawn(x, y, vx, vy - 2, life=35, size=2 + rng.random() * 2, color=GOLD, kind="ember", gravity=0.08, glow=True)
    for _ in range(20):
        vx, vy = _polar(rng.random() * math.tau, 4 + rng.random() * 4)
        ps.spawn(x, y, vx, vy, life=15, size=1.5, color=SPARK_WHITE, kind="spark")
    for _ in range(10):
        ps.spawn(
            x + rng.spread(20),
            y,
            rng.spread(0.5),
            -0.5 - rng.random() * 0.5,
            life=40 + rng.random() * 20,
            max_life=60,
            size=6 + rng.random() * 8,
            color=SMOKE_GREY,
            kind="smoke",
            expanding=True,
        )


def spawn_explosion(ps: ParticleSystem, rng: RNGService, x: float, y: float) -> None:
    """Generic destruction flash: an even ring plus random orange accents."""
    for i in range(15):
        vx, vy = _polar(math.tau * i / 15, 2 + rng.random() * 2)
        ps.spawn(x, y, vx, vy, life=35, size=3 + rng.random() * 3, color=GOLD)
    for _ in range(10):
        vx, vy = _polar(rng.random() * math.tau, 1 + rng.random() * 3)
        ps.spawn(x, y, vx, vy, life=25, size=2 + rng.random() * 2, color=ORANGE)


def spawn_cannon_explosion(ps: ParticleSystem, rng: RNGService, x: float, y: float) -> None:
    for i in range(20):
        vx, vy = _polar(math.tau * i / 20, 2 + rng.random() * 3)
        ps.spawn(x, y, vx, vy, life=60, size=5 + rng.random() * 3, color=CANNON_ORANGE)
    for _ in range(10):
        vx, vy = _polar(rng.random() * math.tau, 3 + rng.random() * 4)
        ps.spawn(x, y, vx, vy, life=40, size=6, color=WHITE)


def spawn_shield_break(ps: ParticleSystem, rng: RNGService, x: float, y: float) -> None:
    for i in range(16):
        vx, vy = _polar(math.tau * i / 16, 3 + rng.random() * 2)
        ps.spawn(x, y, vx, vy, life=50, size=4, color=CYAN)


def spawn_collection_effect(ps: ParticleSystem, rng: RNGService, x: float, y: float, color) -> None:
    rgba = tuple(color) if len(color) == 4 else (*color, 255)
    for i in range(12):
        vx, vy = _polar(math.tau * i / 12, 2 + rng.random() * 2)
        ps.spawn(x, y, vx, vy, life=40, size=3, color=rgba)


def spawn_dust_trail(ps: ParticleSystem, rng: RNGService, x: float, y: float, spread_x: float) -> None:
    """Single lingering puff behind a fast-falling elite rock."""
    ps.spawn(
        x + rng.spread(spread_x),
        y,
        rng.spread(0.5),
        rng.spread(0.5),
        life=20 + rng.random() * 10,
        max_life=30,
        size=3 + rng.random() * 4,
        color=TRAIL_DUST,
        kind="dust",
        gravity=0.0,
    )


__all__ = [
    "spawn_hit_effect",
    "spawn_shockwave",
    "spawn_dust_cloud",
    "spawn_fragment_debris",
    "spawn_ground_impact",
    "spawn_final_disintegration",
    "spawn_explosion",
    "spawn_cannon_explosion",
    "spawn_shield_break",
    "spawn_collection_effect",
    "spawn_dust_trail",
]
