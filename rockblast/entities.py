"""Simulation entities and their per-frame kinematics.

Entities only know how to advance themselves; drawing lives in
``rockblast.renderer`` and works from snapshots, so nothing here imports
pygame.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rockblast.config import CannonConfig, GameConfig, RockConfig
from rockblast.constants import (
    COLLECTIBLE_FLOAT_AMPLITUDE,
    COLLECTIBLE_FLOAT_SPEED,
    ROCK_HEAVY_IMPACT_SPEED,
    ROCK_HIT_FLASH_FRAMES,
)
from rockblast.geometry import center
from rockblast.powerups import PowerUpKind
from rockblast.rng_service import RNGService

MAX_TIER = 2


@dataclass(frozen=True)
class Arena:
    width: float
    height: float
    ground_offset: float

    @classmethod
    def from_config(cls, config: GameConfig) -> "Arena":
        a = config.arena
        return cls(a.width, a.height, a.ground_offset)

    @property
    def ground_y(self) -> float:
        return self.height - self.ground_offset


@dataclass
class Cannon:
    x: float
    y: float
    width: float
    height: float
    arena_width: float
    shielded: bool = False

    @classmethod
    def spawn(cls, cfg: CannonConfig, arena: Arena) -> "Cannon":
        cannon = cls(0.0, 0.0, cfg.width, cfg.height, arena.width)
        cannon.reset(cfg, arena)
        return cannon

    def reset(self, cfg: CannonConfig, arena: Arena) -> None:
        self.x = arena.width / 2 - self.width / 2
        self.y = arena.height - self.height - cfg.bottom_margin
        self.shielded = False

    def move_to(self, pointer_x: float | None) -> None:
        """Center on the pointer (None keeps the last position), then clamp."""
        if pointer_x is not None:
            self.x = pointer_x - self.width / 2
        self.x = min(max(self.x, 0.0), self.arena_width - self.width)

    def center(self):
        return center(self)


@dataclass(eq=False)
class Projectile:
    x: float
    y: float
    width: float
    height: float
    speed: float

    def update(self) -> None:
        self.y -= self.speed

    def is_off_screen(self) -> bool:
        return self.y + self.height < 0


@dataclass(frozen=True)
class RockBounce:
    """A ground contact produced by ``Rock.update``."""

    x: float
    y: float
    speed: float
    heavy: bool
    width: float


def tier_multiplier(tier: int, elite: bool, cfg: RockConfig) -> float:
    scale = cfg.tier_scales[min(max(tier, 0), MAX_TIER)]
    return scale * cfg.elite_scale_factor if elite else scale


@dataclass(eq=False)
class Rock:
    id: int
    x: float
    y: float
    base_width: float
    base_height: float
    tier: int
    elite: bool
    size_multiplier: float
    speed: float
    vx: float
    vy: float
    gravity: float
    restitution: float
    bounce_jitter: float
    impact_decay: float
    rotation_speed: float
    health: int
    max_health: int
    rotation: float = 0.0
    impact_intensity: float = 0.0
    hit_flash: int = 0

    @classmethod
    def create(
        cls,
        rock_id: int,
        x: float,
        y: float,
        base_width: float,
        base_height: float,
        speed: float,
        cfg: RockConfig,
        rng: RNGService,
        tier: int = 0,
        elite: bool = False,
    ) -> "Rock":
        if not 0 <= tier <= MAX_TIER:
            raise ValueError(f"rock tier must be within 0..{MAX_TIER} (got {tier})")
        mult = tier_multiplier(tier, elite, cfg)
        gravity = cfg.gravity * (cfg.elite_gravity_factor if elite and tier == 0 else 1.0)
        base_health = rng.randint(cfg.base_health_min, cfg.base_health_max)
        health_mult = mult * cfg.elite_health_factor if elite else mult
        health = max(1, math.floor(base_health * health_mult))
        return cls(
            id=rock_id,
            x=x,
            y=y,
            base_width=base_width,
            base_height=base_height,
            tier=tier,
            elite=elite,
            size_multiplier=mult,
            speed=speed,
            vx=rng.spread(2.0),
            vy=speed,
            gravity=gravity,
            restitution=cfg.restitution,
            bounce_jitter=cfg.bounce_jitter,
            impact_decay=cfg.impact_decay,
            # larger rocks spin slower
            rotation_speed=rng.spread(0.05) / (mult * 0.5),
            health=health,
            max_health=health,
        )

    @property
    def width(self) -> float:
        return self.base_width * self.size_multiplier

    @property
    def height(self) -> float:
        return self.base_height * self.size_multiplier

    def center(self):
        return center(self)

    def update(self, arena: Arena, rng: RNGService) -> RockBounce | None:
        if self.impact_intensity > 0:
            self.impact_intensity *= self.impact_decay
        if self.hit_flash > 0:
            self.hit_flash -= 1

        self.vy += self.gravity
        self.x += self.vx
        self.y += self.vy
        self.rotation += self.rotation_speed

        bounce = None
        ground = arena.ground_y
        if self.y + self.height >= ground:
            self.y = ground - self.height
            if self.vy > 0:
                before = self.vy
                self.vy = -before * self.restitution
                if self.bounce_jitter:
                    self.vx += rng.spread(self.bounce_jitter)
                heavy = self.elite and self.tier == 0 and abs(before) > ROCK_HEAVY_IMPACT_SPEED
                if heavy:
                    self.impact_intensity = 1.0
                bounce = RockBounce(self.x + self.width / 2, ground, before, heavy, self.width)

        if self.y < 0:
            self.y = 0
            if self.vy < 0:
                self.vy = -self.vy * self.restitution

        if self.x < 0:
            self.x = 0
            self.vx = -self.vx * self.restitution
        elif self.x + self.width > arena.width:
            self.x = arena.width - self.width
            self.vx = -self.vx * self.restitution
        return bounce

    def hit(self) -> None:
        self.health -= 1
        self.hit_flash = ROCK_HIT_FLASH_FRAMES

    def is_destroyed(self) -> bool:
        return self.health <= 0

    def is_off_screen(self) -> bool:
        # Rocks bounce forever; only destruction removes them.
        return False


@dataclass(eq=False)
class Collectible:
    x: float
    y: float
    width: float
    height: float
    speed: float
    kind: PowerUpKind
    float_phase: float = 0.0

    def update(self) -> None:
        self.y += self.speed
        self.float_phase += COLLECTIBLE_FLOAT_SPEED

    @property
    def float_offset(self) -> float:
        """Cosmetic sway for drawing; collision uses the unshifted x."""
        return math.sin(self.float_phase) * COLLECTIBLE_FLOAT_AMPLITUDE

    def is_off_screen(self, arena: Arena) -> bool:
        return self.y > arena.height


@dataclass(eq=False)
class SplitGhost:
    """Visual-only stand-in for a rock that has already been split.

    The parent leaves the live rock list the moment it splits; this record
    only drives the brief scale/shake animation and never collides.
    """

    x: float
    y: float
    width: float
    height: float
    rotation: float
    elite: bool
    health_label: int = 0
    duration: int = 10
    progress: int = field(default=0)

    @classmethod
    def from_rock(cls, rock: Rock, duration: int) -> "SplitGhost":
        return cls(rock.x, rock.y, rock.width, rock.height, rock.rotation, rock.elite, max(rock.health, 0), duration)

    def update(self) -> bool:
        """Advance one frame; True once the animation has finished."""
        self.progress += 1
        return self.progress >= self.duration

    @property
    def fraction(self) -> float:
        return min(self.progress / self.duration, 1.0)

    @property
    def scale(self) -> float:
        return 1 + self.fraction * 0.4

    @property
    def shake(self) -> float:
        return math.sin(self.fraction * math.pi * 8) * 5


__all__ = [
    "Arena",
    "Cannon",
    "Projectile",
    "Rock",
    "RockBounce",
    "Collectible",
    "SplitGhost",
    "tier_multiplier",
    "MAX_TIER",
]
