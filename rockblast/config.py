"""Validated game configuration.

``GameConfig`` groups the tuning values from ``rockblast.constants`` into
per-concern sections. ``validate()`` rejects out-of-range values up front:
zero sizes, cooldowns or intervals would otherwise surface later as
division by zero in scale/health math or as spawn loops that never end.

Overrides come in as nested dicts (e.g. parsed JSON)::

    cfg = GameConfig.from_dict({"rock": {"gravity": 0.2}, "arena": {"width": 1024}})
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Tuple

from rockblast import constants as C


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass(frozen=True)
class ArenaConfig:
    width: int = C.ARENA_WIDTH
    height: int = C.ARENA_HEIGHT
    ground_offset: int = C.GROUND_OFFSET


@dataclass(frozen=True)
class CannonConfig:
    width: int = C.CANNON_WIDTH
    height: int = C.CANNON_HEIGHT
    bottom_margin: int = C.CANNON_BOTTOM_MARGIN


@dataclass(frozen=True)
class ProjectileConfig:
    width: int = C.PROJECTILE_WIDTH
    height: int = C.PROJECTILE_HEIGHT
    speed: float = C.PROJECTILE_SPEED
    cooldown: int = C.FIRE_COOLDOWN_FRAMES


@dataclass(frozen=True)
class RockConfig:
    min_size: float = C.ROCK_MIN_SIZE
    max_size: float = C.ROCK_MAX_SIZE
    base_speed: float = C.ROCK_BASE_SPEED
    speed_variation: float = C.ROCK_SPEED_VARIATION
    gravity: float = C.ROCK_GRAVITY
    restitution: float = C.ROCK_RESTITUTION
    bounce_jitter: float = C.ROCK_BOUNCE_JITTER
    tier_scales: Tuple[float, float, float] = C.ROCK_TIER_SCALES
    elite_scale_factor: float = C.ROCK_ELITE_SCALE_FACTOR
    elite_gravity_factor: float = C.ROCK_ELITE_GRAVITY_FACTOR
    elite_health_factor: float = C.ROCK_ELITE_HEALTH_FACTOR
    base_health_min: int = C.ROCK_BASE_HEALTH_MIN
    base_health_max: int = C.ROCK_BASE_HEALTH_MAX
    split_frames: int = C.ROCK_SPLIT_FRAMES
    impact_decay: float = C.ROCK_IMPACT_DECAY


@dataclass(frozen=True)
class WaveConfig:
    rocks_per_wave: int = C.ROCKS_PER_WAVE
    stagger_frames: int = C.WAVE_STAGGER_FRAMES
    elite_base_chance: float = C.ELITE_BASE_CHANCE
    elite_chance_per_wave: float = C.ELITE_CHANCE_PER_WAVE
    elite_max_chance: float = C.ELITE_MAX_CHANCE


@dataclass(frozen=True)
class DifficultyConfig:
    interval: int = C.DIFFICULTY_INTERVAL_FRAMES
    spawn_interval_start: int = C.SPAWN_INTERVAL_START
    spawn_interval_min: int = C.SPAWN_INTERVAL_MIN
    spawn_interval_step: int = C.SPAWN_INTERVAL_STEP
    speed_bonus_step: float = C.SPEED_BONUS_STEP
    speed_bonus_max: float = C.SPEED_BONUS_MAX
    score_per_level: int = C.SCORE_PER_LEVEL


@dataclass(frozen=True)
class CollectibleConfig:
    size: int = C.COLLECTIBLE_SIZE
    speed: float = C.COLLECTIBLE_SPEED
    spawn_interval: int = C.COLLECTIBLE_SPAWN_FRAMES
    spawn_chance: float = C.COLLECTIBLE_SPAWN_CHANCE
    double_fire_frames: int = C.DOUBLE_FIRE_FRAMES
    shield_frames: int | None = None  # None: shield lasts until it absorbs a hit
    pickup_bonus: int = C.PICKUP_BONUS


_SECTIONS = {
    "arena": ArenaConfig,
    "cannon": CannonConfig,
    "projectile": ProjectileConfig,
    "rock": RockConfig,
    "wave": WaveConfig,
    "difficulty": DifficultyConfig,
    "collectible": CollectibleConfig,
}


def _positive(section: str, obj, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if value is None or value <= 0:
            raise ConfigError(f"{section}.{name} must be > 0 (got {value!r})")


def _non_negative(section: str, obj, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if value < 0:
            raise ConfigError(f"{section}.{name} must be >= 0 (got {value!r})")


def _probability(section: str, obj, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if not 0.0 <= value <= 1.0:
            raise ConfigError(f"{section}.{name} must be within [0, 1] (got {value!r})")


@dataclass(frozen=True)
class GameConfig:
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    cannon: CannonConfig = field(default_factory=CannonConfig)
    projectile: ProjectileConfig = field(default_factory=ProjectileConfig)
    rock: RockConfig = field(default_factory=RockConfig)
    wave: WaveConfig = field(default_factory=WaveConfig)
    difficulty: DifficultyConfig = field(default_factory=DifficultyConfig)
    collectible: CollectibleConfig = field(default_factory=CollectibleConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Any]]) -> "GameConfig":
        """Build a config from nested override dicts; unknown keys are errors."""
        sections = {}
        for key, values in data.items():
            section_cls = _SECTIONS.get(key)
            if section_cls is None:
                raise ConfigError(f"unknown config section {key!r}")
            if not isinstance(values, dict):
                raise ConfigError(f"config section {key!r} must be a mapping (got {type(values).__name__})")
            allowed = {f.name for f in fields(section_cls)}
            unknown = set(values) - allowed
            if unknown:
                raise ConfigError(f"unknown {key} option(s): {sorted(unknown)}")
            if "tier_scales" in values:
                values = dict(values, tier_scales=tuple(values["tier_scales"]))
            sections[key] = section_cls(**values)
        return cls(**sections)

    def with_overrides(self, **sections) -> "GameConfig":
        return replace(self, **sections)

    @property
    def ground_y(self) -> float:
        return self.arena.height - self.arena.ground_offset

    def validate(self) -> "GameConfig":
        a = self.arena
        _positive("arena", a, "width", "height")
        _non_negative("arena", a, "ground_offset")
        if a.ground_offset >= a.height:
            raise ConfigError("arena.ground_offset must leave the ground line inside the arena")

        c = self.cannon
        _positive("cannon", c, "width", "height")
        _non_negative("cannon", c, "bottom_margin")
        if c.width > a.width or c.height + c.bottom_margin > a.height:
            raise ConfigError("cannon does not fit inside the arena")

        p = self.projectile
        _positive("projectile", p, "width", "height", "speed", "cooldown")

        r = self.rock
        _positive("rock", r, "min_size", "max_size", "base_speed", "split_frames")
        _positive("rock", r, "elite_scale_factor", "elite_gravity_factor", "elite_health_factor")
        _positive("rock", r, "base_health_min", "base_health_max")
        _non_negative("rock", r, "speed_variation", "gravity", "bounce_jitter")
        _probability("rock", r, "restitution", "impact_decay")
        if r.min_size > r.max_size:
            raise ConfigError("rock.min_size must not exceed rock.max_size")
        if r.base_health_min > r.base_health_max:
            raise ConfigError("rock.base_health_min must not exceed rock.base_health_max")
        if len(r.tier_scales) != 3:
            raise ConfigError("rock.tier_scales needs exactly one entry per tier (0, 1, 2)")
        if any(s <= 0 for s in r.tier_scales):
            raise ConfigError("rock.tier_scales must all be > 0")
        if not r.tier_scales[0] > r.tier_scales[1] > r.tier_scales[2]:
            raise ConfigError("rock.tier_scales must strictly decrease with tier")
        largest = r.max_size * r.tier_scales[0] * r.elite_scale_factor
        if largest >= a.width or largest >= self.ground_y:
            raise ConfigError("largest possible rock does not fit inside the arena")

        w = self.wave
        _positive("wave", w, "rocks_per_wave", "stagger_frames")
        _probability("wave", w, "elite_base_chance", "elite_max_chance")
        _non_negative("wave", w, "elite_chance_per_wave")

        d = self.difficulty
        _positive("difficulty", d, "interval", "spawn_interval_start", "spawn_interval_min")
        _positive("difficulty", d, "score_per_level")
        _non_negative("difficulty", d, "spawn_interval_step", "speed_bonus_step", "speed_bonus_max")
        if d.spawn_interval_min > d.spawn_interval_start:
            raise ConfigError("difficulty.spawn_interval_min must not exceed spawn_interval_start")

        k = self.collectible
        _positive("collectible", k, "size", "speed", "spawn_interval", "double_fire_frames")
        _probability("collectible", k, "spawn_chance")
        _non_negative("collectible", k, "pickup_bonus")
        if k.shield_frames is not None:
            _positive("collectible", k, "shield_frames")
        if k.size > a.width:
            raise ConfigError("collectible.size does not fit inside the arena")
        return self


__all__ = [
    "ConfigError",
    "GameConfig",
    "ArenaConfig",
    "CannonConfig",
    "ProjectileConfig",
    "RockConfig",
    "WaveConfig",
    "DifficultyConfig",
    "CollectibleConfig",
]
