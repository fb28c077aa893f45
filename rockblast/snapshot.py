from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from rockblast.particle_system import ParticleSystem
from rockblast.state import SimulationState


@dataclass(frozen=True)
class CannonSnapshot:
    x: float
    y: float
    width: float
    height: float
    shielded: bool


@dataclass(frozen=True)
class RockSnapshot:
    id: int
    x: float
    y: float
    width: float
    height: float
    vx: float
    vy: float
    rotation: float
    tier: int
    elite: bool
    health: int
    max_health: int
    impact_intensity: float
    hit_flash: int


@dataclass(frozen=True)
class ProjectileSnapshot:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class CollectibleSnapshot:
    x: float
    y: float
    width: float
    height: float
    kind: str
    float_offset: float


@dataclass(frozen=True)
class GhostSnapshot:
    x: float
    y: float
    width: float
    height: float
    rotation: float
    elite: bool
    scale: float
    shake: float


@dataclass(frozen=True)
class ParticleSnapshot:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int, int]
    alpha: float
    kind: str
    glow: bool


@dataclass(frozen=True)
class HudSnapshot:
    score: int
    level: int
    wave: int
    destroyed: int
    frame: int
    elapsed_seconds: float
    powerups: Tuple[str, ...]
    double_fire_frames: int
    round_over: bool
    debug: bool
    audio_enabled: bool


@dataclass(frozen=True)
class FrameSnapshot:
    arena_width: float
    arena_height: float
    ground_y: float
    cannon: CannonSnapshot
    hud: HudSnapshot
    rocks: Tuple[RockSnapshot, ...] = field(default_factory=tuple)
    projectiles: Tuple[ProjectileSnapshot, ...] = field(default_factory=tuple)
    collectibles: Tuple[CollectibleSnapshot, ...] = field(default_factory=tuple)
    ghosts: Tuple[GhostSnapshot, ...] = field(default_factory=tuple)
    particles: Tuple[ParticleSnapshot, ...] = field(default_factory=tuple)
    events: Tuple[str, ...] = field(default_factory=tuple)


class SnapshotService:
    """Builds read-only copies of the simulation for draw and HUD sinks."""

    @staticmethod
    def capture(
        state: SimulationState,
        particles: ParticleSystem,
        fps: int,
        events=(),
        debug: bool = False,
        audio_enabled: bool = True,
    ) -> FrameSnapshot:
        c = state.cannon
        hud = HudSnapshot(
            score=state.score,
            level=state.level,
            wave=state.current_wave,
            destroyed=state.destroyed,
            frame=state.frame,
            elapsed_seconds=state.frame / fps,
            powerups=tuple(k.value for k in state.powerups.active_kinds(c)),
            double_fire_frames=state.powerups.double_fire_frames,
            round_over=state.round_over,
            debug=debug,
            audio_enabled=audio_enabled,
        )
        return FrameSnapshot(
            arena_width=state.arena.width,
            arena_height=state.arena.height,
            ground_y=state.arena.ground_y,
            cannon=CannonSnapshot(c.x, c.y, c.width, c.height, c.shielded),
            hud=hud,
            rocks=tuple(
                RockSnapshot(
                    r.id,
                    r.x,
                    r.y,
                    r.width,
                    r.height,
                    r.vx,
                    r.vy,
                    r.rotation,
                    r.tier,
                    r.elite,
                    r.health,
                    r.max_health,
                    r.impact_intensity,
                    r.hit_flash,
                )
                for r in state.rocks
            ),
            projectiles=tuple(ProjectileSnapshot(p.x, p.y, p.width, p.height) for p in state.projectiles),
            collectibles=tuple(
                CollectibleSnapshot(k.x, k.y, k.width, k.height, k.kind.value, k.float_offset)
                for k in state.collectibles
            ),
            ghosts=tuple(
                GhostSnapshot(g.x, g.y, g.width, g.height, g.rotation, g.elite, g.scale, g.shake) for g in state.ghosts
            ),
            particles=tuple(
                ParticleSnapshot(d.x, d.y, d.size, d.color, d.alpha, d.kind, d.glow)
                for d in particles.get_draw_commands()
            ),
            events=tuple(events),
        )

    @staticmethod
    def serialize(snapshot: FrameSnapshot) -> Dict[str, Any]:
        return asdict(snapshot)


__all__ = [
    "FrameSnapshot",
    "HudSnapshot",
    "CannonSnapshot",
    "RockSnapshot",
    "ProjectileSnapshot",
    "CollectibleSnapshot",
    "GhostSnapshot",
    "ParticleSnapshot",
    "SnapshotService",
]
