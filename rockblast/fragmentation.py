"""Rock hit / split / destroy state machine.

Per rock::

    Alive(tier, health) --hit--> Alive(tier, health - 1)       health > 0
                                 Split -> two Alive(tier + 1)  tier 0
                                 Destroyed                     any other tier

Each projectile hit removes the projectile and takes exactly one point of
health. When health runs out the rock pays its spawn-time ``max_health``
as score. A tier-0 rock then splits into two tier-1 children. Any other
tier disintegrates without children.

Split policy: the parent leaves ``state.rocks`` in the same step that adds
its children, so it never receives physics or collision updates again. The
brief scale/shake animation is played by a non-colliding ``SplitGhost``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List

from rockblast.config import GameConfig
from rockblast.constants import (
    CHILD_LAUNCH_SPEED,
    CHILD_OFFSET_X,
    CHILD_SEPARATION,
    CHILD_SEPARATION_ELITE,
    CHILD_SPEED_FACTOR,
)
from rockblast.effects_util import (
    spawn_dust_cloud,
    spawn_explosion,
    spawn_final_disintegration,
    spawn_fragment_debris,
    spawn_hit_effect,
    spawn_shockwave,
)
from rockblast.entities import MAX_TIER, Projectile, Rock, SplitGhost
from rockblast.logger import get_logger
from rockblast.rng_service import RNGService
from rockblast.services import ServiceContainer
from rockblast.state import SimulationState

log = get_logger("fragmentation")

SPLITTABLE_TIERS = (0,)


class HitResult(str, enum.Enum):
    HIT = "hit"
    SPLIT = "split"
    DESTROYED = "destroyed"


@dataclass
class HitOutcome:
    result: HitResult
    rock: Rock
    points: int = 0
    children: List[Rock] = field(default_factory=list)


class FragmentationEngine:
    def __init__(self, config: GameConfig, rng: RNGService, services: ServiceContainer):
        self.config = config
        self.rng = rng
        self.services = services

    def apply_hit(self, state: SimulationState, rock: Rock, projectile: Projectile | None = None) -> HitOutcome:
        rock.hit()
        if projectile is not None:
            state.remove_projectile(projectile)

        cx, cy = rock.center()
        if not rock.is_destroyed():
            spawn_hit_effect(self.services.particles, self.rng, cx, cy)
            log.debug(f"Rock {rock.id} hit, health {rock.health}")
            return HitOutcome(HitResult.HIT, rock)

        points = rock.max_health
        state.score += points
        state.destroyed += 1
        self.services.play("explosion")
        spawn_explosion(self.services.particles, self.rng, cx, cy)

        if rock.tier in SPLITTABLE_TIERS:
            children = self.split(state, rock)
            log.debug(f"Rock {rock.id} split (elite={rock.elite}), +{points} points")
            return HitOutcome(HitResult.SPLIT, rock, points, children)

        self.finalize(state, rock)
        log.debug(f"Rock {rock.id} destroyed at tier {rock.tier}, +{points} points")
        return HitOutcome(HitResult.DESTROYED, rock, points)

    def effect_scale(self, rock: Rock) -> float:
        if not rock.elite:
            return 1
        return 3 if rock.tier == 0 else 2

    def split(self, state: SimulationState, rock: Rock) -> List[Rock]:
        """Replace ``rock`` with two next-tier children flying apart."""
        ps = self.services.particles
        cx, cy = rock.center()
        scale = self.effect_scale(rock)
        spawn_shockwave(ps, self.rng, cx, cy, scale)
        spawn_dust_cloud(ps, self.rng, cx, cy, rock.tier, scale)

        state.ghosts.append(SplitGhost.from_rock(rock, self.config.rock.split_frames))

        next_tier = min(rock.tier + 1, MAX_TIER)
        separation = (CHILD_SEPARATION_ELITE if rock.elite else CHILD_SEPARATION) + rock.tier * 2
        children = []
        for direction in (-1, 1):
            child = Rock.create(
                state.allocate_rock_id(),
                cx - rock.base_width / 2 + direction * CHILD_OFFSET_X,
                cy - rock.base_height / 2,
                rock.base_width,
                rock.base_height,
                rock.speed * CHILD_SPEED_FACTOR,
                self.config.rock,
                self.rng,
                tier=next_tier,
                elite=rock.elite,
            )
            child.vx = direction * separation + self.rng.spread(2)
            child.vy = -(CHILD_LAUNCH_SPEED + scale) - self.rng.random() * 2
            child.rotation_speed = self.rng.spread(0.15)
            children.append(child)

        spawn_fragment_debris(ps, self.rng, cx, cy, rock.tier, scale)

        state.remove_rock(rock)
        state.rocks.extend(children)
        return children

    def finalize(self, state: SimulationState, rock: Rock) -> None:
        cx, cy = rock.center()
        spawn_final_disintegration(self.services.particles, self.rng, cx, cy)
        state.remove_rock(rock)


__all__ = ["FragmentationEngine", "HitOutcome", "HitResult", "SPLITTABLE_TIERS"]
