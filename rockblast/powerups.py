"""Power-up kinds and their frame-counted timers.

Timed effects are plain countdowns ticked once per frame by the
simulation, never scheduled callbacks, so an expiring effect can not race
the removal of the entities it refers to.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List

from rockblast.logger import get_logger

log = get_logger("powerups")


class PowerUpKind(str, enum.Enum):
    SHIELD = "shield"
    RAPID_FIRE = "rapid_fire"

    @property
    def color(self) -> tuple:
        return (0, 255, 255) if self is PowerUpKind.SHIELD else (255, 0, 255)


@dataclass
class PowerUpState:
    double_fire_frames_total: int
    shield_frames_total: int | None = None
    double_fire_frames: int = 0
    shield_frames: int = 0  # only counts down when shields are timed

    @property
    def double_fire(self) -> bool:
        return self.double_fire_frames > 0

    def activate(self, kind: PowerUpKind, cannon) -> None:
        if kind is PowerUpKind.SHIELD:
            cannon.shielded = True
            if self.shield_frames_total is not None:
                self.shield_frames = self.shield_frames_total
            log.info("Shield activated")
        else:
            # Picking up another rapid-fire refreshes rather than stacks.
            self.double_fire_frames = self.double_fire_frames_total
            log.info("Double fire activated")

    def tick(self, cannon) -> List[PowerUpKind]:
        """Advance timers one frame; returns the kinds that expired this frame."""
        expired: List[PowerUpKind] = []
        if self.double_fire_frames > 0:
            self.double_fire_frames -= 1
            if self.double_fire_frames == 0:
                expired.append(PowerUpKind.RAPID_FIRE)
                log.info("Double fire expired")
        if self.shield_frames_total is not None and cannon.shielded and self.shield_frames > 0:
            self.shield_frames -= 1
            if self.shield_frames == 0:
                cannon.shielded = False
                expired.append(PowerUpKind.SHIELD)
                log.info("Shield expired")
        return expired

    def consume_shield(self, cannon) -> None:
        cannon.shielded = False
        self.shield_frames = 0

    def active_kinds(self, cannon) -> List[PowerUpKind]:
        kinds = []
        if cannon.shielded:
            kinds.append(PowerUpKind.SHIELD)
        if self.double_fire:
            kinds.append(PowerUpKind.RAPID_FIRE)
        return kinds


__all__ = ["PowerUpKind", "PowerUpState"]
