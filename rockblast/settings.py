"""Player-facing settings kept in memory for the running session."""

import pygame

from rockblast.logger import get_logger

log = get_logger("settings")


class Settings:
    def __init__(self):
        self._sound_volume = 0.5
        # Key bindings use pygame key integers.
        self.key_bindings = {
            "restart": [pygame.K_r, pygame.K_RETURN, pygame.K_SPACE],
            "toggle_audio": [pygame.K_m],
            "toggle_debug": [pygame.K_F1],
            "quit": [pygame.K_ESCAPE],
        }

    @property
    def sound_volume(self):
        return self._sound_volume

    @sound_volume.setter
    def sound_volume(self, value):
        new_val = max(0.0, min(1.0, round(value * 10) / 10))
        if new_val != self._sound_volume:
            self._sound_volume = new_val
            log.debug(f"Sound volume {new_val:.1f}")

    def bind(self, action: str, keys) -> None:
        """Replace the keys bound to ``action``."""
        self.key_bindings[action] = list(keys)


settings = Settings()

__all__ = ["Settings", "settings"]
