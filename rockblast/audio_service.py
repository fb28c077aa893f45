"""AudioService

Plays the simulation's event tags as sound effects through pygame.mixer.

Design:
- Implements the ``AudioPort`` protocol (``play(name)``) so the simulation
  never touches the mixer directly.
- Sounds are loaded lazily from ``<sound_dir>/<tag>.wav`` and cached.
- Volume = per-tag base volume x ``settings.sound_volume``.
- No audio device or a missing file never raises: the service warns once
  per tag and stays silent for it.
"""

from __future__ import annotations

import os
from typing import Dict, Set

import pygame

from rockblast.logger import get_logger
from rockblast.settings import settings

log = get_logger("audio")

BASE_VOLUMES: Dict[str, float] = {
    "shoot": 0.3,
    "explosion": 0.4,
    "powerup": 0.5,
    "gameOver": 0.6,
    "shield": 0.4,
    "bounce": 0.35,
}


class AudioService:
    _instance: "AudioService | None" = None

    def __init__(self, sound_dir: str = "data/sfx") -> None:
        self.sound_dir = sound_dir
        self._sfx: Dict[str, pygame.mixer.Sound] = {}
        self._missing: Set[str] = set()
        self.available = self._init_mixer()

    @classmethod
    def get(cls) -> "AudioService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _init_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as e:
            # Headless machines: retry once on the dummy driver.
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
            try:
                pygame.mixer.init()
            except pygame.error:
                log.warn("No audio device; sound effects disabled:", e)
                return False
        return True

    def _load(self, name: str) -> pygame.mixer.Sound:
        return pygame.mixer.Sound(os.path.join(self.sound_dir, f"{name}.wav"))

    def _sound(self, name: str) -> pygame.mixer.Sound | None:
        snd = self._sfx.get(name)
        if snd is not None or name in self._missing:
            return snd
        try:
            snd = self._load(name)
        except (pygame.error, FileNotFoundError) as e:
            self._missing.add(name)
            log.warn(f"Sound {name!r} unavailable:", e)
            return None
        self._sfx[name] = snd
        self._apply_volume(name, snd)
        return snd

    # Volume management --------------------------------------------------
    def _apply_volume(self, name: str, snd) -> None:
        snd.set_volume(settings.sound_volume * BASE_VOLUMES.get(name, 0.5))

    def apply_volumes(self) -> None:
        for name, snd in self._sfx.items():
            self._apply_volume(name, snd)

    def set_sound_volume(self, v: float) -> None:
        settings.sound_volume = v
        self.apply_volumes()

    # SFX ----------------------------------------------------------------
    def play(self, name: str) -> None:
        if not self.available:
            return
        snd = self._sound(name)
        if snd is None:
            return
        try:
            snd.play()
        except pygame.error as e:
            log.debug(f"play({name!r}) failed:", e)


__all__ = ["AudioService", "BASE_VOLUMES"]
