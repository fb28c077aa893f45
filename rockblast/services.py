"""Output ports the simulation talks to.

The core never depends on pygame directly: sounds go through an
``AudioPort`` (``AudioService`` in the real game, ``NullAudio`` headless)
and particles through the ParticleSystem. ``ServiceContainer`` bundles
them and records every event tag emitted during the current frame so
tests and HUDs can observe what happened without an audio device.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Set

from rockblast.logger import get_logger
from rockblast.particle_system import ParticleSystem

log = get_logger("services")

class AudioPort(Protocol):
    def play(self, name: str) -> None: ...  # noqa: D401


class NullAudio:
    """Silent port used when no audio device is attached."""

    def play(self, name: str) -> None:
        return None


@dataclass
class ServiceContainer:
    audio: AudioPort | None
    particles: ParticleSystem
    audio_enabled: bool = True
    events: List[str] = field(default_factory=list)
    _failed_tags: Set[str] = field(default_factory=set)

    def begin_frame(self) -> None:
        self.events.clear()

    def play(self, tag: str) -> None:
        """Record ``tag`` for this frame and forward it to the audio port.

        A broken or missing audio port never stops the simulation.
        """
        self.events.append(tag)
        if not self.audio_enabled or self.audio is None:
            return
        try:
            self.audio.play(tag)
        except Exception as e:  # noqa: BLE001 - any sink failure is non-fatal
            if tag not in self._failed_tags:
                self._failed_tags.add(tag)
                log.warn(f"audio sink failed for {tag!r}; continuing silently:", e)

    def toggle_audio(self) -> bool:
        self.audio_enabled = not self.audio_enabled
        log.info("Audio enabled" if self.audio_enabled else "Audio muted")
        return self.audio_enabled


__all__ = ["AudioPort", "NullAudio", "ServiceContainer"]
