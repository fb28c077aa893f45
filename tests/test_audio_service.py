import pygame
import pytest

from rockblast.audio_service import BASE_VOLUMES, AudioService
from rockblast.settings import settings


class DummySound:
    def __init__(self):
        self.last_volume = None
        self.play_calls = 0

    def set_volume(self, v):
        self.last_volume = v

    def play(self, loops=0):
        self.play_calls += 1


@pytest.fixture
def svc(monkeypatch):
    sounds = {}

    def fake_load(self, name):
        if name == "missing":
            raise FileNotFoundError(name)
        return sounds.setdefault(name, DummySound())

    monkeypatch.setattr(AudioService, "_init_mixer", lambda self: True)
    monkeypatch.setattr(AudioService, "_load", fake_load)
    service = AudioService(sound_dir="nowhere")
    return service, sounds


def test_play_loads_lazily_and_caches(svc):
    service, sounds = svc
    service.play("shoot")
    service.play("shoot")
    assert sounds["shoot"].play_calls == 2
    assert list(sounds) == ["shoot"]


def test_volume_application(svc):
    service, sounds = svc
    original = settings.sound_volume
    try:
        service.set_sound_volume(0.5)
        service.play("explosion")
        assert sounds["explosion"].last_volume == pytest.approx(0.5 * BASE_VOLUMES["explosion"])
        service.set_sound_volume(1.0)
        assert sounds["explosion"].last_volume == pytest.approx(BASE_VOLUMES["explosion"])
    finally:
        settings.sound_volume = original


def test_missing_sound_is_silent(svc):
    service, sounds = svc
    service.play("missing")
    service.play("missing")
    assert "missing" not in sounds


def test_no_mixer_means_no_playback(monkeypatch):
    monkeypatch.setattr(AudioService, "_init_mixer", lambda self: False)

    def boom(self, name):
        raise AssertionError("should not load without a mixer")

    monkeypatch.setattr(AudioService, "_load", boom)
    AudioService().play("shoot")


def test_singleton(monkeypatch):
    monkeypatch.setattr(AudioService, "_init_mixer", lambda self: True)
    monkeypatch.setattr(AudioService, "_instance", None)
    assert AudioService.get() is AudioService.get()


def test_pygame_error_on_play_is_swallowed(svc):
    service, sounds = svc

    class Broken(DummySound):
        def play(self, loops=0):
            raise pygame.error("busy")

    sounds["bounce"] = Broken()
    service.play("bounce")
