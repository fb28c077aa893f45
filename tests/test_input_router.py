import pygame
import pytest

from rockblast.input_router import InputRouter


@pytest.fixture(autouse=True, scope="module")
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, {"key": k})


def test_key_actions_in_order_without_duplicates():
    router = InputRouter()
    events = [key(pygame.K_m), key(pygame.K_F1), key(pygame.K_r), key(pygame.K_SPACE), key(pygame.K_m)]
    sample = router.process(events)
    assert sample.actions == ["toggle_audio", "toggle_debug", "restart"]
    assert sample.pointer_x is None


def test_quit_sources():
    router = InputRouter()
    sample = router.process([pygame.event.Event(pygame.QUIT, {}), key(pygame.K_ESCAPE)])
    assert sample.actions == ["quit"]


def test_pointer_uses_latest_motion_and_scale():
    router = InputRouter(scale=2.0)
    events = [
        pygame.event.Event(pygame.MOUSEMOTION, {"pos": (100, 50), "rel": (0, 0), "buttons": (0, 0, 0)}),
        pygame.event.Event(pygame.MOUSEMOTION, {"pos": (300, 50), "rel": (0, 0), "buttons": (0, 0, 0)}),
    ]
    sample = router.process(events)
    assert sample.pointer_x == 150
    assert sample.actions == []


def test_left_click_requests_restart_and_moves_pointer():
    router = InputRouter()
    sample = router.process([pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"pos": (420, 10), "button": 1})])
    assert sample.actions == ["restart"]
    assert sample.pointer_x == 420
    right = router.process([pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"pos": (10, 10), "button": 3})])
    assert right.actions == []


def test_touch_is_normalized_to_arena():
    router = InputRouter(arena_width=800)
    sample = router.process([pygame.event.Event(pygame.FINGERMOTION, {"x": 0.25, "y": 0.5})])
    assert sample.pointer_x == 200


def test_invalid_scale():
    with pytest.raises(ValueError):
        InputRouter(scale=0)


def test_configurable_bindings():
    from rockblast.settings import settings

    original = settings.key_bindings["toggle_debug"]
    try:
        settings.bind("toggle_debug", [pygame.K_d])
        router = InputRouter()
        assert router.process([key(pygame.K_d)]).actions == ["toggle_debug"]
        assert router.process([key(pygame.K_F1)]).actions == []
    finally:
        settings.key_bindings["toggle_debug"] = original


def test_sound_volume_clamps_to_tenths():
    from rockblast.settings import Settings

    s = Settings()
    s.sound_volume = 1.7
    assert s.sound_volume == 1.0
    s.sound_volume = -3
    assert s.sound_volume == 0.0
    s.sound_volume = 0.34
    assert s.sound_volume == 0.3
