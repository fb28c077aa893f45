import pytest

from rockblast.config import GameConfig
from rockblast.rng_service import RNGService
from rockblast.spawner import WaveDirector
from rockblast.state import SimulationState


def _director(config=None, seed=11):
    cfg = config or GameConfig()
    return SimulationState.initial(cfg), WaveDirector(cfg, RNGService(seed))


def test_first_wave_starts_immediately_and_staggers():
    state, director = _director()
    spawned = director.update_waves(state)
    assert len(spawned) == 1
    assert state.current_wave == 1
    assert [p.spawn_at_frame for p in state.pending_spawns] == [12, 24]
    assert state.wave_active

    for frame in range(1, 25):
        state.frame = frame
        director.update_waves(state)
    assert len(state.rocks) == 3
    assert state.pending_spawns == []


def test_wave_size_grows_with_wave_number():
    state, director = _director()
    assert director.start_wave(state) == 3  # wave 1
    state.pending_spawns.clear()
    assert director.start_wave(state) == 4  # wave 2
    state.pending_spawns.clear()
    director.start_wave(state)
    assert director.start_wave(state) == 5  # wave 4
    assert state.current_wave == 4


def test_next_wave_waits_for_clear_arena_and_gate():
    state, director = _director()
    director.update_waves(state)
    state.pending_spawns.clear()
    state.rocks.clear()

    state.frame = state.spawn_interval - 1
    director.update_waves(state)
    assert state.current_wave == 1
    assert not state.wave_active

    state.frame = state.spawn_interval
    director.update_waves(state)
    assert state.current_wave == 2


def test_live_rocks_block_next_wave():
    state, director = _director()
    for frame in range(0, 200):
        state.frame = frame
        director.update_waves(state)
    assert state.current_wave == 1
    assert len(state.rocks) == 3


def test_created_rock_enters_from_top():
    state, director = _director()
    for _ in range(50):
        rock = director.create_rock(state)
        assert rock.tier == 0
        assert rock.y == -rock.height
        assert 0 <= rock.x <= state.arena.width - rock.width
    assert len({r.id for r in state.rocks}) == 50


def test_elite_chance_is_capped():
    _, director = _director()
    assert director.elite_chance(1) == pytest.approx(0.17)
    assert director.elite_chance(100) == 0.35


def test_difficulty_is_monotonic():
    state, director = _director()
    intervals = []
    bonuses = []
    for _ in range(40_000):
        director.apply_difficulty(state)
        intervals.append(state.spawn_interval)
        bonuses.append(state.speed_bonus)
    assert all(a >= b for a, b in zip(intervals, intervals[1:]))
    assert all(a <= b for a, b in zip(bonuses, bonuses[1:]))
    assert intervals[-1] == 30
    assert bonuses[-1] == 3.0


def test_difficulty_steps_every_interval():
    state, director = _director()
    stepped = [director.apply_difficulty(state) for _ in range(1200)]
    assert stepped.count(True) == 2
    assert state.spawn_interval == 80
    assert state.speed_bonus == pytest.approx(0.4)


def test_level_follows_score_and_never_drops():
    state, director = _director()
    state.score = 120
    director.apply_difficulty(state)
    assert state.level == 3
    state.score = 0
    director.apply_difficulty(state)
    assert state.level == 3


def test_collectible_spawns_on_interval():
    cfg = GameConfig.from_dict({"collectible": {"spawn_chance": 1.0}})
    state, director = _director(cfg)
    results = [director.update_collectibles(state) for _ in range(600)]
    assert results[:-1] == [None] * 599
    item = results[-1]
    assert item is not None and state.collectibles == [item]
    assert item.y == -item.height
    assert 0 <= item.x <= state.arena.width - item.width


def test_collectible_roll_can_fail():
    cfg = GameConfig.from_dict({"collectible": {"spawn_chance": 0.0}})
    state, director = _director(cfg)
    for _ in range(3000):
        director.update_collectibles(state)
    assert state.collectibles == []
