import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (app, rockblast)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless / test mode environment variables
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from rockblast.config import GameConfig  # noqa: E402
from rockblast.entities import Rock  # noqa: E402
from rockblast.rng_service import RNGService  # noqa: E402
from rockblast.simulation import Simulation  # noqa: E402


@pytest.fixture
def rng():
    return RNGService(1234)


@pytest.fixture
def sim():
    return Simulation(seed=7)


@pytest.fixture
def make_rock(rng):
    """Factory for tier/elite rocks with a forced health value."""

    def _make(x=100.0, y=100.0, size=40.0, tier=0, elite=False, health=None, rock_id=1, config=None):
        cfg = (config or GameConfig()).rock
        rock = Rock.create(rock_id, x, y, size, size, 1.0, cfg, rng, tier=tier, elite=elite)
        if health is not None:
            rock.health = health
            rock.max_health = health
        return rock

    return _make
