import random
from typing import Any, Sequence

from rockblast.logger import get_logger

log = get_logger("rng")

Seed = int | float | str | bytes | bytearray | None


class RNGService:
    """Seedable random source shared by every simulation component.

    The simulation owns one instance and hands it down; nothing in the core
    touches the global ``random`` module, so a seed fully determines a run.
    """

    def __init__(self, seed: Seed = None):
        self._generator = random.Random(seed)
        self._seed_val = seed
        log.debug(f"RNG initialized with seed: {seed!r}")

    @property
    def seed_value(self) -> Seed:
        return self._seed_val

    def seed(self, a: Seed = None) -> None:
        self._seed_val = a
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._generator.random()

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._generator.randint(a, b)

    def uniform(self, a: float, b: float) -> float:
        """Return a random floating point number N such that a <= N <= b for a <= b."""
        return self._generator.uniform(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from the non-empty sequence seq."""
        return self._generator.choice(seq)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._generator.random() < probability

    def spread(self, magnitude: float) -> float:
        """Centered jitter in [-magnitude / 2, magnitude / 2)."""
        return (self._generator.random() - 0.5) * magnitude

    def get_state(self) -> tuple[Any, ...]:
        return self._generator.getstate()

    def set_state(self, state: tuple[Any, ...]) -> None:
        self._generator.setstate(state)


__all__ = ["RNGService", "Seed"]
