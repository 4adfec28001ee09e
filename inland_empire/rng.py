"""Random source used by every stochastic step of the engine.

Scoring noise, ancient-voice draws, voice acceptance, the should-check draw
and the dice all pull from one object matching this protocol:

    def random(self) -> float: ...            # [0.0, 1.0)
    def uniform(self, a, b) -> float: ...
    def randint(self, a, b) -> int: ...       # inclusive

random.Random satisfies it, so production code passes nothing (module-level
generator) or make_rng(seed) for reproducible runs. Tests subclass
random.Random to script exact draws.
"""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


_default = random.Random()


def default_rng() -> RandomSource:
    return _default


def make_rng(seed: int | str | None = None) -> RandomSource:
    """Return an independent generator, seeded when a seed is given."""
    return random.Random(seed)
