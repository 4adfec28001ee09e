import random

import pytest


class ScriptedRandom(random.Random):
    """random.Random with scripted draws.

    random() pops from `draws` (then returns `default`); uniform() goes through
    random(), so a draw of 0.5 gives zero scoring noise. randint() pops from
    `dice` (then returns the lower bound). `calls` counts random() draws.
    """

    def __init__(self, draws=(), dice=(), default: float = 0.5) -> None:
        super().__init__(0)
        self.draws = list(draws)
        self.dice = list(dice)
        self.default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.draws.pop(0) if self.draws else self.default

    def randint(self, a: int, b: int) -> int:
        return self.dice.pop(0) if self.dice else a


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
