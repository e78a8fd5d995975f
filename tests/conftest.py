import pytest

from guess_engine import GameEngine


class FixedRandom:
    """Stands in for random.Random; hands out targets from a list, in order."""

    def __init__(self, *targets):
        self.targets = list(targets)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if len(self.targets) > 1:
            return self.targets.pop(0)
        return self.targets[0]


@pytest.fixture
def engine50():
    return GameEngine(rng=FixedRandom(50))


@pytest.fixture
def make_engine():
    def _make(*targets):
        return GameEngine(rng=FixedRandom(*targets))
    return _make
