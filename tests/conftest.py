# Shared fixtures: seeded and scripted randomness, small hand-made worlds,
# and a recorder for events published on the bus.

import random

import pytest

from emojiquest.engine.core import TurnEngine
from emojiquest.events import SessionEvent, TurnEvent, event_bus
from emojiquest.missions.demo import world_from_layout


class ScriptedRandom:
    """randint answers from a queue; shuffle applies queued orders, else keeps the list as is."""

    def __init__(self, ints=(), shuffles=()):
        self.ints = list(ints)
        self.shuffles = [list(s) for s in shuffles]

    def randint(self, a, b):
        if not self.ints:
            raise AssertionError(f"unexpected randint({a}, {b})")
        v = self.ints.pop(0)
        assert a <= v <= b, f"scripted {v} outside [{a}, {b}]"
        return v

    def shuffle(self, x):
        if self.shuffles:
            order = self.shuffles.pop(0)
            assert sorted(order) == sorted(x)
            x[:] = order


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def engine():
    return TurnEngine()


@pytest.fixture
def layout():
    return world_from_layout


@pytest.fixture
def captured_events():
    seen = []
    event_bus.subscribe(TurnEvent, seen.append)
    event_bus.subscribe(SessionEvent, seen.append)
    yield seen
    event_bus.unsubscribe(TurnEvent, seen.append)
    event_bus.unsubscribe(SessionEvent, seen.append)
