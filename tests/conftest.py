import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from core.dispatcher import Dispatcher

# binary fractions keep elapsed-time sums exact: a window closes on the 4th frame
DT = 0.125
WINDOW = 0.5


class ScriptedKeys:
    """Held-key state set by the test; one tracker source per key."""

    def __init__(self):
        self.down = set()

    def source(self, key):
        return lambda: key in self.down

    def press(self, key):
        self.down.add(key)

    def release(self, key):
        self.down.discard(key)


class Calls:
    def __init__(self):
        self.log = []

    def cb(self, name):
        return lambda: self.log.append(name)

    def count(self, name):
        return self.log.count(name)


@pytest.fixture
def keys():
    return ScriptedKeys()


@pytest.fixture
def calls():
    return Calls()


@pytest.fixture
def make_dispatcher(keys):
    def _make(registry, interval=WINDOW):
        d = Dispatcher(registry, interval)
        for key in registry.keys():
            d.tracker.bind_source(key, keys.source(key))
        return d
    return _make


@pytest.fixture
def step():
    def _step(dispatcher, frames=1, dt=DT):
        for _ in range(frames):
            dispatcher.tick(dt)
    return _step
