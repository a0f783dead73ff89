"""
Shared fixtures for the snake engine tests.
"""

import pytest

from snakegame.domain.constants import base_interval
from snakegame.engine import GameEngine


class ScriptedRandom:
    """
    Stand-in for random.Random that replays a fixed list of randrange results.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        assert self.values, "ScriptedRandom ran out of values"
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside range({n})"
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[0]


def _step(engine: GameEngine) -> int:
    """
    Tick until the engine executes one step (or stops playing).

    Returns the number of tick() calls that took.
    """
    start = engine.steps
    ticks = 0
    while engine.steps == start:
        engine.tick()
        ticks += 1
        assert ticks <= 100, "no step executed after 100 ticks"
    return ticks


def _assert_invariants(engine: GameEngine) -> None:
    body = engine.snake_body
    assert 0 <= engine.throttle_count <= base_interval(engine.speed)
    for x, y in body + (engine.food_location,):
        assert 0 <= x < engine.width and 0 <= y < engine.height
    assert engine.food_location not in body
    assert len(set(body)) == len(body)
    assert engine.score >= 0 and engine.speed >= 1


@pytest.fixture
def step():
    return _step


@pytest.fixture
def assert_invariants():
    return _assert_invariants


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def engine():
    """A 20x20 engine in the PLAYING state."""
    game = GameEngine(20, 20)
    game.play_new()
    return game
