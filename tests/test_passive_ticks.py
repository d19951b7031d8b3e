from __future__ import annotations

import pytest

from kitten_idle.engine.game_state import GameState
from kitten_idle.engine.loop import LoopConfig, PassiveTimeSimulator


class FakeSleep:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def test_single_tick_adds_rate_times_dt():
    sim = PassiveTimeSimulator(sleep=FakeSleep())
    state = GameState(kittens=2, bowls=1)

    gained = sim.tick(state)

    assert gained == pytest.approx(0.125)
    assert state.yarn == pytest.approx(0.125)
    assert sim.ticks == 1


def test_advance_runs_five_ticks_and_paces_them():
    sleep = FakeSleep()
    sim = PassiveTimeSimulator(sleep=sleep)
    state = GameState(kittens=2, bowls=1)

    total = sim.advance(state)

    assert sim.ticks == 5
    assert total == pytest.approx(0.625)
    assert state.yarn == pytest.approx(0.625)
    assert sleep.calls == [0.1] * 5


def test_advance_without_pacing_never_sleeps():
    sleep = FakeSleep()
    sim = PassiveTimeSimulator(LoopConfig(pacing=False), sleep=sleep)
    state = GameState(kittens=1)

    sim.advance(state)

    assert sleep.calls == []
    assert state.yarn == pytest.approx(0.25)


def test_no_kittens_no_income():
    sim = PassiveTimeSimulator(LoopConfig(ticks_per_command=10, pacing=False))
    state = GameState(yarn=3.0, bowls=4)
    assert sim.advance(state) == 0
    assert state.yarn == 3.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tick_seconds": -1.0},
        {"tick_seconds": float("inf")},
        {"ticks_per_command": "five"},
        {"ticks_per_command": True},
        {"ticks_per_command": -3},
        {"pacing": "yes"},
    ],
)
def test_invalid_loop_config_rejected(kwargs):
    with pytest.raises(ValueError):
        LoopConfig(**kwargs)
