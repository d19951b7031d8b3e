from __future__ import annotations

import dataclasses
import io
from pathlib import Path

import pytest

from kitten_idle.app import KittenIdleGame, run_cli
from kitten_idle.engine.game_state import GameState
from kitten_idle.settings import Settings


def make_game(tmp_path: Path, *, passive: bool = True, state: GameState | None = None) -> KittenIdleGame:
    settings = Settings()
    settings.save.path = str(tmp_path / "save.dat")
    ticks = settings.loop.ticks_per_command if passive else 0
    settings.loop = dataclasses.replace(settings.loop, ticks_per_command=ticks, pacing=False)
    return KittenIdleGame(settings, state, sleep=lambda _s: None)


def test_scenario_without_passive_income(tmp_path: Path):
    game = make_game(tmp_path, passive=False)

    for _ in range(10):
        assert game.step("g\n").output == "You gathered yarn. +1"
    assert game.state.yarn == 10.0

    assert game.step("b\n").output == "A kitten joins! Kittens: 1"
    assert (game.state.yarn, game.state.kittens) == (0.0, 1)

    for _ in range(15):
        game.step("G\n")
    assert game.state.yarn == 15.0

    game.step("B\n")
    assert game.state.yarn == pytest.approx(3.0)
    assert game.state.kittens == 2


def test_each_command_is_followed_by_passive_ticks(tmp_path: Path):
    game = make_game(tmp_path, state=GameState(kittens=2, bowls=1))

    result = game.step("x\n")

    assert result.output == "Unknown command."
    assert game.state.yarn == pytest.approx(0.625)
    assert game.simulator.ticks == 5


def test_quit_skips_passive_ticks(tmp_path: Path):
    game = make_game(tmp_path, state=GameState(kittens=2, bowls=1))

    result = game.step("q\n")

    assert result.quit is True
    assert game.state.yarn == 0.0
    assert game.simulator.ticks == 0


def test_failed_purchase_reports_and_keeps_state(tmp_path: Path):
    game = make_game(tmp_path, passive=False, state=GameState(yarn=20.0))
    assert game.handle_line("u").output == "Not enough yarn."
    assert game.state == GameState(yarn=20.0)


def test_buy_bowl_message(tmp_path: Path):
    game = make_game(tmp_path, passive=False, state=GameState(yarn=30.0))
    assert game.handle_line("u").output == "Bought a food bowl. Bowls: 1"
    assert game.state.yarn == pytest.approx(5.0)


def test_save_then_load_restores_state(tmp_path: Path):
    game = make_game(tmp_path, passive=False, state=GameState(yarn=42.5, kittens=3, bowls=2))

    assert game.handle_line("s").output == f"Saved to {game.save_path}"
    game.state.yarn = 0.0
    game.state.kittens = 0

    assert game.handle_line("l").output == f"Loaded from {game.save_path}"
    assert game.state == GameState(yarn=42.5, kittens=3, bowls=2)


def test_load_without_save_keeps_state(tmp_path: Path):
    game = make_game(tmp_path, passive=False, state=GameState(yarn=7.0, kittens=1))
    assert game.handle_line("l").output == "Load failed (no save yet?)."
    assert game.state == GameState(yarn=7.0, kittens=1)


def test_save_failure_is_reported(tmp_path: Path):
    game = make_game(tmp_path, passive=False)
    game.save_path = tmp_path / "missing-dir" / "save.dat"
    assert game.handle_line("s").output == "Save failed."


def test_status_screen_shows_balance_rate_and_costs(tmp_path: Path):
    game = make_game(tmp_path, state=GameState(yarn=3.5, kittens=2, bowls=1))
    screen = game.status()
    assert "=== Kitten Idle (MVP) ===" in screen
    assert "Yarn: 3.50" in screen
    assert "Kittens: 2 | Bowls: 1" in screen
    assert "Passive rate: 1.25 yarn/s" in screen
    assert "b = buy kitten (cost 14.00)" in screen
    assert "u = buy bowl upgrade (cost 35.00)" in screen
    assert "s = save | l = load | q = quit" in screen


def test_run_cli_until_quit(tmp_path: Path):
    game = make_game(tmp_path, passive=False)
    stdin = io.StringIO("g\ng\nz\nq\ng\n")
    stdout = io.StringIO()

    code = run_cli(game, stdin=stdin, stdout=stdout)

    out = stdout.getvalue()
    assert code == 0
    assert out.count("You gathered yarn. +1") == 2
    assert "Unknown command." in out
    assert out.rstrip().endswith("Goodbye.")
    assert game.state.yarn == 2.0


def test_run_cli_ends_gracefully_on_eof(tmp_path: Path):
    game = make_game(tmp_path, passive=False)
    stdout = io.StringIO()
    assert run_cli(game, stdin=io.StringIO("g\n"), stdout=stdout) == 0
    assert "Goodbye." in stdout.getvalue()
    assert game.state.yarn == 1.0


def test_run_cli_treats_undecodable_input_as_unknown(tmp_path: Path):
    game = make_game(tmp_path, passive=False, state=GameState(yarn=4.0))
    stdout = io.StringIO()

    code = run_cli(game, stdin=io.StringIO("\ufffd\nq\n"), stdout=stdout)

    assert code == 0
    assert "Unknown command." in stdout.getvalue()
    assert game.state == GameState(yarn=4.0)
