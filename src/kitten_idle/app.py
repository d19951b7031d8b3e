from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .economy.shop import Shop
from .engine.game_state import GameState, new_game
from .engine.loop import PassiveTimeSimulator
from .exceptions import InsufficientFundsError, PersistenceError
from .input.actions import Command
from .persistence.storage import load_game, save_game
from .settings import Settings
from .ui.status import PROMPT, render_status

logger = logging.getLogger(__name__)

FAREWELL = "Goodbye."


@dataclass
class CommandResult:
    output: str
    quit: bool = False


class KittenIdleGame:
    """Owns one game session: the state record plus the services acting on it.

    ``step`` is the unit of play: dispatch one input line, then (unless the
    player quit) advance passive time by one burst of ticks.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        state: Optional[GameState] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings or Settings()
        self.state = state if state is not None else new_game(self.settings.economy.kitten_base_rate)
        self.shop = Shop(self.settings.economy)
        self.simulator = PassiveTimeSimulator(self.settings.loop, self.settings.economy, sleep=sleep)
        self.mapper = self.settings.input.build_mapper()
        self.save_path = self.settings.save_path

    # Public API -----------------------------------------------------------
    def status(self) -> str:
        return render_status(self.state, self.settings.economy, self.mapper)

    def step(self, line: str) -> CommandResult:
        result = self.handle_line(line)
        if not result.quit:
            self.simulator.advance(self.state)
        return result

    def handle_line(self, line: str) -> CommandResult:
        command = self.mapper.translate_line(line)
        if command is None:
            logger.debug("Unrecognized input: %r", line)
            return CommandResult("Unknown command.")
        return self.handle_command(command)

    def handle_command(self, command: Command) -> CommandResult:
        handler = {
            Command.GATHER: self.gather,
            Command.BUY_KITTEN: self.buy_kitten,
            Command.BUY_BOWL: self.buy_bowl,
            Command.SAVE: self.save,
            Command.LOAD: self.load,
            Command.QUIT: self.quit,
        }[command]
        return handler()

    # Command handlers -----------------------------------------------------
    def gather(self) -> CommandResult:
        amount = self.shop.gather(self.state)
        return CommandResult(f"You gathered yarn. +{amount:g}")

    def buy_kitten(self) -> CommandResult:
        try:
            receipt = self.shop.buy_kitten(self.state)
        except InsufficientFundsError:
            return CommandResult("Not enough yarn.")
        return CommandResult(f"A kitten joins! Kittens: {receipt.owned}")

    def buy_bowl(self) -> CommandResult:
        try:
            receipt = self.shop.buy_bowl(self.state)
        except InsufficientFundsError:
            return CommandResult("Not enough yarn.")
        return CommandResult(f"Bought a food bowl. Bowls: {receipt.owned}")

    def save(self) -> CommandResult:
        try:
            save_game(self.state, self.save_path)
        except PersistenceError as e:
            logger.warning("Save failed: %s", e)
            return CommandResult("Save failed.")
        return CommandResult(f"Saved to {self.save_path}")

    def load(self) -> CommandResult:
        try:
            loaded = load_game(self.save_path)
        except PersistenceError as e:
            logger.warning("Load failed: %s", e)
            return CommandResult("Load failed (no save yet?).")
        self.state.replace_with(loaded)
        return CommandResult(f"Loaded from {self.save_path}")

    def quit(self) -> CommandResult:
        return CommandResult("", quit=True)


def run_cli(
    game: KittenIdleGame,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run the interactive loop until the player quits or input ends.

    Returns:
        Process exit code (0 on quit or end of input, 130 on Ctrl+C).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logger.info("Session started (save_path=%s)", game.save_path)
    try:
        while True:
            stdout.write(game.status() + "\n" + PROMPT)
            stdout.flush()
            line = stdin.readline()
            if not line:
                logger.info("End of input; leaving loop")
                break
            result = game.step(line)
            if result.quit:
                break
            stdout.write(result.output + "\n")
    except KeyboardInterrupt:
        stdout.write("\nInterrupted by user\n")
        return 130

    stdout.write("\n" + FAREWELL + "\n")
    stdout.flush()
    logger.info("Session ended: %s", game.state)
    return 0
