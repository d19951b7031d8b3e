from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..economy.config import DEFAULT_ECONOMY, EconomyConfig
from ..economy.formulas import passive_rate
from .game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class LoopConfig:
    """Configuration for the passive-time simulation run after each command.

    Attributes:
        ticks_per_command: Number of discrete ticks simulated after a command.
        tick_seconds: Simulated duration of one tick, in seconds.
        pacing: If True, sleep ``tick_seconds`` of real time between ticks so the
            player sees the game "move". Has no effect on the resulting state.
    """

    ticks_per_command: int = 5
    tick_seconds: float = 0.1
    pacing: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.ticks_per_command, int) or isinstance(self.ticks_per_command, bool):
            raise ValueError(f"loop.ticks_per_command must be an integer, got {self.ticks_per_command!r}")
        if self.ticks_per_command < 0:
            raise ValueError(f"loop.ticks_per_command must be >= 0, got {self.ticks_per_command}")
        if (
            not isinstance(self.tick_seconds, (int, float))
            or isinstance(self.tick_seconds, bool)
            or not math.isfinite(self.tick_seconds)
        ):
            raise ValueError(f"loop.tick_seconds must be a finite number, got {self.tick_seconds!r}")
        if self.tick_seconds < 0:
            raise ValueError(f"loop.tick_seconds must be >= 0, got {self.tick_seconds}")
        if not isinstance(self.pacing, bool):
            raise ValueError(f"loop.pacing must be true or false, got {self.pacing!r}")


class PassiveTimeSimulator:
    """Advances simulated time in fixed ticks, crediting kitten production.

    Sleeping is delegated to an injectable callable so tests (and headless
    runs) never block.
    """

    def __init__(
        self,
        config: Optional[LoopConfig] = None,
        economy: Optional[EconomyConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or LoopConfig()
        self.economy = economy or DEFAULT_ECONOMY
        self._sleep = sleep
        self._ticks: int = 0

    @property
    def ticks(self) -> int:
        """Total ticks simulated since construction."""
        return self._ticks

    def tick(self, state: GameState, dt: Optional[float] = None) -> float:
        """Perform a single tick and return the yarn it produced.

        Args:
            state: Game state to credit.
            dt: Tick duration in seconds; defaults to ``config.tick_seconds``.
        """
        if dt is None:
            dt = self.config.tick_seconds
        gained = passive_rate(state, self.economy) * dt
        state.yarn += gained
        self._ticks += 1
        logger.debug("Tick #%d (dt=%.3f) +%.4f yarn -> %.4f", self._ticks, dt, gained, state.yarn)
        return gained

    def advance(self, state: GameState) -> float:
        """Run the configured burst of ticks and return the total yarn produced."""
        total = 0.0
        for _ in range(self.config.ticks_per_command):
            total += self.tick(state)
            if self.config.pacing and self.config.tick_seconds > 0:
                self._sleep(self.config.tick_seconds)
        if total:
            logger.debug("Passive income over %d ticks: +%.4f yarn", self.config.ticks_per_command, total)
        return total
