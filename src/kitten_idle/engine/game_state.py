from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_KITTEN_BASE_RATE = 0.5


@dataclass
class GameState:
    """Holds the whole game: yarn balance and owned upgrades.

    The record is owned by the caller and passed explicitly to the economy,
    tick engine and persistence functions. Field order matches the on-disk
    layout used by :mod:`kitten_idle.persistence.codec`.
    """

    yarn: float = 0.0
    kittens: int = 0
    bowls: int = 0
    kitten_base_rate: float = DEFAULT_KITTEN_BASE_RATE  # yarn per second per kitten

    def replace_with(self, other: "GameState") -> None:
        """Overwrite every field in place with the values of ``other``."""
        self.yarn = other.yarn
        self.kittens = other.kittens
        self.bowls = other.bowls
        self.kitten_base_rate = other.kitten_base_rate
        logger.debug("State replaced: %s", self)


def new_game(kitten_base_rate: float = DEFAULT_KITTEN_BASE_RATE) -> GameState:
    return GameState(yarn=0.0, kittens=0, bowls=0, kitten_base_rate=kitten_base_rate)
