"""Closed-form cost and production formulas.

All functions are pure: they read the state and config and return a number.
"""
from __future__ import annotations

from typing import Optional

from ..engine.game_state import GameState
from .config import DEFAULT_ECONOMY, EconomyConfig


def kitten_cost(state: GameState, config: Optional[EconomyConfig] = None) -> float:
    cfg = config or DEFAULT_ECONOMY
    return cfg.kitten_base_cost * (1.0 + cfg.kitten_cost_growth * state.kittens)


def bowl_cost(state: GameState, config: Optional[EconomyConfig] = None) -> float:
    cfg = config or DEFAULT_ECONOMY
    return cfg.bowl_base_cost + cfg.bowl_cost_step * state.bowls


def kitten_rate(state: GameState, config: Optional[EconomyConfig] = None) -> float:
    """Yarn per second produced by a single kitten, including bowl bonuses."""
    cfg = config or DEFAULT_ECONOMY
    multiplier = 1.0 + cfg.bowl_rate_bonus * state.bowls
    return state.kitten_base_rate * multiplier


def passive_rate(state: GameState, config: Optional[EconomyConfig] = None) -> float:
    """Total yarn per second produced by all kittens."""
    return state.kittens * kitten_rate(state, config)
