from .game_state import DEFAULT_KITTEN_BASE_RATE, GameState, new_game

__all__ = [
    "DEFAULT_KITTEN_BASE_RATE",
    "GameState",
    "new_game",
]
