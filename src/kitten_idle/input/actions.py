from __future__ import annotations

from enum import Enum


class Command(Enum):
    """Logical commands the player can issue at the prompt.

    Values are the command names used in the settings file's input mapping.
    """

    GATHER = "gather"
    BUY_KITTEN = "buy_kitten"
    BUY_BOWL = "buy_bowl"
    SAVE = "save"
    LOAD = "load"
    QUIT = "quit"

    @classmethod
    def from_name(cls, name: str) -> "Command":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown command name: {name!r}") from None


__all__ = ["Command"]
