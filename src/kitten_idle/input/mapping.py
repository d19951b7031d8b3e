from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional

from .actions import Command

logger = logging.getLogger(__name__)

DEFAULT_BINDINGS: Dict[Command, Iterable[str]] = {
    Command.GATHER: ["g"],
    Command.BUY_KITTEN: ["b"],
    Command.BUY_BOWL: ["u"],
    Command.SAVE: ["s"],
    Command.LOAD: ["l"],
    Command.QUIT: ["q"],
}


class InputMapper:
    """Rebindable mapping from typed keys to logical commands.

    Only the first character of an input line selects a command, and matching
    is case-insensitive:

        mapper = InputMapper.default()
        mapper.translate_line("Gather!")  # -> Command.GATHER
        mapper.translate_line("x")        # -> None
    """

    def __init__(self, bindings: Optional[Dict[str, Command]] = None) -> None:
        # Internal storage uses canonical lowercase single characters
        self._bindings: Dict[str, Command] = {}
        if bindings:
            for key, command in bindings.items():
                self.bind(key, command)

    # ---------- Canonicalization ----------
    @staticmethod
    def _normalize(key: str) -> Optional[str]:
        """Normalize a key into a canonical lowercase character.

        Returns None for empty or non-string input. Multi-character keys are
        cut to their first character since only that is ever matched.
        """
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k[0].lower()

    # ---------- Binding API ----------
    def bind(self, key: str, command: Command) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        previous = self._bindings.get(nk)
        if previous is not None and previous is not command:
            logger.warning("Key %r rebound from %s to %s", nk, previous.value, command.value)
        self._bindings[nk] = command

    def bind_many(self, keys: Iterable[str], command: Command) -> None:
        """Bind multiple keys to the same command."""
        for k in keys:
            self.bind(k, command)

    def keys_for(self, command: Command) -> list[str]:
        return sorted(k for k, c in self._bindings.items() if c is command)

    # ---------- Translation ----------
    def translate_line(self, line: str) -> Optional[Command]:
        """Translate an input line into a command, or None if unrecognized.

        Leading whitespace is not skipped: the very first character decides.
        """
        if not line:
            return None
        return self._bindings.get(line[0].lower())

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "InputMapper":
        """Create a mapper with the classic single-letter bindings (g/b/u/s/l/q)."""
        return cls.from_mapping({c.value: keys for c, keys in DEFAULT_BINDINGS.items()})

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "InputMapper":
        """Build a mapper from ``{command_name: [keys...]}`` as found in settings."""
        mapper = cls()
        for name, keys in mapping.items():
            mapper.bind_many(keys, Command.from_name(name))
        return mapper


__all__ = ["DEFAULT_BINDINGS", "InputMapper"]
