"""
Input abstraction layer for Kitten Idle.

Exposes:
- Command: Logical commands issued at the prompt.
- InputMapper: Rebindable mapping from typed characters to commands.
"""
from .actions import Command
from .mapping import DEFAULT_BINDINGS, InputMapper

__all__ = [
    "Command",
    "DEFAULT_BINDINGS",
    "InputMapper",
]
