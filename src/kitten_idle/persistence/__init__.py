"""Persistence subsystem for Kitten Idle.

Save files are a raw, fixed-size image of the game record (see ``codec``);
``storage`` handles the single save slot on disk.
"""

from .codec import RECORD, RECORD_SIZE, decode_state, encode_state
from .storage import DEFAULT_SAVE_PATH, load_game, save_game

__all__ = [
    "RECORD",
    "RECORD_SIZE",
    "decode_state",
    "encode_state",
    "DEFAULT_SAVE_PATH",
    "load_game",
    "save_game",
]
