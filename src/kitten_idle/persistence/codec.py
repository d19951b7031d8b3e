from __future__ import annotations

import struct

from ..engine.game_state import GameState
from ..exceptions import PersistenceError

# Native byte order, size and alignment: double, int, int, double.
# No header, magic or version; files are not portable across architectures.
RECORD = struct.Struct("@diid")
RECORD_SIZE = RECORD.size


def encode_state(state: GameState) -> bytes:
    """Pack a GameState into its fixed-size binary image."""
    try:
        return RECORD.pack(
            float(state.yarn),
            int(state.kittens),
            int(state.bowls),
            float(state.kitten_base_rate),
        )
    except struct.error as e:
        raise PersistenceError(f"State cannot be packed: {e}") from e


def decode_state(data: bytes) -> GameState:
    """Unpack one record from the start of ``data``.

    Trailing bytes are ignored. Fewer bytes than a full record is an error.
    """
    if len(data) < RECORD_SIZE:
        raise PersistenceError(f"Short read: got {len(data)} bytes, need {RECORD_SIZE}")
    yarn, kittens, bowls, base_rate = RECORD.unpack_from(data, 0)
    return GameState(yarn=yarn, kittens=kittens, bowls=bowls, kitten_base_rate=base_rate)
