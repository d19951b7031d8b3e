from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from ..engine.game_state import GameState
from ..exceptions import PersistenceError
from .codec import RECORD_SIZE, decode_state, encode_state

logger = logging.getLogger(__name__)

DEFAULT_SAVE_PATH = Path("save.dat")

PathLike = Union[str, Path]


def save_game(state: GameState, path: PathLike = DEFAULT_SAVE_PATH) -> Path:
    """Write the state to ``path`` atomically.

    The record is written to a sibling temporary file, flushed, then moved over
    the target with ``os.replace`` so a failed write never leaves a partial
    save behind.

    Raises:
        PersistenceError: if the file cannot be opened or written.
    """
    target = Path(path)
    payload = encode_state(state)
    tmp_path = target.with_name(target.name + ".tmp")
    try:
        logger.debug("Writing save to temporary file: %s", tmp_path)
        with open(tmp_path, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target)
    except OSError as exc:
        logger.error("Failed to save game to %s: %s", target, exc)
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_exc:
            logger.warning("Could not remove temporary save %s: %s", tmp_path, cleanup_exc)
        raise PersistenceError(f"Unable to write save file {target}: {exc}") from exc
    logger.info("Saved game to %s (%d bytes)", target, len(payload))
    return target


def load_game(path: PathLike = DEFAULT_SAVE_PATH) -> GameState:
    """Read one full record from ``path`` and return it as a new GameState.

    Raises:
        PersistenceError: if the file is missing, unreadable, or shorter than
            one record.
    """
    source = Path(path)
    try:
        with open(source, "rb") as f:
            data = f.read(RECORD_SIZE)
    except FileNotFoundError as exc:
        logger.warning("Save file not found: %s", source)
        raise PersistenceError(f"Save file not found: {source}") from exc
    except OSError as exc:
        logger.error("Failed to read save file %s: %s", source, exc)
        raise PersistenceError(f"Unable to read save file {source}: {exc}") from exc

    state = decode_state(data)
    logger.info("Loaded game from %s", source)
    return state
