from __future__ import annotations

from typing import List, Optional

from ..economy.config import DEFAULT_ECONOMY, EconomyConfig
from ..economy.formulas import bowl_cost, kitten_cost, passive_rate
from ..engine.game_state import GameState
from ..input.actions import Command
from ..input.mapping import InputMapper

TITLE = "=== Kitten Idle (MVP) ==="
PROMPT = "> "


def _key(mapper: InputMapper, command: Command) -> str:
    keys = mapper.keys_for(command)
    return "/".join(keys) if keys else "?"


def render_status(
    state: GameState,
    economy: Optional[EconomyConfig] = None,
    mapper: Optional[InputMapper] = None,
) -> str:
    """Render the status screen and command menu, without the trailing prompt."""
    cfg = economy or DEFAULT_ECONOMY
    keys = mapper or InputMapper.default()
    lines: List[str] = [
        "",
        TITLE,
        f"Yarn: {state.yarn:.2f}",
        f"Kittens: {state.kittens} | Bowls: {state.bowls}",
        f"Passive rate: {passive_rate(state, cfg):.2f} yarn/s",
        "",
        "Commands:",
        f"  {_key(keys, Command.GATHER)} = gather yarn (+{cfg.gather_amount:g})",
        f"  {_key(keys, Command.BUY_KITTEN)} = buy kitten (cost {kitten_cost(state, cfg):.2f})",
        f"  {_key(keys, Command.BUY_BOWL)} = buy bowl upgrade (cost {bowl_cost(state, cfg):.2f})",
        f"  {_key(keys, Command.SAVE)} = save | {_key(keys, Command.LOAD)} = load | {_key(keys, Command.QUIT)} = quit",
    ]
    return "\n".join(lines)
