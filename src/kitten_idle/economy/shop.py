import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..engine.game_state import GameState
from ..exceptions import InsufficientFundsError
from .config import DEFAULT_ECONOMY, EconomyConfig
from .formulas import bowl_cost, kitten_cost

logger = logging.getLogger(__name__)

KITTEN = "kitten"
BOWL = "bowl"


@dataclass
class PurchaseReceipt:
    item: str
    cost: float
    owned: int
    remaining_yarn: float


class Shop:
    """Spends yarn on kittens and bowls.

    Purchases are all-or-nothing: when the balance is short, the state is
    left untouched and :class:`InsufficientFundsError` is raised.
    """

    def __init__(self, config: Optional[EconomyConfig] = None) -> None:
        self.config = config or DEFAULT_ECONOMY

    def gather(self, state: GameState) -> float:
        amount = self.config.gather_amount
        state.yarn += amount
        logger.debug("Gathered %.2f yarn; balance=%.2f", amount, state.yarn)
        return amount

    def can_afford(self, state: GameState, cost: float) -> bool:
        if cost < 0:
            return False
        return state.yarn >= cost

    def buy_kitten(self, state: GameState) -> PurchaseReceipt:
        return self._purchase(state, KITTEN, kitten_cost, self._add_kitten)

    def buy_bowl(self, state: GameState) -> PurchaseReceipt:
        return self._purchase(state, BOWL, bowl_cost, self._add_bowl)

    def _purchase(
        self,
        state: GameState,
        item: str,
        price: Callable[[GameState, EconomyConfig], float],
        grant: Callable[[GameState], int],
    ) -> PurchaseReceipt:
        cost = price(state, self.config)
        if not self.can_afford(state, cost):
            logger.info("Insufficient yarn for %s; cost=%.2f, have=%.2f", item, cost, state.yarn)
            raise InsufficientFundsError(item, cost, state.yarn)

        state.yarn -= cost
        owned = grant(state)
        logger.debug("Purchased %s for %.2f yarn; owned=%d, remaining=%.2f", item, cost, owned, state.yarn)
        return PurchaseReceipt(item=item, cost=cost, owned=owned, remaining_yarn=state.yarn)

    @staticmethod
    def _add_kitten(state: GameState) -> int:
        state.kittens += 1
        return state.kittens

    @staticmethod
    def _add_bowl(state: GameState) -> int:
        state.bowls += 1
        return state.bowls
