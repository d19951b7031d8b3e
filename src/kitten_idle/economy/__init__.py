from .config import DEFAULT_ECONOMY, EconomyConfig
from .formulas import bowl_cost, kitten_cost, kitten_rate, passive_rate
from .shop import BOWL, KITTEN, PurchaseReceipt, Shop

__all__ = [
    "DEFAULT_ECONOMY",
    "EconomyConfig",
    "bowl_cost",
    "kitten_cost",
    "kitten_rate",
    "passive_rate",
    "BOWL",
    "KITTEN",
    "PurchaseReceipt",
    "Shop",
]
