import math
from dataclasses import dataclass, fields


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class EconomyConfig:
    """Tuning knobs for the yarn economy.

    Defaults reproduce the classic curves: kittens cost 10, 12, 14..., bowls
    cost 25, 35, 45..., and each bowl adds +25% to every kitten's output.
    Base costs must be positive; every other knob must be non-negative so yarn
    can never go below zero.
    """

    kitten_base_cost: float = 10.0
    kitten_cost_growth: float = 0.2  # +20% of base cost per kitten owned
    bowl_base_cost: float = 25.0
    bowl_cost_step: float = 10.0
    bowl_rate_bonus: float = 0.25
    kitten_base_rate: float = 0.5
    gather_amount: float = 1.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not _is_number(value):
                raise ValueError(f"economy.{f.name} must be a finite number, got {value!r}")
            if value < 0:
                raise ValueError(f"economy.{f.name} must be >= 0, got {value!r}")
        for name in ("kitten_base_cost", "bowl_base_cost"):
            if getattr(self, name) <= 0:
                raise ValueError(f"economy.{name} must be > 0, got {getattr(self, name)!r}")


DEFAULT_ECONOMY = EconomyConfig()
