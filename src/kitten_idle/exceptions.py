class KittenIdleError(Exception):
    """Base exception for the Kitten Idle project."""


class InsufficientFundsError(KittenIdleError):
    """Raised when a purchase costs more yarn than the player holds."""

    def __init__(self, item: str, cost: float, balance: float) -> None:
        super().__init__(f"Not enough yarn for {item}: need {cost:.2f}, have {balance:.2f}")
        self.item = item
        self.cost = cost
        self.balance = balance


class PersistenceError(KittenIdleError):
    """Raised when the save file cannot be written, opened, or fully read."""


class SettingsError(KittenIdleError):
    """Raised when a settings file exists but cannot be parsed."""
