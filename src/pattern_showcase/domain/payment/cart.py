"""Shopping cart - delegates checkout to the active payment strategy."""
from typing import Optional

from pattern_showcase.domain.base.exceptions import InvalidArgumentError, InvalidStateError
from pattern_showcase.infrastructure.logging.logger import get_logger

from .strategies import PaymentStrategy


class StrategyNotSetError(InvalidStateError):
    """Raised when checkout is attempted before a payment strategy is chosen."""

    def __init__(self) -> None:
        super().__init__("checkout", "no payment strategy has been set")


class ShoppingCart:
    """Context whose checkout outcome depends only on the current strategy."""

    def __init__(self) -> None:
        self._strategy: Optional[PaymentStrategy] = None
        self._logger = get_logger(__name__)

    @property
    def strategy(self) -> Optional[PaymentStrategy]:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        """Replace the active strategy."""
        if strategy is None:
            raise InvalidArgumentError("strategy")
        self._strategy = strategy
        self._logger.debug("Payment strategy set", strategy=type(strategy).__name__)

    def checkout(self, amount: float) -> None:
        """Pay ``amount`` with the active strategy."""
        if self._strategy is None:
            raise StrategyNotSetError()
        self._logger.debug(
            "Checking out",
            amount=amount,
            strategy=type(self._strategy).__name__,
        )
        self._strategy.pay(amount)
