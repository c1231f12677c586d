"""Strategy: a cart delegates checkout to a swappable payment strategy."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from pydantic import BaseModel, Field

from ..core.patterns.exceptions import PatternError, UnknownVariantError


class PaymentRequest(BaseModel):
    """Validated payment input."""

    amount: float = Field(gt=0, description="Amount to charge")
    currency: str = Field(default="USD", min_length=3, max_length=3)


class PaymentStrategy(ABC):
    """Interface every payment method implements."""

    method: str

    @abstractmethod
    def pay(self, request: PaymentRequest) -> str:
        """Charge the request and return the confirmation line."""


class CreditCardPayment(PaymentStrategy):
    method = "credit_card"

    def pay(self, request: PaymentRequest) -> str:
        return f"Paid {request.amount:.2f} {request.currency} using Credit Card"


class PayPalPayment(PaymentStrategy):
    method = "paypal"

    def pay(self, request: PaymentRequest) -> str:
        return f"Paid {request.amount:.2f} {request.currency} using PayPal"


class UpiPayment(PaymentStrategy):
    method = "upi"

    def pay(self, request: PaymentRequest) -> str:
        return f"Paid {request.amount:.2f} {request.currency} using UPI"


STRATEGIES: Dict[str, Type[PaymentStrategy]] = {
    cls.method: cls for cls in (CreditCardPayment, PayPalPayment, UpiPayment)
}


def get_payment_strategy(method: str) -> PaymentStrategy:
    """Return the strategy for a payment method key.

    Raises:
        UnknownVariantError: If the method is not known
    """
    strategy_cls = STRATEGIES.get(method.strip().lower())
    if strategy_cls is None:
        raise UnknownVariantError("payment method", method, STRATEGIES)
    return strategy_cls()


class ShoppingCart:
    """Context object holding the current payment strategy."""

    def __init__(self, strategy: Optional[PaymentStrategy] = None):
        self.strategy = strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def checkout(self, amount: float, currency: str = "USD") -> str:
        """
        Pay for the cart with the current strategy.

        Raises:
            PatternError: If no strategy is set
            pydantic.ValidationError: If the amount is not positive
        """
        if self.strategy is None:
            raise PatternError("No payment strategy set", details={"amount": amount})
        request = PaymentRequest(amount=amount, currency=currency)
        return self.strategy.pay(request)


def run_demo(amount: Optional[float] = None) -> List[str]:
    if amount is None:
        from ..config import get_config
        amount = get_config().payment_amount

    cart = ShoppingCart()
    lines = []
    for method in STRATEGIES:
        cart.set_strategy(get_payment_strategy(method))
        lines.append(cart.checkout(amount))
    return lines
