"""Payment service port — asking Payments for a checkout session."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shared.deadline import Deadline


@dataclass(frozen=True)
class CheckoutLine:
    product_name: str
    quantity: int
    unit_price: float


class PaymentServicePort(ABC):
    """Abstract interface for the Payments service."""

    @abstractmethod
    def create_checkout_session(
        self,
        order_id: str,
        items: list[CheckoutLine],
        deadline: Deadline | None = None,
    ) -> str | None:
        """Return the checkout URL, or None when the session was not created."""
        ...
