"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement.
This enables swapping between FakeGateway (dev/test) and StripeGateway
(production) without changing any domain or application code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

CURRENCY = "usd"


@dataclass(frozen=True)
class CheckoutLineItem:
    """One line of a hosted checkout page, priced in cents."""

    name: str
    quantity: int
    unit_amount: int
    currency: str = CURRENCY


@dataclass(frozen=True)
class CheckoutSessionResult:
    """Result of a checkout session request."""

    success: bool
    session_id: str | None = None
    checkout_url: str | None = None
    failure_reason: str | None = None


def to_cents(amount: float) -> int:
    return int(round(amount * 100))


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_checkout_session(
        self,
        client_reference_id: str,
        line_items: list[CheckoutLineItem],
    ) -> CheckoutSessionResult:
        """Open a hosted checkout session; the order id is the client reference."""
        ...

    @abstractmethod
    def verify_webhook_signature(
        self,
        payload: str,
        signature: str,
    ) -> bool:
        """Verify that a webhook payload is authentically from the gateway."""
        ...
