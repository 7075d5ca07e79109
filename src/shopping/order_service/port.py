"""Order service port — handing a checked-out cart to the Ordering service.

One call creates the order, then its delivery, then its payment session.
Whatever came back present or absent is what the checkout classifies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from shared.deadline import Deadline


@dataclass(frozen=True)
class OrderFromCartRequest:
    user_id: str
    courier_id: str
    total_price: float
    contact: dict
    address: dict
    items: list[dict] = field(default_factory=list)
    note: str | None = None


@dataclass(frozen=True)
class OrderCreationResult:
    order_id: str
    delivery_id: str | None = None
    checkout_url: str | None = None


class OrderServiceUnavailable(Exception):
    """The order-creation call failed in transport; nothing is known about its effects."""


class OrderServicePort(ABC):
    """Abstract interface for the Ordering service."""

    @abstractmethod
    def create_order_from_cart(
        self,
        request: OrderFromCartRequest,
        deadline: Deadline | None = None,
    ) -> OrderCreationResult:
        """Run the order-creation chain.

        Raises OrderServiceUnavailable on a transport failure and
        DeadlineExceeded when the deadline expired before the call.
        """
        ...
