"""Order service port — who owns an order.

The Delivery aggregate only stores the order id. When a delivery is
canceled the notification needs the owning user, so the fulfillment
domain asks the Ordering service through this port.
"""

from abc import ABC, abstractmethod

from shared.deadline import Deadline


class OrderServicePort(ABC):
    """Abstract interface for order-owner lookups."""

    @abstractmethod
    def get_order_owner(self, order_id: str, deadline: Deadline | None = None) -> str | None:
        """Return the owning user id, or None when it cannot be resolved."""
        ...
