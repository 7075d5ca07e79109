"""Delivery service port — the Fulfillment calls Ordering depends on.

Ordering only keeps the delivery id on the order. Creating the delivery
and reading its status back are requests to the Fulfillment service,
never reads of its data.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shared.deadline import Deadline


@dataclass(frozen=True)
class DeliveryRequest:
    """Everything Fulfillment needs to create a delivery for an order."""

    order_id: str
    courier_id: str
    email: str
    first_name: str
    last_name: str
    phone_number: str
    street: str
    city: str
    postal_code: str
    state: str


class DeliveryServicePort(ABC):
    """Abstract interface for the Fulfillment service."""

    @abstractmethod
    def create_delivery(self, request: DeliveryRequest, deadline: Deadline | None = None) -> str | None:
        """Create a delivery and return its id, or None when it was not created."""
        ...

    @abstractmethod
    def get_delivery_status(self, order_id: str, deadline: Deadline | None = None) -> str | None:
        """Return the status of the order's delivery, or None when not found."""
        ...
