"""Delivery aggregate (CQRS) — the core of the fulfillment domain.

A Delivery is created once per order by the checkout chain and afterwards
only moves along its lifecycle. The order it serves and the assigned
courier are plain identifiers; nothing here reaches into other contexts.

State Machine:
    PENDING → IN_PROGRESS → DELIVERED
    {PENDING, IN_PROGRESS} → CANCELED
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, ValueObject

from fulfillment.delivery.events import (
    DeliveryCanceled,
    DeliveryCreated,
    DeliveryDelivered,
    DeliveryStarted,
)
from fulfillment.domain import fulfillment


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class DeliveryStatus(Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"


_VALID_TRANSITIONS = {
    DeliveryStatus.PENDING: {DeliveryStatus.IN_PROGRESS, DeliveryStatus.CANCELED},
    DeliveryStatus.IN_PROGRESS: {DeliveryStatus.DELIVERED, DeliveryStatus.CANCELED},
    DeliveryStatus.DELIVERED: set(),  # terminal
    DeliveryStatus.CANCELED: set(),  # terminal
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@fulfillment.value_object(part_of="Delivery")
class Recipient:
    """Who receives the parcel, captured at checkout."""

    email = String(required=True, max_length=254)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    phone_number = String(required=True, max_length=30)


@fulfillment.value_object(part_of="Delivery")
class ShippingAddress:
    """Where the parcel goes, captured at checkout."""

    street = String(required=True, max_length=200)
    city = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    state = String(required=True, max_length=100)


# ---------------------------------------------------------------------------
# Aggregate Root (CQRS)
# ---------------------------------------------------------------------------
@fulfillment.aggregate
class Delivery:
    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    status = String(
        choices=DeliveryStatus,
        default=DeliveryStatus.PENDING.value,
    )
    recipient = ValueObject(Recipient)
    address = ValueObject(ShippingAddress)
    tracking_number = String(max_length=50)
    delivered_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id: str, courier_id: str, recipient: dict, address: dict):
        """Create a pending delivery for a placed order."""
        now = datetime.now(UTC)
        delivery = cls(
            order_id=order_id,
            courier_id=courier_id,
            status=DeliveryStatus.PENDING.value,
            recipient=Recipient(**recipient),
            address=ShippingAddress(**address),
            tracking_number=f"TRK-{uuid4().hex[:12].upper()}",
            created_at=now,
            updated_at=now,
        )
        delivery.raise_(
            DeliveryCreated(
                delivery_id=str(delivery.id),
                order_id=str(order_id),
                courier_id=str(courier_id),
                tracking_number=delivery.tracking_number,
                created_at=now,
            )
        )
        return delivery

    # -------------------------------------------------------------------
    # State transition helpers
    # -------------------------------------------------------------------
    def can_transition_to(self, target_status: DeliveryStatus) -> bool:
        return target_status in _VALID_TRANSITIONS.get(DeliveryStatus(self.status), set())

    def _assert_can_transition(self, target_status: DeliveryStatus) -> None:
        if not self.can_transition_to(target_status):
            current = DeliveryStatus(self.status)
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def change_status(self, target_status: DeliveryStatus, user_id: str | None = None) -> None:
        """Move the delivery to ``target_status``.

        ``user_id`` is the order owner and is only carried on cancellation.
        """
        if target_status == DeliveryStatus.IN_PROGRESS:
            self.start()
        elif target_status == DeliveryStatus.DELIVERED:
            self.mark_delivered()
        elif target_status == DeliveryStatus.CANCELED:
            self.cancel(user_id=user_id)
        else:
            self._assert_can_transition(target_status)

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def start(self) -> None:
        """The courier set off with the parcel."""
        self._assert_can_transition(DeliveryStatus.IN_PROGRESS)
        now = datetime.now(UTC)
        self.status = DeliveryStatus.IN_PROGRESS.value
        self.updated_at = now
        self.raise_(
            DeliveryStarted(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                started_at=now,
            )
        )

    def mark_delivered(self) -> None:
        """The parcel reached the customer."""
        self._assert_can_transition(DeliveryStatus.DELIVERED)
        now = datetime.now(UTC)
        self.status = DeliveryStatus.DELIVERED.value
        self.delivered_at = now
        self.updated_at = now
        self.raise_(
            DeliveryDelivered(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                delivered_at=now,
            )
        )

    def cancel(self, user_id: str | None = None) -> None:
        """Cancel the delivery; allowed until it is delivered."""
        self._assert_can_transition(DeliveryStatus.CANCELED)
        now = datetime.now(UTC)
        self.status = DeliveryStatus.CANCELED.value
        self.updated_at = now
        self.raise_(
            DeliveryCanceled(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                user_id=user_id,
                canceled_at=now,
            )
        )
