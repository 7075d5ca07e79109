"""Delivery domain events — immutable facts about delivery state changes.

All events are past tense and versioned. DeliveryDelivered and
DeliveryCanceled cross the context boundary; their shape must match the
contracts in src/shared/events/fulfillment.py.
"""

from protean.fields import DateTime, Identifier, String

from fulfillment.domain import fulfillment


@fulfillment.event(part_of="Delivery")
class DeliveryCreated:
    """A delivery was created for a freshly placed order."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    tracking_number = String(required=True)
    created_at = DateTime(required=True)


@fulfillment.event(part_of="Delivery")
class DeliveryStarted:
    """The courier picked the parcel up and is on the way."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    started_at = DateTime(required=True)


@fulfillment.event(part_of="Delivery")
class DeliveryDelivered:
    """The parcel reached the customer."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    delivered_at = DateTime(required=True)


@fulfillment.event(part_of="Delivery")
class DeliveryCanceled:
    """The delivery was canceled before reaching the customer."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier()  # Absent when the order owner could not be resolved
    canceled_at = DateTime(required=True)
