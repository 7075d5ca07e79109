"""Cross-domain event contracts for Fulfillment domain events.

These classes define the event shape for consumption by other domains
(the Ordering domain to complete an order once its delivery arrived, the
Notifications domain to tell the user a delivery was canceled). They are
registered as external events via domain.register_external_event() with
matching __type__ strings so Protean's stream deserialization works
correctly.

The source-of-truth events are in src/fulfillment/delivery/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier


class DeliveryDelivered(BaseEvent):
    """A delivery reached the customer."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    delivered_at = DateTime(required=True)


class DeliveryCanceled(BaseEvent):
    """A delivery was canceled before it reached the customer.

    user_id is resolved by asking the Ordering domain who owns the order.
    It is absent when that lookup failed; consumers treat a missing user_id
    as "cannot notify", not as an error.
    """

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier()
    canceled_at = DateTime(required=True)
