"""Cross-domain event contracts for Ordering domain events.

These classes define the event shape for consumption by other domains
(the Notifications domain turns them into user-facing messages). They are
registered as external events via domain.register_external_event() with
matching __type__ strings so Protean's stream deserialization works
correctly.

The source-of-truth events are in src/ordering/order/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String, Text


class OrderCreated(BaseEvent):
    """A new order was created from a user's cart at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total_price = Float(required=True)
    note = Text()
    created_at = DateTime(required=True)


class OrderStatusChanged(BaseEvent):
    """The public status of an order moved along its lifecycle."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String()
    new_status = String(required=True)
    updated_at = DateTime(required=True)
