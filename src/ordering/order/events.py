"""Domain events for the Order aggregate.

All events are versioned, immutable facts representing state changes.
OrderCreated and OrderStatusChanged cross the context boundary; their
shape must match the contracts in src/shared/events/ordering.py.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """A new order was created from a user's cart at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total_price = Float(required=True)
    note = Text()
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """The public status of the order moved along its lifecycle."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String()
    new_status = String(required=True)
    updated_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderInternalStatusChanged:
    """The operational flag on the order was set or cleared."""

    __version__ = 1

    order_id = Identifier(required=True)
    internal_status = String(required=True)
    updated_at = DateTime(required=True)
