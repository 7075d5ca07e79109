"""Cross-domain event contracts for Payments domain events.

OrderSuccessfullyPaid is the only trigger for an order's Created -> Paid
transition. It is registered in the Ordering domain via
domain.register_external_event() with a matching __type__ string so
Protean's stream deserialization works correctly.

The source-of-truth event is in src/payments/checkout/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String


class OrderSuccessfullyPaid(BaseEvent):
    """The payment provider confirmed a completed checkout session."""

    __version__ = 1

    order_id = Identifier(required=True)
    checkout_session_id = Identifier()
    gateway_session_id = String()
    paid_at = DateTime()
