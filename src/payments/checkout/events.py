"""Domain events for the CheckoutSession aggregate.

OrderSuccessfullyPaid crosses the context boundary; its shape must match
the contract in src/shared/events/payments.py.
"""

from protean.fields import DateTime, Float, Identifier, String

from payments.domain import payments


@payments.event(part_of="CheckoutSession")
class CheckoutSessionCreated:
    """The gateway opened a hosted checkout page for an order."""

    __version__ = 1

    checkout_session_id = Identifier(required=True)
    order_id = Identifier(required=True)
    gateway_session_id = String(required=True)
    amount_total = Float(required=True)
    created_at = DateTime(required=True)


@payments.event(part_of="CheckoutSession")
class OrderSuccessfullyPaid:
    """The customer completed the hosted checkout; the order is paid."""

    __version__ = 1

    order_id = Identifier(required=True)
    checkout_session_id = Identifier()
    gateway_session_id = String()
    paid_at = DateTime()
