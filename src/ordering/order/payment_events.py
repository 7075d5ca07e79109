"""Inbound cross-domain event handler — Ordering reacts to Payments events.

OrderSuccessfullyPaid moves the order from Created to Paid. Redelivered or
late events find the order already past Created and are ignored.
"""

import structlog
from protean.utils.mixins import handle
from shared.events.payments import OrderSuccessfullyPaid

from ordering.domain import ordering
from ordering.order.lifecycle import mark_order_paid
from ordering.order.order import Order

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
ordering.register_external_event(OrderSuccessfullyPaid, "Payments.OrderSuccessfullyPaid.v1")


@ordering.event_handler(part_of=Order, stream_category="payments::checkout_session")
class PaymentOrderEventHandler:
    """Marks orders as paid when Payments confirms the checkout session."""

    @handle(OrderSuccessfullyPaid)
    def on_order_successfully_paid(self, event: OrderSuccessfullyPaid) -> None:
        logger.info("Payment received for order", order_id=str(event.order_id))
        mark_order_paid(str(event.order_id))
