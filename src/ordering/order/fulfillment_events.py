"""Inbound cross-domain event handler — Ordering reacts to Fulfillment events.

DeliveryDelivered drives the order's Shipped → Completed transition. The
delivery status is confirmed with Fulfillment before completing, and an
order that is already Completed (a redelivered event) is left untouched.
"""

import structlog
from protean.utils.mixins import handle
from shared.events.fulfillment import DeliveryDelivered

from ordering.domain import ordering
from ordering.order.lifecycle import complete_order
from ordering.order.order import Order

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
ordering.register_external_event(DeliveryDelivered, "Fulfillment.DeliveryDelivered.v1")


@ordering.event_handler(part_of=Order, stream_category="fulfillment::delivery")
class FulfillmentOrderEventHandler:
    """Completes orders whose delivery reached the customer."""

    @handle(DeliveryDelivered)
    def on_delivery_delivered(self, event: DeliveryDelivered) -> None:
        logger.info(
            "Delivery delivered for order",
            order_id=str(event.order_id),
            delivery_id=str(event.delivery_id),
        )
        complete_order(str(event.order_id))
