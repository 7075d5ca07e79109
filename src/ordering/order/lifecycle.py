"""Order lifecycle — status commands, handler and the entry points.

Administrative status changes and the two event-driven transitions
(payment received, delivery delivered) all go through here. The entry
points resolve missing orders and refused transitions up front and return
a TransitionResult; the aggregate re-checks the transition when the
command is handled.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from shared.deadline import Deadline
from shared.lifecycle import TransitionResult

from ordering.delivery_service import get_delivery_service
from ordering.domain import ordering
from ordering.order.order import EVENT_DRIVEN_STATUSES, Order, OrderStatus

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class ChangeOrderStatus:
    """Administrative status change."""

    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


@ordering.command(part_of="Order")
class RecordOrderPayment:
    order_id = Identifier(required=True)


@ordering.command(part_of="Order")
class RecordOrderCompletion:
    order_id = Identifier(required=True)
    delivery_status = String(max_length=50)


@ordering.command_handler(part_of=Order)
class OrderLifecycleHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_status(OrderStatus(command.status))
        repo.add(order)

    @handle(RecordOrderPayment)
    def record_payment(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_paid()
        repo.add(order)

    @handle(RecordOrderCompletion)
    def record_completion(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.complete(command.delivery_status)
        repo.add(order)


def _load(order_id: str) -> Order | None:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return None


def change_order_status(order_id: str, status: OrderStatus) -> TransitionResult:
    """Apply an administrative status change.

    Paid and Completed are reached only through inbound events, so an
    administrator asking for them gets INVALID_TRANSITION.
    """
    order = _load(order_id)
    if order is None:
        logger.warning("Cannot change order status, order not found", order_id=order_id)
        return TransitionResult.NOT_FOUND

    if status in EVENT_DRIVEN_STATUSES or not order.can_transition_to(status):
        logger.warning(
            "Cannot change order status, invalid transition",
            order_id=order_id,
            current_status=order.status,
            requested_status=status.value,
        )
        return TransitionResult.INVALID_TRANSITION

    current_domain.process(ChangeOrderStatus(order_id=order_id, status=status.value), asynchronous=False)
    logger.info("Order status changed", order_id=order_id, status=status.value)
    return TransitionResult.APPLIED


def mark_order_paid(order_id: str) -> TransitionResult:
    """Created → Paid, on a successful payment."""
    order = _load(order_id)
    if order is None:
        logger.warning("Payment received for unknown order", order_id=order_id)
        return TransitionResult.NOT_FOUND

    if not order.can_transition_to(OrderStatus.PAID):
        logger.info(
            "Payment received, order not awaiting payment; ignoring",
            order_id=order_id,
            current_status=order.status,
        )
        return TransitionResult.INVALID_TRANSITION

    current_domain.process(RecordOrderPayment(order_id=order_id), asynchronous=False)
    logger.info("Order marked as paid", order_id=order_id)
    return TransitionResult.APPLIED


def complete_order(order_id: str, deadline: Deadline | None = None) -> TransitionResult:
    """Shipped → Completed, once Fulfillment reports the delivery as Delivered."""
    order = _load(order_id)
    if order is None:
        logger.warning("Delivery delivered for unknown order", order_id=order_id)
        return TransitionResult.NOT_FOUND

    # Fulfillment is only asked about orders that can complete
    if OrderStatus(order.status) != OrderStatus.SHIPPED:
        logger.info(
            "Delivery delivered, order not shipped; ignoring",
            order_id=order_id,
            current_status=order.status,
        )
        return TransitionResult.INVALID_TRANSITION

    delivery_status = get_delivery_service().get_delivery_status(order_id, deadline=deadline)
    if not order.can_transition_to(OrderStatus.COMPLETED, delivery_status=delivery_status):
        logger.warning(
            "Cannot complete order, delivery not delivered",
            order_id=order_id,
            delivery_status=delivery_status,
        )
        return TransitionResult.INVALID_TRANSITION

    current_domain.process(
        RecordOrderCompletion(order_id=order_id, delivery_status=delivery_status),
        asynchronous=False,
    )
    logger.info("Order completed", order_id=order_id)
    return TransitionResult.APPLIED
