"""Delivery status changes — command, handler and the lifecycle entry point.

``change_delivery_status`` is what the API calls. It resolves the missing
and refused cases up front so callers get a TransitionResult instead of an
exception, and it looks up the order owner outside of any unit of work
before a cancellation is recorded.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from shared.deadline import Deadline
from shared.lifecycle import TransitionResult

from fulfillment.delivery.delivery import Delivery, DeliveryStatus
from fulfillment.domain import fulfillment
from fulfillment.order_service import get_order_service

logger = structlog.get_logger(__name__)


@fulfillment.command(part_of="Delivery")
class ChangeDeliveryStatus:
    """Move a delivery along its lifecycle."""

    delivery_id = Identifier(required=True)
    status = String(required=True, choices=DeliveryStatus)
    user_id = Identifier()  # Order owner, carried on cancellation


@fulfillment.command_handler(part_of=Delivery)
class ChangeDeliveryStatusHandler:
    @handle(ChangeDeliveryStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Delivery)
        delivery = repo.get(command.delivery_id)
        delivery.change_status(DeliveryStatus(command.status), user_id=command.user_id)
        repo.add(delivery)


def change_delivery_status(
    delivery_id: str,
    status: DeliveryStatus,
    deadline: Deadline | None = None,
) -> TransitionResult:
    """Apply an administrative delivery status change."""
    try:
        delivery = current_domain.repository_for(Delivery).get(delivery_id)
    except ObjectNotFoundError:
        logger.warning("Cannot change delivery status, delivery not found", delivery_id=delivery_id)
        return TransitionResult.NOT_FOUND

    if not delivery.can_transition_to(status):
        logger.warning(
            "Cannot change delivery status, invalid transition",
            delivery_id=delivery_id,
            current_status=delivery.status,
            requested_status=status.value,
        )
        return TransitionResult.INVALID_TRANSITION

    user_id = None
    if status == DeliveryStatus.CANCELED:
        user_id = get_order_service().get_order_owner(str(delivery.order_id), deadline=deadline)
        if user_id is None:
            logger.warning(
                "Order owner unknown, DeliveryCanceled will carry no user_id",
                delivery_id=delivery_id,
                order_id=str(delivery.order_id),
            )

    current_domain.process(
        ChangeDeliveryStatus(delivery_id=delivery_id, status=status.value, user_id=user_id),
        asynchronous=False,
    )
    logger.info("Delivery status changed", delivery_id=delivery_id, status=status.value)
    return TransitionResult.APPLIED
