"""Checkout session completion — command and handler.

Driven by the gateway's ``checkout.session.completed`` webhook. The
session is found by the gateway's session id, falling back to the open
session for the referenced order.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from payments.checkout.session import CheckoutSession
from payments.domain import payments

logger = structlog.get_logger(__name__)


@payments.command(part_of="CheckoutSession")
class CompleteCheckoutSession:
    order_id = Identifier(required=True)  # The session's client reference
    gateway_session_id = String(max_length=255)


@payments.command_handler(part_of=CheckoutSession)
class CompleteCheckoutSessionHandler:
    @handle(CompleteCheckoutSession)
    def complete_session(self, command):
        repo = current_domain.repository_for(CheckoutSession)
        session = None
        if command.gateway_session_id:
            session = repo.find_by_gateway_session(command.gateway_session_id)
        if session is None:
            session = repo.find_open_for_order(command.order_id)

        if session is None:
            logger.warning(
                "No checkout session recorded for completed payment",
                order_id=str(command.order_id),
                gateway_session_id=command.gateway_session_id,
            )
            return None
        if session.is_completed:
            logger.info("Checkout session already completed", checkout_session_id=str(session.id))
            return str(session.id)

        session.complete()
        repo.add(session)
        logger.info(
            "Checkout session completed",
            checkout_session_id=str(session.id),
            order_id=str(session.order_id),
        )
        return str(session.id)
