"""Checkout session creation — command, handler and the entry point.

The gateway is called first, outside of any unit of work; only a session
the gateway actually opened is recorded. Amounts go to the gateway in
cents, and the order id travels as the client reference so the
completion webhook can name the order it paid for.
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from payments.checkout.session import CheckoutSession
from payments.domain import payments
from payments.gateway import get_gateway
from payments.gateway.port import CheckoutLineItem, to_cents

logger = structlog.get_logger(__name__)


@payments.command(part_of="CheckoutSession")
class RecordCheckoutSession:
    order_id = Identifier(required=True)
    gateway_session_id = String(required=True, max_length=255)
    checkout_url = String(required=True, max_length=2048)
    amount_total = Float(required=True)


@payments.command_handler(part_of=CheckoutSession)
class RecordCheckoutSessionHandler:
    @handle(RecordCheckoutSession)
    def record_session(self, command):
        session = CheckoutSession.open(
            order_id=command.order_id,
            gateway_session_id=command.gateway_session_id,
            checkout_url=command.checkout_url,
            amount_total=command.amount_total,
        )
        current_domain.repository_for(CheckoutSession).add(session)
        return str(session.id)


def create_checkout_session(order_id: str, items: list[dict]) -> str | None:
    """Open a checkout session for the order and return its URL.

    ``items`` carry product_name, quantity and unit_price. Returns None
    when the gateway did not open a session.
    """
    line_items = [
        CheckoutLineItem(
            name=item["product_name"],
            quantity=int(item["quantity"]),
            unit_amount=to_cents(float(item["unit_price"])),
        )
        for item in items
    ]
    result = get_gateway().create_checkout_session(client_reference_id=str(order_id), line_items=line_items)
    if not result.success:
        logger.error(
            "Gateway did not open a checkout session",
            order_id=str(order_id),
            reason=result.failure_reason,
        )
        return None

    amount_total = round(sum(line.unit_amount * line.quantity for line in line_items) / 100, 2)
    current_domain.process(
        RecordCheckoutSession(
            order_id=str(order_id),
            gateway_session_id=result.session_id,
            checkout_url=result.checkout_url,
            amount_total=amount_total,
        ),
        asynchronous=False,
    )
    logger.info(
        "Checkout session created",
        order_id=str(order_id),
        gateway_session_id=result.session_id,
        amount_total=amount_total,
    )
    return result.checkout_url
