"""Order creation — commands, handlers and the order-creation chain.

``create_order_from_cart`` runs the three legs of a checkout on the
Ordering side: the order itself, its delivery and its payment session.
Each leg is a separate request; a failing leg never undoes an earlier
one. A delivery that could not be created flags the order as
DeliveryFailed so operators can pick it up.
"""

import json
from dataclasses import dataclass

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain
from shared.deadline import Deadline

from ordering.delivery_service import get_delivery_service
from ordering.delivery_service.port import DeliveryRequest
from ordering.domain import ordering
from ordering.order.management import ChangeOrderInternalStatus
from ordering.order.order import InternalOrderStatus, Order
from ordering.payment_service import get_payment_service
from ordering.payment_service.port import CheckoutLine

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CreateOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of item dicts
    note = Text()


@ordering.command(part_of="Order")
class AttachDelivery:
    order_id = Identifier(required=True)
    delivery_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        order = Order.create(
            user_id=command.user_id,
            items_data=items_data,
            note=command.note,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)

    @handle(AttachDelivery)
    def attach_delivery(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.attach_delivery(command.delivery_id)
        repo.add(order)


# ---------------------------------------------------------------------------
# Order-creation chain
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OrderCreationResult:
    order_id: str
    delivery_id: str | None = None
    checkout_url: str | None = None


def _deadline_passed(deadline: Deadline | None) -> bool:
    return deadline is not None and deadline.expired


def create_order_from_cart(
    user_id: str,
    courier_id: str,
    items: list[dict],
    contact: dict,
    address: dict,
    note: str | None = None,
    total_price: float | None = None,
    deadline: Deadline | None = None,
) -> OrderCreationResult:
    """Create the order, then ask for its delivery and its payment session.

    ``items`` carry product_id, product_name, unit_price and quantity.
    ``contact`` carries email, first_name, last_name and phone_number;
    ``address`` carries street, city, postal_code and state.
    The order total is always recomputed from the items; a differing
    ``total_price`` from the caller is logged and otherwise ignored.
    """
    order_id = current_domain.process(
        CreateOrder(user_id=user_id, items=json.dumps(items), note=note),
        asynchronous=False,
    )
    logger.info("Order created from cart", order_id=order_id, user_id=str(user_id))

    if total_price is not None:
        order_total = current_domain.repository_for(Order).get(order_id).total_price
        if abs(order_total - total_price) > 0.005:
            logger.warning(
                "Submitted total differs from item total",
                order_id=order_id,
                submitted_total=total_price,
                order_total=order_total,
            )

    delivery_id = None
    if _deadline_passed(deadline):
        logger.warning("Deadline expired before delivery creation", order_id=order_id)
    else:
        delivery_id = get_delivery_service().create_delivery(
            DeliveryRequest(order_id=order_id, courier_id=str(courier_id), **contact, **address),
            deadline=deadline,
        )

    if delivery_id is not None:
        current_domain.process(AttachDelivery(order_id=order_id, delivery_id=delivery_id), asynchronous=False)
    else:
        logger.error("Delivery not created, flagging order", order_id=order_id)
        current_domain.process(
            ChangeOrderInternalStatus(
                order_id=order_id,
                internal_status=InternalOrderStatus.DELIVERY_FAILED.value,
            ),
            asynchronous=False,
        )

    checkout_url = None
    if _deadline_passed(deadline):
        logger.warning("Deadline expired before payment session creation", order_id=order_id)
    else:
        lines = [
            CheckoutLine(
                product_name=item["product_name"],
                quantity=int(item["quantity"]),
                unit_price=float(item["unit_price"]),
            )
            for item in items
        ]
        checkout_url = get_payment_service().create_checkout_session(order_id, lines, deadline=deadline)
        if checkout_url is None:
            logger.error("Payment checkout session not created", order_id=order_id)

    return OrderCreationResult(order_id=order_id, delivery_id=delivery_id, checkout_url=checkout_url)
