"""Read side of the Delivery aggregate. No state-machine involvement."""

from protean.utils.globals import current_domain

from fulfillment.delivery.delivery import Delivery


def get_delivery(delivery_id: str) -> Delivery:
    return current_domain.repository_for(Delivery).get(delivery_id)


def get_delivery_by_order(order_id: str) -> Delivery | None:
    return current_domain.repository_for(Delivery).find_by_order(order_id)


def get_delivery_status(order_id: str) -> str | None:
    """Current status of the order's delivery, or None when there is none."""
    delivery = get_delivery_by_order(order_id)
    return delivery.status if delivery is not None else None
