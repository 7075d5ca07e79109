"""Read side of the Order aggregate. Pure reads, no state-machine involvement."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order


def get_order(order_id: str) -> Order:
    return current_domain.repository_for(Order).get(order_id)


def list_orders() -> list[Order]:
    return current_domain.repository_for(Order).list_all()


def list_orders_by_user(user_id: str) -> list[Order]:
    return current_domain.repository_for(Order).find_by_user(user_id)


def list_orders_flagged_as_delivery_failed() -> list[Order]:
    return current_domain.repository_for(Order).find_flagged_delivery_failed()


def get_order_owner(order_id: str) -> str | None:
    """The user who placed the order, or None for an unknown order."""
    try:
        order = get_order(order_id)
    except ObjectNotFoundError:
        return None
    return str(order.user_id)
