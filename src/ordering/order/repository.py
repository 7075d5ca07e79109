"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import InternalOrderStatus, Order


@ordering.repository(part_of=Order)
class OrderRepository:
    """Adds the listing lookups used by the admin and user order views."""

    def list_all(self) -> list[Order]:
        return self._dao.query.order_by("-created_at").all().items

    def find_by_user(self, user_id: str) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items

    def find_flagged_delivery_failed(self) -> list[Order]:
        return (
            self._dao.query.filter(internal_status=InternalOrderStatus.DELIVERY_FAILED.value)
            .order_by("-created_at")
            .all()
            .items
        )
