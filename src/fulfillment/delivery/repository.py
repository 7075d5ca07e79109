"""Repository for the Delivery aggregate."""

from fulfillment.delivery.delivery import Delivery, DeliveryStatus
from fulfillment.domain import fulfillment


@fulfillment.repository(part_of=Delivery)
class DeliveryRepository:
    """Adds the order-keyed lookup the Ordering domain relies on and the
    open-delivery check that guards courier removal."""

    def find_by_order(self, order_id: str) -> Delivery | None:
        return self._dao.query.filter(order_id=str(order_id)).all().first

    def has_open_for_courier(self, courier_id: str) -> bool:
        """Whether the courier still carries a pending or in-progress delivery."""
        open_statuses = [DeliveryStatus.PENDING.value, DeliveryStatus.IN_PROGRESS.value]
        return self._dao.query.filter(courier_id=str(courier_id), status__in=open_statuses).all().total > 0
