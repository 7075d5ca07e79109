"""Repository for the Courier aggregate."""

from fulfillment.courier.courier import Courier
from fulfillment.domain import fulfillment


@fulfillment.repository(part_of=Courier)
class CourierRepository:
    def list_all(self) -> list[Courier]:
        return self._dao.query.order_by("name").all().items
