"""Fake order service — in-memory order owners for tests and development."""

from shared.deadline import Deadline

from fulfillment.order_service.port import OrderServicePort


class FakeOrderService(OrderServicePort):
    """Resolves owners from a dict; can be configured to be unreachable."""

    def __init__(self) -> None:
        self.owners: dict[str, str] = {}
        self.should_succeed = True
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool = True) -> None:
        self.should_succeed = should_succeed

    def register_order(self, order_id: str, user_id: str) -> None:
        self.owners[str(order_id)] = str(user_id)

    def get_order_owner(self, order_id: str, deadline: Deadline | None = None) -> str | None:
        self.calls.append({"method": "get_order_owner", "order_id": str(order_id)})
        if not self.should_succeed:
            return None
        return self.owners.get(str(order_id))
