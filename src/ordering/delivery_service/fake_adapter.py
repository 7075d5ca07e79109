"""Fake delivery service — in-memory deliveries for tests and development."""

from uuid import uuid4

from shared.deadline import Deadline

from ordering.delivery_service.port import DeliveryRequest, DeliveryServicePort


class FakeDeliveryService(DeliveryServicePort):
    """Creates deliveries in a dict; can be configured to fail."""

    def __init__(self) -> None:
        self.deliveries: dict[str, dict] = {}
        self.should_succeed = True
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool = True) -> None:
        self.should_succeed = should_succeed

    def set_status(self, order_id: str, status: str) -> None:
        for delivery in self.deliveries.values():
            if delivery["order_id"] == str(order_id):
                delivery["status"] = status
                return
        self.deliveries[f"dlv-{uuid4().hex[:12]}"] = {"order_id": str(order_id), "status": status}

    def create_delivery(self, request: DeliveryRequest, deadline: Deadline | None = None) -> str | None:
        self.calls.append({"method": "create_delivery", "order_id": request.order_id})
        if not self.should_succeed:
            return None
        delivery_id = f"dlv-{uuid4().hex[:12]}"
        self.deliveries[delivery_id] = {"order_id": request.order_id, "status": "Pending"}
        return delivery_id

    def get_delivery_status(self, order_id: str, deadline: Deadline | None = None) -> str | None:
        self.calls.append({"method": "get_delivery_status", "order_id": str(order_id)})
        if not self.should_succeed:
            return None
        for delivery in self.deliveries.values():
            if delivery["order_id"] == str(order_id):
                return delivery["status"]
        return None
