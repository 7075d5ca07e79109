"""HTTP adapter for the Ordering service's owner lookup."""

from shared.deadline import Deadline
from shared.http_client import ServiceClient

from fulfillment.order_service.port import OrderServicePort


class HttpOrderService(ServiceClient, OrderServicePort):
    def get_order_owner(self, order_id: str, deadline: Deadline | None = None) -> str | None:
        path = f"/orders/{order_id}/owner"
        response = self._request("GET", path, deadline=deadline)
        if response is None or response.status_code == 404:
            return None
        data = self._json(response, path)
        return data.get("user_id") if data is not None else None
