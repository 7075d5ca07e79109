"""HTTP adapter for the Fulfillment service."""

from dataclasses import asdict

from shared.deadline import Deadline
from shared.http_client import ServiceClient

from ordering.delivery_service.port import DeliveryRequest, DeliveryServicePort


class HttpDeliveryService(ServiceClient, DeliveryServicePort):
    def create_delivery(self, request: DeliveryRequest, deadline: Deadline | None = None) -> str | None:
        path = "/deliveries"
        response = self._request("POST", path, deadline=deadline, json=asdict(request))
        if response is None or response.status_code == 404:
            return None
        data = self._json(response, path)
        return data.get("delivery_id") if data is not None else None

    def get_delivery_status(self, order_id: str, deadline: Deadline | None = None) -> str | None:
        path = f"/deliveries/order/{order_id}/status"
        response = self._request("GET", path, deadline=deadline)
        if response is None or response.status_code == 404:
            return None
        data = self._json(response, path)
        return data.get("status") if data is not None else None
