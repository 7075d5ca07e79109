"""HTTP adapter for the Ordering service's order-creation chain."""

from dataclasses import asdict

from shared.deadline import Deadline
from shared.http_client import ServiceClient

from shopping.order_service.port import (
    OrderCreationResult,
    OrderFromCartRequest,
    OrderServicePort,
    OrderServiceUnavailable,
)


class HttpOrderService(ServiceClient, OrderServicePort):
    def create_order_from_cart(
        self,
        request: OrderFromCartRequest,
        deadline: Deadline | None = None,
    ) -> OrderCreationResult:
        if deadline is not None:
            deadline.check()
        path = "/orders/from-cart"
        response = self._request("POST", path, deadline=deadline, json=asdict(request))
        if response is None or response.status_code == 404:
            raise OrderServiceUnavailable("Order creation call failed")

        data = self._json(response, path)
        if data is None or not data.get("order_id"):
            raise OrderServiceUnavailable("Order creation answered without an order id")
        return OrderCreationResult(
            order_id=str(data["order_id"]),
            delivery_id=data.get("delivery_id"),
            checkout_url=data.get("checkout_url"),
        )
