"""HTTP adapter for the Payments service."""

from dataclasses import asdict

from shared.deadline import Deadline
from shared.http_client import ServiceClient

from ordering.payment_service.port import CheckoutLine, PaymentServicePort


class HttpPaymentService(ServiceClient, PaymentServicePort):
    def create_checkout_session(
        self,
        order_id: str,
        items: list[CheckoutLine],
        deadline: Deadline | None = None,
    ) -> str | None:
        path = "/payments/checkout-sessions"
        payload = {"order_id": str(order_id), "items": [asdict(item) for item in items]}
        response = self._request("POST", path, deadline=deadline, json=payload)
        if response is None or response.status_code == 404:
            return None
        data = self._json(response, path)
        return data.get("checkout_url") if data is not None else None
