"""Fake payment service — hands out checkout URLs without a gateway."""

from shared.deadline import Deadline

from ordering.payment_service.port import CheckoutLine, PaymentServicePort


class FakePaymentService(PaymentServicePort):
    def __init__(self) -> None:
        self.should_succeed = True
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool = True) -> None:
        self.should_succeed = should_succeed

    def create_checkout_session(
        self,
        order_id: str,
        items: list[CheckoutLine],
        deadline: Deadline | None = None,
    ) -> str | None:
        self.calls.append({"method": "create_checkout_session", "order_id": str(order_id), "items": list(items)})
        if not self.should_succeed:
            return None
        return f"https://checkout.example.com/pay/{order_id}"
