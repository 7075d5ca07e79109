"""Fake order service — scripted order-creation results for tests and development."""

from uuid import uuid4

from shared.deadline import Deadline

from shopping.order_service.port import (
    OrderCreationResult,
    OrderFromCartRequest,
    OrderServicePort,
    OrderServiceUnavailable,
)


class FakeOrderService(OrderServicePort):
    """Creates nothing; returns ids for the legs configured to succeed."""

    def __init__(self) -> None:
        self.reachable = True
        self.create_delivery = True
        self.create_checkout = True
        self.calls: list[OrderFromCartRequest] = []

    def configure(
        self,
        reachable: bool = True,
        create_delivery: bool = True,
        create_checkout: bool = True,
    ) -> None:
        self.reachable = reachable
        self.create_delivery = create_delivery
        self.create_checkout = create_checkout

    def create_order_from_cart(
        self,
        request: OrderFromCartRequest,
        deadline: Deadline | None = None,
    ) -> OrderCreationResult:
        if deadline is not None:
            deadline.check()
        self.calls.append(request)
        if not self.reachable:
            raise OrderServiceUnavailable("Ordering service unreachable")

        order_id = f"ord-{uuid4().hex[:12]}"
        return OrderCreationResult(
            order_id=order_id,
            delivery_id=f"dlv-{uuid4().hex[:12]}" if self.create_delivery else None,
            checkout_url=f"https://checkout.example.com/pay/{order_id}" if self.create_checkout else None,
        )
