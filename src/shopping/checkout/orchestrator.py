"""CheckoutOrchestrator — the checkout saga, run from the user's cart.

Steps, strictly in sequence:

1. Ask the product catalog whether every cart line is in stock. A
   shortage ends the attempt: the cart is kept and nothing is created.
2. Ask the Ordering service to create the order, its delivery and its
   payment session in one call.
3. Classify what came back into one outcome.
4. Delete the cart, whatever the classification. The order already
   exists downstream, so the cart must not be checked out a second time.

A created order or delivery is never rolled back here; Ordering flags a
missing delivery for operators instead.
"""

import structlog
from protean.utils.globals import current_domain
from shared.deadline import Deadline, DeadlineExceeded

from shopping.cart.cart import Cart
from shopping.cart.management import DeleteCart, find_cart
from shopping.catalogue import get_catalogue
from shopping.catalogue.port import CataloguePort
from shopping.checkout.outcome import CartError, CheckoutOutcome, CheckoutRequest
from shopping.order_service import get_order_service
from shopping.order_service.port import (
    OrderCreationResult,
    OrderFromCartRequest,
    OrderServicePort,
    OrderServiceUnavailable,
)

logger = structlog.get_logger(__name__)


def classify(result: OrderCreationResult) -> CheckoutOutcome:
    """Map which of delivery id and checkout URL came back to an outcome."""
    if result.delivery_id is None and result.checkout_url is None:
        return CheckoutOutcome.failure(CartError.DELIVERY_AND_PAYMENT_CHECKOUT_NOT_CREATED, order_id=result.order_id)
    if result.checkout_url is None:
        return CheckoutOutcome.failure(CartError.PAYMENT_CHECKOUT_URL_NOT_CREATED, order_id=result.order_id)
    if result.delivery_id is None:
        return CheckoutOutcome.failure(CartError.DELIVERY_NOT_CREATED, order_id=result.order_id)
    return CheckoutOutcome.success(checkout_url=result.checkout_url, order_id=result.order_id)


class CheckoutOrchestrator:
    def __init__(
        self,
        catalogue: CataloguePort | None = None,
        order_service: OrderServicePort | None = None,
    ) -> None:
        self.catalogue = catalogue or get_catalogue()
        self.order_service = order_service or get_order_service()

    def checkout(
        self,
        user_id: str,
        request: CheckoutRequest,
        deadline: Deadline | None = None,
    ) -> CheckoutOutcome:
        cart = find_cart(user_id)
        if cart is None or cart.is_empty:
            logger.warning("Cannot checkout, cart not found or empty", user_id=str(user_id))
            return CheckoutOutcome.failure(CartError.CART_NOT_FOUND)

        log = logger.bind(cart_id=str(cart.id), user_id=str(user_id))

        requested = [(str(item.product_id), item.quantity) for item in cart.items]
        unavailable = self.catalogue.check_availability(requested, deadline=deadline)
        if unavailable:
            log.info(
                "Checkout stopped, items out of stock",
                product_ids=[product.product_id for product in unavailable],
            )
            return CheckoutOutcome.shortage(unavailable)

        outcome = self._create_order(cart, user_id, request, deadline, log)
        self._delete_cart(cart, log)
        return outcome

    def _create_order(
        self,
        cart: Cart,
        user_id: str,
        request: CheckoutRequest,
        deadline: Deadline | None,
        log: structlog.stdlib.BoundLogger,
    ) -> CheckoutOutcome:
        order_request = OrderFromCartRequest(
            user_id=str(user_id),
            courier_id=str(request.courier_id),
            total_price=cart.total_price,
            contact=request.contact,
            address=request.address,
            items=cart.snapshot(),
            note=request.note,
        )
        try:
            result = self.order_service.create_order_from_cart(order_request, deadline=deadline)
        except (OrderServiceUnavailable, DeadlineExceeded) as exc:
            log.error("Order creation chain failed", error=str(exc))
            return CheckoutOutcome.failure(CartError.DELIVERY_AND_PAYMENT_CHECKOUT_NOT_CREATED)

        outcome = classify(result)
        if outcome.failed:
            log.warning("Checkout partially failed", order_id=result.order_id, error=outcome.error.value)
        else:
            log.info("Checkout succeeded", order_id=result.order_id)
        return outcome

    def _delete_cart(self, cart: Cart, log: structlog.stdlib.BoundLogger) -> None:
        current_domain.process(DeleteCart(cart_id=str(cart.id)), asynchronous=False)
        log.info("Cart deleted after checkout")
