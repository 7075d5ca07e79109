"""FastAPI routes for the Shopping domain — the user's cart and checkout."""

import os

import structlog
from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain
from shared.deadline import Deadline

from shopping.api.dependencies import current_user_id
from shopping.api.schemas import (
    AddCartItemRequest,
    CartItemResponse,
    CartResponse,
    ChangeQuantityRequest,
    CheckoutCartRequest,
    CheckoutResponse,
    StatusResponse,
    UnavailableProductSchema,
)
from shopping.cart.cart import Cart
from shopping.cart.items import add_item_to_cart, change_item_quantity, remove_item_from_cart
from shopping.cart.management import DeleteCart, find_cart, get_or_create_cart
from shopping.checkout.orchestrator import CheckoutOrchestrator
from shopping.checkout.outcome import CartError, CheckoutOutcome, CheckoutRequest

logger = structlog.get_logger(__name__)

DEFAULT_CHECKOUT_TIMEOUT_SECONDS = 30.0

CHECKOUT_ERRORS = {
    CartError.CART_NOT_FOUND: (404, "Cart not found."),
    CartError.DELIVERY_NOT_CREATED: (400, "Order created but its delivery not created."),
    CartError.PAYMENT_CHECKOUT_URL_NOT_CREATED: (
        400,
        "Order and delivery created but its payment checkout url not created.",
    ),
    CartError.DELIVERY_AND_PAYMENT_CHECKOUT_NOT_CREATED: (
        400,
        "Order created but its delivery and payment checkout url not created.",
    ),
}
OUT_OF_STOCK_MESSAGE = "Some items in your cart are out of stock."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def checkout_timeout() -> float:
    return float(os.environ.get("CHECKOUT_TIMEOUT_SECONDS", DEFAULT_CHECKOUT_TIMEOUT_SECONDS))


def _to_response(cart: Cart) -> CartResponse:
    return CartResponse(
        cart_id=str(cart.id),
        user_id=str(cart.user_id),
        items=[
            CartItemResponse(
                product_id=str(item.product_id),
                product_name=item.product_name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in cart.items
        ],
        total_price=cart.total_price,
    )


def _unavailable(outcome: CheckoutOutcome) -> list[UnavailableProductSchema]:
    return [
        UnavailableProductSchema(
            product_id=product.product_id,
            title=product.title,
            quantity_in_stock=product.quantity_in_stock,
        )
        for product in outcome.unavailable_products
    ]


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/me", response_model=CartResponse)
def read_cart(user_id: str = Depends(current_user_id)) -> CartResponse:
    """The user's cart, created on first access."""
    return _to_response(get_or_create_cart(user_id))


@cart_router.delete("/me", response_model=StatusResponse)
def delete_cart(user_id: str = Depends(current_user_id)) -> StatusResponse:
    cart = find_cart(user_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found.")
    current_domain.process(DeleteCart(cart_id=str(cart.id)), asynchronous=False)
    return StatusResponse()


@cart_router.post("/me/items", status_code=201, response_model=CartResponse)
def add_cart_item(body: AddCartItemRequest, user_id: str = Depends(current_user_id)) -> CartResponse:
    return _to_response(add_item_to_cart(user_id, body.product_id, body.quantity))


@cart_router.put("/me/items/{product_id}", response_model=CartResponse)
def update_cart_item(
    product_id: str,
    body: ChangeQuantityRequest,
    user_id: str = Depends(current_user_id),
) -> CartResponse:
    return _to_response(change_item_quantity(user_id, product_id, body.quantity))


@cart_router.delete("/me/items/{product_id}", response_model=CartResponse)
def delete_cart_item(product_id: str, user_id: str = Depends(current_user_id)) -> CartResponse:
    return _to_response(remove_item_from_cart(user_id, product_id))


@cart_router.post("/me/checkout", response_model=CheckoutResponse)
def checkout_cart(body: CheckoutCartRequest, user_id: str = Depends(current_user_id)) -> CheckoutResponse:
    """Check the cart out: order, delivery and payment session in one go.

    Stock shortages answer 400 with the short products and keep the cart.
    Partial failures answer 400 with a readable message; the cart is gone.
    """
    deadline = Deadline.within(checkout_timeout())
    try:
        outcome = CheckoutOrchestrator().checkout(user_id, CheckoutRequest(**body.model_dump()), deadline=deadline)
    except Exception as exc:
        logger.exception("Checkout failed unexpectedly", user_id=user_id)
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR_MESSAGE) from exc

    if outcome.failed:
        status_code, message = CHECKOUT_ERRORS[outcome.error]
        raise HTTPException(status_code=status_code, detail=message)

    if not outcome.all_available:
        raise HTTPException(
            status_code=400,
            detail={
                "message": OUT_OF_STOCK_MESSAGE,
                "unavailable_products": [product.model_dump() for product in _unavailable(outcome)],
            },
        )

    return CheckoutResponse(
        all_available=True,
        checkout_url=outcome.checkout_url,
        order_id=outcome.order_id,
    )
