"""FastAPI routes for the Ordering domain."""

from fastapi import APIRouter, Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from shared.deadline import Deadline

from ordering.api.schemas import (
    ChangeOrderInternalStatusRequest,
    ChangeOrderStatusRequest,
    CreateOrderFromCartRequest,
    OrderCreationResponse,
    OrderItemSchema,
    OrderOwnerResponse,
    OrderResponse,
    StatusResponse,
    UpdateOrderNoteRequest,
)
from ordering.order.creation import create_order_from_cart
from ordering.order.lifecycle import change_order_status
from ordering.order.management import ChangeOrderInternalStatus, DeleteOrder, UpdateOrderNote
from ordering.order.order import Order
from ordering.order.queries import (
    get_order,
    get_order_owner,
    list_orders,
    list_orders_by_user,
    list_orders_flagged_as_delivery_failed,
)

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.id),
        user_id=str(order.user_id),
        total_price=order.total_price,
        status=order.status,
        internal_status=order.internal_status,
        delivery_id=str(order.delivery_id) if order.delivery_id else None,
        note=order.note,
        items=[
            OrderItemSchema(
                product_id=str(item.product_id),
                product_name=item.product_name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in order.items
        ],
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def _require_order(order_id: str) -> None:
    try:
        get_order(order_id)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Order not found") from exc


@order_router.get("", response_model=list[OrderResponse])
def read_orders() -> list[OrderResponse]:
    return [_to_response(order) for order in list_orders()]


@order_router.get("/delivery-failed", response_model=list[OrderResponse])
def read_delivery_failed_orders() -> list[OrderResponse]:
    """Orders whose delivery could not be created, for manual triage."""
    return [_to_response(order) for order in list_orders_flagged_as_delivery_failed()]


@order_router.get("/user/{user_id}", response_model=list[OrderResponse])
def read_user_orders(user_id: str) -> list[OrderResponse]:
    return [_to_response(order) for order in list_orders_by_user(user_id)]


@order_router.post("/from-cart", status_code=201, response_model=OrderCreationResponse)
def create_from_cart(
    body: CreateOrderFromCartRequest,
    x_request_deadline: str | None = Header(default=None),
) -> OrderCreationResponse:
    """Create an order, its delivery and its payment session (called by Shopping)."""
    result = create_order_from_cart(
        user_id=body.user_id,
        courier_id=body.courier_id,
        items=[item.model_dump() for item in body.items],
        contact=body.contact.model_dump(),
        address=body.address.model_dump(),
        note=body.note,
        total_price=body.total_price,
        deadline=Deadline.from_header(x_request_deadline),
    )
    return OrderCreationResponse(
        order_id=result.order_id,
        delivery_id=result.delivery_id,
        checkout_url=result.checkout_url,
    )


@order_router.get("/{order_id}", response_model=OrderResponse)
def read_order(order_id: str) -> OrderResponse:
    try:
        return _to_response(get_order(order_id))
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Order not found") from exc


@order_router.get("/{order_id}/owner", response_model=OrderOwnerResponse)
def read_order_owner(order_id: str) -> OrderOwnerResponse:
    user_id = get_order_owner(order_id)
    if user_id is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderOwnerResponse(order_id=order_id, user_id=user_id)


@order_router.put("/{order_id}/status", response_model=StatusResponse)
def update_order_status(order_id: str, body: ChangeOrderStatusRequest) -> StatusResponse:
    """Administrative status change.

    A missing order and a refused transition both answer 404.
    """
    result = change_order_status(order_id, body.status)
    if not result.succeeded:
        raise HTTPException(status_code=404, detail="Order not found or status change not allowed")
    return StatusResponse(status=body.status.value)


@order_router.put("/{order_id}/internal-status", response_model=StatusResponse)
def update_order_internal_status(order_id: str, body: ChangeOrderInternalStatusRequest) -> StatusResponse:
    _require_order(order_id)
    current_domain.process(
        ChangeOrderInternalStatus(order_id=order_id, internal_status=body.internal_status.value),
        asynchronous=False,
    )
    return StatusResponse(status=body.internal_status.value)


@order_router.put("/{order_id}/note", response_model=StatusResponse)
def update_order_note(order_id: str, body: UpdateOrderNoteRequest) -> StatusResponse:
    _require_order(order_id)
    current_domain.process(UpdateOrderNote(order_id=order_id, note=body.note), asynchronous=False)
    return StatusResponse()


@order_router.delete("/{order_id}", response_model=StatusResponse)
def delete_order(order_id: str) -> StatusResponse:
    _require_order(order_id)
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()
