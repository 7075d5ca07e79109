"""FastAPI routes for the Fulfillment domain."""

from fastapi import APIRouter, Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from shared.deadline import Deadline

from fulfillment.api.schemas import (
    ChangeDeliveryStatusRequest,
    CourierRequest,
    CourierResponse,
    CreateDeliveryRequest,
    DeliveryIdResponse,
    DeliveryResponse,
    DeliveryStatusResponse,
    StatusResponse,
)
from fulfillment.courier.courier import Courier
from fulfillment.courier.management import (
    CreateCourier,
    DeleteCourier,
    UpdateCourier,
    find_courier,
    get_courier,
    list_couriers,
)
from fulfillment.delivery.creation import CreateDelivery
from fulfillment.delivery.delivery import Delivery
from fulfillment.delivery.queries import get_delivery, get_delivery_by_order
from fulfillment.delivery.status import change_delivery_status

# ---------------------------------------------------------------------------
# Delivery Router
# ---------------------------------------------------------------------------
delivery_router = APIRouter(prefix="/deliveries", tags=["deliveries"])


def _to_response(delivery: Delivery) -> DeliveryResponse:
    recipient = delivery.recipient
    address = delivery.address
    return DeliveryResponse(
        delivery_id=str(delivery.id),
        order_id=str(delivery.order_id),
        courier_id=str(delivery.courier_id),
        status=delivery.status,
        tracking_number=delivery.tracking_number,
        delivered_at=delivery.delivered_at,
        email=recipient.email if recipient else None,
        first_name=recipient.first_name if recipient else None,
        last_name=recipient.last_name if recipient else None,
        phone_number=recipient.phone_number if recipient else None,
        street=address.street if address else None,
        city=address.city if address else None,
        postal_code=address.postal_code if address else None,
        state=address.state if address else None,
    )


@delivery_router.post("", status_code=201, response_model=DeliveryIdResponse)
def create_delivery(body: CreateDeliveryRequest) -> DeliveryIdResponse:
    """Create the delivery for a placed order (called by the Ordering service)."""
    command = CreateDelivery(**body.model_dump())
    result = current_domain.process(command, asynchronous=False)
    return DeliveryIdResponse(delivery_id=result)


@delivery_router.get("/{delivery_id}", response_model=DeliveryResponse)
def read_delivery(delivery_id: str) -> DeliveryResponse:
    try:
        return _to_response(get_delivery(delivery_id))
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Delivery not found") from exc


@delivery_router.get("/order/{order_id}", response_model=DeliveryResponse)
def read_delivery_by_order(order_id: str) -> DeliveryResponse:
    delivery = get_delivery_by_order(order_id)
    if delivery is None:
        raise HTTPException(status_code=404, detail="Delivery not found")
    return _to_response(delivery)


@delivery_router.get("/order/{order_id}/status", response_model=DeliveryStatusResponse)
def read_delivery_status(order_id: str) -> DeliveryStatusResponse:
    """Current delivery status for an order; 404 when the order has no delivery."""
    delivery = get_delivery_by_order(order_id)
    if delivery is None:
        raise HTTPException(status_code=404, detail="Delivery not found")
    return DeliveryStatusResponse(order_id=order_id, status=delivery.status)


@delivery_router.put("/{delivery_id}/status", response_model=StatusResponse)
def update_delivery_status(
    delivery_id: str,
    body: ChangeDeliveryStatusRequest,
    x_request_deadline: str | None = Header(default=None),
) -> StatusResponse:
    """Administrative status change.

    A missing delivery and a refused transition both answer 404.
    """
    result = change_delivery_status(
        delivery_id,
        body.status,
        deadline=Deadline.from_header(x_request_deadline),
    )
    if not result.succeeded:
        raise HTTPException(status_code=404, detail="Delivery not found or status change not allowed")
    return StatusResponse(status=body.status.value)


# ---------------------------------------------------------------------------
# Courier Router
# ---------------------------------------------------------------------------
courier_router = APIRouter(prefix="/couriers", tags=["couriers"])


def _to_courier_response(courier: Courier) -> CourierResponse:
    return CourierResponse(
        courier_id=str(courier.id),
        name=courier.name,
        email=courier.email,
        phone_number=courier.phone_number,
        created_at=courier.created_at,
        updated_at=courier.updated_at,
    )


def _require_courier(courier_id: str) -> None:
    if find_courier(courier_id) is None:
        raise HTTPException(status_code=404, detail="Courier not found")


@courier_router.get("", response_model=list[CourierResponse])
def read_couriers() -> list[CourierResponse]:
    return [_to_courier_response(courier) for courier in list_couriers()]


@courier_router.get("/{courier_id}", response_model=CourierResponse)
def read_courier(courier_id: str) -> CourierResponse:
    try:
        return _to_courier_response(get_courier(courier_id))
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Courier not found") from exc


@courier_router.post("", status_code=201, response_model=CourierResponse)
def create_courier(body: CourierRequest) -> CourierResponse:
    courier_id = current_domain.process(CreateCourier(**body.model_dump()), asynchronous=False)
    return _to_courier_response(get_courier(courier_id))


@courier_router.put("/{courier_id}", response_model=CourierResponse)
def update_courier(courier_id: str, body: CourierRequest) -> CourierResponse:
    _require_courier(courier_id)
    current_domain.process(UpdateCourier(courier_id=courier_id, **body.model_dump()), asynchronous=False)
    return _to_courier_response(get_courier(courier_id))


@courier_router.delete("/{courier_id}", response_model=StatusResponse)
def delete_courier(courier_id: str) -> StatusResponse:
    """Remove a courier; refused while it still has open deliveries."""
    _require_courier(courier_id)
    current_domain.process(DeleteCourier(courier_id=courier_id), asynchronous=False)
    return StatusResponse(status="deleted")
