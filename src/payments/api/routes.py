"""FastAPI routes for the Payments domain — checkout sessions and webhooks."""

import os

import structlog
from fastapi import APIRouter, Header, HTTPException, Request
from protean.utils.globals import current_domain
from pydantic import ValidationError as PydanticValidationError

from payments.api.schemas import (
    CheckoutSessionResponse,
    ConfigureGatewayRequest,
    CreateCheckoutSessionRequest,
    GatewayConfigResponse,
    StatusResponse,
    WebhookEventRequest,
)
from payments.checkout.completion import CompleteCheckoutSession
from payments.checkout.creation import create_checkout_session
from payments.gateway import get_gateway
from payments.gateway.fake_adapter import FakeGateway

logger = structlog.get_logger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"

# ---------------------------------------------------------------------------
# Payment Router
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.post("/checkout-sessions", status_code=201, response_model=CheckoutSessionResponse)
def open_checkout_session(body: CreateCheckoutSessionRequest) -> CheckoutSessionResponse:
    """Open a hosted checkout session for an order (called by the Ordering service)."""
    checkout_url = create_checkout_session(body.order_id, [item.model_dump() for item in body.items])
    if checkout_url is None:
        raise HTTPException(status_code=502, detail="Payment checkout session not created")
    return CheckoutSessionResponse(order_id=body.order_id, checkout_url=checkout_url)


@payment_router.post("/webhook", response_model=StatusResponse)
async def process_webhook(
    request: Request,
    x_gateway_signature: str = Header(default=""),
) -> StatusResponse:
    """Process a payment gateway webhook callback."""
    payload = (await request.body()).decode()
    gateway = get_gateway()
    if not gateway.verify_webhook_signature(payload, x_gateway_signature):
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    try:
        event = WebhookEventRequest.model_validate_json(payload)
    except PydanticValidationError as exc:
        raise HTTPException(status_code=400, detail="Malformed webhook payload") from exc

    if event.type != CHECKOUT_COMPLETED:
        logger.info("Ignoring webhook event", event_type=event.type)
        return StatusResponse(status="ignored")

    session = event.data.object
    if not session.client_reference_id:
        logger.warning("Completed checkout session without client reference", gateway_session_id=session.id)
        return StatusResponse(status="ignored")

    current_domain.process(
        CompleteCheckoutSession(order_id=session.client_reference_id, gateway_session_id=session.id),
        asynchronous=False,
    )
    return StatusResponse(status="processed")


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the FakeGateway behavior (non-production only).

    This endpoint is only available when PROTEAN_ENV is not 'production'.
    It allows toggling success/failure behavior for manual API testing.
    """
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, FakeGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakeGateway")

    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
    )
