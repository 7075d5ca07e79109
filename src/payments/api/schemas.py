"""Pydantic request/response schemas for the Payments API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CheckoutItemSchema(BaseModel):
    product_name: str
    quantity: int = Field(ge=1)
    unit_price: float = Field(ge=0)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateCheckoutSessionRequest(BaseModel):
    order_id: str
    items: list[CheckoutItemSchema] = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "ord-001",
                    "items": [{"product_name": "Widget", "quantity": 2, "unit_price": 100.0}],
                }
            ]
        }
    }


class WebhookSessionObject(BaseModel):
    id: str | None = None
    client_reference_id: str | None = None


class WebhookEventData(BaseModel):
    object: WebhookSessionObject


class WebhookEventRequest(BaseModel):
    """The subset of a gateway webhook event the service reads."""

    type: str
    data: WebhookEventData


class ConfigureGatewayRequest(BaseModel):
    should_succeed: bool = True
    failure_reason: str = "Checkout session unavailable"


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CheckoutSessionResponse(BaseModel):
    order_id: str
    checkout_url: str


class StatusResponse(BaseModel):
    status: str = "ok"


class GatewayConfigResponse(BaseModel):
    gateway: str
    should_succeed: bool
    failure_reason: str
