"""Pydantic API schemas for the Fulfillment domain.

These are the external API contracts — separate from domain commands.
The API layer translates between these schemas and domain commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from fulfillment.delivery.delivery import DeliveryStatus


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class CreateDeliveryRequest(BaseModel):
    order_id: str
    courier_id: str
    email: str
    first_name: str
    last_name: str
    phone_number: str
    street: str
    city: str
    postal_code: str
    state: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "ord-001",
                    "courier_id": "courier-001",
                    "email": "jane@example.com",
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "phone_number": "+1-555-0100",
                    "street": "1 Main St",
                    "city": "Springfield",
                    "postal_code": "12345",
                    "state": "IL",
                }
            ]
        }
    }


class CourierRequest(BaseModel):
    """Body for registering a courier and for replacing its details."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str | None = Field(default=None, max_length=254)
    phone_number: str | None = Field(default=None, max_length=30)

    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Swift Couriers", "email": "dispatch@swift.example", "phone_number": "+1-555-0199"}]
        }
    }


class ChangeDeliveryStatusRequest(BaseModel):
    status: DeliveryStatus = Field(..., description="Target delivery status")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class DeliveryIdResponse(BaseModel):
    delivery_id: str


class DeliveryStatusResponse(BaseModel):
    order_id: str
    status: str


class DeliveryResponse(BaseModel):
    delivery_id: str
    order_id: str
    courier_id: str
    status: str
    tracking_number: str | None = None
    delivered_at: datetime | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None
    state: str | None = None


class CourierResponse(BaseModel):
    courier_id: str
    name: str
    email: str | None = None
    phone_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StatusResponse(BaseModel):
    status: str
