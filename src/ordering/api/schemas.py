"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ordering.order.order import InternalOrderStatus, OrderStatus


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ContactSchema(BaseModel):
    email: str
    first_name: str
    last_name: str
    phone_number: str


class AddressSchema(BaseModel):
    street: str
    city: str
    postal_code: str
    state: str


class OrderItemSchema(BaseModel):
    product_id: str
    product_name: str
    unit_price: float = Field(ge=0)
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderFromCartRequest(BaseModel):
    user_id: str
    courier_id: str
    total_price: float = Field(ge=0)
    note: str | None = Field(default=None, max_length=1000)
    contact: ContactSchema
    address: AddressSchema
    items: list[OrderItemSchema] = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "user-001",
                    "courier_id": "courier-001",
                    "total_price": 200.0,
                    "note": "Leave at the door",
                    "contact": {
                        "email": "jane@example.com",
                        "first_name": "Jane",
                        "last_name": "Doe",
                        "phone_number": "+1-555-0100",
                    },
                    "address": {
                        "street": "1 Main St",
                        "city": "Springfield",
                        "postal_code": "12345",
                        "state": "IL",
                    },
                    "items": [
                        {
                            "product_id": "prod-001",
                            "product_name": "Widget",
                            "unit_price": 100.0,
                            "quantity": 2,
                        }
                    ],
                }
            ]
        }
    }


class ChangeOrderStatusRequest(BaseModel):
    status: OrderStatus = Field(..., description="Target order status")


class ChangeOrderInternalStatusRequest(BaseModel):
    internal_status: InternalOrderStatus


class UpdateOrderNoteRequest(BaseModel):
    note: str | None = Field(default=None, max_length=1000)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderCreationResponse(BaseModel):
    order_id: str
    delivery_id: str | None = None
    checkout_url: str | None = None


class OrderOwnerResponse(BaseModel):
    order_id: str
    user_id: str


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    total_price: float
    status: str
    internal_status: str
    delivery_id: str | None = None
    note: str | None = None
    items: list[OrderItemSchema] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
