"""Pydantic request/response schemas for the Shopping API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddCartItemRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1)


class ChangeQuantityRequest(BaseModel):
    quantity: int  # 0 removes the item; negatives are refused by the domain


class CheckoutCartRequest(BaseModel):
    courier_id: str
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    first_name: str = Field(min_length=2)
    last_name: str
    phone_number: str = Field(pattern=r"^\+?[0-9 ()\-]{6,30}$")
    street: str
    city: str
    postal_code: str
    state: str
    note: str | None = Field(default=None, max_length=1000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "courier_id": "courier-001",
                    "email": "jane@example.com",
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "phone_number": "+1-555-0100",
                    "street": "1 Main St",
                    "city": "Springfield",
                    "postal_code": "12345",
                    "state": "IL",
                    "note": "Leave at the door",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartItemResponse(BaseModel):
    product_id: str
    product_name: str
    unit_price: float
    quantity: int


class CartResponse(BaseModel):
    cart_id: str
    user_id: str
    items: list[CartItemResponse] = []
    total_price: float = 0.0


class UnavailableProductSchema(BaseModel):
    product_id: str
    title: str
    quantity_in_stock: int


class CheckoutResponse(BaseModel):
    all_available: bool
    unavailable_products: list[UnavailableProductSchema] = []
    checkout_url: str | None = None
    order_id: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
