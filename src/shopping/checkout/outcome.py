"""Checkout request and outcome values.

A checkout attempt ends in exactly one of:
- a structured failure (``CartError``),
- a stock shortage (success-shaped, ``all_available`` False),
- a success carrying the payment checkout URL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shopping.catalogue.port import UnavailableProduct


class CartError(Enum):
    CART_NOT_FOUND = "CartNotFound"
    DELIVERY_NOT_CREATED = "DeliveryNotCreated"
    PAYMENT_CHECKOUT_URL_NOT_CREATED = "PaymentCheckoutUrlNotCreated"
    DELIVERY_AND_PAYMENT_CHECKOUT_NOT_CREATED = "DeliveryAndPaymentCheckoutNotCreated"


@dataclass(frozen=True)
class CheckoutRequest:
    """Shipping and contact details the user submits at checkout."""

    courier_id: str
    email: str
    first_name: str
    last_name: str
    phone_number: str
    street: str
    city: str
    postal_code: str
    state: str
    note: str | None = None

    @property
    def contact(self) -> dict:
        return {
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone_number": self.phone_number,
        }

    @property
    def address(self) -> dict:
        return {
            "street": self.street,
            "city": self.city,
            "postal_code": self.postal_code,
            "state": self.state,
        }


@dataclass(frozen=True)
class CheckoutOutcome:
    error: CartError | None = None
    all_available: bool = False
    unavailable_products: tuple[UnavailableProduct, ...] = field(default_factory=tuple)
    checkout_url: str | None = None
    order_id: str | None = None

    @classmethod
    def failure(cls, error: CartError, order_id: str | None = None) -> CheckoutOutcome:
        return cls(error=error, order_id=order_id)

    @classmethod
    def shortage(cls, products: list[UnavailableProduct]) -> CheckoutOutcome:
        return cls(all_available=False, unavailable_products=tuple(products))

    @classmethod
    def success(cls, checkout_url: str, order_id: str) -> CheckoutOutcome:
        return cls(all_available=True, checkout_url=checkout_url, order_id=order_id)

    @property
    def failed(self) -> bool:
        return self.error is not None
