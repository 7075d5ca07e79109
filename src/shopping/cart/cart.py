"""Cart aggregate (CQRS) — a user's selection until checkout.

There is at most one cart per user. It is created lazily on first access
and destroyed, not marked, once a checkout attempt passes the stock check.
Product names and prices are captured when an item is added.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from shopping.cart.events import (
    CartCreated,
    CartItemAdded,
    CartItemQuantityChanged,
    CartItemRemoved,
)
from shopping.domain import shopping


@shopping.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@shopping.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        cart = cls(user_id=user_id, created_at=now, updated_at=now)
        cart.raise_(CartCreated(cart_id=str(cart.id), user_id=str(user_id), created_at=now))
        return cart

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def total_price(self) -> float:
        return round(sum(item.unit_price * item.quantity for item in self.items), 2)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_item(self, product_id) -> CartItem | None:
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def quantity_of(self, product_id) -> int:
        item = self.find_item(product_id)
        return item.quantity if item else 0

    def snapshot(self) -> list[dict]:
        """Items as plain dicts, in the shape the Ordering service expects."""
        return [
            {
                "product_id": str(item.product_id),
                "product_name": item.product_name,
                "unit_price": item.unit_price,
                "quantity": item.quantity,
            }
            for item in self.items
        ]

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, product_name, unit_price, quantity):
        """Add a product, or increase its quantity if it is already in the cart."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be greater than zero."]})

        now = datetime.now(UTC)
        existing = self.find_item(product_id)
        if existing:
            existing.quantity += quantity
        else:
            self.add_items(
                CartItem(
                    product_id=product_id,
                    product_name=product_name,
                    unit_price=unit_price,
                    quantity=quantity,
                    added_at=now,
                )
            )
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                product_name=product_name,
                unit_price=unit_price,
                quantity=quantity,
            )
        )

    def change_item_quantity(self, product_id, new_quantity):
        """Set an item's quantity; zero removes the item."""
        if new_quantity < 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero."]})

        item = self.find_item(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Item not found in cart"]})

        if new_quantity == 0:
            self.remove_item(product_id)
            return

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityChanged(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Item not found in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))
