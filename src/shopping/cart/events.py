"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from shopping.domain import shopping


@shopping.event(part_of="Cart")
class CartCreated:
    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    created_at = DateTime(required=True)


@shopping.event(part_of="Cart")
class CartItemAdded:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(required=True)
    unit_price = Float(required=True)
    quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartItemQuantityChanged:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)

