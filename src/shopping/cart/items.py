"""Cart item management — commands, handler and the stock-checked entry points.

Adding an item or raising its quantity is checked against the product
catalog first, outside of any unit of work; the command then records the
change with the product name and price the catalog reported.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from shopping.cart.cart import Cart
from shopping.cart.management import get_or_create_cart
from shopping.catalogue import get_catalogue
from shopping.domain import shopping

logger = structlog.get_logger(__name__)


@shopping.command(part_of="Cart")
class AddCartItem:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True)
    quantity = Integer(required=True, min_value=1)


@shopping.command(part_of="Cart")
class ChangeCartItemQuantity:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)  # 0 removes the item


@shopping.command(part_of="Cart")
class RemoveCartItem:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopping.command_handler(part_of=Cart)
class CartItemsHandler:
    @handle(AddCartItem)
    def add_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.add_item(
            product_id=command.product_id,
            product_name=command.product_name,
            unit_price=command.unit_price,
            quantity=command.quantity,
        )
        repo.add(cart)

    @handle(ChangeCartItemQuantity)
    def change_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.change_item_quantity(command.product_id, command.quantity)
        repo.add(cart)

    @handle(RemoveCartItem)
    def remove_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.remove_item(command.product_id)
        repo.add(cart)


def _product_in_stock(product_id: str, quantity: int):
    product = get_catalogue().get_product(product_id)
    if product is None:
        logger.warning("Product not found", product_id=product_id)
        raise ValidationError({"product_id": ["Product not found"]})
    if product.quantity_in_stock < quantity:
        logger.warning(
            "Not enough stock for product",
            product_id=product_id,
            requested=quantity,
            in_stock=product.quantity_in_stock,
        )
        raise ValidationError({"quantity": [f"Only {product.quantity_in_stock} of {product.title} in stock"]})
    return product


def add_item_to_cart(user_id: str, product_id: str, quantity: int) -> Cart:
    """Add ``quantity`` of a product to the user's cart, creating the cart if needed."""
    if quantity < 1:
        raise ValidationError({"quantity": ["Quantity must be greater than zero."]})

    cart = get_or_create_cart(user_id)
    product = _product_in_stock(product_id, cart.quantity_of(product_id) + quantity)
    current_domain.process(
        AddCartItem(
            cart_id=str(cart.id),
            product_id=product_id,
            product_name=product.title,
            unit_price=product.price,
            quantity=quantity,
        ),
        asynchronous=False,
    )
    logger.info("Item added to cart", cart_id=str(cart.id), product_id=product_id, quantity=quantity)
    return current_domain.repository_for(Cart).get(str(cart.id))


def change_item_quantity(user_id: str, product_id: str, quantity: int) -> Cart:
    """Set an item's quantity; zero removes it, a negative quantity is refused."""
    if quantity < 0:
        raise ValidationError({"quantity": ["Quantity must be greater than zero."]})

    cart = get_or_create_cart(user_id)
    if cart.find_item(product_id) is None:
        raise ValidationError({"product_id": ["Item not found in cart"]})
    if quantity > 0:
        _product_in_stock(product_id, quantity)

    current_domain.process(
        ChangeCartItemQuantity(cart_id=str(cart.id), product_id=product_id, quantity=quantity),
        asynchronous=False,
    )
    return current_domain.repository_for(Cart).get(str(cart.id))


def remove_item_from_cart(user_id: str, product_id: str) -> Cart:
    cart = get_or_create_cart(user_id)
    current_domain.process(RemoveCartItem(cart_id=str(cart.id), product_id=product_id), asynchronous=False)
    return current_domain.repository_for(Cart).get(str(cart.id))
