"""Cart management — get-or-create and deletion."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from shopping.cart.cart import Cart
from shopping.domain import shopping

logger = structlog.get_logger(__name__)


@shopping.command(part_of="Cart")
class GetOrCreateCart:
    user_id = Identifier(required=True)


@shopping.command(part_of="Cart")
class DeleteCart:
    cart_id = Identifier(required=True)


@shopping.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(GetOrCreateCart)
    def get_or_create(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id)
        if cart is None:
            cart = Cart.create(user_id=command.user_id)
            repo.add(cart)
            logger.info("Cart created", cart_id=str(cart.id), user_id=str(command.user_id))
        return str(cart.id)

    @handle(DeleteCart)
    def delete_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        repo._dao.delete(cart)
        logger.info("Cart deleted", cart_id=str(command.cart_id), user_id=str(cart.user_id))


def find_cart(user_id: str) -> Cart | None:
    return current_domain.repository_for(Cart).find_by_user(user_id)


def get_or_create_cart(user_id: str) -> Cart:
    cart_id = current_domain.process(GetOrCreateCart(user_id=user_id), asynchronous=False)
    return current_domain.repository_for(Cart).get(cart_id)
