"""Repository for the Cart aggregate."""

from shopping.cart.cart import Cart
from shopping.domain import shopping


@shopping.repository(part_of=Cart)
class CartRepository:
    def find_by_user(self, user_id: str) -> Cart | None:
        return self._dao.query.filter(user_id=str(user_id)).all().first
