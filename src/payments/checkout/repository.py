"""Repository for the CheckoutSession aggregate."""

from payments.checkout.session import CheckoutSession, CheckoutSessionStatus
from payments.domain import payments


@payments.repository(part_of=CheckoutSession)
class CheckoutSessionRepository:
    def find_by_gateway_session(self, gateway_session_id: str) -> CheckoutSession | None:
        return self._dao.query.filter(gateway_session_id=gateway_session_id).all().first

    def find_open_for_order(self, order_id: str) -> CheckoutSession | None:
        return (
            self._dao.query.filter(
                order_id=str(order_id),
                status=CheckoutSessionStatus.OPEN.value,
            )
            .all()
            .first
        )
