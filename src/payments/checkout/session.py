"""CheckoutSession aggregate (CQRS).

Records a hosted checkout session the gateway opened for an order.

State Machine:
    OPEN → COMPLETED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from payments.checkout.events import CheckoutSessionCreated, OrderSuccessfullyPaid
from payments.domain import payments


class CheckoutSessionStatus(Enum):
    OPEN = "Open"
    COMPLETED = "Completed"


@payments.aggregate
class CheckoutSession:
    order_id = Identifier(required=True)
    gateway_session_id = String(required=True, max_length=255)
    checkout_url = String(required=True, max_length=2048)
    amount_total = Float(required=True, min_value=0.0)
    currency = String(max_length=3, default="usd")
    status = String(
        choices=CheckoutSessionStatus,
        default=CheckoutSessionStatus.OPEN.value,
    )
    created_at = DateTime()
    completed_at = DateTime()

    @classmethod
    def open(cls, order_id, gateway_session_id, checkout_url, amount_total, currency="usd"):
        now = datetime.now(UTC)
        session = cls(
            order_id=order_id,
            gateway_session_id=gateway_session_id,
            checkout_url=checkout_url,
            amount_total=amount_total,
            currency=currency,
            status=CheckoutSessionStatus.OPEN.value,
            created_at=now,
        )
        session.raise_(
            CheckoutSessionCreated(
                checkout_session_id=str(session.id),
                order_id=str(order_id),
                gateway_session_id=gateway_session_id,
                amount_total=amount_total,
                created_at=now,
            )
        )
        return session

    @property
    def is_completed(self) -> bool:
        return self.status == CheckoutSessionStatus.COMPLETED.value

    def complete(self) -> None:
        """The customer paid on the hosted page."""
        if self.is_completed:
            raise ValidationError({"status": ["Checkout session is already completed"]})

        now = datetime.now(UTC)
        self.status = CheckoutSessionStatus.COMPLETED.value
        self.completed_at = now
        self.raise_(
            OrderSuccessfullyPaid(
                order_id=str(self.order_id),
                checkout_session_id=str(self.id),
                gateway_session_id=self.gateway_session_id,
                paid_at=now,
            )
        )
