"""Courier aggregate — the carriers a delivery can be assigned to.

Deliveries reference a courier by identifier only; a courier is never
loaded through a delivery.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from fulfillment.domain import fulfillment


@fulfillment.aggregate
class Courier:
    name = String(required=True, max_length=100)
    email = String(max_length=254)
    phone_number = String(max_length=30)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name: str, email: str | None = None, phone_number: str | None = None):
        now = datetime.now(UTC)
        return cls(
            name=name,
            email=email,
            phone_number=phone_number,
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name: str, email: str | None = None, phone_number: str | None = None) -> None:
        """Replace the courier's contact details."""
        self.name = name
        self.email = email
        self.phone_number = phone_number
        self.updated_at = datetime.now(UTC)
