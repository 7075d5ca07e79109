"""Order aggregate (CQRS) — the core of the ordering domain.

An Order is created once from a checked-out cart and afterwards only its
status, internal status, note and delivery link change. Line items are a
snapshot taken at checkout: catalogue price changes never reach them, and
the total price is derived from them at creation.

State Machine:
    DRAFT → CREATED → PAID → ACCEPTED → SHIPPED → COMPLETED
    CREATED → CANCELLED
    PAID → REJECTED

CREATED → PAID is only driven by the Payments domain's OrderSuccessfullyPaid
event, and SHIPPED → COMPLETED only by Fulfillment's DeliveryDelivered event
once the delivery is confirmed as Delivered. Everything else is an
administrative command.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.events import OrderCreated, OrderInternalStatusChanged, OrderStatusChanged


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    DRAFT = "Draft"
    CREATED = "Created"
    PAID = "Paid"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class InternalOrderStatus(Enum):
    NORMAL = "Normal"
    DELIVERY_FAILED = "DeliveryFailed"


# Delivery status value that allows completion, as reported by Fulfillment
DELIVERY_DELIVERED = "Delivered"

_VALID_TRANSITIONS = {
    OrderStatus.DRAFT: {OrderStatus.CREATED},
    OrderStatus.CREATED: {OrderStatus.PAID, OrderStatus.CANCELLED},
    OrderStatus.PAID: {OrderStatus.ACCEPTED, OrderStatus.REJECTED},
    OrderStatus.ACCEPTED: {OrderStatus.SHIPPED},
    OrderStatus.SHIPPED: {OrderStatus.COMPLETED},
    OrderStatus.REJECTED: set(),  # Terminal
    OrderStatus.COMPLETED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

# Targets that only inbound events may reach
EVENT_DRIVEN_STATUSES = frozenset({OrderStatus.PAID, OrderStatus.COMPLETED})


def _items_total(items) -> float:
    return round(sum(item.unit_price * item.quantity for item in items), 2)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A line item captured from the cart at checkout."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


# ---------------------------------------------------------------------------
# Aggregate Root (CQRS)
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    total_price = Float(required=True, min_value=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.CREATED.value,
    )
    internal_status = String(
        choices=InternalOrderStatus,
        default=InternalOrderStatus.NORMAL.value,
    )
    delivery_id = Identifier()
    note = Text()
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_price_matches_items(self):
        if self.items and abs(self.total_price - _items_total(self.items)) > 0.005:
            raise ValidationError({"total_price": ["Total price must equal the sum of the order items"]})

    @invariant.post
    def note_within_limit(self):
        if self.note and len(self.note) > 1000:
            raise ValidationError({"note": ["Note cannot exceed 1000 characters"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, items_data, note=None):
        """Create a new order from the items of a checked-out cart.

        Args:
            user_id: The user placing the order.
            items_data: List of dicts with product_id, product_name,
                        unit_price, quantity.
            note: Optional free-text note from the user.
        """
        if not items_data:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        items = [OrderItem(**item) for item in items_data]
        order = cls(
            user_id=user_id,
            total_price=_items_total(items),
            status=OrderStatus.CREATED.value,
            internal_status=InternalOrderStatus.NORMAL.value,
            note=note,
            items=items,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                user_id=str(user_id),
                total_price=order.total_price,
                note=note or "",
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transition helpers
    # -------------------------------------------------------------------
    def can_transition_to(self, target_status: OrderStatus, delivery_status: str | None = None) -> bool:
        """Whether ``target_status`` is reachable right now.

        Completion also needs the linked delivery to be Delivered; an unknown
        delivery (``None``) refuses it.
        """
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            return False
        if target_status == OrderStatus.COMPLETED:
            return delivery_status == DELIVERY_DELIVERED
        return True

    def _assert_can_transition(self, target_status: OrderStatus, delivery_status: str | None = None) -> None:
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})
        if target_status == OrderStatus.COMPLETED and delivery_status != DELIVERY_DELIVERED:
            raise ValidationError(
                {"status": [f"Cannot complete order, delivery status is {delivery_status or 'unknown'}"]}
            )

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def change_status(self, target_status: OrderStatus, delivery_status: str | None = None) -> None:
        """Move the order to ``target_status`` and announce it."""
        self._assert_can_transition(target_status, delivery_status)
        previous = self.status
        now = datetime.now(UTC)
        self.status = target_status.value
        self.updated_at = now
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                user_id=str(self.user_id),
                previous_status=previous,
                new_status=target_status.value,
                updated_at=now,
            )
        )

    def mark_paid(self) -> None:
        self.change_status(OrderStatus.PAID)

    def complete(self, delivery_status: str | None) -> None:
        self.change_status(OrderStatus.COMPLETED, delivery_status=delivery_status)

    # -------------------------------------------------------------------
    # Operational attributes (no lifecycle involvement)
    # -------------------------------------------------------------------
    def attach_delivery(self, delivery_id: str) -> None:
        self.delivery_id = delivery_id
        self.updated_at = datetime.now(UTC)

    def change_internal_status(self, internal_status: InternalOrderStatus) -> None:
        now = datetime.now(UTC)
        self.internal_status = internal_status.value
        self.updated_at = now
        self.raise_(
            OrderInternalStatusChanged(
                order_id=str(self.id),
                internal_status=internal_status.value,
                updated_at=now,
            )
        )

    def flag_delivery_failed(self) -> None:
        self.change_internal_status(InternalOrderStatus.DELIVERY_FAILED)

    def update_note(self, note: str | None) -> None:
        self.note = note
        self.updated_at = datetime.now(UTC)
