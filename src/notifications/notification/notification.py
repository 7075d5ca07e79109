"""Notification aggregate (CQRS) — one message for one user.

Notifications are created reactively from cross-domain events and are
never modified afterwards.
"""

from datetime import UTC, datetime
from enum import Enum

from notifications.domain import notifications
from notifications.notification.events import NotificationCreated
from protean.fields import DateTime, Identifier, String, Text


class NotificationType(Enum):
    GENERAL = "General"
    ORDER_CREATED = "OrderCreated"
    ORDER_STATUS_CHANGED = "OrderStatusChanged"
    DELIVERY_STATUS_CHANGED = "DeliveryStatusChanged"


@notifications.aggregate
class Notification:
    user_id = Identifier(required=True)
    notification_type = String(
        required=True,
        choices=NotificationType,
        default=NotificationType.GENERAL.value,
    )
    title = String(required=True, max_length=255)
    message = Text(required=True)
    source_event_type = String(max_length=255)
    created_at = DateTime()

    @classmethod
    def create(cls, user_id, notification_type, title, message, source_event_type=None, created_at=None):
        created_at = created_at or datetime.now(UTC)
        notification = cls(
            user_id=user_id,
            notification_type=notification_type,
            title=title,
            message=message,
            source_event_type=source_event_type,
            created_at=created_at,
        )
        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                user_id=str(user_id),
                notification_type=notification_type,
                title=title,
                created_at=created_at,
            )
        )
        return notification
