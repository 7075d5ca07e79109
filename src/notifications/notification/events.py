"""Domain events for the Notification aggregate."""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, String


@notifications.event(part_of="Notification")
class NotificationCreated:
    __version__ = 1

    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)
    notification_type = String(required=True)
    title = String(required=True)
    created_at = DateTime(required=True)
