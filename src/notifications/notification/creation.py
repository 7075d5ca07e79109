"""Notification creation — command, handler and the template-driven helper."""

import json

import structlog
from notifications.domain import notifications
from notifications.notification.notification import Notification
from notifications.templates import get_template
from protean import handle
from protean.fields import DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)


@notifications.command(part_of="Notification")
class CreateNotification:
    user_id = Identifier(required=True)
    notification_type = String(required=True, max_length=50)
    title = String(required=True, max_length=255)
    message = Text(required=True)
    source_event_type = String(max_length=255)
    created_at = DateTime()


@notifications.command_handler(part_of=Notification)
class CreateNotificationHandler:
    @handle(CreateNotification)
    def create_notification(self, command):
        notification = Notification.create(
            user_id=command.user_id,
            notification_type=command.notification_type,
            title=command.title,
            message=command.message,
            source_event_type=command.source_event_type,
            created_at=command.created_at,
        )
        current_domain.repository_for(Notification).add(notification)
        return str(notification.id)


def notify_user(user_id: str, notification_type: str, context: dict, source_event_type: str, created_at=None) -> str:
    """Render the template for ``notification_type`` and store it for the user."""
    content = get_template(notification_type).render(context)
    notification_id = current_domain.process(
        CreateNotification(
            user_id=user_id,
            notification_type=notification_type,
            title=content["title"],
            message=content["message"],
            source_event_type=source_event_type,
            created_at=created_at,
        ),
        asynchronous=False,
    )
    logger.info(
        "Notification created",
        notification_id=notification_id,
        user_id=user_id,
        notification_type=notification_type,
        context=json.dumps(context),
    )
    return notification_id
