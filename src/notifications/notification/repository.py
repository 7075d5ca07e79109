"""Repository for the Notification aggregate."""

from notifications.domain import notifications
from notifications.notification.notification import Notification


@notifications.repository(part_of=Notification)
class NotificationRepository:
    def find_by_user(self, user_id: str) -> list[Notification]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items
