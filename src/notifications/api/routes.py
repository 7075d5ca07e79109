"""FastAPI routes for the Notifications domain.

Read-only: notifications are only ever created by event handlers.
"""

from fastapi import APIRouter
from notifications.api.schemas import NotificationListResponse, NotificationResponse
from notifications.notification.notification import Notification
from protean.utils.globals import current_domain

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/{user_id}", response_model=NotificationListResponse)
async def get_user_notifications(user_id: str) -> NotificationListResponse:
    """A user's notifications, newest first."""
    results = current_domain.repository_for(Notification).find_by_user(user_id)
    return NotificationListResponse(
        notifications=[
            NotificationResponse(
                notification_id=str(n.id),
                user_id=str(n.user_id),
                notification_type=n.notification_type,
                title=n.title,
                message=n.message,
                created_at=n.created_at,
            )
            for n in results
        ]
    )
