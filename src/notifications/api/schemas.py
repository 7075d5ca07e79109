"""Pydantic API schemas for the Notifications domain."""

from datetime import datetime

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    notification_id: str
    user_id: str
    notification_type: str
    title: str
    message: str
    created_at: datetime | None = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
