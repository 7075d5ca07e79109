"""Integration tests for the Notifications API via TestClient."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from notifications.api.routes import router
from notifications.notification.creation import notify_user
from notifications.notification.notification import NotificationType


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


class TestUserNotifications:
    def test_lists_users_notifications(self, client):
        notify_user(
            user_id="user-api",
            notification_type=NotificationType.ORDER_CREATED.value,
            context={"order_id": "ord-001", "total_price": 10.0},
            source_event_type="Ordering.OrderCreated.v1",
        )
        notify_user(
            user_id="user-api",
            notification_type=NotificationType.ORDER_STATUS_CHANGED.value,
            context={"order_id": "ord-001", "new_status": "Paid"},
            source_event_type="Ordering.OrderStatusChanged.v1",
        )

        response = client.get("/notifications/user-api")

        assert response.status_code == 200
        titles = [n["title"] for n in response.json()["notifications"]]
        assert sorted(titles) == ["Order created", "Order status changed"]

    def test_newest_first(self, client):
        now = datetime.now(UTC)
        for offset, status in ((2, "Paid"), (1, "Accepted"), (0, "Shipped")):
            notify_user(
                user_id="user-order",
                notification_type=NotificationType.ORDER_STATUS_CHANGED.value,
                context={"order_id": "ord-001", "new_status": status},
                source_event_type="Ordering.OrderStatusChanged.v1",
                created_at=now - timedelta(minutes=offset),
            )

        messages = [n["message"] for n in client.get("/notifications/user-order").json()["notifications"]]
        assert [m.rsplit(" ", 1)[-1] for m in messages] == ["Shipped.", "Accepted.", "Paid."]

    def test_user_without_notifications(self, client):
        assert client.get("/notifications/user-nobody").json() == {"notifications": []}
