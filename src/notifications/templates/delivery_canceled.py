"""Delivery canceled template."""

from notifications.notification.notification import NotificationType


class DeliveryCanceledTemplate:
    notification_type = NotificationType.DELIVERY_STATUS_CHANGED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        return {
            "title": "Delivery canceled",
            "message": f"Your order #{order_id} delivery was canceled.",
        }
