"""Order status changed template — sent on every lifecycle step of an order."""

from notifications.notification.notification import NotificationType


class OrderStatusChangedTemplate:
    notification_type = NotificationType.ORDER_STATUS_CHANGED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        new_status = context.get("new_status", "Unknown")
        return {
            "title": "Order status changed",
            "message": f"The status of your order #{order_id} has been updated to {new_status}.",
        }
