"""Order created template — sent when an order is placed from a cart."""

from notifications.notification.notification import NotificationType


class OrderCreatedTemplate:
    notification_type = NotificationType.ORDER_CREATED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        total_price = float(context.get("total_price") or 0.0)
        return {
            "title": "Order created",
            "message": f"Your order #{order_id} was successfully created. Total: {total_price:.2f} $.",
        }
