"""Template registry — maps NotificationType to template classes.

Each template renders a title and a message from event context data.
"""

from notifications.notification.notification import NotificationType
from notifications.templates.delivery_canceled import DeliveryCanceledTemplate
from notifications.templates.order_created import OrderCreatedTemplate
from notifications.templates.order_status_changed import OrderStatusChangedTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.ORDER_CREATED.value: OrderCreatedTemplate,
    NotificationType.ORDER_STATUS_CHANGED.value: OrderStatusChangedTemplate,
    NotificationType.DELIVERY_STATUS_CHANGED.value: DeliveryCanceledTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
