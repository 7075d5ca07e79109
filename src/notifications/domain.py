"""Notifications bounded context — user-facing messages about orders.

A downstream collaborator of the fulfillment saga: it turns Ordering and
Fulfillment events into stored notifications a user can list. Delivery of
those notifications to a live client is outside this service.
"""

import structlog
from protean.domain import Domain

notifications = Domain(name="notifications")

logger = structlog.get_logger(__name__)
