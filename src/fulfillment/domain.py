"""Fulfillment bounded context — Delivery of placed orders.

Owns the Delivery aggregate and its lifecycle (Pending → InProgress →
Delivered, or Canceled on the way). Uses CQRS: deliveries are created once
by the Ordering domain's checkout chain and afterwards only change status.
"""

import structlog
from protean.domain import Domain

fulfillment = Domain(name="fulfillment")

logger = structlog.get_logger(__name__)
