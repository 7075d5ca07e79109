"""Ordering bounded context — Order lifecycle and the checkout chain.

Owns the Order aggregate (CQRS), creates the order, its delivery and its
payment session when a cart is checked out, and advances the order's
public status from administrative commands and inbound Payments and
Fulfillment events.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
