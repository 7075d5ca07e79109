"""Shopping bounded context — Carts and the checkout saga.

Owns the Cart aggregate (one live cart per user) and the
CheckoutOrchestrator, which checks stock with the product catalog, asks
the Ordering service to create the order, its delivery and its payment
session, and deletes the cart once the attempt went past the stock check.
"""

import structlog
from protean.domain import Domain

shopping = Domain(name="shopping")

logger = structlog.get_logger(__name__)
