"""Payments bounded context — Checkout sessions with the payment provider.

Creates a hosted checkout session for an order through the gateway port,
records it (CQRS), and turns the provider's completion webhook into the
OrderSuccessfullyPaid event the Ordering domain waits for.
"""

import structlog
from protean.domain import Domain

payments = Domain(name="payments")

logger = structlog.get_logger(__name__)
