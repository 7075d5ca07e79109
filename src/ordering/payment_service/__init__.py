"""Payment service adapter factory.

Provides get_payment_service() / set_payment_service() to swap implementations:
- FakePaymentService for development and testing (default)
- HttpPaymentService when PAYMENT_SERVICE_ADAPTER=http, calling PAYMENT_SERVICE_URL
"""

import os

from ordering.payment_service.port import PaymentServicePort

_current_service: PaymentServicePort | None = None


def get_payment_service() -> PaymentServicePort:
    """Return the configured payment service adapter (singleton)."""
    global _current_service
    if _current_service is None:
        adapter = os.environ.get("PAYMENT_SERVICE_ADAPTER", "fake")
        if adapter == "fake":
            from ordering.payment_service.fake_adapter import FakePaymentService

            _current_service = FakePaymentService()
        elif adapter == "http":
            from ordering.payment_service.http_adapter import HttpPaymentService

            _current_service = HttpPaymentService(os.environ.get("PAYMENT_SERVICE_URL", "http://localhost:8000"))
        else:
            raise ValueError(f"Unknown payment service adapter: {adapter}")
    return _current_service


def set_payment_service(service: PaymentServicePort) -> None:
    """Override the active adapter (useful for tests)."""
    global _current_service
    _current_service = service


def reset_payment_service() -> None:
    """Reset the singleton so the next call re-reads the environment."""
    global _current_service
    _current_service = None
