"""Delivery service adapter factory.

Provides get_delivery_service() / set_delivery_service() to swap implementations:
- FakeDeliveryService for development and testing (default)
- HttpDeliveryService when DELIVERY_SERVICE_ADAPTER=http, calling DELIVERY_SERVICE_URL
"""

import os

from ordering.delivery_service.port import DeliveryServicePort

_current_service: DeliveryServicePort | None = None


def get_delivery_service() -> DeliveryServicePort:
    """Return the configured delivery service adapter (singleton)."""
    global _current_service
    if _current_service is None:
        adapter = os.environ.get("DELIVERY_SERVICE_ADAPTER", "fake")
        if adapter == "fake":
            from ordering.delivery_service.fake_adapter import FakeDeliveryService

            _current_service = FakeDeliveryService()
        elif adapter == "http":
            from ordering.delivery_service.http_adapter import HttpDeliveryService

            _current_service = HttpDeliveryService(os.environ.get("DELIVERY_SERVICE_URL", "http://localhost:8000"))
        else:
            raise ValueError(f"Unknown delivery service adapter: {adapter}")
    return _current_service


def set_delivery_service(service: DeliveryServicePort) -> None:
    """Override the active adapter (useful for tests)."""
    global _current_service
    _current_service = service


def reset_delivery_service() -> None:
    """Reset the singleton so the next call re-reads the environment."""
    global _current_service
    _current_service = None
