"""Order service adapter factory.

Provides get_order_service() / set_order_service() to swap implementations:
- FakeOrderService for development and testing (default)
- HttpOrderService when ORDER_SERVICE_ADAPTER=http, calling ORDER_SERVICE_URL
"""

import os

from shopping.order_service.port import OrderServicePort

_current_service: OrderServicePort | None = None


def get_order_service() -> OrderServicePort:
    """Return the configured order service adapter (singleton)."""
    global _current_service
    if _current_service is None:
        adapter = os.environ.get("ORDER_SERVICE_ADAPTER", "fake")
        if adapter == "fake":
            from shopping.order_service.fake_adapter import FakeOrderService

            _current_service = FakeOrderService()
        elif adapter == "http":
            from shopping.order_service.http_adapter import HttpOrderService

            _current_service = HttpOrderService(
                os.environ.get("ORDER_SERVICE_URL", "http://localhost:8000"),
                timeout=float(os.environ.get("CHECKOUT_TIMEOUT_SECONDS", "30")),
            )
        else:
            raise ValueError(f"Unknown order service adapter: {adapter}")
    return _current_service


def set_order_service(service: OrderServicePort) -> None:
    """Override the active adapter (useful for tests)."""
    global _current_service
    _current_service = service


def reset_order_service() -> None:
    """Reset the singleton so the next call re-reads the environment."""
    global _current_service
    _current_service = None
