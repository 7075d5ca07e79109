"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeGateway for development and testing (default)
- StripeGateway when PAYMENT_GATEWAY=stripe (stub), configured from
  STRIPE_API_KEY, STRIPE_WEBHOOK_SECRET, CHECKOUT_SUCCESS_URL and
  CHECKOUT_CANCEL_URL
"""

import os

from payments.gateway.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def _build_gateway() -> PaymentGateway:
    name = os.environ.get("PAYMENT_GATEWAY", "fake")
    if name == "fake":
        from payments.gateway.fake_adapter import FakeGateway

        return FakeGateway()
    if name == "stripe":
        from payments.gateway.stripe_adapter import StripeGateway

        return StripeGateway(
            api_key=os.environ["STRIPE_API_KEY"],
            webhook_secret=os.environ["STRIPE_WEBHOOK_SECRET"],
            success_url=os.environ.get("CHECKOUT_SUCCESS_URL", "http://localhost:3000/checkout/success"),
            cancel_url=os.environ.get("CHECKOUT_CANCEL_URL", "http://localhost:3000/checkout/cancel"),
        )
    raise ValueError(f"Unknown payment gateway: {name}")


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway (singleton)."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _build_gateway()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset the singleton so the next call re-reads the environment."""
    global _current_gateway
    _current_gateway = None
