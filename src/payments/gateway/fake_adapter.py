"""Configurable fake payment gateway for development and testing.

This adapter simulates a hosted checkout provider without any external
calls. It can be configured at runtime to succeed or fail, making it
useful for:
- Manual API testing via /payments/gateway/configure
- Automated tests with predictable outcomes
- Development without real gateway credentials
"""

from uuid import uuid4

from payments.gateway.port import CheckoutLineItem, CheckoutSessionResult, PaymentGateway

FAKE_CHECKOUT_BASE_URL = "https://checkout.fake-gateway.test/pay"


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Checkout session unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Checkout session unavailable") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_checkout_session(
        self,
        client_reference_id: str,
        line_items: list[CheckoutLineItem],
    ) -> CheckoutSessionResult:
        call = {
            "method": "create_checkout_session",
            "client_reference_id": client_reference_id,
            "line_items": list(line_items),
        }
        self.calls.append(call)

        if self.should_succeed:
            session_id = f"cs_fake_{uuid4().hex[:16]}"
            return CheckoutSessionResult(
                success=True,
                session_id=session_id,
                checkout_url=f"{FAKE_CHECKOUT_BASE_URL}/{session_id}",
            )
        return CheckoutSessionResult(
            success=False,
            failure_reason=self.failure_reason,
        )

    def verify_webhook_signature(self, payload: str, signature: str) -> bool:  # noqa: ARG002
        return signature == "test-signature"
