"""Stripe payment gateway adapter (production stub).

This is a placeholder for the real Stripe SDK integration.
In production, this would use the stripe-python SDK to:
- Create hosted Checkout Sessions (mode "payment", client_reference_id = order id)
- Verify webhook signatures using Stripe's signing secret
"""

from payments.gateway.port import CheckoutLineItem, CheckoutSessionResult, PaymentGateway


class StripeGateway(PaymentGateway):
    """Production Stripe gateway adapter. Not yet implemented."""

    def __init__(self, api_key: str, webhook_secret: str, success_url: str, cancel_url: str) -> None:
        self.api_key = api_key
        self.webhook_secret = webhook_secret
        self.success_url = success_url
        self.cancel_url = cancel_url

    def create_checkout_session(
        self,
        client_reference_id: str,
        line_items: list[CheckoutLineItem],
    ) -> CheckoutSessionResult:
        raise NotImplementedError(
            "StripeGateway.create_checkout_session() is not yet implemented. "
            "Use stripe.checkout.Session.create() here."
        )

    def verify_webhook_signature(self, payload: str, signature: str) -> bool:
        raise NotImplementedError(
            "StripeGateway.verify_webhook_signature() is not yet implemented. "
            "Use stripe.Webhook.construct_event() here."
        )
