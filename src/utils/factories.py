import json
import time
import uuid

from src.models.event import CHECKOUT_SESSION_COMPLETED, CUSTOMER_SUBSCRIPTION_DELETED
from src.webhook_listener.signer import WebhookSigner


class StripeEventFactory:
    """Factory for building Stripe-style webhook bodies with sensible defaults."""

    @staticmethod
    def create_body(event_type: str = CHECKOUT_SESSION_COMPLETED, **overrides) -> str:
        event_id = overrides.pop("event_id", f"evt_{uuid.uuid4().hex[:16]}")
        data_object = overrides.pop("data_object", None)
        if data_object is None:
            data_object = StripeEventFactory._build_object(event_type, **overrides)

        document = {
            "id": event_id,
            "object": "event",
            "type": event_type,
            "created": int(time.time()),
            "livemode": False,
            "data": {"object": data_object},
        }
        return json.dumps(document)

    @staticmethod
    def _build_object(event_type: str, **kwargs) -> dict:
        if event_type == CHECKOUT_SESSION_COMPLETED:
            return {
                "id": kwargs.get("session_id", f"cs_test_{uuid.uuid4().hex[:16]}"),
                "object": "checkout.session",
                "amount_total": kwargs.get("amount_total", 2000),
                "currency": kwargs.get("currency", "usd"),
                "customer": kwargs.get("customer", f"cus_{uuid.uuid4().hex[:14]}"),
                "payment_status": kwargs.get("payment_status", "paid"),
            }
        if event_type == CUSTOMER_SUBSCRIPTION_DELETED:
            return {
                "id": kwargs.get("subscription_id", f"sub_{uuid.uuid4().hex[:14]}"),
                "object": "subscription",
                "customer": kwargs.get("customer", f"cus_{uuid.uuid4().hex[:14]}"),
                "status": kwargs.get("status", "canceled"),
            }
        return {"id": kwargs.get("object_id", f"obj_{uuid.uuid4().hex[:14]}")}


class SignedRequestFactory:
    """Builds (headers, body) pairs signed the way the provider signs them."""

    @staticmethod
    def create(
        secret: str,
        body: str | None = None,
        timestamp: int | str | None = None,
        event_type: str = CHECKOUT_SESSION_COMPLETED,
        header_name: str = "Stripe-Signature",
    ) -> tuple[dict, str]:
        if body is None:
            body = StripeEventFactory.create_body(event_type)
        header = WebhookSigner(secret).sign(body, timestamp=timestamp)
        return {"Content-Type": "application/json", header_name: header}, body
