import time

from src.utils.crypto import generate_signature, to_bytes


class WebhookSigner:
    """Produces ``Stripe-Signature`` header values the way the provider does."""

    def __init__(self, secret: bytes | str):
        self._secret = to_bytes(secret)

    def sign(
        self,
        body: bytes | str,
        timestamp: int | str | None = None,
        extra_signatures: list[str] | None = None,
    ) -> str:
        """Return ``t=<timestamp>,v1=<hex>`` for the body.

        Args:
            body: The exact request body that will be sent.
            timestamp: Unix seconds; defaults to the current time.
            extra_signatures: Additional ``v1`` values appended after the real
                one, as the provider does while rotating secrets.
        """
        if timestamp is None:
            timestamp = int(time.time())
        ts = str(timestamp)
        parts = [f"t={ts}", f"v1={generate_signature(self._secret, ts, body)}"]
        for extra in extra_signatures or []:
            parts.append(f"v1={extra}")
        return ",".join(parts)
