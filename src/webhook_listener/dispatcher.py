import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from requests.structures import CaseInsensitiveDict

from src.config import ListenerSettings
from src.models.event import (
    CHECKOUT_SESSION_COMPLETED,
    CUSTOMER_SUBSCRIPTION_DELETED,
    CheckoutCompleted,
    ClassifiedEvent,
    ParsedEvent,
    SubscriptionDeleted,
    Unknown,
)
from src.webhook_listener.errors import AuthenticationError, MalformedPayloadError
from src.webhook_listener.verifier import SignatureVerifier

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "Stripe-Signature"

EVENT_CLASSES: dict[str, type[ClassifiedEvent]] = {
    CHECKOUT_SESSION_COMPLETED: CheckoutCompleted,
    CUSTOMER_SUBSCRIPTION_DELETED: SubscriptionDeleted,
}

Headers = Mapping[str, str | bytes] | Iterable[tuple[str, str | bytes]]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


class _JSONObject(dict):
    """A decoded JSON object that remembers which keys appeared more than once."""

    def __init__(self, pairs: list[tuple[str, Any]]):
        super().__init__(pairs)
        self.duplicates: set[str] = set()
        if len(self) < len(pairs):
            seen: set[str] = set()
            for key, _ in pairs:
                if key in seen:
                    self.duplicates.add(key)
                seen.add(key)


def _reject_duplicates(obj: Any, fields: tuple[str, ...]) -> None:
    repeated = sorted(set(fields) & getattr(obj, "duplicates", set()))
    if repeated:
        raise MalformedPayloadError(f"duplicate fields: {repeated}")


def parse_event(raw_body: bytes | str) -> ParsedEvent:
    """Deserialize a webhook body into a ParsedEvent.

    Raises MalformedPayloadError for invalid JSON or a missing/ill-typed
    ``id``, ``type`` or ``data.object``.
    """
    try:
        text = raw_body.decode("utf-8") if isinstance(raw_body, (bytes, bytearray)) else raw_body
        document = json.loads(text, parse_constant=_reject_constant, object_pairs_hook=_JSONObject)
    except (ValueError, RecursionError) as exc:
        raise MalformedPayloadError("invalid JSON body") from exc

    if not isinstance(document, dict):
        raise MalformedPayloadError("event must be a JSON object")
    _reject_duplicates(document, ("id", "type", "data"))

    missing = [f for f in ("id", "type", "data") if f not in document]
    if missing:
        raise MalformedPayloadError(f"missing fields: {missing}")

    event_id = document["id"]
    event_type = document["type"]
    data = document["data"]
    if not isinstance(event_id, str):
        raise MalformedPayloadError("id must be a string")
    if not isinstance(event_type, str):
        raise MalformedPayloadError("type must be a string")
    if not isinstance(data, dict):
        raise MalformedPayloadError("data must be an object")
    _reject_duplicates(data, ("object",))
    if "object" not in data:
        raise MalformedPayloadError("missing fields: ['data.object']")

    return ParsedEvent(id=event_id, type=event_type, data_object=data["object"])


def classify(event: ParsedEvent) -> ClassifiedEvent:
    """Map an event type to its typed variant; unrecognized types become Unknown."""
    event_class = EVENT_CLASSES.get(event.type, Unknown)
    return event_class(payload=event.data_object, event_id=event.id, event_type=event.type)


def _header_value(headers: Headers, name: str) -> str | None:
    value = CaseInsensitiveDict(headers).get(name)
    if isinstance(value, (bytes, bytearray)):
        try:
            return value.decode("ascii")
        except UnicodeDecodeError:
            return None
    if value is not None and not isinstance(value, str):
        return None
    return value


class EventDispatcher:
    """Authenticates a webhook request and turns its body into a typed event."""

    def __init__(self, secret: bytes | str, tolerance: float | None = None):
        self.verifier = SignatureVerifier(secret, tolerance=tolerance)

    @classmethod
    def from_settings(cls, settings: ListenerSettings) -> "EventDispatcher":
        return cls(settings.secret, tolerance=settings.tolerance)

    def process(self, headers: Headers, raw_body: bytes | str) -> ClassifiedEvent:
        """Verify the request, then parse and classify its body.

        Raises:
            AuthenticationError: the signature header is missing or invalid.
                The body is not parsed in that case.
            MalformedPayloadError: the body is authentic but not a valid event.
        """
        signature = _header_value(headers, SIGNATURE_HEADER)
        if not self.verifier.verify(signature, raw_body):
            raise AuthenticationError()

        event = classify(parse_event(raw_body))
        if isinstance(event, Unknown):
            logger.debug("Unrecognized event type %s for event %s", event.event_type, event.event_id)
        return event
