import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from src.models.event import ClassifiedEvent
from src.observability.metrics import MetricsCollector, Outcome
from src.webhook_listener.dispatcher import EventDispatcher, Headers
from src.webhook_listener.errors import AuthenticationError, MalformedPayloadError

logger = logging.getLogger(__name__)

Handler = Callable[[ClassifiedEvent], Any]


@dataclass(frozen=True)
class WebhookResponse:
    status_code: int
    body: str

    def json(self) -> dict:
        return json.loads(self.body)


def _respond(code: int, payload: dict) -> WebhookResponse:
    return WebhookResponse(status_code=code, body=json.dumps(payload))


class WebhookReceiver:
    """Turns dispatcher outcomes into HTTP-style responses for a host framework.

    Handlers are registered per event class; an event with no handler is
    still acknowledged so the provider does not redeliver it.
    """

    def __init__(self, dispatcher: EventDispatcher, metrics: MetricsCollector | None = None):
        self.dispatcher = dispatcher
        self.metrics = metrics
        self._handlers: dict[type[ClassifiedEvent], Handler] = {}

    def on(self, event_class: type[ClassifiedEvent]) -> Callable[[Handler], Handler]:
        """Register a handler for an event class (decorator)."""
        def decorator(fn: Handler) -> Handler:
            self._handlers[event_class] = fn
            return fn
        return decorator

    def handle(self, headers: Headers, raw_body: bytes | str) -> WebhookResponse:
        try:
            event = self.dispatcher.process(headers, raw_body)
        except AuthenticationError:
            logger.warning("Rejected webhook: signature verification failed")
            self._record(Outcome.AUTH_FAILED)
            return _respond(401, {"error": "invalid signature"})
        except MalformedPayloadError as e:
            logger.warning("Rejected webhook: %s", e)
            self._record(Outcome.MALFORMED)
            return _respond(400, {"error": str(e)})

        handler = self._handlers.get(type(event))
        if handler is not None:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler failed for event %s (%s)", event.event_id, event.event_type)
                self._record(Outcome.HANDLER_FAILED)
                return _respond(500, {"error": "handler failed"})

        logger.info("Accepted webhook %s (%s)", event.event_id, event.event_type)
        self._record(Outcome.ACCEPTED)
        return _respond(200, {"status": "ok"})

    def _record(self, outcome: Outcome) -> None:
        if self.metrics is not None:
            self.metrics.record(outcome)
