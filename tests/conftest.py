import pytest

from src.merchant_receiver.handler import WebhookReceiver
from src.observability.metrics import MetricsCollector
from src.utils.factories import SignedRequestFactory, StripeEventFactory
from src.webhook_listener.dispatcher import EventDispatcher
from src.webhook_listener.signer import WebhookSigner
from src.webhook_listener.verifier import SignatureVerifier


WEBHOOK_SECRET = "whsec_test-secret-key-for-hmac"


@pytest.fixture
def webhook_secret():
    return WEBHOOK_SECRET


@pytest.fixture
def signer():
    return WebhookSigner(WEBHOOK_SECRET)


@pytest.fixture
def verifier():
    return SignatureVerifier(WEBHOOK_SECRET)


@pytest.fixture
def dispatcher():
    return EventDispatcher(WEBHOOK_SECRET)


@pytest.fixture
def metrics():
    return MetricsCollector(window_seconds=300)


@pytest.fixture
def receiver(dispatcher, metrics):
    return WebhookReceiver(dispatcher=dispatcher, metrics=metrics)


@pytest.fixture
def event_factory():
    return StripeEventFactory


@pytest.fixture
def request_factory():
    return SignedRequestFactory
