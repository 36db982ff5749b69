from .dispatcher import EventDispatcher, classify, parse_event
from .errors import AuthenticationError, MalformedPayloadError, WebhookError
from .signer import WebhookSigner
from .verifier import SignatureVerifier, parse_signature_header, verify_signature

__all__ = [
    "EventDispatcher", "classify", "parse_event",
    "AuthenticationError", "MalformedPayloadError", "WebhookError",
    "WebhookSigner",
    "SignatureVerifier", "parse_signature_header", "verify_signature",
]
