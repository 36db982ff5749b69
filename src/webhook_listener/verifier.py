import time
from typing import Callable

from src.models.signature import SignatureHeader
from src.utils.crypto import DIGEST_SIZE, compute_digest, decode_hex, digests_match, to_bytes


TIMESTAMP_KEY = "t"
SIGNATURE_KEY = "v1"


def parse_signature_header(header: str) -> SignatureHeader | None:
    """Extract the timestamp and signature from a ``Stripe-Signature`` value.

    The first ``t`` and the first ``v1`` win. Later occurrences are ignored,
    as are unknown keys and segments without ``=``. Returns None when either
    field is missing.
    """
    timestamp = None
    signature = None

    for segment in header.split(","):
        key, sep, value = segment.partition("=")
        if not sep or not key:
            continue
        if key == TIMESTAMP_KEY and timestamp is None:
            timestamp = value
        elif key == SIGNATURE_KEY and signature is None:
            signature = value

    if timestamp is None or signature is None:
        return None
    return SignatureHeader(timestamp=timestamp, signature=signature)


class SignatureVerifier:
    """Verifies ``Stripe-Signature`` headers against a shared secret.

    Holds no mutable state, so one instance can be shared across threads.
    """

    def __init__(
        self,
        secret: bytes | str,
        tolerance: float | None = None,
        clock: Callable[[], float] = time.time,
    ):
        if not isinstance(secret, (bytes, str)):
            raise TypeError("secret must be bytes or str")
        self._secret = to_bytes(secret)
        self._tolerance = tolerance
        self._clock = clock

    def __repr__(self) -> str:
        return f"SignatureVerifier(tolerance={self._tolerance!r})"

    def verify(self, header_value: str | None, raw_body: bytes | str) -> bool:
        """Return True only if the header carries a valid signature for raw_body."""
        if header_value is None:
            return False

        header = parse_signature_header(header_value)
        if header is None:
            return False

        if self._tolerance is not None and not self._within_tolerance(header.timestamp):
            return False

        try:
            expected = compute_digest(self._secret, header.timestamp, raw_body)
        except UnicodeEncodeError:
            # lone surrogates in a str body or timestamp cannot be signed bytes
            return False

        provided = decode_hex(header.signature)
        if provided is None or len(provided) != DIGEST_SIZE:
            return False

        return digests_match(expected, provided)

    def _within_tolerance(self, timestamp: str) -> bool:
        if not timestamp.isascii() or not timestamp.isdigit():
            return False
        try:
            return abs(self._clock() - int(timestamp)) <= self._tolerance
        except (ValueError, OverflowError):
            # past the int digit limit, or too large to mix with a float clock
            return False


def verify_signature(header_value: str | None, raw_body: bytes | str, secret: bytes | str) -> bool:
    """Verify a ``Stripe-Signature`` header value against a raw body and secret."""
    return SignatureVerifier(secret).verify(header_value, raw_body)
