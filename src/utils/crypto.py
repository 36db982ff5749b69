import binascii
import hashlib
import hmac


DIGEST_SIZE = hashlib.sha256().digest_size


def to_bytes(value: bytes | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def build_signed_payload(timestamp: str, body: bytes | str) -> bytes:
    """Build the exact byte string the provider signs: ``{timestamp}.{body}``."""
    return timestamp.encode("utf-8") + b"." + to_bytes(body)


def compute_digest(secret: bytes, timestamp: str, body: bytes | str) -> bytes:
    """Raw HMAC-SHA256 digest of the signed payload."""
    return hmac.new(secret, build_signed_payload(timestamp, body), hashlib.sha256).digest()


def generate_signature(secret: bytes | str, timestamp: str, body: bytes | str) -> str:
    """Hex-encoded HMAC-SHA256 signature, as carried in a ``v1`` entry."""
    return compute_digest(to_bytes(secret), timestamp, body).hex()


def decode_hex(value: str) -> bytes | None:
    """Decode a hex string, returning None on any malformed input."""
    try:
        return binascii.unhexlify(value)
    except ValueError:
        # binascii.Error is a ValueError; non-ASCII str raises ValueError too
        return None


def digests_match(expected: bytes, provided: bytes) -> bool:
    """Compare two digests without leaking the position of a mismatch."""
    if len(expected) != len(provided):
        return False
    return hmac.compare_digest(expected, provided)
