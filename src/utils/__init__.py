from .crypto import build_signed_payload, digests_match, generate_signature

__all__ = ["build_signed_payload", "digests_match", "generate_signature"]
