from dataclasses import dataclass


@dataclass(frozen=True)
class SignatureHeader:
    timestamp: str  # verbatim, not converted to an int
    signature: str  # hex from the first v1 entry
