import os
from dataclasses import dataclass, field
from typing import Mapping


SECRET_ENV = "STRIPE_WEBHOOK_SECRET"
TOLERANCE_ENV = "STRIPE_WEBHOOK_TOLERANCE"


@dataclass(frozen=True)
class ListenerSettings:
    secret: str = field(repr=False)
    tolerance: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ListenerSettings":
        """Load settings from the environment.

        STRIPE_WEBHOOK_SECRET is required. STRIPE_WEBHOOK_TOLERANCE, when set,
        is the maximum allowed age of a signature in seconds.
        """
        env = os.environ if environ is None else environ
        secret = env.get(SECRET_ENV)
        if not secret:
            raise ValueError(f"{SECRET_ENV} is not set")

        tolerance = None
        raw_tolerance = env.get(TOLERANCE_ENV, "").strip()
        if raw_tolerance:
            try:
                tolerance = int(raw_tolerance)
            except ValueError:
                raise ValueError(f"{TOLERANCE_ENV} must be an integer, got {raw_tolerance!r}") from None
            if tolerance < 0:
                raise ValueError(f"{TOLERANCE_ENV} must not be negative")

        return cls(secret=secret, tolerance=tolerance)
