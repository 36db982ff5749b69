from .event import (
    CHECKOUT_SESSION_COMPLETED,
    CUSTOMER_SUBSCRIPTION_DELETED,
    CheckoutCompleted,
    ClassifiedEvent,
    ParsedEvent,
    SubscriptionDeleted,
    Unknown,
)
from .signature import SignatureHeader

__all__ = [
    "CHECKOUT_SESSION_COMPLETED", "CUSTOMER_SUBSCRIPTION_DELETED",
    "ParsedEvent", "ClassifiedEvent",
    "CheckoutCompleted", "SubscriptionDeleted", "Unknown",
    "SignatureHeader",
]
