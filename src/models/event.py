from dataclasses import dataclass
from typing import Any


CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
CUSTOMER_SUBSCRIPTION_DELETED = "customer.subscription.deleted"


@dataclass(frozen=True)
class ParsedEvent:
    id: str
    type: str
    data_object: Any  # opaque JSON value from data.object


@dataclass(frozen=True)
class ClassifiedEvent:
    """Base of the closed event family; only its subclasses are instantiated."""

    payload: Any
    event_id: str
    event_type: str

    def __post_init__(self):
        if type(self) is ClassifiedEvent:
            raise TypeError("ClassifiedEvent is abstract; use one of its variants")


@dataclass(frozen=True)
class CheckoutCompleted(ClassifiedEvent):
    pass


@dataclass(frozen=True)
class SubscriptionDeleted(ClassifiedEvent):
    pass


@dataclass(frozen=True)
class Unknown(ClassifiedEvent):
    pass
