from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional, Type

from order_events.errors import UnknownEventTypeError
from order_events.schemas.base import (
    ORDER_EVENT_TYPES,
    PAYMENT_EVENT_TYPES,
    BaseEvent,
    EventType,
)
from order_events.schemas.events import (
    OrderCancelledEvent,
    OrderConfirmedEvent,
    OrderCreatedEvent,
    OrderShippedEvent,
    PaymentAuthorizedEvent,
    PaymentFailedEvent,
)

# The contract is closed: adding an event type means adding a model here,
# a member to EventType and the matching tests.
EVENT_SCHEMAS: Mapping[EventType, Type[BaseEvent]] = MappingProxyType({
    EventType.ORDER_CREATED: OrderCreatedEvent,
    EventType.ORDER_CONFIRMED: OrderConfirmedEvent,
    EventType.ORDER_SHIPPED: OrderShippedEvent,
    EventType.ORDER_CANCELLED: OrderCancelledEvent,
    EventType.PAYMENT_AUTHORIZED: PaymentAuthorizedEvent,
    EventType.PAYMENT_FAILED: PaymentFailedEvent,
})


def as_event_type(tag: Any) -> Optional[EventType]:
    """Return the EventType for ``tag`` or None. Never raises."""
    if isinstance(tag, EventType):
        return tag
    if not isinstance(tag, str):
        return None
    try:
        return EventType(tag)
    except ValueError:
        return None


def get_schema(tag: Any) -> Optional[Type[BaseEvent]]:
    """Look up the event model for a type tag; None for anything unknown."""
    event_type = as_event_type(tag)
    if event_type is None:
        return None
    return EVENT_SCHEMAS.get(event_type)


def require_schema(tag: Any) -> Type[BaseEvent]:
    schema = get_schema(tag)
    if schema is None:
        raise UnknownEventTypeError(tag)
    return schema


def is_order_event_type(tag: Any) -> bool:
    return as_event_type(tag) in ORDER_EVENT_TYPES


def is_payment_event_type(tag: Any) -> bool:
    return as_event_type(tag) in PAYMENT_EVENT_TYPES
