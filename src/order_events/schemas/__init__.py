"""Schemas package for the event contract (field rules, base shape, event models).

These models are intentionally strict: unknown keys are rejected, numbers are
never coerced from strings and every event is immutable once built.
"""

from .base import ORDER_EVENT_TYPES, PAYMENT_EVENT_TYPES, BaseEvent, EventPayload, EventType
from .events import (
    CANCELLED_BY_VALUES,
    Event,
    OrderCancelledData,
    OrderCancelledEvent,
    OrderConfirmedData,
    OrderConfirmedEvent,
    OrderCreatedData,
    OrderCreatedEvent,
    OrderEvent,
    OrderItem,
    OrderShippedData,
    OrderShippedEvent,
    PaymentAuthorizedData,
    PaymentAuthorizedEvent,
    PaymentEvent,
    PaymentFailedData,
    PaymentFailedEvent,
)

__all__ = [
    "ORDER_EVENT_TYPES",
    "PAYMENT_EVENT_TYPES",
    "BaseEvent",
    "EventPayload",
    "EventType",
    "CANCELLED_BY_VALUES",
    "Event",
    "OrderCancelledData",
    "OrderCancelledEvent",
    "OrderConfirmedData",
    "OrderConfirmedEvent",
    "OrderCreatedData",
    "OrderCreatedEvent",
    "OrderEvent",
    "OrderItem",
    "OrderShippedData",
    "OrderShippedEvent",
    "PaymentAuthorizedData",
    "PaymentAuthorizedEvent",
    "PaymentEvent",
    "PaymentFailedData",
    "PaymentFailedEvent",
]
