"""Message-bus channel names shared by producers and consumers.

These are plain string constants; nothing in the contract depends on them
beyond :func:`topic_for`.
"""

from __future__ import annotations

from typing import Any

from order_events.errors import UnknownEventTypeError
from order_events.registry import is_order_event_type, is_payment_event_type


class TOPICS:
    ORDER_EVENTS = "order.events"
    PAYMENT_EVENTS = "payment.events"


class CONSUMER_GROUPS:
    NOTIFICATION_WORKER = "notification-worker-group"
    PRODUCT_SERVICE = "product-service-group"
    PAYMENT_SERVICE = "payment-service-group"


def topic_for(event_type: Any) -> str:
    """Return the topic an event of ``event_type`` is published on."""
    if is_order_event_type(event_type):
        return TOPICS.ORDER_EVENTS
    if is_payment_event_type(event_type):
        return TOPICS.PAYMENT_EVENTS
    raise UnknownEventTypeError(event_type)
