"""Producer-side construction of events.

The factory fills in ``correlationId`` and ``timestamp`` when the caller leaves
them out, validates the result and raises on any problem. It is meant for
trusted call sites where a malformed event is a bug.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Collection, Mapping, Optional

from order_events.errors import UnknownEventTypeError
from order_events.registry import as_event_type
from order_events.schemas.base import ORDER_EVENT_TYPES, PAYMENT_EVENT_TYPES, BaseEvent, EventType, EventPayload
from order_events.schemas.events import OrderEvent, PaymentEvent
from order_events.utils.logger_util import get_logger
from order_events.validation import ValidationFailure, validate_event

logger = get_logger(__name__)


def new_correlation_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Current UTC instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _build(
    family: Collection[EventType],
    event_type: Any,
    order_id: Any,
    user_id: Any,
    data: Mapping[str, Any] | EventPayload,
    correlation_id: Optional[str],
    timestamp: Optional[str],
) -> BaseEvent:
    # only None means "not supplied"; "" is kept and rejected by validation
    if correlation_id is None:
        correlation_id = new_correlation_id()
    if timestamp is None:
        timestamp = utc_timestamp()

    candidate = {
        "type": event_type.value if isinstance(event_type, EventType) else event_type,
        "orderId": order_id,
        "userId": user_id,
        "correlationId": correlation_id,
        "timestamp": timestamp,
        "data": data,
    }

    if as_event_type(event_type) not in family:
        logger.warning("refusing to build event of unknown type %r", event_type)
        raise UnknownEventTypeError(event_type)

    result = validate_event(candidate)
    if isinstance(result, ValidationFailure):
        logger.warning("invalid %s event for order %r: %s", candidate["type"], order_id, result.error)
    event = result.unwrap()
    logger.debug("built %s correlationId=%s", event.type, event.correlation_id)
    return event


def create_order_event(
    event_type: EventType | str,
    *,
    order_id: int,
    user_id: int,
    data: Mapping[str, Any] | EventPayload,
    correlation_id: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> OrderEvent:
    """Build and validate an ``order.*`` event.

    ``data`` is either a mapping with wire (camelCase) keys or a payload
    model such as OrderCreatedData, which may be built with Python names.

    Raises:
        UnknownEventTypeError: ``event_type`` is not one of the order event types.
        EventValidationError: the assembled event breaks the contract; carries
            every violation.
    """
    return _build(ORDER_EVENT_TYPES, event_type, order_id, user_id, data, correlation_id, timestamp)


def create_payment_event(
    event_type: EventType | str,
    *,
    order_id: int,
    user_id: int,
    data: Mapping[str, Any] | EventPayload,
    correlation_id: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> PaymentEvent:
    """Build and validate a ``payment.*`` event. Same contract as create_order_event."""
    return _build(PAYMENT_EVENT_TYPES, event_type, order_id, user_id, data, correlation_id, timestamp)
