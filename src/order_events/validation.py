"""Inbound validation: classify an untrusted value as a typed event or a failure.

``validate_event`` never raises for malformed input; it returns a
:class:`ValidationSuccess` or :class:`ValidationFailure`. Consumers reading a
stream of messages can log and skip failures without stopping the loop.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Mapping, NoReturn, Union

from pydantic import ValidationError

from order_events.errors import (
    EventContractError,
    EventValidationError,
    MalformedEventError,
    UnknownEventTypeError,
)
from order_events.registry import get_schema
from order_events.schemas.base import BaseEvent
from order_events.utils.logger_util import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationSuccess:
    data: BaseEvent
    success: Literal[True] = True

    def unwrap(self) -> BaseEvent:
        return self.data


@dataclass(frozen=True)
class ValidationFailure:
    error: EventContractError
    success: Literal[False] = False

    def unwrap(self) -> NoReturn:
        raise self.error


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def _reject(error: EventContractError) -> ValidationFailure:
    logger.debug("event rejected: %s", error)
    return ValidationFailure(error=error)


def validate_event(value: Any) -> ValidationResult:
    """Validate an arbitrary value against the event type it declares."""
    if isinstance(value, BaseEvent):
        value = event_to_dict(value)
    if not isinstance(value, Mapping):
        return _reject(MalformedEventError("Event must be a non-null object", value=value))

    tag = value.get("type")
    if tag is None or tag == "":
        return _reject(MalformedEventError("Event type is required", field="type", constraint="missing", value=tag))

    schema = get_schema(tag)
    if schema is None:
        return _reject(UnknownEventTypeError(tag))

    try:
        event = schema.model_validate(dict(value), by_alias=True, by_name=False)
    except ValidationError as exc:
        return _reject(EventValidationError.from_pydantic(exc, event_type=tag))

    logger.debug("event accepted: type=%s correlationId=%s", event.type, event.correlation_id)
    return ValidationSuccess(data=event)


def validate_event_json(raw: str | bytes | bytearray) -> ValidationResult:
    """Decode wire bytes and validate the result. Bad JSON is a failure, not an exception."""
    try:
        value = json.loads(raw)
    except (ValueError, TypeError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return _reject(MalformedEventError(f"Event is not valid JSON: {exc}", constraint="json_invalid", value=raw))
    return validate_event(value)


def parse_event(value: Any) -> BaseEvent:
    """Like validate_event but raises the EventContractError on failure."""
    return validate_event(value).unwrap()


def event_to_dict(event: BaseEvent) -> dict:
    """JSON-compatible dict with wire (camelCase) keys; unset optionals omitted."""
    return event.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_event(event: BaseEvent) -> str:
    return event.model_dump_json(by_alias=True, exclude_none=True)
