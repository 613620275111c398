# order_events
# Shared contract for order and payment events exchanged over the message bus

__version__ = "0.0.1"

from .errors import (
    EventContractError,
    EventValidationError,
    MalformedEventError,
    UnknownEventTypeError,
    Violation,
)
from .factory import create_order_event, create_payment_event
from .registry import EVENT_SCHEMAS, get_schema, require_schema
from .schemas import *  # noqa: F401,F403
from .schemas import __all__ as _schemas_all
from .topics import CONSUMER_GROUPS, TOPICS, topic_for
from .validation import (
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    event_to_dict,
    parse_event,
    serialize_event,
    validate_event,
    validate_event_json,
)

__all__ = [
    "__version__",
    "EventContractError",
    "EventValidationError",
    "MalformedEventError",
    "UnknownEventTypeError",
    "Violation",
    "create_order_event",
    "create_payment_event",
    "EVENT_SCHEMAS",
    "get_schema",
    "require_schema",
    "CONSUMER_GROUPS",
    "TOPICS",
    "topic_for",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "event_to_dict",
    "parse_event",
    "serialize_event",
    "validate_event",
    "validate_event_json",
    *_schemas_all,
]
