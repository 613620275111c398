"""Reusable field rules shared by every event model.

Each rule is an ``Annotated`` pydantic type so it can be dropped straight into
a model, and every rule can also be checked on its own with :func:`satisfies`,
which never raises.

All rules are strict: a numeric string is not a number, a number is not a
string and ``True`` is not an integer.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, Field, Strict, TypeAdapter, ValidationError

UUID_V4_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"

# date T time (seconds required, any fraction) + Z or +HH:MM / -HH:MM
ISO_DATETIME_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"

_ISO_DATETIME_RE = re.compile(ISO_DATETIME_PATTERN)


def _check_iso_datetime(v: str) -> str:
    # the pattern only checks the shape; 2024-02-30T25:00:00Z must still fail
    if not _ISO_DATETIME_RE.match(v):
        raise ValueError("must be an ISO-8601 datetime with a timezone designator")
    try:
        datetime.fromisoformat(v)
    except ValueError:
        raise ValueError("must be a valid ISO-8601 calendar datetime") from None
    return v


PositiveInt = Annotated[int, Strict(), Field(gt=0)]
PositiveNumber = Annotated[float, Strict(), Field(gt=0, allow_inf_nan=False)]
NonNegativeNumber = Annotated[float, Strict(), Field(ge=0, allow_inf_nan=False)]
StrictString = Annotated[str, Strict()]
NonEmptyString = Annotated[str, Strict(), Field(min_length=1)]
UuidV4String = Annotated[str, Strict(), Field(pattern=UUID_V4_PATTERN)]
IsoDatetimeString = Annotated[str, Strict(), AfterValidator(_check_iso_datetime)]
StrictBoolean = Annotated[bool, Strict()]


def enum_of(*values: str) -> Any:
    """Return a Literal type that only accepts one of ``values``."""
    if not values:
        raise ValueError("enum_of() needs at least one value")
    return Literal[values]


_ADAPTERS: dict[int, tuple[Any, TypeAdapter]] = {}


def _adapter(rule: Any) -> TypeAdapter:
    # keyed by identity, Annotated metadata is not reliably hashable
    cached = _ADAPTERS.get(id(rule))
    if cached is None or cached[0] is not rule:
        cached = (rule, TypeAdapter(rule))
        _ADAPTERS[id(rule)] = cached
    return cached[1]


def satisfies(rule: Any, value: Any) -> bool:
    """Return True if ``value`` passes ``rule``. Never raises for any value."""
    try:
        _adapter(rule).validate_python(value)
    except ValidationError:
        return False
    return True


def is_positive_int(value: Any) -> bool:
    return satisfies(PositiveInt, value)


def is_positive_number(value: Any) -> bool:
    return satisfies(PositiveNumber, value)


def is_non_negative_number(value: Any) -> bool:
    return satisfies(NonNegativeNumber, value)


def is_non_empty_string(value: Any) -> bool:
    return satisfies(NonEmptyString, value)


def is_uuid_v4(value: Any) -> bool:
    return satisfies(UuidV4String, value)


def is_iso_datetime(value: Any) -> bool:
    return satisfies(IsoDatetimeString, value)
