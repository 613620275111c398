"""Error taxonomy for the event contract.

Every rejection is an :class:`EventContractError`. The inbound validator hands
them back inside a failed result; the factory raises them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple

from pydantic import ValidationError

ROOT = "<root>"


def describe_value(value: Any) -> str:
    """Short JSON-flavoured description of a value's type, for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


@dataclass(frozen=True)
class Violation:
    field: str
    constraint: str
    message: str
    input_type: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message} [{self.constraint}, got {self.input_type}]"


def violations_from_pydantic(exc: ValidationError) -> Tuple[Violation, ...]:
    out = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or ROOT
        if err["type"] == "missing":
            input_type = "missing"
        else:
            input_type = describe_value(err.get("input"))
        out.append(Violation(field=loc, constraint=err["type"], message=err["msg"], input_type=input_type))
    return tuple(out)


class EventContractError(ValueError):
    """Base class for every contract rejection."""


class EventValidationError(EventContractError):
    """One or more fields violate the contract. Carries every violation."""

    def __init__(self, violations: Iterable[Violation], event_type: str | None = None):
        self.violations: Tuple[Violation, ...] = tuple(violations)
        self.event_type = event_type
        super().__init__(self._render())

    def _render(self) -> str:
        head = f"{len(self.violations)} validation error(s)"
        if self.event_type:
            head += f" for {self.event_type}"
        return "\n  ".join([head] + [str(v) for v in self.violations])

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(v.field for v in self.violations)

    @classmethod
    def from_pydantic(cls, exc: ValidationError, event_type: str | None = None) -> "EventValidationError":
        err = cls(violations_from_pydantic(exc), event_type=event_type)
        err.__cause__ = exc
        return err


class MalformedEventError(EventValidationError):
    """The value is not an event envelope at all (not an object, no type, bad JSON)."""

    def __init__(self, message: str, field: str = ROOT, constraint: str = "envelope", value: Any = None):
        self.message = message
        violation = Violation(field=field, constraint=constraint, message=message, input_type=describe_value(value))
        super().__init__([violation])

    def _render(self) -> str:
        return self.message


class UnknownEventTypeError(EventContractError):
    """The type tag is not one this version of the contract knows."""

    def __init__(self, event_type: Any):
        self.event_type = event_type
        super().__init__(f"Unknown event type: {event_type}")
