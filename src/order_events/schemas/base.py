from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .fields import IsoDatetimeString, PositiveInt, UuidV4String


class EventType(str, Enum):
    ORDER_CREATED = "order.created"
    ORDER_CONFIRMED = "order.confirmed"
    ORDER_SHIPPED = "order.shipped"
    ORDER_CANCELLED = "order.cancelled"
    PAYMENT_AUTHORIZED = "payment.authorized"
    PAYMENT_FAILED = "payment.failed"


ORDER_EVENT_TYPES = frozenset({
    EventType.ORDER_CREATED,
    EventType.ORDER_CONFIRMED,
    EventType.ORDER_SHIPPED,
    EventType.ORDER_CANCELLED,
})

PAYMENT_EVENT_TYPES = frozenset({
    EventType.PAYMENT_AUTHORIZED,
    EventType.PAYMENT_FAILED,
})


class ContractModel(BaseModel):
    """Common config: camelCase on the wire, immutable, no unknown keys.

    Python names are accepted when building models in code; wire input goes
    through validate_event, which only accepts the camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class EventPayload(ContractModel):
    pass


class BaseEvent(ContractModel):
    """Fields shared by every event. Subclasses pin ``type`` and ``data``."""

    type: str
    order_id: PositiveInt
    user_id: PositiveInt
    correlation_id: UuidV4String
    timestamp: IsoDatetimeString

    @property
    def event_type(self) -> EventType:
        return EventType(self.type)
