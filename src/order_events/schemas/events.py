from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .base import BaseEvent, EventPayload
from .fields import (
    IsoDatetimeString,
    NonEmptyString,
    NonNegativeNumber,
    PositiveInt,
    PositiveNumber,
    StrictBoolean,
    StrictString,
    enum_of,
)

CANCELLED_BY_VALUES = ("user", "system", "admin")
CancelledBy = enum_of(*CANCELLED_BY_VALUES)


class OrderItem(EventPayload):
    product_id: PositiveInt
    quantity: PositiveInt
    price: PositiveNumber


OrderItems = Annotated[tuple[OrderItem, ...], Field(min_length=1)]


# --- order.* payloads ---

class OrderCreatedData(EventPayload):
    items: OrderItems
    total_amount: PositiveNumber
    shipping_address: Optional[StrictString] = None


class OrderConfirmedData(EventPayload):
    items: OrderItems
    total_amount: PositiveNumber
    payment_id: Optional[StrictString] = None


class OrderShippedData(EventPayload):
    # every field is optional: a shipment may be announced before tracking exists
    tracking_number: Optional[StrictString] = None
    carrier: Optional[StrictString] = None
    estimated_delivery: Optional[IsoDatetimeString] = None


class OrderCancelledData(EventPayload):
    reason: NonEmptyString
    cancelled_by: CancelledBy
    refund_amount: Optional[NonNegativeNumber] = None


# --- payment.* payloads ---

class PaymentAuthorizedData(EventPayload):
    transaction_id: NonEmptyString
    amount: PositiveNumber
    currency: NonEmptyString


class PaymentFailedData(EventPayload):
    reason: NonEmptyString
    retryable: StrictBoolean


# --- events ---

class OrderCreatedEvent(BaseEvent):
    type: Literal["order.created"]
    data: OrderCreatedData


class OrderConfirmedEvent(BaseEvent):
    type: Literal["order.confirmed"]
    data: OrderConfirmedData


class OrderShippedEvent(BaseEvent):
    type: Literal["order.shipped"]
    data: OrderShippedData


class OrderCancelledEvent(BaseEvent):
    type: Literal["order.cancelled"]
    data: OrderCancelledData


class PaymentAuthorizedEvent(BaseEvent):
    type: Literal["payment.authorized"]
    data: PaymentAuthorizedData


class PaymentFailedEvent(BaseEvent):
    type: Literal["payment.failed"]
    data: PaymentFailedData


OrderEvent = Annotated[
    Union[OrderCreatedEvent, OrderConfirmedEvent, OrderShippedEvent, OrderCancelledEvent],
    Field(discriminator="type"),
]

PaymentEvent = Annotated[
    Union[PaymentAuthorizedEvent, PaymentFailedEvent],
    Field(discriminator="type"),
]

Event = Annotated[
    Union[
        OrderCreatedEvent,
        OrderConfirmedEvent,
        OrderShippedEvent,
        OrderCancelledEvent,
        PaymentAuthorizedEvent,
        PaymentFailedEvent,
    ],
    Field(discriminator="type"),
]
