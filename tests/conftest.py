import copy
from typing import Any, Callable, Dict

import pytest

# tests/conftest.py

VALID_UUID = "3f1c2a9e-7b4d-4e2a-9c1f-0a8b6d5e4f3c"
VALID_TIMESTAMP = "2024-05-01T12:30:45.123Z"

ORDER_ITEMS = [{"productId": 1, "quantity": 2, "price": 19.99}]

# smallest payload each event type accepts: required fields only
MINIMAL_DATA: Dict[str, Dict[str, Any]] = {
    "order.created": {"items": ORDER_ITEMS, "totalAmount": 39.98},
    "order.confirmed": {"items": ORDER_ITEMS, "totalAmount": 39.98},
    "order.shipped": {},
    "order.cancelled": {"reason": "customer changed their mind", "cancelledBy": "user"},
    "payment.authorized": {"transactionId": "txn_001", "amount": 39.98, "currency": "USD"},
    "payment.failed": {"reason": "card declined", "retryable": False},
}

REQUIRED_DATA_FIELDS: Dict[str, tuple] = {
    "order.created": ("items", "totalAmount"),
    "order.confirmed": ("items", "totalAmount"),
    "order.shipped": (),
    "order.cancelled": ("reason", "cancelledBy"),
    "payment.authorized": ("transactionId", "amount", "currency"),
    "payment.failed": ("reason", "retryable"),
}

EVENT_TYPES = list(MINIMAL_DATA)
ORDER_TYPES = [t for t in EVENT_TYPES if t.startswith("order.")]
PAYMENT_TYPES = [t for t in EVENT_TYPES if t.startswith("payment.")]


@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """
    Return a helper building a wire-shaped (camelCase) event dict.
    Usage: body = make_event("order.cancelled", orderId=7, data={...})
    """
    def _make(event_type: str, **overrides: Any) -> Dict[str, Any]:
        body = {
            "type": event_type,
            "orderId": 123,
            "userId": 456,
            "correlationId": VALID_UUID,
            "timestamp": VALID_TIMESTAMP,
            "data": copy.deepcopy(MINIMAL_DATA[event_type]),
        }
        body.update(overrides)
        return body
    return _make


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """
    Keep logging configuration stable across tests; individual tests may
    monkeypatch further.
    """
    monkeypatch.delenv("ORDER_EVENTS_LOG_DIR", raising=False)
    monkeypatch.delenv("ORDER_EVENTS_LOG_LEVEL", raising=False)
    yield
