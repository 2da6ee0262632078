"""Shipment identifier sequences."""

import threading
from uuid import uuid4


class CounterSequence:
    """Monotonic identifiers of the form `<prefix><n>`."""

    def __init__(self, prefix: str = "shp-", start: int = 1):
        self.prefix = prefix
        self._next = start
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self.prefix}{value}"


def uuid_sequence() -> str:
    return str(uuid4())
