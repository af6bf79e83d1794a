"""In-memory FIFO of requests that could not be sent while offline."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass
class QueueItem:
    """A deferred request: method ("POST" or "GET"), endpoint, JSON body and token."""

    method: str
    endpoint: str
    body: Any = field(default_factory=dict)
    token: str = ""


class OfflineQueue:
    """Thread-safe first-in, first-out queue of deferred requests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: deque[QueueItem] = deque()

    def enqueue(self, item: QueueItem) -> None:
        """Append an item to the back of the queue."""
        with self._lock:
            self._items.append(item)

    def empty(self) -> bool:
        """Return True when nothing is queued."""
        with self._lock:
            return not self._items

    def try_pop(self) -> QueueItem | None:
        """Remove and return the earliest item, or None if the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)