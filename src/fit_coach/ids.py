"""Identifier allocation for plans and workout occurrences."""

from __future__ import annotations

import threading
from typing import Protocol


class IdAllocator(Protocol):
    def next_id(self, prefix: str) -> str: ...


class CounterIdAllocator:
    """
    Mint ids of the form ``{prefix}_{n}`` from a single counter.

    All prefixes share the counter, so ``wo_1`` and ``plan_2`` never collide
    on the numeric part. Safe to share between threads.
    """

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self, prefix: str) -> str:
        with self._lock:
            n = self._next
            self._next += 1
        return f"{prefix}_{n}"

    def reset(self, start: int = 1) -> None:
        with self._lock:
            self._next = start


DEFAULT_ALLOCATOR = CounterIdAllocator()
