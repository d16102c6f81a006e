"""
clock.py — Clock-Driven Task Queue
==================================
Timer-deferred callbacks without threads.  Actions are queued with a
delay and fired, in due-time order, whenever the owner advances the
clock.  Two clocks share the same queue:

    VirtualClock   – time only moves when a test calls advance()
    MonotonicClock – time.monotonic(); the UI calls tick() from its loop

Times are milliseconds.  Entries due at the same instant fire in the
order they were submitted.
"""

import heapq
import itertools
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple


Action = Callable[[], None]


class TaskQueue:
    """Min-heap of (due, seq, action)."""

    def __init__(self):
        self._heap: List[Tuple[float, int, Action]] = []
        self._seq = itertools.count()

    def push(self, due: float, action: Action) -> None:
        heapq.heappush(self._heap, (due, next(self._seq), action))

    def pop_due(self, now: float) -> List[Tuple[float, Action]]:
        due: List[Tuple[float, Action]] = []
        while self._heap and self._heap[0][0] <= now:
            when, _, action = heapq.heappop(self._heap)
            due.append((when, action))
        return due

    def next_due(self) -> float:
        return self._heap[0][0] if self._heap else float("inf")

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)


class Clock(ABC):
    """
    Base clock.  Subclasses decide where `now()` comes from.

    Attributes:
        queue : Pending actions.
    """

    def __init__(self):
        self.queue = TaskQueue()

    @abstractmethod
    def now(self) -> float:
        """Current time in milliseconds."""

    def call_later(self, delay: float, action: Action) -> None:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self.queue.push(self.now() + delay, action)

    @property
    def pending(self) -> int:
        return len(self.queue)

    def _fire_until(self, limit: float) -> int:
        """Fire everything due at or before `limit`, including actions queued while firing."""
        fired = 0
        while self.queue.next_due() <= limit:
            for _, action in self.queue.pop_due(limit):
                action()
                fired += 1
        return fired


class VirtualClock(Clock):
    """Deterministic clock for tests and offline playback."""

    def __init__(self, start: float = 0.0):
        super().__init__()
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, delta: float) -> int:
        """
        Move time forward by `delta` ms, firing due actions in order.
        While an action runs, now() reports that action's due time.
        Returns the number of actions fired.
        """
        if delta < 0:
            raise ValueError(f"cannot move a clock backwards ({delta})")
        target = self._now + delta
        fired = 0
        while self.queue.next_due() <= target:
            for when, action in self.queue.pop_due(self.queue.next_due()):
                self._now = when
                action()
                fired += 1
        self._now = target
        return fired

    def run_all(self) -> int:
        """Advance until nothing is pending."""
        fired = 0
        while self.queue:
            fired += self.advance(max(self.queue.next_due() - self._now, 0.0))
        return fired


class MonotonicClock(Clock):
    """Wall clock; call tick() periodically (e.g. on every UI poll)."""

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def tick(self) -> int:
        return self._fire_until(self.now())
