# utils/debounce.py
from __future__ import annotations
import time
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Holds the latest pushed value until no new value has arrived for
    `delay_ms`. Polling after the quiet period releases the value once.
    The clock returns seconds and is injectable for tests.
    """

    def __init__(self, delay_ms: int = 500, clock: Callable[[], float] = time.monotonic):
        self.delay = delay_ms / 1000.0
        self.clock = clock
        self._value: Optional[T] = None
        self._pushed_at: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._pushed_at is not None

    def push(self, value: T) -> None:
        self._value = value
        self._pushed_at = self.clock()

    def remaining(self) -> float:
        if self._pushed_at is None:
            return 0.0
        return max(0.0, self._pushed_at + self.delay - self.clock())

    def poll(self) -> Optional[T]:
        if self._pushed_at is None or self.remaining() > 0:
            return None
        value = self._value
        self._value = None
        self._pushed_at = None
        return value

    def cancel(self) -> None:
        self._value = None
        self._pushed_at = None
