from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback later without blocking the caller.

    `asyncio.AbstractEventLoop.call_later` fits this protocol directly.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


@dataclass
class ScheduledCall:
    due: float
    seq: int
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Virtual clock driven by the frame loop (or a test) through `advance`."""

    now: float = 0.0
    _calls: list[ScheduledCall] = field(default_factory=list)
    _seq: int = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        self._seq += 1
        call = ScheduledCall(due=self.now + max(0.0, delay), seq=self._seq, callback=callback)
        self._calls.append(call)
        return call

    def advance(self, dt: float) -> int:
        """Move the clock forward and fire everything that came due. Returns calls fired."""
        self.now += max(0.0, dt)
        fired = 0
        while True:
            due = [c for c in self._calls if not c.cancelled and c.due <= self.now]
            if not due:
                break
            call = min(due, key=lambda c: (c.due, c.seq))
            self._calls.remove(call)
            call.callback()
            fired += 1
        self._calls = [c for c in self._calls if not c.cancelled]
        return fired

    def pending(self) -> int:
        return sum(1 for c in self._calls if not c.cancelled)
