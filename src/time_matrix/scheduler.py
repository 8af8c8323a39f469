"""Deferred callbacks for a single-threaded event loop.

Nothing here runs on another thread: callbacks fire only when the owner
calls ``run_due()`` (or ``wait_and_run()``), one at a time.
"""
import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass(order=True)
class ScheduledCall:
    due: float
    seq: int
    callback: Callable = field(compare=False)
    args: tuple = field(default=(), compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic, sleep: Callable[[float], None] = time.sleep):
        self.clock = clock
        self.sleep = sleep
        self._pending: list[ScheduledCall] = []
        self._seq = 0

    def call_later(self, delay: float, callback: Callable, *args) -> ScheduledCall:
        self._seq += 1
        call = ScheduledCall(due=self.clock() + max(0.0, delay), seq=self._seq, callback=callback, args=args)
        self._pending.append(call)
        self._pending.sort()
        return call

    def cancel_all(self) -> None:
        for call in self._pending:
            call.cancel()
        self._pending.clear()

    def has_pending(self) -> bool:
        return any(not c.cancelled for c in self._pending)

    def time_until_next(self) -> float | None:
        live = [c for c in self._pending if not c.cancelled]
        if not live:
            return None
        return max(0.0, live[0].due - self.clock())

    def run_due(self) -> int:
        """Fire every call whose due time has passed, in due order."""
        fired = 0
        now = self.clock()
        while self._pending and self._pending[0].due <= now:
            call = self._pending.pop(0)
            if call.cancelled:
                continue
            call.callback(*call.args)
            fired += 1
        return fired

    def wait_and_run(self) -> int:
        """Sleep until the next call is due, then run everything due."""
        wait = self.time_until_next()
        if wait is None:
            return 0
        if wait > 0:
            self.sleep(wait)
        return self.run_due()
