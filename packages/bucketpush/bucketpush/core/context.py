"""Push context — cancellation and deadline shared by every blocking step."""

from __future__ import annotations

import threading
import time

from bucketpush.core.errors import ContextCancelledError, DeadlineExceededError


class PushContext:
    """Cancellation/deadline carrier threaded through all remote calls.

    A context may be cancelled from another thread with ``cancel()``. Steps
    call ``check()`` before and during blocking work; it raises once the
    context is cancelled or its deadline has passed.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be > 0")
        self._cancelled = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._reason = ""

    @classmethod
    def background(cls) -> PushContext:
        """A context with no deadline that is only cancelled explicitly."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Monotonic deadline, or None when the context never expires."""
        return self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline (never negative), or None."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def cancel(self, reason: str = "context cancelled") -> None:
        self._reason = reason
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def check(self) -> None:
        """Raise if the context is cancelled or past its deadline."""
        if self._cancelled.is_set():
            raise ContextCancelledError(self._reason)
        if self.expired:
            raise DeadlineExceededError("context deadline exceeded")
