"""Status reporting — scoped progress sinks handed to a push by its host."""

from __future__ import annotations

import logging
import sys
import threading
from abc import ABC, abstractmethod
from types import TracebackType
from typing import TextIO

from bucketpush.schemas.status import StatusKind, StatusUpdate

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    StatusKind.RUNNING: logging.INFO,
    StatusKind.OK: logging.INFO,
    StatusKind.WARN: logging.WARNING,
    StatusKind.ERROR: logging.ERROR,
}


class Status(ABC):
    """A live status scope. Acquired once per operation, closed once.

    Usable as a context manager so that ``close()`` runs on every exit path.
    """

    @abstractmethod
    def update(self, message: str) -> None:
        """Replace the in-progress status line."""

    @abstractmethod
    def step(self, kind: StatusKind, message: str) -> None:
        """Record a finished step with the given outcome."""

    @abstractmethod
    def close(self) -> None:
        """Release the status scope."""

    def __enter__(self) -> Status:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class UI(ABC):
    """Host-provided factory for status scopes."""

    @abstractmethod
    def status(self) -> Status:
        """Open a new status scope."""


# ── Console ────────────────────────────────────────────────────────


class ConsoleStatus(Status):
    """Writes each status line to a text stream and mirrors it to logging."""

    _MARKERS = {
        StatusKind.RUNNING: "..",
        StatusKind.OK: "ok",
        StatusKind.WARN: "!!",
        StatusKind.ERROR: "xx",
    }

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._closed = False

    def _emit(self, kind: StatusKind, message: str) -> None:
        if self._closed:
            logger.warning("Status line after close dropped: %s", message)
            return
        self._stream.write(f"[{self._MARKERS[kind]}] {message}\n")
        self._stream.flush()
        logger.log(_LOG_LEVELS[kind], message)

    def update(self, message: str) -> None:
        self._emit(StatusKind.RUNNING, message)

    def step(self, kind: StatusKind, message: str) -> None:
        self._emit(kind, message)

    def close(self) -> None:
        self._closed = True


class ConsoleUI(UI):
    """UI that prints status lines, by default to stderr."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stderr

    def status(self) -> Status:
        return ConsoleStatus(self._stream)


# ── Recording ──────────────────────────────────────────────────────


class RecordingStatus(Status):
    """Keeps every status line as a StatusUpdate. Thread-safe."""

    def __init__(self) -> None:
        self._updates: list[StatusUpdate] = []
        self._lock = threading.Lock()
        self.close_count = 0

    @property
    def updates(self) -> list[StatusUpdate]:
        with self._lock:
            return list(self._updates)

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    def update(self, message: str) -> None:
        with self._lock:
            self._updates.append(StatusUpdate(kind=StatusKind.RUNNING, message=message))

    def step(self, kind: StatusKind, message: str) -> None:
        with self._lock:
            self._updates.append(StatusUpdate(kind=kind, message=message))

    def close(self) -> None:
        with self._lock:
            self.close_count += 1


class RecordingUI(UI):
    """UI whose status scopes are kept for later inspection or persistence."""

    def __init__(self) -> None:
        self.scopes: list[RecordingStatus] = []

    def status(self) -> Status:
        scope = RecordingStatus()
        self.scopes.append(scope)
        return scope

    @property
    def updates(self) -> list[StatusUpdate]:
        """All status lines across every scope, in emission order per scope."""
        return [u for scope in self.scopes for u in scope.updates]
