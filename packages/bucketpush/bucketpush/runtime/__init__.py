"""bucketpush runtime — host-facing inputs, source location and status sinks."""

from bucketpush.runtime.inputs import PushInputs
from bucketpush.runtime.source import SourceLocation
from bucketpush.runtime.ui import (
    UI,
    ConsoleStatus,
    ConsoleUI,
    RecordingStatus,
    RecordingUI,
    Status,
)

__all__ = [
    "ConsoleStatus",
    "ConsoleUI",
    "PushInputs",
    "RecordingStatus",
    "RecordingUI",
    "SourceLocation",
    "Status",
    "UI",
]
