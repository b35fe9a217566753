"""Push inputs — the values a host binds for one push."""

from __future__ import annotations

from dataclasses import dataclass, field

from bucketpush.core.context import PushContext
from bucketpush.runtime.source import SourceLocation
from bucketpush.runtime.ui import UI


@dataclass(frozen=True)
class PushInputs:
    """Everything a push consumes from its host, bound as one record.

    ``extras`` carries any additional values the host pipeline chooses to
    inject (build id, git ref, labels). The object store publisher does not
    interpret them; it logs their keys so a host can see what reached the
    push.
    """

    context: PushContext
    source: SourceLocation
    ui: UI
    extras: dict[str, object] = field(default_factory=dict)
