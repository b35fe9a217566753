"""bucketpush schemas — Pydantic v2 models for config, output, status and docs."""

from bucketpush.schemas.artifact import Artifact
from bucketpush.schemas.config import PublisherConfig
from bucketpush.schemas.docs import Documentation, FieldDoc, render_documentation
from bucketpush.schemas.status import StatusKind, StatusUpdate

__all__ = [
    "Artifact",
    "Documentation",
    "FieldDoc",
    "PublisherConfig",
    "StatusKind",
    "StatusUpdate",
    "render_documentation",
]
