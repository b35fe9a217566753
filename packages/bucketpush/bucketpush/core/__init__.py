"""bucketpush core — errors, push stages, and the push context."""

from bucketpush.core.context import PushContext
from bucketpush.core.errors import (
    BucketPushError,
    ClientInitError,
    CommitError,
    ConfigurationError,
    ContextCancelledError,
    DeadlineExceededError,
    LocalFileError,
    MetadataError,
    ObjectOpenError,
    PushError,
    PushStage,
    UploadError,
    URLParseError,
)

__all__ = [
    "BucketPushError",
    "ClientInitError",
    "CommitError",
    "ConfigurationError",
    "ContextCancelledError",
    "DeadlineExceededError",
    "LocalFileError",
    "MetadataError",
    "ObjectOpenError",
    "PushContext",
    "PushError",
    "PushStage",
    "URLParseError",
    "UploadError",
]
