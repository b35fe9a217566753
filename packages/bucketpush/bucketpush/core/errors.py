"""Core error hierarchy for bucketpush."""

from __future__ import annotations

from enum import StrEnum


class PushStage(StrEnum):
    """Stages of a single push, in the order they are reached."""

    INIT = "Init"
    CLIENT_READY = "ClientReady"
    OBJECT_OPENED = "ObjectOpened"
    SOURCE_OPENED = "SourceOpened"
    UPLOADED = "Uploaded"
    FINALIZED = "Finalized"
    ATTRS_FETCHED = "AttrsFetched"
    URL_RESOLVED = "URLResolved"
    DONE = "Done"
    FAILED = "Failed"


class BucketPushError(Exception):
    """Base exception for all bucketpush errors."""


class ConfigurationError(BucketPushError):
    """Raised when publisher configuration is missing or invalid."""


class ContextCancelledError(BucketPushError):
    """Raised when a push context has been cancelled."""


class DeadlineExceededError(ContextCancelledError):
    """Raised when a push context's deadline has passed."""


class PushError(BucketPushError):
    """Base class for failures during a push.

    ``stage`` is the stage the push was trying to reach when it failed.
    """

    stage: PushStage = PushStage.FAILED

    def __init__(self, message: str, *, stage: PushStage | None = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class ClientInitError(PushError):
    """Raised when the object store client could not be built."""

    stage = PushStage.CLIENT_READY


class ObjectOpenError(PushError):
    """Raised when the remote object writer could not be opened."""

    stage = PushStage.OBJECT_OPENED


class LocalFileError(PushError):
    """Raised when the local artifact could not be opened."""

    stage = PushStage.SOURCE_OPENED


class UploadError(PushError):
    """Raised when copying the artifact to the store fails mid-stream."""

    stage = PushStage.UPLOADED


class CommitError(PushError):
    """Raised when closing the writer (committing the object) fails."""

    stage = PushStage.FINALIZED


class MetadataError(PushError):
    """Raised when the committed object's attributes cannot be fetched.

    The upload itself succeeded when this is raised.
    """

    stage = PushStage.ATTRS_FETCHED


class URLParseError(PushError):
    """Raised when the store returned a media link that is not a usable URL."""

    stage = PushStage.URL_RESOLVED
