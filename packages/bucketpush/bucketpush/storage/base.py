"""Object store abstraction — buckets, object handles and commit-on-close writers."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import BinaryIO

from pydantic import BaseModel, Field

from bucketpush.core.context import PushContext

DEFAULT_CHUNK_SIZE = 1024 * 1024


class ObjectAttrs(BaseModel):
    """Metadata of a committed object."""

    bucket: str
    name: str
    size: int = Field(ge=0, default=0)
    etag: str = ""
    content_type: str = "application/octet-stream"
    media_link: str = Field(description="Direct-access URL; may carry transient query parameters")


class ObjectWriter(ABC):
    """Write stream for one object. Nothing is visible remotely until close().

    A writer is finished exactly once, either by ``close()`` (commit) or
    ``abort()`` (discard local buffers, commit nothing).
    """

    def __init__(self) -> None:
        self._finished = False
        self._committed = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def committed(self) -> bool:
        return self._committed

    def _ensure_open(self) -> None:
        if self._finished:
            raise ValueError("writer is already closed")

    def write(self, data: bytes) -> int:
        self._ensure_open()
        return self._write(data)

    def close(self) -> None:
        """Commit the object. The writer is finished even if the commit fails."""
        self._ensure_open()
        self._finished = True
        try:
            self._commit()
        finally:
            self._release()
        self._committed = True

    def abort(self) -> None:
        """Release local resources without committing. No-op once finished."""
        if self._finished:
            return
        self._finished = True
        self._release()

    @abstractmethod
    def _write(self, data: bytes) -> int:
        """Buffer or send a chunk of object content."""

    @abstractmethod
    def _commit(self) -> None:
        """Make the written content visible as the object."""

    @abstractmethod
    def _release(self) -> None:
        """Free buffers and temporary files. Must be safe after a failed commit."""


class ObjectHandle(ABC):
    """Reference to ``bucket/name``; the object need not exist yet."""

    def __init__(self, bucket: str, name: str) -> None:
        self.bucket = bucket
        self.name = name

    @abstractmethod
    def new_writer(self, ctx: PushContext) -> ObjectWriter:
        """Open a writer that replaces the object's content on close."""

    @abstractmethod
    def attrs(self, ctx: PushContext) -> ObjectAttrs:
        """Fetch metadata of the committed object."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bucket={self.bucket!r}, name={self.name!r})"


class BucketHandle:
    """A named bucket within a store."""

    def __init__(self, store: ObjectStore, name: str) -> None:
        self._store = store
        self.name = name

    def object(self, name: str) -> ObjectHandle:
        return self._store.object_handle(self.name, name)


class ObjectStore(ABC):
    """Client for a bucket-based object store."""

    def bucket(self, name: str) -> BucketHandle:
        return BucketHandle(self, name)

    @abstractmethod
    def object_handle(self, bucket: str, name: str) -> ObjectHandle:
        """Return a handle for ``bucket/name``."""

    def close(self) -> None:
        """Release client resources. Default: nothing to release."""


def copy_to_writer(
    src: BinaryIO,
    writer: ObjectWriter,
    ctx: PushContext,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> tuple[int, str]:
    """Stream ``src`` into ``writer``, checking ``ctx`` around every chunk.

    Returns the number of bytes copied and their SHA-256 hex digest.
    """
    h = hashlib.sha256()
    total = 0
    ctx.check()
    for chunk in iter(lambda: src.read(chunk_size), b""):
        ctx.check()
        writer.write(chunk)
        h.update(chunk)
        total += len(chunk)
    ctx.check()
    return total, h.hexdigest()
