"""Local filesystem object store: ``<root>/<bucket>/<key>``.

Useful for development pipelines and dry runs. Objects are written to a
temporary file beside the target and renamed into place on commit.
"""

from __future__ import annotations

import hashlib
import logging
import mimetypes
import os
import tempfile
from pathlib import Path

from bucketpush.core.context import PushContext
from bucketpush.storage.base import ObjectAttrs, ObjectHandle, ObjectStore, ObjectWriter

logger = logging.getLogger(__name__)


def _safe_parts(value: str, what: str) -> list[str]:
    parts = [p for p in value.split("/") if p]
    if not parts or any(p in (".", "..") for p in parts):
        raise ValueError(f"Invalid {what}: {value!r}")
    return parts


class LocalObjectWriter(ObjectWriter):
    def __init__(self, target: Path) -> None:
        super().__init__()
        self._target = target
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".upload-", dir=target.parent)
        self._tmp_path = Path(tmp)
        self._fh = os.fdopen(fd, "wb")

    def _write(self, data: bytes) -> int:
        return self._fh.write(data)

    def _commit(self) -> None:
        self._fh.close()
        os.replace(self._tmp_path, self._target)
        logger.debug("Committed %s", self._target)

    def _release(self) -> None:
        if not self._fh.closed:
            self._fh.close()
        self._tmp_path.unlink(missing_ok=True)


class LocalObjectHandle(ObjectHandle):
    def __init__(self, path: Path, bucket: str, name: str) -> None:
        super().__init__(bucket, name)
        self.path = path

    def new_writer(self, ctx: PushContext) -> ObjectWriter:
        ctx.check()
        return LocalObjectWriter(self.path)

    def attrs(self, ctx: PushContext) -> ObjectAttrs:
        ctx.check()
        st = self.path.stat()
        etag = hashlib.md5(
            f"{st.st_size}:{st.st_mtime_ns}".encode(), usedforsecurity=False
        ).hexdigest()
        content_type, _ = mimetypes.guess_type(self.name)
        return ObjectAttrs(
            bucket=self.bucket,
            name=self.name,
            size=st.st_size,
            etag=etag,
            content_type=content_type or "application/octet-stream",
            media_link=f"{self.path.resolve().as_uri()}?generation={st.st_mtime_ns}",
        )


class LocalObjectStore(ObjectStore):
    """Stores each bucket as a directory under ``root``."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def object_handle(self, bucket: str, name: str) -> ObjectHandle:
        path = self.root.joinpath(*_safe_parts(bucket, "bucket"), *_safe_parts(name, "object name"))
        return LocalObjectHandle(path, bucket, name)
