"""S3 object store backed by boto3.

Works against AWS S3 and S3-compatible endpoints (MinIO, the GCS
interoperability API) through ``StoreSettings.endpoint_url``.
"""

from __future__ import annotations

import logging
import mimetypes
from tempfile import SpooledTemporaryFile
from typing import Any

import boto3
from botocore.config import Config

from bucketpush.core.context import PushContext
from bucketpush.settings import StoreSettings
from bucketpush.storage.base import ObjectAttrs, ObjectHandle, ObjectStore, ObjectWriter

logger = logging.getLogger(__name__)

# Content kept in memory before the spool rolls over to a temp file.
_SPOOL_MAX_BYTES = 8 * 1024 * 1024


def _content_type(key: str) -> str:
    guessed, _ = mimetypes.guess_type(key)
    return guessed or "application/octet-stream"


def build_s3_client(settings: StoreSettings, ctx: PushContext) -> Any:
    """Build a boto3 S3 client using the ambient credential chain.

    Retries are disabled and timeouts are capped by the context deadline.
    """
    ctx.check()
    connect_timeout = settings.connect_timeout
    read_timeout = settings.read_timeout
    remaining = ctx.remaining()
    if remaining is not None:
        connect_timeout = min(connect_timeout, max(remaining, 0.001))
        read_timeout = min(read_timeout, max(remaining, 0.001))

    cfg = Config(
        retries={"max_attempts": 1, "mode": "standard"},
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        region_name=settings.region,
    )
    return boto3.client("s3", config=cfg, endpoint_url=settings.endpoint_url or None)


class S3ObjectWriter(ObjectWriter):
    """Spools content locally and uploads it with a single put_object on close."""

    def __init__(self, client: Any, bucket: str, key: str, ctx: PushContext) -> None:
        super().__init__()
        self._client = client
        self._bucket = bucket
        self._key = key
        self._ctx = ctx
        self._spool = SpooledTemporaryFile(max_size=_SPOOL_MAX_BYTES)

    def _write(self, data: bytes) -> int:
        return self._spool.write(data)

    def _commit(self) -> None:
        self._ctx.check()
        self._spool.seek(0)
        self._client.put_object(
            Bucket=self._bucket,
            Key=self._key,
            Body=self._spool,
            ContentType=_content_type(self._key),
        )
        logger.debug("Committed s3://%s/%s", self._bucket, self._key)

    def _release(self) -> None:
        self._spool.close()


class S3ObjectHandle(ObjectHandle):
    def __init__(self, store: S3ObjectStore, bucket: str, name: str) -> None:
        super().__init__(bucket, name)
        self._store = store

    def new_writer(self, ctx: PushContext) -> ObjectWriter:
        ctx.check()
        return S3ObjectWriter(self._store.client, self.bucket, self.name, ctx)

    def attrs(self, ctx: PushContext) -> ObjectAttrs:
        ctx.check()
        client = self._store.client
        resp = client.head_object(Bucket=self.bucket, Key=self.name)
        ctx.check()
        link = client.generate_presigned_url(
            ClientMethod="get_object",
            Params={"Bucket": self.bucket, "Key": self.name},
            ExpiresIn=self._store.presign_ttl_seconds,
        )
        return ObjectAttrs(
            bucket=self.bucket,
            name=self.name,
            size=resp.get("ContentLength") or 0,
            etag=(resp.get("ETag") or "").strip('"'),
            content_type=resp.get("ContentType") or "application/octet-stream",
            media_link=link,
        )


class S3ObjectStore(ObjectStore):
    """ObjectStore over a boto3 S3 client."""

    def __init__(self, client: Any, *, presign_ttl_seconds: int = 900) -> None:
        self.client = client
        self.presign_ttl_seconds = presign_ttl_seconds

    @classmethod
    def from_settings(cls, settings: StoreSettings, ctx: PushContext) -> S3ObjectStore:
        client = build_s3_client(settings, ctx)
        return cls(client, presign_ttl_seconds=settings.presign_ttl_seconds)

    def object_handle(self, bucket: str, name: str) -> ObjectHandle:
        return S3ObjectHandle(self, bucket, name)

    def close(self) -> None:
        self.client.close()
