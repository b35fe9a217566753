"""bucketpush storage — object store interface and its backends."""

from bucketpush.storage.base import (
    BucketHandle,
    ObjectAttrs,
    ObjectHandle,
    ObjectStore,
    ObjectWriter,
    copy_to_writer,
)
from bucketpush.storage.factory import build_store
from bucketpush.storage.local import LocalObjectStore
from bucketpush.storage.s3 import S3ObjectStore
from bucketpush.storage.urls import strip_query_params

__all__ = [
    "BucketHandle",
    "LocalObjectStore",
    "ObjectAttrs",
    "ObjectHandle",
    "ObjectStore",
    "ObjectWriter",
    "S3ObjectStore",
    "build_store",
    "copy_to_writer",
    "strip_query_params",
]
