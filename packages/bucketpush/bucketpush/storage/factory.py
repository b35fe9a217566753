"""Store factory — build the configured ObjectStore for one push."""

from __future__ import annotations

import logging

from bucketpush.core.context import PushContext
from bucketpush.settings import StoreSettings
from bucketpush.storage.base import ObjectStore
from bucketpush.storage.local import LocalObjectStore
from bucketpush.storage.s3 import S3ObjectStore

logger = logging.getLogger(__name__)


def build_store(settings: StoreSettings, ctx: PushContext) -> ObjectStore:
    """Construct the store selected by ``settings.backend``."""
    ctx.check()
    logger.debug("Building %s object store", settings.backend)
    if settings.backend == "local":
        return LocalObjectStore(settings.local_root)
    if settings.backend == "s3":
        return S3ObjectStore.from_settings(settings, ctx)
    raise ValueError(f"Unknown store backend '{settings.backend}'")
