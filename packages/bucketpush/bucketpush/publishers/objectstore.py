"""ObjectStorePublisher — upload one build artifact and return its canonical URL."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from bucketpush.core.context import PushContext
from bucketpush.core.errors import (
    ClientInitError,
    CommitError,
    ConfigurationError,
    LocalFileError,
    MetadataError,
    ObjectOpenError,
    PushError,
    PushStage,
    UploadError,
    URLParseError,
)
from bucketpush.publishers.base import BasePublisher
from bucketpush.runtime.inputs import PushInputs
from bucketpush.runtime.ui import Status
from bucketpush.schemas.artifact import Artifact
from bucketpush.schemas.config import PublisherConfig
from bucketpush.schemas.docs import Documentation, FieldDoc
from bucketpush.schemas.status import StatusKind
from bucketpush.settings import StoreSettings
from bucketpush.storage.base import ObjectStore, copy_to_writer
from bucketpush.storage.factory import build_store
from bucketpush.storage.urls import strip_query_params

logger = logging.getLogger(__name__)

StoreFactory = Callable[[PushContext], ObjectStore]

_EXAMPLE = """
build {
  use "archive" {
    sources            = ["./"]
    output_name        = "server.zip"
    overwrite_existing = true
  }

  registry {
    use "objectstore" {
      source = "server.zip"
      name   = "${gitrefpretty()}.zip"
      bucket = "staging.example-project.artifacts"
    }
  }
}
"""


class ObjectStorePublisher(BasePublisher):
    """Uploads a build artifact to an object store bucket.

    Configuration is bound once with ``config_set``. Each ``push`` opens a
    status scope on the host UI, streams ``source`` to ``bucket/name``,
    reads back the object's media link and returns it without its query
    string. Every failure after the client is built emits one error status
    line and raises the matching PushError. Partially written objects are
    left as the store leaves them.
    """

    def __init__(
        self,
        settings: StoreSettings | None = None,
        *,
        store_factory: StoreFactory | None = None,
    ) -> None:
        self._settings = settings or StoreSettings()
        self._store_factory = store_factory or (lambda ctx: build_store(self._settings, ctx))
        self._config: PublisherConfig | None = None

    @property
    def name(self) -> str:
        return "objectstore"

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def config_schema(self) -> type[BaseModel]:
        return PublisherConfig

    @property
    def output_schema(self) -> type[BaseModel]:
        return Artifact

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def config(self) -> PublisherConfig | None:
        return self._config

    # ── Configuration ──────────────────────────────────────────────

    def config_set(self, raw: BaseModel | dict[str, Any]) -> PublisherConfig:
        if isinstance(raw, PublisherConfig):
            config = raw
        else:
            if isinstance(raw, BaseModel):
                raw = raw.model_dump()
            try:
                config = PublisherConfig.model_validate(raw)
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid publisher configuration: {exc}") from exc

        if config.source == "":
            raise ConfigurationError("Source artifact should not be empty")
        if config.name == "":
            raise ConfigurationError("Name of the object should not be empty")
        if config.bucket == "":
            raise ConfigurationError("Bucket should not be empty")

        self._config = config
        return config

    def documentation(self) -> Documentation:
        return Documentation(
            description="Upload build artifacts to an object storage bucket",
            example=_EXAMPLE,
            output="bucketpush.Artifact",
            fields=[
                FieldDoc(name="source", summary="the build artifact to upload"),
                FieldDoc(name="name", summary="the name of the object to create in the bucket"),
                FieldDoc(name="bucket", summary="the name of the bucket"),
            ],
        )

    # ── Push ───────────────────────────────────────────────────────

    def push(self, inputs: PushInputs) -> Artifact:
        if self._config is None:
            raise ConfigurationError("Publisher is not configured; call config_set first")
        config = self._config
        ctx = inputs.context

        with inputs.ui.status() as status:
            status.update(f"Pushing artifact to object storage: {config.name}")
            if inputs.extras:
                logger.debug("Host extras for %s: %s", config.name, sorted(inputs.extras))

            try:
                store = self._store_factory(ctx)
            except Exception as exc:
                raise ClientInitError(f"Creating object store client failed: {exc}") from exc
            self._advance(config, PushStage.CLIENT_READY)

            try:
                return self._push_with(store, config, inputs, status)
            finally:
                store.close()

    def _push_with(
        self,
        store: ObjectStore,
        config: PublisherConfig,
        inputs: PushInputs,
        status: Status,
    ) -> Artifact:
        ctx = inputs.context

        try:
            handle = store.bucket(config.bucket).object(config.name)
            writer = handle.new_writer(ctx)
        except Exception as exc:
            raise self._fail(status, ObjectOpenError, "Opening remote object failed", exc) from exc
        self._advance(config, PushStage.OBJECT_OPENED)

        try:
            path = inputs.source.resolve(config.source)
            try:
                ctx.check()
                src = open(path, "rb")
            except Exception as exc:
                raise self._fail(status, LocalFileError, "Opening source file failed", exc) from exc
            self._advance(config, PushStage.SOURCE_OPENED)

            with src:
                try:
                    size, digest = copy_to_writer(
                        src, writer, ctx, chunk_size=self._settings.chunk_size
                    )
                except Exception as exc:
                    raise self._fail(
                        status, UploadError, "Uploading file to object storage failed", exc
                    ) from exc
            logger.debug("Copied %d bytes from %s (sha256=%s)", size, path, digest)
            self._advance(config, PushStage.UPLOADED)

            try:
                ctx.check()
                writer.close()
            except Exception as exc:
                raise self._fail(
                    status, CommitError, "Error closing writer after file upload", exc
                ) from exc
            self._advance(config, PushStage.FINALIZED)
        finally:
            writer.abort()

        try:
            attrs = handle.attrs(ctx)
        except Exception as exc:
            raise self._fail(
                status, MetadataError, "Error fetching uploaded object attributes", exc
            ) from exc
        self._advance(config, PushStage.ATTRS_FETCHED)

        try:
            source_url = strip_query_params(attrs.media_link)
        except ValueError as exc:
            raise self._fail(status, URLParseError, "Error parsing uploaded object url", exc) from exc
        self._advance(config, PushStage.URL_RESOLVED)

        status.step(StatusKind.OK, f"Artifact saved to object storage: '{source_url}'")
        self._advance(config, PushStage.DONE)
        return Artifact(source_url=source_url)

    @staticmethod
    def _advance(config: PublisherConfig, stage: PushStage) -> None:
        logger.debug("push %s/%s: %s", config.bucket, config.name, stage.value)

    @staticmethod
    def _fail(
        status: Status,
        error_cls: type[PushError],
        label: str,
        exc: Exception,
    ) -> PushError:
        status.step(StatusKind.ERROR, label)
        logger.error("%s: %s", label, exc)
        return error_cls(f"{label}: {exc}")
