"""Shared test fixtures for bucketpush."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from bucketpush.core.context import PushContext
from bucketpush.publishers.objectstore import ObjectStorePublisher
from bucketpush.runtime.inputs import PushInputs
from bucketpush.runtime.source import SourceLocation
from bucketpush.runtime.ui import RecordingUI
from bucketpush.schemas.status import StatusKind, StatusUpdate
from bucketpush.settings import StoreSettings
from bucketpush.storage.base import ObjectAttrs, ObjectHandle, ObjectStore, ObjectWriter


# ── FakeStore ──────────────────────────────────────────────────────


class FakeWriter(ObjectWriter):
    """In-memory writer that records what it does on its store."""

    def __init__(self, store: FakeStore, bucket: str, name: str) -> None:
        super().__init__()
        self._store = store
        self._key = (bucket, name)
        self._buffer = bytearray()

    def _write(self, data: bytes) -> int:
        self._store.calls.append("write")
        if "write" in self._store.fail_on:
            raise OSError("connection reset by peer")
        self._buffer.extend(data)
        if self._store.on_write is not None:
            self._store.on_write()
        return len(data)

    def _commit(self) -> None:
        self._store.calls.append("commit")
        if "commit" in self._store.fail_on:
            raise OSError("commit rejected")
        self._store.objects[self._key] = bytes(self._buffer)

    def _release(self) -> None:
        self._store.calls.append("release")
        self._buffer.clear()


class FakeHandle(ObjectHandle):
    def __init__(self, store: FakeStore, bucket: str, name: str) -> None:
        super().__init__(bucket, name)
        self._store = store

    def new_writer(self, ctx: PushContext) -> ObjectWriter:
        ctx.check()
        self._store.calls.append("open")
        if "open" in self._store.fail_on:
            raise PermissionError("bucket access denied")
        return FakeWriter(self._store, self.bucket, self.name)

    def attrs(self, ctx: PushContext) -> ObjectAttrs:
        ctx.check()
        self._store.calls.append("attrs")
        if "attrs" in self._store.fail_on:
            raise OSError("metadata service unavailable")
        data = self._store.objects[(self.bucket, self.name)]
        return ObjectAttrs(
            bucket=self.bucket,
            name=self.name,
            size=len(data),
            media_link=self._store.media_link.format(bucket=self.bucket, name=self.name),
        )


class FakeStore(ObjectStore):
    """Deterministic in-memory object store with scripted failures.

    ``fail_on`` may contain "open", "write", "commit" and "attrs".
    ``on_write`` runs after every chunk a writer accepts.
    """

    def __init__(
        self,
        *,
        fail_on: set[str] | None = None,
        media_link: str = "https://storage.example.com/download/{bucket}/{name}?generation=17&alt=media",
    ) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.fail_on = set(fail_on or ())
        self.media_link = media_link
        self.calls: list[str] = []
        self.close_count = 0
        self.on_write: Callable[[], None] | None = None

    def object_handle(self, bucket: str, name: str) -> ObjectHandle:
        return FakeHandle(self, bucket, name)

    def close(self) -> None:
        self.close_count += 1


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture()
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def build_dir(tmp_path: Path) -> Path:
    """Build output directory holding server.zip."""
    d = tmp_path / "build"
    d.mkdir()
    (d / "server.zip").write_bytes(b"PK\x03\x04 fake archive payload")
    return d


@pytest.fixture()
def scenario_config() -> dict[str, str]:
    return {"source": "server.zip", "name": "build-42.zip", "bucket": "my-bucket"}


def make_publisher(
    store: ObjectStore,
    config: dict[str, str] | None = None,
    *,
    chunk_size: int = 1024 * 1024,
) -> ObjectStorePublisher:
    """A publisher wired to ``store`` and, if given, already configured."""
    publisher = ObjectStorePublisher(
        StoreSettings(backend="local", chunk_size=chunk_size),
        store_factory=lambda ctx: store,
    )
    if config is not None:
        publisher.config_set(config)
    return publisher


def make_inputs(
    source_dir: Path,
    *,
    ui: RecordingUI | None = None,
    context: PushContext | None = None,
) -> PushInputs:
    return PushInputs(
        context=context or PushContext.background(),
        source=SourceLocation(path=str(source_dir)),
        ui=ui or RecordingUI(),
    )


# ── Assertion Helpers ──────────────────────────────────────────────


def assert_status_kinds(updates: list[StatusUpdate], expected: list[StatusKind]) -> None:
    """Assert that status lines match the expected kind sequence."""
    actual = [u.kind for u in updates]
    assert actual == expected, (
        f"Status sequence mismatch.\n"
        f"  Expected: {[k.value for k in expected]}\n"
        f"  Actual:   {[k.value for k in actual]}\n"
        f"  Messages: {[u.message for u in updates]}"
    )
