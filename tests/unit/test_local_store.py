"""Tests for the local filesystem object store."""

from pathlib import Path

import pytest

from bucketpush.core.context import PushContext
from bucketpush.core.errors import ContextCancelledError
from bucketpush.storage.local import LocalObjectStore
from bucketpush.storage.urls import strip_query_params


@pytest.fixture()
def store(tmp_path: Path) -> LocalObjectStore:
    return LocalObjectStore(tmp_path / "objects")


class TestLocalObjectStore:
    def test_write_commit_attrs(self, store: LocalObjectStore) -> None:
        ctx = PushContext.background()
        handle = store.bucket("my-bucket").object("builds/build-42.zip")
        writer = handle.new_writer(ctx)
        writer.write(b"hello ")
        writer.write(b"world")
        writer.close()

        target = store.root / "my-bucket" / "builds" / "build-42.zip"
        assert target.read_bytes() == b"hello world"
        assert writer.committed is True

        attrs = handle.attrs(ctx)
        assert attrs.bucket == "my-bucket"
        assert attrs.name == "builds/build-42.zip"
        assert attrs.size == 11
        assert attrs.media_link.startswith("file://")
        assert "?generation=" in attrs.media_link
        assert strip_query_params(attrs.media_link) == target.resolve().as_uri()

    def test_nothing_visible_before_commit(self, store: LocalObjectStore) -> None:
        handle = store.bucket("b").object("k")
        writer = handle.new_writer(PushContext.background())
        writer.write(b"partial")
        assert not (store.root / "b" / "k").exists()
        writer.abort()
        assert list((store.root / "b").iterdir()) == []

    def test_overwrite_replaces_content(self, store: LocalObjectStore) -> None:
        ctx = PushContext.background()
        for payload in (b"first", b"second"):
            writer = store.bucket("b").object("k").new_writer(ctx)
            writer.write(payload)
            writer.close()
        assert (store.root / "b" / "k").read_bytes() == b"second"

    def test_double_close_rejected(self, store: LocalObjectStore) -> None:
        writer = store.bucket("b").object("k").new_writer(PushContext.background())
        writer.close()
        with pytest.raises(ValueError, match="already closed"):
            writer.close()
        with pytest.raises(ValueError, match="already closed"):
            writer.write(b"late")

    def test_abort_after_close_is_noop(self, store: LocalObjectStore) -> None:
        writer = store.bucket("b").object("k").new_writer(PushContext.background())
        writer.close()
        writer.abort()
        assert (store.root / "b" / "k").exists()

    def test_attrs_missing_object(self, store: LocalObjectStore) -> None:
        with pytest.raises(FileNotFoundError):
            store.bucket("b").object("missing").attrs(PushContext.background())

    @pytest.mark.parametrize(("bucket", "name"), [("..", "k"), ("b", "../escape"), ("b", ""), ("", "k")])
    def test_escaping_names_rejected(self, store: LocalObjectStore, bucket: str, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid"):
            store.bucket(bucket).object(name)

    def test_cancelled_context(self, store: LocalObjectStore) -> None:
        ctx = PushContext()
        ctx.cancel()
        with pytest.raises(ContextCancelledError):
            store.bucket("b").object("k").new_writer(ctx)
