"""Tests for the core error hierarchy and push stages."""

import pytest

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


class TestErrorHierarchy:
    def test_base_error_is_exception(self) -> None:
        assert issubclass(BucketPushError, Exception)

    def test_configuration_error_is_not_push_error(self) -> None:
        assert issubclass(ConfigurationError, BucketPushError)
        assert not issubclass(ConfigurationError, PushError)

    @pytest.mark.parametrize(
        "error_cls",
        [
            ClientInitError,
            ObjectOpenError,
            LocalFileError,
            UploadError,
            CommitError,
            MetadataError,
            URLParseError,
        ],
    )
    def test_push_errors_share_base(self, error_cls: type[PushError]) -> None:
        assert issubclass(error_cls, PushError)
        assert issubclass(error_cls, BucketPushError)

    def test_deadline_is_cancellation(self) -> None:
        assert issubclass(DeadlineExceededError, ContextCancelledError)


class TestPushErrorStage:
    def test_each_error_names_its_stage(self) -> None:
        assert ClientInitError("x").stage == PushStage.CLIENT_READY
        assert ObjectOpenError("x").stage == PushStage.OBJECT_OPENED
        assert LocalFileError("x").stage == PushStage.SOURCE_OPENED
        assert UploadError("x").stage == PushStage.UPLOADED
        assert CommitError("x").stage == PushStage.FINALIZED
        assert MetadataError("x").stage == PushStage.ATTRS_FETCHED
        assert URLParseError("x").stage == PushStage.URL_RESOLVED

    def test_stage_override(self) -> None:
        err = PushError("custom", stage=PushStage.UPLOADED)
        assert err.stage == PushStage.UPLOADED

    def test_generic_push_error_is_failed(self) -> None:
        assert PushError("x").stage == PushStage.FAILED

    def test_catch_all_via_base(self) -> None:
        with pytest.raises(BucketPushError, match="caught by base"):
            raise CommitError("caught by base")


class TestPushStage:
    def test_stage_order(self) -> None:
        assert [s.value for s in PushStage] == [
            "Init",
            "ClientReady",
            "ObjectOpened",
            "SourceOpened",
            "Uploaded",
            "Finalized",
            "AttrsFetched",
            "URLResolved",
            "Done",
            "Failed",
        ]
