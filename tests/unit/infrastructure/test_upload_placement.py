"""
Unit tests for upload placement and write-once enforcement.
"""

import pytest

from artifact_store.domain.value_objects import FileName, VersionName
from artifact_store.infrastructure.persistence.upload_placement import (
    STAGING_DIR,
    UploadPlacement,
)
from artifact_store.shared.errors.domain import ErrorKind, StoreError, VersionAlreadyExistsError
from artifact_store.shared.errors.infrastructure import StorageError
from helpers import make_version

V1 = VersionName("1.0.0")
APP = FileName("app.bin")


@pytest.fixture
def placement(store_root):
    return UploadPlacement(store_root)


@pytest.mark.unit
class TestOutpathFor:

    def test_creates_version_directory(self, store_root, placement, writer):
        path = placement.outpath_for(writer, V1, APP)

        assert path == store_root / "acme" / "versions" / "1.0.0" / "app.bin"
        assert path.parent.is_dir()
        assert not path.exists()

    def test_second_call_after_write_fails(self, placement, writer):
        path = placement.outpath_for(writer, V1, APP)
        path.write_bytes(b"payload")

        with pytest.raises(VersionAlreadyExistsError) as exc_info:
            placement.outpath_for(writer, V1, FileName("other.bin"))
        assert exc_info.value.kind == ErrorKind.VERSION_ALREADY_EXISTS
        assert exc_info.value.message == "version already exists"

    def test_second_call_without_write_proceeds(self, placement, writer):
        first = placement.outpath_for(writer, V1, APP)
        second = placement.outpath_for(writer, V1, APP)
        assert first == second

    def test_missing_versions_dir_is_a_storage_error(self, store_root, placement, writer):
        (store_root / "acme" / "versions").rmdir()
        with pytest.raises(StorageError):
            placement.outpath_for(writer, V1, APP)


@pytest.mark.unit
class TestStageUpload:

    def test_publish_moves_file_into_version(self, store_root, placement, writer):
        with placement.stage_upload(writer, V1, APP) as staged:
            assert STAGING_DIR in staged.path.parts
            staged.path.write_bytes(b"payload")
            final = staged.publish()

        assert final == store_root / "acme" / "versions" / "1.0.0" / "app.bin"
        assert final.read_bytes() == b"payload"
        assert list((store_root / "acme" / STAGING_DIR).iterdir()) == []

    def test_populated_version_fails_before_staging(self, store_root, placement, writer):
        make_version(store_root, "acme", "1.0.0", {"app.bin": b"old"})
        with pytest.raises(VersionAlreadyExistsError):
            placement.stage_upload(writer, V1, APP)

    def test_publish_loses_to_earlier_publisher(self, store_root, placement, writer):
        first = placement.stage_upload(writer, V1, APP)
        second = placement.stage_upload(writer, V1, FileName("other.bin"))
        first.path.write_bytes(b"first")
        second.path.write_bytes(b"second")

        first.publish()
        with pytest.raises(VersionAlreadyExistsError):
            second.publish()

        version_dir = store_root / "acme" / "versions" / "1.0.0"
        assert [p.name for p in version_dir.iterdir()] == ["app.bin"]
        assert not second.staging_dir.exists()

    def test_publish_replaces_abandoned_empty_version(self, store_root, placement, writer):
        make_version(store_root, "acme", "1.0.0", {})
        with placement.stage_upload(writer, V1, APP) as staged:
            staged.path.write_bytes(b"retry")
            final = staged.publish()
        assert final.read_bytes() == b"retry"

    def test_publish_without_content_fails(self, store_root, placement, writer):
        staged = placement.stage_upload(writer, V1, APP)
        with pytest.raises(StoreError) as exc_info:
            staged.publish()
        assert exc_info.value.message == "failed to upload"
        assert not (store_root / "acme" / "versions" / "1.0.0").exists()

    def test_leaving_block_without_publish_discards(self, store_root, placement, writer):
        with placement.stage_upload(writer, V1, APP) as staged:
            staged.path.write_bytes(b"payload")
        assert not staged.staging_dir.exists()
        assert not (store_root / "acme" / "versions" / "1.0.0").exists()
