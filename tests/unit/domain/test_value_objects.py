"""
Unit tests for store value objects.

Names are concatenated into filesystem paths, so validation must reject
anything that could escape the intended directory.
"""

from dataclasses import FrozenInstanceError

import pytest

from artifact_store.domain.value_objects import (
    Credential,
    FileName,
    ProjectName,
    VersionName,
    validate_file_name,
    validate_project_name,
    validate_version_name,
)
from artifact_store.shared.errors.domain import (
    ErrorKind,
    InvalidFileError,
    InvalidProjectError,
    InvalidVersionError,
)


@pytest.mark.unit
class TestProjectName:
    """Tests for ProjectName."""

    @pytest.mark.parametrize("name", ["acme", "Acme_2", "my-project", "0", "a_b-C9"])
    def test_accepts_valid_names(self, name):
        assert validate_project_name(name).value == name

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "..",
            ".",
            "a/b",
            "../etc",
            "a\\b",
            "with space",
            "dot.ted",
            "tab\t",
            "nul\x00",
            "new\nline",
            "café",
        ],
    )
    def test_rejects_invalid_names(self, name):
        with pytest.raises(InvalidProjectError) as exc_info:
            validate_project_name(name)
        assert exc_info.value.kind == ErrorKind.INVALID_PROJECT
        assert exc_info.value.message == "invalid project name"

    def test_is_immutable(self):
        project = ProjectName("acme")
        with pytest.raises(FrozenInstanceError):
            project.value = "other"

    def test_str(self):
        assert str(ProjectName("acme")) == "acme"


@pytest.mark.unit
class TestVersionName:
    """Tests for VersionName."""

    @pytest.mark.parametrize("name", ["1.0.0", "v2", "release_candidate-1", "2024.01.15", "a."])
    def test_accepts_valid_names(self, name):
        assert validate_version_name(name).value == name

    @pytest.mark.parametrize(
        "name",
        ["", "1.0/2", "../x", "1 0", "v1\n", "1:0", "a\\b", "rév"],
    )
    def test_rejects_invalid_characters(self, name):
        with pytest.raises(InvalidVersionError) as exc_info:
            validate_version_name(name)
        assert exc_info.value.message == "invalid version name"

    @pytest.mark.parametrize("name", [".", "..", ".hidden", ".1.0"])
    def test_rejects_leading_dot(self, name):
        with pytest.raises(InvalidVersionError):
            VersionName(name)

    @pytest.mark.parametrize("name", ["1..2", "a..", "x...y"])
    def test_rejects_double_dot(self, name):
        with pytest.raises(InvalidVersionError):
            VersionName(name)


@pytest.mark.unit
class TestFileName:
    """Tests for FileName."""

    @pytest.mark.parametrize("name", ["app.bin", "release v1.tar.gz", ".hidden", "café.txt"])
    def test_accepts_single_component(self, name):
        assert validate_file_name(name).value == name

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "../escape", "a\\b", "nul\x00"])
    def test_rejects_path_like_names(self, name):
        with pytest.raises(InvalidFileError) as exc_info:
            FileName(name)
        assert exc_info.value.message == "invalid file name"
        assert exc_info.value.kind == ErrorKind.INVALID_FILE


@pytest.mark.unit
def test_credential_hides_token_in_repr():
    credential = Credential(token="secret")
    assert credential.token == "secret"
    assert "secret" not in repr(credential)
