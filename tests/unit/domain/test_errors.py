from __future__ import annotations

"""Unit tests for the error taxonomy and the public package surface."""

import pytest

import fsorder
from fsorder.domain.errors import DirectoryOpenError, FsOrderError, ResolutionError
from fsorder.domain.paths import to_native_path


@pytest.mark.parametrize("cls", [DirectoryOpenError, ResolutionError])
def test_errors_share_base_and_carry_context(cls: type) -> None:
    err = cls("opendir failed /frames", path="/frames", reason="No such file or directory")

    assert isinstance(err, FsOrderError)
    assert str(err) == "opendir failed /frames"
    assert err.path == "/frames"
    assert err.reason == "No such file or directory"


def test_reason_defaults_to_empty() -> None:
    assert ResolutionError("boom").reason == ""
    assert ResolutionError("boom").path == ""


def test_to_native_path_decodes_bytes() -> None:
    assert to_native_path(b"frames/a.png") == "frames/a.png"


def test_public_api_contract() -> None:
    required = [
        "less",
        "compare",
        "natural_key",
        "natural_sort",
        "is_directory",
        "is_readable",
        "list_directory",
        "name_without_extension",
        "extension",
        "get_executable_directory",
        "sanitize_file_path",
        "sanitize_dir_path",
        "DirectoryOpenError",
        "ResolutionError",
    ]
    for name in required:
        assert hasattr(fsorder, name), f"fsorder missing: {name}"
