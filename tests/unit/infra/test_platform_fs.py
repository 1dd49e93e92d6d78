from __future__ import annotations

"""
Unit tests for the PlatformFileSystem implementations.

Native executable queries are replaced with fakes that reproduce each
OS API's buffer protocol, so every platform branch runs on any host.
"""

import ctypes
import os
import sys
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from fsorder.domain.constants import INITIAL_PATH_BUFFER, MAX_PATH_BUFFER
from fsorder.domain.errors import ResolutionError
from fsorder.infra.platform import (
    DarwinFileSystem,
    PosixFileSystem,
    WindowsFileSystem,
    get_platform_filesystem,
    select_filesystem,
)

posix_only = pytest.mark.skipif(os.name == "nt", reason="requires POSIX symlinks")


# -----------------------------------------------------------------------------
# SELECTION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "tag, expected",
    [
        ("win32", WindowsFileSystem),
        ("darwin", DarwinFileSystem),
        ("linux", PosixFileSystem),
        ("freebsd13", PosixFileSystem),
    ],
)
def test_select_filesystem_by_platform_tag(tag: str, expected: type) -> None:
    assert type(select_filesystem(tag)) is expected


def test_process_wide_filesystem_is_shared() -> None:
    assert get_platform_filesystem() is get_platform_filesystem()


def test_separators() -> None:
    assert WindowsFileSystem.separator == "\\"
    assert DarwinFileSystem.separator == "/"
    assert PosixFileSystem.separator == "/"


# -----------------------------------------------------------------------------
# POSIX (/proc/self/exe)
# -----------------------------------------------------------------------------

@posix_only
def test_posix_truncates_after_last_slash(tmp_path: Path) -> None:
    link = tmp_path / "exe"
    os.symlink("/opt/batchtool/bin/batchtool", link)

    fs = PosixFileSystem(self_exe_link=str(link))

    assert fs.executable_path() == "/opt/batchtool/bin/batchtool"
    assert fs.executable_directory() == "/opt/batchtool/bin/"


def test_posix_missing_link_raises(tmp_path: Path) -> None:
    fs = PosixFileSystem(self_exe_link=str(tmp_path / "missing"))

    with pytest.raises(ResolutionError) as exc_info:
        fs.executable_directory()

    assert exc_info.value.path == str(tmp_path / "missing")
    assert "readlink" in exc_info.value.reason


@posix_only
def test_posix_target_without_separator_raises(tmp_path: Path) -> None:
    link = tmp_path / "exe"
    os.symlink("batchtool", link)

    with pytest.raises(ResolutionError):
        PosixFileSystem(self_exe_link=str(link)).executable_directory()


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="requires /proc")
def test_posix_real_process_image() -> None:
    exe_dir = PosixFileSystem().executable_directory()

    assert exe_dir.endswith("/")
    assert os.path.isdir(exe_dir)


# -----------------------------------------------------------------------------
# WINDOWS (GetModuleFileNameW)
# -----------------------------------------------------------------------------

def _fake_module_file_name(path: str, calls: List[int]):
    """Emulate GetModuleFileNameW: truncate and return nSize when too small."""
    def _query(_module, buf, size):
        calls.append(size)
        if len(path) >= size:
            return size
        buf.value = path
        return len(path)
    return _query


def test_windows_truncates_after_last_backslash() -> None:
    calls: List[int] = []
    fake = _fake_module_file_name("C:\\Program Files\\Batch Tool\\tool.exe", calls)

    with patch.object(WindowsFileSystem, "_load_query", return_value=fake):
        exe_dir = WindowsFileSystem().executable_directory()

    assert exe_dir == "C:\\Program Files\\Batch Tool\\"
    assert calls == [INITIAL_PATH_BUFFER]


def test_windows_grows_buffer_on_truncation() -> None:
    long_path = "C:\\" + "d" * 300 + "\\tool.exe"
    calls: List[int] = []
    fake = _fake_module_file_name(long_path, calls)

    with patch.object(WindowsFileSystem, "_load_query", return_value=fake):
        exe_path = WindowsFileSystem().executable_path()

    assert exe_path == long_path
    assert calls == [INITIAL_PATH_BUFFER, INITIAL_PATH_BUFFER * 2]


def test_windows_api_error_raises() -> None:
    with patch.object(WindowsFileSystem, "_load_query", return_value=lambda *_: 0):
        with pytest.raises(ResolutionError) as exc_info:
            WindowsFileSystem().executable_directory()

    assert "GetModuleFileNameW" in exc_info.value.reason


def test_windows_path_beyond_max_buffer_raises() -> None:
    with patch.object(WindowsFileSystem, "_load_query", return_value=lambda _m, _b, size: size):
        with pytest.raises(ResolutionError) as exc_info:
            WindowsFileSystem().executable_path()

    assert str(MAX_PATH_BUFFER) in exc_info.value.reason


@pytest.mark.skipif(sys.platform == "win32", reason="kernel32 is available on Windows")
def test_windows_query_unavailable_off_windows() -> None:
    with pytest.raises(ResolutionError):
        WindowsFileSystem().executable_path()


# -----------------------------------------------------------------------------
# APPLE (_NSGetExecutablePath)
# -----------------------------------------------------------------------------

def _fake_ns_get_executable_path(path: bytes, calls: List[int]):
    """Emulate dyld: report the required size and return -1 when too small."""
    def _query(buf, size_ptr):
        calls.append(size_ptr.contents.value)
        needed = len(path) + 1
        if size_ptr.contents.value < needed:
            size_ptr.contents.value = needed
            return -1
        buf.value = path
        return 0
    return _query


def test_darwin_truncates_after_last_slash() -> None:
    calls: List[int] = []
    fake = _fake_ns_get_executable_path(b"/Applications/Tool.app/Contents/MacOS/tool", calls)

    with patch.object(DarwinFileSystem, "_load_query", return_value=fake):
        exe_dir = DarwinFileSystem().executable_directory()

    assert exe_dir == "/Applications/Tool.app/Contents/MacOS/"
    assert calls == [INITIAL_PATH_BUFFER]


def test_darwin_retries_with_reported_size() -> None:
    long_path = b"/Volumes/" + b"x" * 400 + b"/tool"
    calls: List[int] = []
    fake = _fake_ns_get_executable_path(long_path, calls)

    with patch.object(DarwinFileSystem, "_load_query", return_value=fake):
        exe_path = DarwinFileSystem().executable_path()

    assert exe_path == long_path.decode()
    assert calls == [INITIAL_PATH_BUFFER, len(long_path) + 1]


def test_darwin_failure_without_size_hint_raises() -> None:
    with patch.object(DarwinFileSystem, "_load_query", return_value=lambda *_: -1):
        with pytest.raises(ResolutionError):
            DarwinFileSystem().executable_directory()


@pytest.mark.skipif(sys.platform == "darwin", reason="dyld is available on macOS")
def test_darwin_query_unavailable_off_macos() -> None:
    with pytest.raises(ResolutionError):
        DarwinFileSystem().executable_path()


# -----------------------------------------------------------------------------
# SHARED PROBES
# -----------------------------------------------------------------------------

def test_probes_on_real_entries(tmp_path: Path) -> None:
    target = tmp_path / "frame.png"
    target.write_bytes(b"\x89PNG")
    fs = select_filesystem()

    assert fs.is_directory(str(tmp_path)) is True
    assert fs.is_directory(str(target)) is False
    assert fs.is_readable(str(target)) is True
    assert fs.is_readable(str(tmp_path / "missing.png")) is False


def test_probes_reject_embedded_nul() -> None:
    fs = select_filesystem()
    assert fs.is_directory("bad\0path") is False
    assert fs.is_readable("bad\0path") is False
