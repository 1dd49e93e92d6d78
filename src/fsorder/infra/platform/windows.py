from __future__ import annotations

"""
Windows FileSystem Implementation.

Locates the running executable through `GetModuleFileNameW`. The API
silently truncates into a short buffer and returns the buffer size, so
the query is retried with a doubled buffer until the result fits.
"""

import ctypes
from typing import Any, Callable

from fsorder.domain.constants import INITIAL_PATH_BUFFER, MAX_PATH_BUFFER
from fsorder.infra.platform.base import PlatformFileSystem


class WindowsFileSystem(PlatformFileSystem):
    """Win32 host backed by kernel32."""

    name = "windows"
    separator = "\\"

    def executable_path(self) -> str:
        query = self._load_query()

        size = INITIAL_PATH_BUFFER
        while size <= MAX_PATH_BUFFER:
            buf = ctypes.create_unicode_buffer(size)
            length = query(None, buf, size)
            if length == 0:
                raise self._fail(f"GetModuleFileNameW error {self._last_error()}")
            if length < size:
                return buf.value
            size *= 2

        raise self._fail(f"module path longer than {MAX_PATH_BUFFER} characters")

    def _load_query(self) -> Callable[..., Any]:
        """Bind `GetModuleFileNameW` from kernel32."""
        try:
            from ctypes import wintypes

            fn = ctypes.WinDLL("kernel32", use_last_error=True).GetModuleFileNameW
        except (OSError, AttributeError, ImportError, ValueError) as e:
            raise self._fail(f"kernel32 unavailable: {e}") from e

        fn.argtypes = [wintypes.HMODULE, wintypes.LPWSTR, wintypes.DWORD]
        fn.restype = wintypes.DWORD
        return fn

    @staticmethod
    def _last_error() -> int:
        """Thread-local Win32 error code captured by ctypes."""
        get_last_error = getattr(ctypes, "get_last_error", None)
        return get_last_error() if get_last_error else 0
