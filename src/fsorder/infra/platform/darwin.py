from __future__ import annotations

"""
Apple (macOS) FileSystem Implementation.

Locates the running executable through the dynamic linker's
`_NSGetExecutablePath`, which reports the required buffer size when the
first attempt is too small.
"""

import ctypes
import os
from typing import Any, Callable

from fsorder.domain.constants import INITIAL_PATH_BUFFER, MAX_PATH_BUFFER
from fsorder.infra.platform.base import PlatformFileSystem


class DarwinFileSystem(PlatformFileSystem):
    """macOS host backed by dyld."""

    name = "darwin"
    separator = "/"

    def executable_path(self) -> str:
        query = self._load_query()

        size = ctypes.c_uint32(INITIAL_PATH_BUFFER)
        buf = ctypes.create_string_buffer(size.value)
        if query(buf, ctypes.pointer(size)) != 0:
            # dyld wrote the required capacity into `size`
            if size.value <= INITIAL_PATH_BUFFER or size.value > MAX_PATH_BUFFER:
                raise self._fail(f"_NSGetExecutablePath requested {size.value} bytes")
            buf = ctypes.create_string_buffer(size.value)
            if query(buf, ctypes.pointer(size)) != 0:
                raise self._fail("_NSGetExecutablePath failed after resize")

        path = os.fsdecode(buf.value)
        if not path:
            raise self._fail("_NSGetExecutablePath returned an empty path")
        return path

    def _load_query(self) -> Callable[..., Any]:
        """Bind `_NSGetExecutablePath` from the process image."""
        try:
            fn = ctypes.CDLL(None)._NSGetExecutablePath
        except (OSError, AttributeError, TypeError) as e:
            raise self._fail(f"dyld symbol unavailable: {e}") from e

        fn.argtypes = [ctypes.c_char_p, ctypes.POINTER(ctypes.c_uint32)]
        fn.restype = ctypes.c_int
        return fn
