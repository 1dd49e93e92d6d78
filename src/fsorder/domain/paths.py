from __future__ import annotations

"""
Path Representation.

Every helper works on the interpreter's native `str` path form on all
platforms. Bytes and path-like inputs are converted once, here, at the
boundary.
"""

import os
from typing import Union

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def to_native_path(path: PathInput) -> str:
    """
    Convert str, bytes or path-like input to a native str path.

    Bytes are decoded with the filesystem encoding and error handler, so
    undecodable names survive a round trip through `os.fsencode`.
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        return os.fsdecode(raw)
    return raw
