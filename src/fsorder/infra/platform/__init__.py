from __future__ import annotations

"""
Platform selection for filesystem access.

Picks the PlatformFileSystem implementation matching the running host.
The choice is made once per process; implementations carry no state.
"""

import sys
from functools import lru_cache
from typing import Optional

from .base import PlatformFileSystem
from .darwin import DarwinFileSystem
from .posix import PosixFileSystem
from .windows import WindowsFileSystem


def select_filesystem(platform: Optional[str] = None) -> PlatformFileSystem:
    """
    Build the implementation for a `sys.platform` identifier.

    Args:
        platform: Platform tag to select for. Defaults to the running host.

    Returns:
        PlatformFileSystem: Windows, Darwin or generic POSIX implementation.
    """
    tag = platform if platform is not None else sys.platform
    if tag.startswith("win"):
        return WindowsFileSystem()
    if tag == "darwin":
        return DarwinFileSystem()
    return PosixFileSystem()


@lru_cache(maxsize=1)
def get_platform_filesystem() -> PlatformFileSystem:
    """Return the process-wide implementation for the running host."""
    return select_filesystem()


__all__ = [
    "PlatformFileSystem",
    "PosixFileSystem",
    "DarwinFileSystem",
    "WindowsFileSystem",
    "select_filesystem",
    "get_platform_filesystem",
]
