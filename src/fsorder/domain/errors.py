from __future__ import annotations

"""
Domain Error Taxonomy.

Structured failure signals raised by the filesystem helpers. Every error
carries the offending path and the underlying OS reason so callers can
branch on the type instead of parsing diagnostic text.
"""

from typing import Optional


class FsOrderError(Exception):
    """
    Base class for all failures surfaced by fsorder.

    Attributes:
        path: Path the failing operation was given (may be empty).
        reason: Human-readable cause reported by the OS or the resolver.
    """

    def __init__(self, message: str, path: str = "", reason: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason or ""


class DirectoryOpenError(FsOrderError):
    """Directory is missing, is not a directory, or cannot be read."""


class ResolutionError(FsOrderError):
    """The running executable's own location could not be determined."""
