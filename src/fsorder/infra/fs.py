from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides directory enumeration, readability probes, filename splitting
and executable-relative path fallback. Delegates every host-specific call
to the selected PlatformFileSystem so that ordering and filtering behave
identically on Windows and Unix-like systems.
"""

import os
from typing import List

from fsorder.core.natural import natural_sort
from fsorder.domain.constants import OPENDIR_FAILED_FMT
from fsorder.domain.errors import DirectoryOpenError
from fsorder.domain.paths import PathInput, to_native_path
from fsorder.infra.logging import get_logger
from fsorder.infra.platform import get_platform_filesystem

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# PROBES
# -----------------------------------------------------------------------------

def is_directory(path: PathInput) -> bool:
    """
    Check whether a path exists and refers to a directory.

    Args:
        path: Path to probe.

    Returns:
        bool: True for directories (including symlinks to directories).
    """
    return get_platform_filesystem().is_directory(to_native_path(path))


def is_readable(path: PathInput) -> bool:
    """
    Check whether a file can be opened for reading.

    Acquires and immediately releases a read handle; leaves no other
    trace on the filesystem.

    Args:
        path: File path to probe.

    Returns:
        bool: True if the open succeeded.
    """
    return get_platform_filesystem().is_readable(to_native_path(path))

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_directory(dir_path: PathInput) -> List[str]:
    """
    List the regular files of a directory in natural order.

    Subdirectories, symbolic links, devices and other special entries are
    skipped. Entries whose type the enumeration cannot report are decided
    by an lstat of the entry.

    Args:
        dir_path: Directory to enumerate (not traversed recursively).

    Returns:
        List[str]: Bare file names sorted with the natural comparator.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
    """
    path = to_native_path(dir_path)
    platform_fs = get_platform_filesystem()

    try:
        with platform_fs.open_directory(path) as entries:
            names = [entry.name for entry in entries if _is_regular_file(entry)]
    except (OSError, ValueError) as e:
        message = OPENDIR_FAILED_FMT.format(path=path)
        logger.error(message)
        reason = getattr(e, "strerror", None) or str(e)
        raise DirectoryOpenError(message, path=path, reason=reason) from e

    logger.debug(f"Listed {len(names)} regular files in '{path}'")
    return natural_sort(names)

# -----------------------------------------------------------------------------
# FILENAME SPLITTING
# -----------------------------------------------------------------------------

def name_without_extension(path: PathInput) -> str:
    """
    Strip the final dot-suffix from a path.

    Returns:
        str: Everything before the last '.', or the whole path if none.
    """
    text = to_native_path(path)
    dot = text.rfind(".")
    if dot < 0:
        return text
    return text[:dot]


def extension(path: PathInput) -> str:
    """
    Extract the final dot-suffix of a path, without the dot.

    Returns:
        str: Everything after the last '.', or '' if the path has none.
    """
    text = to_native_path(path)
    dot = text.rfind(".")
    if dot < 0:
        return ""
    return text[dot + 1:]

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_executable_directory() -> str:
    """
    Resolve the directory of the running executable.

    Returns:
        str: Directory path terminated by the platform separator.

    Raises:
        ResolutionError: If the host cannot report the executable path.
    """
    return get_platform_filesystem().executable_directory()


def sanitize_file_path(path: PathInput) -> str:
    """
    Resolve a file path against the executable directory when needed.

    Readable paths are returned unchanged. Otherwise the executable
    directory is prepended; the result is not re-validated.

    Args:
        path: File path, possibly relative to an unknown working directory.

    Returns:
        str: The original path or its executable-relative counterpart.

    Raises:
        ResolutionError: If the fallback is needed but cannot be computed.
    """
    text = to_native_path(path)
    if is_readable(text):
        return text

    resolved = get_executable_directory() + text
    logger.debug(f"'{text}' not readable, falling back to '{resolved}'")
    return resolved


def sanitize_dir_path(path: PathInput) -> str:
    """
    Resolve a directory path against the executable directory when needed.

    Args:
        path: Directory path, possibly relative to an unknown working directory.

    Returns:
        str: The original path if it is a directory, else the
        executable-relative counterpart.

    Raises:
        ResolutionError: If the fallback is needed but cannot be computed.
    """
    text = to_native_path(path)
    if is_directory(text):
        return text

    resolved = get_executable_directory() + text
    logger.debug(f"'{text}' is not a directory, falling back to '{resolved}'")
    return resolved

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_regular_file(entry: os.DirEntry) -> bool:
    """Regular-file test that never follows symlinks; unreadable entries are skipped."""
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False
