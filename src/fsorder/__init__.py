from __future__ import annotations

"""
fsorder: cross-platform file discovery, natural ordering and
executable-relative path resolution for batch file tools.
"""

from fsorder.core.natural import compare, less, natural_key, natural_sort
from fsorder.domain.errors import DirectoryOpenError, FsOrderError, ResolutionError
from fsorder.infra.fs import (
    extension,
    get_executable_directory,
    is_directory,
    is_readable,
    list_directory,
    name_without_extension,
    sanitize_dir_path,
    sanitize_file_path,
)

__version__ = "0.1.0"

__all__ = [
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
    "FsOrderError",
    "DirectoryOpenError",
    "ResolutionError",
]
