from __future__ import annotations

"""
Platform FileSystem Capability.

Declares the single polymorphic seam between the platform-agnostic
helpers (ordering, filtering, fallback resolution) and the host OS. The
shared probes rely on `os` primitives that behave identically on every
platform; subclasses only supply the native executable-path query and
the separator that query produces.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from typing import ContextManager, Iterator

from fsorder.domain.constants import EXE_QUERY_FAILED_FMT
from fsorder.domain.errors import ResolutionError

logger = logging.getLogger(__name__)


class PlatformFileSystem(ABC):
    """
    Host-specific filesystem operations.

    Implementations are stateless; one instance is selected per process
    and may be shared freely across threads.
    """

    #: Name reported in diagnostics.
    name: str = "generic"

    #: Separator terminating the executable directory.
    separator: str = "/"

    # --------------------------------------------------------------------------
    # Probes
    # --------------------------------------------------------------------------

    def is_directory(self, path: str) -> bool:
        """Return True if `path` exists and is a directory (symlinks followed)."""
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return False
        return stat.S_ISDIR(st.st_mode)

    def is_readable(self, path: str) -> bool:
        """
        Probe read access by opening the file and closing it immediately.

        Returns:
            bool: True when a binary read handle could be acquired.
        """
        try:
            with open(path, "rb"):
                return True
        except (OSError, ValueError):
            return False

    def open_directory(self, path: str) -> ContextManager[Iterator[os.DirEntry]]:
        """
        Open a directory for enumeration.

        The returned context manager releases the native handle on exit.

        Raises:
            OSError: If the directory cannot be opened.
        """
        return os.scandir(path)

    # --------------------------------------------------------------------------
    # Executable discovery
    # --------------------------------------------------------------------------

    def executable_directory(self) -> str:
        """
        Resolve the directory holding the running executable.

        Returns:
            str: Directory path ending with `separator`.

        Raises:
            ResolutionError: If the native query fails or yields no directory.
        """
        exe_path = self.executable_path()
        cut = exe_path.rfind(self.separator)
        if cut < 0:
            raise self._fail(f"no '{self.separator}' in '{exe_path}'", path=exe_path)
        return exe_path[:cut + 1]

    @abstractmethod
    def executable_path(self) -> str:
        """
        Query the OS for the full path of the running executable.

        Raises:
            ResolutionError: If the OS cannot report it.
        """

    def _fail(self, reason: str, path: str = "") -> ResolutionError:
        """Log and build a ResolutionError for a failed native query."""
        message = EXE_QUERY_FAILED_FMT.format(reason=f"{self.name}: {reason}")
        logger.error(message)
        return ResolutionError(message, path=path, reason=reason)
