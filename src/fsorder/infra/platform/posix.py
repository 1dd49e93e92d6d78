from __future__ import annotations

"""
POSIX (Linux, BSD and friends) FileSystem Implementation.

Locates the running executable through the kernel's self-referential
process-image link.
"""

import os

from fsorder.domain.constants import PROC_SELF_EXE
from fsorder.infra.platform.base import PlatformFileSystem


class PosixFileSystem(PlatformFileSystem):
    """Generic POSIX host resolving its executable via /proc/self/exe."""

    name = "posix"
    separator = "/"

    def __init__(self, self_exe_link: str = PROC_SELF_EXE) -> None:
        self.self_exe_link = self_exe_link

    def executable_path(self) -> str:
        try:
            target = os.readlink(self.self_exe_link)
        except OSError as e:
            raise self._fail(f"readlink {self.self_exe_link}: {e.strerror or e}",
                             path=self.self_exe_link) from e

        if not target:
            raise self._fail(f"readlink {self.self_exe_link}: empty target",
                             path=self.self_exe_link)
        return target
