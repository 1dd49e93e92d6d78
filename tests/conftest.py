from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used by listing and resolution tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """
    Return a factory that populates a fresh directory with empty files.

    Returns:
        Callable: make(names) -> directory containing one file per name.
    """
    counter = {"n": 0}

    def _make(names: Iterable[str]) -> Path:
        counter["n"] += 1
        root = tmp_path / f"frames_{counter['n']}"
        root.mkdir()
        for name in names:
            (root / name).write_bytes(b"")
        return root

    return _make
