from __future__ import annotations

"""
Domain Constants.

Centralizes the numeric bounds, OS probe locations and diagnostic
templates shared by the comparator, the directory lister and the
executable-path resolvers.
"""

# -----------------------------------------------------------------------------
# NATURAL ORDERING
# -----------------------------------------------------------------------------

# Digit runs are parsed as unsigned 64-bit values and clamp at this ceiling.
NUMERIC_SATURATION: int = 2 ** 64 - 1

# -----------------------------------------------------------------------------
# EXECUTABLE DISCOVERY
# -----------------------------------------------------------------------------

PROC_SELF_EXE = "/proc/self/exe"

# Character capacity used for the first native query; doubled on truncation.
INITIAL_PATH_BUFFER: int = 256
MAX_PATH_BUFFER: int = 32768

# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

OPENDIR_FAILED_FMT = "opendir failed {path}"
EXE_QUERY_FAILED_FMT = "executable path query failed: {reason}"

LOG_LEVEL_ENV_VAR = "FSORDER_LOG_LEVEL"
