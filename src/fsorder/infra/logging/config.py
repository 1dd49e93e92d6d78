from __future__ import annotations

"""
Logging Configuration Models.

Defines the immutable settings used to initialize the logging subsystem
and the mapping from textual severity names to logging constants.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from fsorder.domain.constants import LOG_LEVEL_ENV_VAR

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        log_file: Optional path for a rotating log file.
        max_bytes: Maximum size per log segment before rotation.
        backup_count: Number of historical log segments to preserve.
        console_fmt: Format for terminal output.
        file_fmt: Format for file entries.
        datefmt: Timestamp format for file entries.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(
            cls,
            environ: Optional[Mapping[str, str]] = None,
            **overrides: object,
    ) -> "LoggingConfig":
        """
        Build a config whose level is taken from FSORDER_LOG_LEVEL when set.

        Args:
            environ: Environment mapping to read. Defaults to os.environ.
            **overrides: Explicit field values; they win over the environment.

        Returns:
            LoggingConfig: The resolved configuration.
        """
        env = os.environ if environ is None else environ
        fields: Dict[str, object] = {}

        level = (env.get(LOG_LEVEL_ENV_VAR) or "").strip()
        if level:
            fields["level"] = level

        fields.update(overrides)
        return cls(**fields)  # type: ignore[arg-type]
