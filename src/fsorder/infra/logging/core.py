from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Handlers sit
behind a QueueHandler/QueueListener pair so that file writes never block
the thread performing filesystem work.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fsorder.infra.logging.config import _LEVEL_MAP, LoggingConfig
from fsorder.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_fsorder_configured"
_QUEUE_LISTENER_ATTR: str = "_fsorder_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, routing records through a queue.

    Subsequent calls are no-ops unless `force` is set, in which case the
    handlers previously installed by this function are replaced. Handlers
    owned by the host application are left untouched.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(level_int)
            sh.setFormatter(logging.Formatter(cfg.console_fmt))
            _tag_handler(sh)
            handlers_list.append(sh)

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            setattr(root, _CONFIGURED_FLAG_ATTR, True)
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()

        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)

        return root

    # Emergency console logging if handler construction fails
    except (OSError, ValueError, TypeError) as e:
        _remove_our_handlers(root)
        _stop_existing_listener(root)

        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        root.addHandler(sh)
        root.setLevel(logging.INFO)

        root.warning(f"Logging setup failed ({e}). Switched to emergency console.")
        return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger bound to the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Stop the queue listener and detach every handler this package installed."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close all package-managed handlers from the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate and release the existing QueueListener."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    `QueueListener.stop` fails on a second call because its worker thread
    is reset to None; atexit and explicit shutdown may both reach here.
    """
    if not listener:
        return

    if getattr(listener, "_thread", None) is not None:
        listener.stop()
