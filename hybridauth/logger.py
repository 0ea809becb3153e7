"""Default logger collaborator built on structlog."""

from __future__ import annotations

import atexit
import logging
import os
import sys
import threading
from typing import Dict, TextIO, Union

import structlog

from hybridauth.core.logger import Logger
from hybridauth.exceptions import InvalidConfigError
from hybridauth.models import DebugMode

_LEVELS = {
    DebugMode.ERROR: logging.ERROR,
    DebugMode.INFO: logging.INFO,
    DebugMode.DEBUG: logging.DEBUG,
}

# One append handle per debug file, shared by every logger writing to it
_sinks: Dict[str, TextIO] = {}
_sinks_lock = threading.Lock()


def _open_sink(debug_file: str) -> TextIO:
    path = os.path.abspath(debug_file)
    with _sinks_lock:
        sink = _sinks.get(path)
        if sink is None or sink.closed:
            try:
                sink = open(path, "a", encoding="utf-8")
            except OSError as e:
                raise InvalidConfigError(f"Cannot open debug_file {debug_file!r}: {e}") from e
            _sinks[path] = sink
        return sink


@atexit.register
def close_sinks() -> None:
    """Close every debug file opened by create_logger."""
    with _sinks_lock:
        for sink in _sinks.values():
            sink.close()
        _sinks.clear()


def create_logger(
    debug_mode: Union[DebugMode, str, bool] = DebugMode.NONE,
    debug_file: str = "",
) -> Logger:
    """Build the logger handed to the orchestrator and the adapters.

    Args:
        debug_mode: NONE silences everything. ERROR, INFO and DEBUG set the
            minimum level that gets written.
        debug_file: File the entries are appended to. Entries go to stderr
            when empty. Loggers for the same file share one handle.

    Returns:
        A structlog bound logger

    Raises:
        InvalidConfigError: If debug_file cannot be opened for writing
    """
    mode = DebugMode.parse(debug_mode)
    if mode is DebugMode.NONE:
        return structlog.wrap_logger(
            structlog.ReturnLogger(),
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        ).bind(logger="hybridauth")

    sink = _open_sink(debug_file) if debug_file else sys.stderr

    return structlog.wrap_logger(
        structlog.WriteLogger(sink),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event"], drop_missing=True
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS[mode]),
    ).bind(logger="hybridauth")
