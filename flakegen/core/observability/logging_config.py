"""
Logging configuration — set up once by the CLI.

Modules log through ``logging.getLogger(__name__)``; this decides where
those records go and how much detail they carry.

Level precedence:
    --debug / --verbose / --quiet  >  FLAKEGEN_LOG_LEVEL  >  WARNING

FLAKEGEN_LOG_FILE adds a file sink at the same level, always in the
detailed format.
"""

from __future__ import annotations

import logging
import sys

_DETAILED = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S")

# Console format by threshold: the quieter the level, the terser the line
_CONSOLE_FORMATS = (
    (logging.DEBUG, _DETAILED),
    (logging.INFO, ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S")),
)
_MINIMAL = ("%(message)s", None)


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure the root logger for the process.

    Args:
        level: Level name; unknown names fall back to WARNING.
        log_file: Optional path of a log file to write alongside stderr.
    """
    numeric_level = _parse_level(level)

    handlers: list[logging.Handler] = [
        _handler(logging.StreamHandler(sys.stderr), numeric_level, _console_format(numeric_level))
    ]
    if log_file:
        handlers.append(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), numeric_level, _DETAILED)
        )

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(numeric_level)


def _console_format(numeric_level: int) -> tuple[str, str | None]:
    for threshold, fmt in _CONSOLE_FORMATS:
        if numeric_level <= threshold:
            return fmt
    return _MINIMAL


def _handler(
    handler: logging.Handler, numeric_level: int, fmt: tuple[str, str | None]
) -> logging.Handler:
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt[0], datefmt=fmt[1]))
    return handler


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
