"""
Logging configuration — one setup call per process.

The CLI calls ``configure_from_flags`` before dispatching a command;
every module then logs through ``logging.getLogger(__name__)``.

Console level precedence:
    CLI flag  >  CSVFIXTURES_LOG_LEVEL  >  WARNING

A log file is added when CSVFIXTURES_LOG_FILE is set, at
CSVFIXTURES_LOG_FILE_LEVEL (or the console level).
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "CSVFIXTURES_LOG_LEVEL"
ENV_FILE = "CSVFIXTURES_LOG_FILE"
ENV_FILE_LEVEL = "CSVFIXTURES_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

# WARNING and above: the message is enough
_FMT_MINIMAL = "%(message)s"

# INFO: time + logger, enough to follow a generation run file by file
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG: level and source line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# Log file: full date, since files outlive a single run
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

# Flask's dev server logs every request at INFO
_NOISY_LOGGERS = ("werkzeug", "urllib3")

_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, _FMT_DEBUG, _DATEFMT_DEBUG),
    (logging.INFO, _FMT_VERBOSE, _DATEFMT_VERBOSE),
)


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level from CLI flags, falling back to the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def configure_from_flags(debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Set up logging from the global CLI flags and the CSVFIXTURES_LOG_* env vars."""
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Replace the root logger's handlers with a console (and optional file) handler.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file; defaults to ``level``.
        quiet_third_party: Hold werkzeug and friends at WARNING
            unless running at DEBUG.
    """
    console_level = _parse_level(level)

    # ── Console handler (stderr, keeps stdout clean for --json) ──
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_console_handler(console_level))

    # ── File handler (optional) ─────────────────────────────────
    root_level = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    # Root passes records down to the most verbose handler
    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _FMT_MINIMAL, None
    for threshold, candidate, candidate_datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            fmt, datefmt = candidate, candidate_datefmt
            break

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value (unknown → WARNING)."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
