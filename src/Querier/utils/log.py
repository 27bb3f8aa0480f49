"""Querier logging utilities.

All diagnostics (index load warnings, bad arguments, query errors at DEBUG)
go through the `Querier` logger on stderr. Standard output carries only the
prompt and result blocks, so a session can be piped into another tool.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final, TextIO

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_LOG_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("Querier")


def session_log_path(log_dir: str, action: str) -> Path:
    """Return a fresh log file path `<log_dir>/<action>/<action>_<mmddHHMMSS>.log`."""
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%m%d%H%M%S")
    return action_dir / f"{action}_{timestamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
    stream: TextIO | None = None,
) -> None:
    """Configure the Querier logger for one CLI session.

    Records look like `mm-dd HH:MM:SS [LVL] message` with LVL one of
    DEBG/INFO/WARN/ERRO. The console handler honours `level`; the optional
    session file always records DEBUG, which includes every rejected query.

    Args:
        level: Console logging level (e.g., INFO, DEBUG).
        action: CLI action name; required for the session file.
        log_to_file: Whether to mirror records to a session file.
        log_dir: Base directory for session files.
        stream: Console stream; defaults to the current `sys.stderr`.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if log_to_file and action:
        session_file = logging.FileHandler(session_log_path(log_dir, action), encoding="utf-8")
        session_file.setLevel(logging.DEBUG)
        session_file.setFormatter(formatter)
        handlers.append(session_file)

    for handler in log.handlers:
        handler.close()
    log.handlers = handlers
    log.setLevel(min(handler.level for handler in handlers))
    log.propagate = False
