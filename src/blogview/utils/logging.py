"""Structured logging for blogview.

Events are JSON lines appended to ``blogview.log`` in the log directory:

    {"slug": "hooks-deeply", "event": "post_loaded", "level": "debug", ...}

The directory defaults to ``~/.cache/blogview/logs`` and can be moved with
``BLOGVIEW_LOG_DIR``; the level comes from ``BLOGVIEW_LOG_LEVEL``
(DEBUG, INFO, WARNING or ERROR; default INFO). Follow the log with:

    tail -f ~/.cache/blogview/logs/blogview.log | jq .
"""

import atexit
import os
from pathlib import Path
from typing import Any, Optional, TextIO

import structlog


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FILENAME = "blogview.log"

# One handle per process; replaced only when the log directory changes
_log_stream: Optional[TextIO] = None
_configured: Optional[tuple[Path, str]] = None


def default_log_dir() -> Path:
    env_dir = os.environ.get("BLOGVIEW_LOG_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".cache" / "blogview" / "logs"


def log_level_from_env() -> str:
    level = os.environ.get("BLOGVIEW_LOG_LEVEL", "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def configure_logging(log_dir: Optional[Path] = None) -> None:
    """Route structlog output to the log file.

    Safe to call repeatedly (every CLI invocation does): the open handle is
    reused while the target file and level are unchanged.

    Args:
        log_dir: Directory for ``blogview.log`` (default: ``default_log_dir()``)
    """
    global _log_stream, _configured

    log_file = Path(log_dir or default_log_dir()) / LOG_FILENAME
    level = log_level_from_env()
    if _configured == (log_file, level) and _log_stream is not None and not _log_stream.closed:
        return

    if _log_stream is None or _log_stream.closed or _configured[0] != log_file:
        close_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _log_stream = log_file.open("a", encoding="utf-8")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_log_stream),
        # Loggers re-resolve the factory so a replaced handle is never written to
        cache_logger_on_first_use=False,
    )
    _configured = (log_file, level)


def close_log_file() -> None:
    """Close the log handle opened by ``configure_logging``, if any.

    structlog falls back to its defaults until configured again.
    """
    global _log_stream, _configured
    if _log_stream is not None and not _log_stream.closed:
        structlog.reset_defaults()
        _log_stream.close()
    _log_stream = None
    _configured = None


atexit.register(close_log_file)


def get_logger(name: str) -> Any:
    """Structured logger for a module (``get_logger(__name__)``)."""
    return structlog.get_logger(name)
