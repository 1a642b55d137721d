# hmdbrdf/observability.py
"""
Logging setup with contextvars-based metadata injection.

- Adds the accession of the record being converted into every log line.
- Console handler writes to stderr; stdout is reserved for Turtle output.
- Optional rotating file log.
"""

import contextvars
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

cv_accession = contextvars.ContextVar("accession", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.acc = cv_accession.get() or "-"
        return True


def set_log_context(*, accession: Optional[str] = None) -> None:
    if accession is not None:
        cv_accession.set(str(accession))


def clear_log_context() -> None:
    cv_accession.set("-")


def configure_logging(
    *,
    log_file: Optional[Path] = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging.

    Args:
        log_file: Path to log file (None = console only)
        console_level: Minimum level for stderr output
        file_level: Minimum level for file output
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] acc=%(acc)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | acc=%(acc)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
