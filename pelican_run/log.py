"""Console logging for the pelican_run package."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

from .config import check_log_level


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("pelican_run.", "")
        return f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"


def setup_logging(level: str = "info") -> None:
    """Configure the pelican_run root logger."""
    root = logging.getLogger("pelican_run")
    root.setLevel(check_log_level("log level", level).upper())
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the pelican_run namespace."""
    return logging.getLogger(f"pelican_run.{name}")
