"""Colored, timestamped logging for the detector and its CLI.

Only the package logger ("keylang") carries a handler; module loggers
propagate to it, so the source column tells loader, classifier and CLI
lines apart.
"""

import logging
import sys
from datetime import datetime

GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
DIM = "\x1b[2m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"

PACKAGE_LOGGER = "keylang"


class DetectorFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: DIM,
        logging.INFO: "",
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: RED + BOLD,
    }

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        color = self.LEVEL_COLORS.get(record.levelno, "")
        source = record.name.removeprefix(f"{PACKAGE_LOGGER}.")
        line = f"{DIM}[{ts}] {source}{RESET} {color}{record.getMessage()}{RESET}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_logger(name: str = PACKAGE_LOGGER, level: str | None = None) -> logging.Logger:
    """Return ``name``'s logger, attaching the stderr handler to the package once.

    ``level`` applies to the whole package; None leaves it unchanged.
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(DetectorFormatter())
        package.addHandler(handler)
        package.setLevel(logging.INFO)
    if level is not None:
        package.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logging.getLogger(name)
