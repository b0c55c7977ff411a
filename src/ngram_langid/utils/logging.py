"""Colored single-line logging to stderr for the detector.

Model construction logs one INFO summary per build (languages, orders,
elapsed time) and a DEBUG line per model. Detection calls log at DEBUG only:
script fast-path verdicts and undetectable inputs. The CLI and the HTTP app
set the level from ``--log-level`` or ``LANGID_LOG_LEVEL``.
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
        line = f"{DIM}[{ts}]{RESET} {color}{record.getMessage()}{RESET}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_logger(name: str = "ngram_langid", level: str | None = None) -> logging.Logger:
    """Return the package logger, attaching the stderr handler once.

    The level is only changed when given explicitly, so modules can fetch the
    logger at import time without resetting a level chosen by the CLI.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(DetectorFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
