"""
Logging Configuration — stderr logging for the gibo CLI.

Stdout carries boilerplate content, so every log line goes to stderr.
Normal runs only show warnings and errors; -v / GIBO_LOG_LEVEL=DEBUG adds
timestamps and the emitting module so git activity can be followed.

## Environment Variables

- GIBO_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)

## Usage

    from gibo.logging_config import setup_logging

    setup_logging()  # Call once at startup
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime


class CLIFormatter(logging.Formatter):
    """
    Compact formatter for a one-shot command.

    Output format:
    gibo: warning: Message                    (INFO and above)
    12:34:56 debug [git_sync] Message          (when verbose)
    """

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, verbose: bool = False, color: bool | None = None):
        super().__init__()
        self.verbose = verbose
        self.color = sys.stderr.isatty() if color is None else color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.lower()
        if self.color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        if self.verbose:
            time_str = datetime.now().strftime("%H:%M:%S")
            module = record.name.split(".")[-1]
            return f"{time_str} {level} [{module}] {msg}"

        return f"gibo: {level}: {msg}"


def setup_logging(level: str | None = None) -> None:
    """
    Configure logging for the CLI.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to GIBO_LOG_LEVEL env var or WARNING.
    """
    log_level = (level or os.environ.get("GIBO_LOG_LEVEL", "WARNING")).upper()
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CLIFormatter(verbose=numeric_level <= logging.DEBUG))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.getLogger(__name__).debug(f"Logging configured: level={logging.getLevelName(numeric_level)}")
