"""Logging setup shared by the TUI and console modes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleFilter(logging.Filter):
    """Only our own warnings and errors reach the terminal; third-party noise stays in the file."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("todosync"):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def setup_logging(
    log_file: str | Path,
    level: str = "INFO",
    console: bool = False,
) -> None:
    """
    Configure the root logger with a file handler and, in console mode, a stderr handler.

    The TUI owns the terminal, so it calls this with ``console=False``.
    """
    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        ch.addFilter(_ConsoleFilter())
        root.addHandler(ch)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.captureWarnings(True)
