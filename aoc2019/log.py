"""
Logging setup shared by the CLI and anything else that wants console/file logs.

Library modules only call logging.getLogger(__name__); handlers are attached
here, once, to the package logger.
"""

from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from . import config


def setup_logging(
    name: str = config.LOG_NAME,
    level: int = config.LOG_LEVEL,
    console_level: int = config.CONSOLE_LEVEL,
    log_dir: Optional[Path] = config.LOG_DIR,
) -> logging.Logger:
    """
    Configure and return a logger.

    Console output goes through rich at ``console_level``. When ``log_dir`` is
    given, everything (DEBUG+) is also written to
    ``<log_dir>/<name>_YYYYMMDD_HHMMSS.log``.

    Calling it again for a logger that already has handlers returns it as-is.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)

    # ── Console handler ──
    ch = RichHandler(
        level=console_level,
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    ch.setLevel(console_level)
    logger.addHandler(ch)

    # ── File handler: captures everything (DEBUG+) ──
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{name}_{ts}.log"
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(fh)
        logger.info("Log file: %s", log_file)

    return logger


def console_level_for(verbose: int = 0, quiet: bool = False) -> int:
    """Map -v/-q counts to a console log level."""
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return config.CONSOLE_LEVEL
