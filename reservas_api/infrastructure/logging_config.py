"""
Logging setup for the reservations API.

``setup_logging`` attaches a console handler (and optionally a file handler)
to the root logger. It only does so once, so calling ``create_app`` several
times, as the tests do, does not duplicate output.
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: str = "INFO", logfile: Optional[Union[str, Path]] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : str or Path, optional
        File to write log records to, in addition to the console.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
