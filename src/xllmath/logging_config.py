"""Logging setup for the command-line entry point.

Library modules never configure logging; they only do
``logger = logging.getLogger(__name__)``.  ``setup_logging`` is called once
from ``cli.main``.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def coerce_level(level: int | str) -> int:
    """Coerce a logging level given as int or string into an int."""
    if isinstance(level, int):
        return level

    s = str(level).strip().upper()
    if not s:
        raise ValueError("Empty logging level")
    if s.isdigit():
        return int(s)

    try:
        return _LEVELS[s]
    except KeyError as e:
        raise ValueError(f"Unknown logging level: {level!r}") from e


def setup_logging(
    level: int | str = "WARNING",
    *,
    fmt: str = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    log_file: str | Path | None = None,
) -> None:
    """Configure the root logger: stderr handler plus an optional file.

    Uses ``force=True`` so repeated calls (tests, notebooks) don't stack
    handlers.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(p, encoding="utf-8"))

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)
    for h in handlers:
        h.setFormatter(formatter)

    logging.basicConfig(level=coerce_level(level), handlers=handlers, force=True)
