"""
Logging setup for applications embedding tennis_rank.

What the package logs, per module logger (`tennis_rank.<module>`):
- INFO  engine: one line per rated match (canonical score, winning side,
  applied deltas) and one line per score rejected before rating.
- DEBUG score: the text and reason of every rejected score.
- DEBUG mmr: K-factors, expected scores, multiplier and clamped deltas of
  each singles update, team averages and per-player deltas of doubles
  updates, and why a multiplier fell back to neutral.
- DEBUG config: whether load_env() found a .env file.
- WARNING config: environment values that were invalid and replaced by
  defaults.

The package never configures logging itself. Call setup_logging() once at
startup; LOG_LEVEL (DEBUG|INFO|WARNING|ERROR|CRITICAL) picks the level when
none is passed, and DEBUG switches to the verbose line format.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _level_from_env(default: LogLevel = "INFO") -> int:
    level_str = os.getenv("LOG_LEVEL", default).upper()
    return _LEVELS.get(level_str, logging.INFO)


def _level_from_name(name: str) -> int:
    return _LEVELS.get(name.upper(), logging.INFO)


def setup_logging(level: Optional[LogLevel] = None, mode: Optional[Literal["test", "prod"]] = None) -> None:
    """Configure root logger.

    Args:
        level: Optional string level (e.g., "DEBUG"). If omitted, uses LOG_LEVEL env var or INFO.
        mode: Optional mode hint ("test"|"prod") to tweak formatting; defaults based on level.
    """
    numeric_level = _level_from_env() if level is None else _level_from_name(level)

    # Avoid duplicate handlers if re-configuring
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    is_debug = numeric_level <= logging.DEBUG
    fmt_verbose = (
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(funcName)s | %(message)s"
    )
    fmt_concise = "%(levelname).1s %(name)s: %(message)s"
    fmt = fmt_verbose if (mode == "test" or is_debug) else fmt_concise

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%H:%M:%S"))

    root.setLevel(numeric_level)
    root.addHandler(handler)

    # python-dotenv warns about unparsable .env lines on every load
    logging.getLogger("dotenv").setLevel(logging.INFO if is_debug else logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    """Convenience wrapper to get a module logger."""
    return logging.getLogger(name)
