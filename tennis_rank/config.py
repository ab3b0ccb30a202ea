"""
Runtime configuration read from the environment.

Values are read from ``os.environ`` when the package is imported. A ``.env``
file is only consulted when the embedding application calls ``load_env()``
at startup; importing the library never touches the environment.

Only sanity bounds and defaults live here; the rating formula constants
are fixed in ``tennis_rank.mmr``.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from .logging_config import get_logger

log = get_logger(__name__)

# Rating for new players and players with no stored rating
DEFAULT_RATING: float = 1200.0

# Sanity bounds used by the score parser to reject corrupted input
MAX_SET_GAMES: int = 20
MAX_TIEBREAK_POINTS: int = 99


def _positive_number(name: str, default: float, cast=float):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        log.warning("Invalid %s value %r, using default %s", name, raw, default)
        return default
    if value <= 0:
        log.warning("%s must be positive, using default %s", name, default)
        return default
    return value


def refresh() -> None:
    """Re-read settings from the current environment."""
    global DEFAULT_RATING, MAX_SET_GAMES, MAX_TIEBREAK_POINTS
    DEFAULT_RATING = _positive_number("DEFAULT_RATING", 1200.0)
    MAX_SET_GAMES = _positive_number("MAX_SET_GAMES", 20, int)
    MAX_TIEBREAK_POINTS = _positive_number("MAX_TIEBREAK_POINTS", 99, int)


def load_env(dotenv_path: Optional[str] = None, override: bool = False) -> None:
    """Load a .env file into the environment, then refresh settings.

    Meant for application entry points; with no path python-dotenv searches
    upward from the calling module.
    """
    found = load_dotenv(dotenv_path, override=override)
    log.debug("load_dotenv(%r) found=%s", dotenv_path, found)
    refresh()


refresh()
