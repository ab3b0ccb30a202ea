"""
Score grammar for tennis match results.

A match score is a comma-separated list of set tokens, each either
``"<gamesA>-<gamesB>"`` or ``"<gamesA>-<gamesB>(<pointsA>-<pointsB>)"``::

    "6-4, 7-6(7-3)"

Parsing never raises on bad input. ``parse_score`` returns either the list of
sets or a ``ScoreError`` value describing the first problem found, so forms
can show a field-level message without special-casing control flow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from . import config
from .logging_config import get_logger
from .models import SetScore, Tiebreak

log = get_logger(__name__)

_PAIR = re.compile(r"([0-9]+)-([0-9]+)")
# Longer digit runs are out of range whatever the configured bound is
_MAX_DIGITS = 9


class ErrorKind(str, Enum):
    EMPTY_SCORE = "EmptyScore"
    MALFORMED_SET = "MalformedSet"
    MALFORMED_TIEBREAK = "MalformedTiebreak"
    OUT_OF_RANGE = "OutOfRange"


@dataclass(frozen=True)
class ScoreError:
    """Why a score string was rejected.

    ``index`` is the 1-based set number and ``token`` the raw set text, both
    None when the whole string is at fault.
    """

    kind: ErrorKind
    message: str
    token: Optional[str] = None
    index: Optional[int] = None


class ScoreValidationError(ValueError):
    """Raised by ``parse_score_or_raise`` for callers that prefer exceptions."""

    def __init__(self, error: ScoreError) -> None:
        super().__init__(error.message)
        self.error = error
        self.kind = error.kind


MatchScore = list[SetScore]
ParseResult = Union[MatchScore, ScoreError]


def _pair(text: str) -> Optional[tuple[str, str]]:
    m = _PAIR.fullmatch(text)
    if m is None:
        return None
    return m.group(1), m.group(2)


def _bounded(digits: str, bound: int) -> Optional[int]:
    if len(digits) > _MAX_DIGITS:
        return None
    value = int(digits)
    return value if value <= bound else None


def _parse_set(token: str, index: int, max_games: int, max_tiebreak: int) -> Union[SetScore, ScoreError]:
    if not token:
        return ScoreError(ErrorKind.MALFORMED_SET, f"Set #{index} is empty.", token, index)

    set_part = token
    tiebreak: Optional[Tiebreak] = None

    if "(" in token or ")" in token:
        open_at = token.find("(")
        balanced = (
            open_at != -1
            and token.endswith(")")
            and token.count("(") == 1
            and token.count(")") == 1
        )
        if not balanced:
            return ScoreError(
                ErrorKind.MALFORMED_TIEBREAK,
                f"Set #{index} has an unbalanced tie-break group.",
                token,
                index,
            )
        inner = token[open_at + 1:-1].strip()
        if not inner:
            return ScoreError(
                ErrorKind.MALFORMED_TIEBREAK,
                f"Set #{index} has an empty tie-break score.",
                token,
                index,
            )
        tb = _pair(inner)
        if tb is None:
            return ScoreError(
                ErrorKind.MALFORMED_TIEBREAK,
                f"Set #{index} tie-break must look like 7-3.",
                token,
                index,
            )
        tb_a, tb_b = _bounded(tb[0], max_tiebreak), _bounded(tb[1], max_tiebreak)
        if tb_a is None or tb_b is None:
            return ScoreError(
                ErrorKind.OUT_OF_RANGE,
                f"Set #{index} tie-break points must be <= {max_tiebreak}.",
                token,
                index,
            )
        tiebreak = Tiebreak(tb_a, tb_b)
        set_part = token[:open_at].rstrip()

    games = _pair(set_part)
    if games is None:
        return ScoreError(
            ErrorKind.MALFORMED_SET,
            f"Set #{index} must look like 6-4.",
            token,
            index,
        )
    games_a, games_b = _bounded(games[0], max_games), _bounded(games[1], max_games)
    if games_a is None or games_b is None:
        return ScoreError(
            ErrorKind.OUT_OF_RANGE,
            f"Set #{index} games must be <= {max_games}.",
            token,
            index,
        )
    return SetScore(games_a, games_b, tiebreak)


def parse_score(
    text: str,
    *,
    max_games: Optional[int] = None,
    max_tiebreak: Optional[int] = None,
) -> ParseResult:
    """Parse a score string into sets, or return a ``ScoreError``.

    Args:
        text: Raw score such as ``"6-4,7-6(7-3)"``. Whitespace around set
            tokens is ignored.
        max_games: Upper bound on games per side in one set
            (defaults to ``config.MAX_SET_GAMES``).
        max_tiebreak: Upper bound on tie-break points per side
            (defaults to ``config.MAX_TIEBREAK_POINTS``).

    Returns:
        A non-empty list of ``SetScore`` in play order, or the first
        ``ScoreError`` encountered. Never a partial list.
    """
    max_games = config.MAX_SET_GAMES if max_games is None else max_games
    max_tiebreak = config.MAX_TIEBREAK_POINTS if max_tiebreak is None else max_tiebreak

    if not isinstance(text, str) or not text.strip():
        return ScoreError(ErrorKind.EMPTY_SCORE, "Score is required.")

    sets: MatchScore = []
    for index, raw in enumerate(text.split(","), start=1):
        parsed = _parse_set(raw.strip(), index, max_games, max_tiebreak)
        if isinstance(parsed, ScoreError):
            log.debug("Rejected score %r: %s", text, parsed.message)
            return parsed
        sets.append(parsed)
    return sets


def parse_score_or_raise(text: str, **bounds) -> MatchScore:
    """Like ``parse_score`` but raises ``ScoreValidationError`` on bad input."""
    result = parse_score(text, **bounds)
    if isinstance(result, ScoreError):
        raise ScoreValidationError(result)
    return result


def is_valid_score(text: str) -> bool:
    return not isinstance(parse_score(text), ScoreError)


def format_set(s: SetScore) -> str:
    out = f"{s.games_a}-{s.games_b}"
    if s.tiebreak is not None:
        out += f"({s.tiebreak.points_a}-{s.tiebreak.points_b})"
    return out


def format_score(sets: Sequence[SetScore]) -> str:
    """Canonical rendering, e.g. ``"6-4, 7-6(7-3)"``. Parses back to ``sets``."""
    return ", ".join(format_set(s) for s in sets)
