"""
Data models for the tennis match outcome and rating engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from . import config

Side = Literal["A", "B"]


@dataclass(frozen=True)
class Tiebreak:
    points_a: int
    points_b: int


@dataclass(frozen=True)
class SetScore:
    """One played set. ``tiebreak`` is informational only."""

    games_a: int
    games_b: int
    tiebreak: Optional[Tiebreak] = None


@dataclass(frozen=True)
class PlayerRatingInput:
    """Snapshot of a player's stored rating, supplied by the caller."""

    rating: float
    games_played: float = 0

    @classmethod
    def from_record(cls, rating: float | None = None, games_played: int | None = None) -> "PlayerRatingInput":
        """Build an input from a stored record whose fields may be missing.

        Missing values describe a brand-new player: the default rating and
        zero games played.
        """
        return cls(
            rating=config.DEFAULT_RATING if rating is None else float(rating),
            games_played=games_played or 0,
        )


@dataclass(frozen=True)
class RatingChange:
    new_rating: float
    delta: int


@dataclass(frozen=True)
class SinglesRatingChanges:
    winner: RatingChange
    loser: RatingChange


@dataclass(frozen=True)
class MatchStats:
    sets_a: int
    sets_b: int
    games_a: int
    games_b: int
    winner: Side


@dataclass(frozen=True)
class RatingTier:
    name: str
    color: str


@dataclass(frozen=True)
class MatchRating:
    """Outcome of rating one recorded match, keyed by side.

    ``changes_a`` / ``changes_b`` follow the order players were given in.
    """

    sets: list[SetScore]
    winner: Side
    changes_a: list[RatingChange]
    changes_b: list[RatingChange]
