"""Tennis Rank core package.

Score grammar and ELO rating engine for recorded tennis matches.
Exports the entry points and models for convenience.
"""

from . import config as config
from . import engine as engine
from . import fmt as fmt
from . import logging_config as logging_config
from . import mmr as mmr
from . import rules as rules
from . import score as score
from .engine import rate_doubles_match, rate_singles_match
from .mmr import (
    expected_score,
    k_factor,
    score_differential_multiplier,
    update_doubles_ratings,
    update_singles_ratings,
)
from .models import (
    MatchRating,
    MatchStats,
    PlayerRatingInput,
    RatingChange,
    RatingTier,
    SetScore,
    SinglesRatingChanges,
    Tiebreak,
)
from .rules import determine_winner
from .score import ErrorKind, ScoreError, ScoreValidationError, format_score, parse_score

__all__ = [
    "config",
    "engine",
    "fmt",
    "logging_config",
    "mmr",
    "rules",
    "score",
    "parse_score",
    "format_score",
    "determine_winner",
    "expected_score",
    "k_factor",
    "score_differential_multiplier",
    "update_singles_ratings",
    "update_doubles_ratings",
    "rate_singles_match",
    "rate_doubles_match",
    "ErrorKind",
    "ScoreError",
    "ScoreValidationError",
    "SetScore",
    "Tiebreak",
    "PlayerRatingInput",
    "RatingChange",
    "SinglesRatingChanges",
    "MatchRating",
    "MatchStats",
    "RatingTier",
]
