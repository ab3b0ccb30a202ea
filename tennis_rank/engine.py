"""
Match recording pipeline: score text -> sets -> winner -> rating changes.

Callers hand in the players' current ratings in side order (the order the
score was written in) and persist the returned changes themselves. Two
recordings touching the same player must be serialized by the caller's
storage layer; this module only computes.
"""

from __future__ import annotations

from typing import Sequence, Union

from .logging_config import get_logger
from .mmr import update_doubles_ratings, update_singles_ratings
from .models import MatchRating, PlayerRatingInput
from .rules import determine_winner
from .score import ScoreError, format_score, parse_score

log = get_logger(__name__)


def rate_singles_match(
    score_text: str,
    player_a: PlayerRatingInput,
    player_b: PlayerRatingInput,
) -> Union[MatchRating, ScoreError]:
    """Rate a singles match, or return the ``ScoreError`` for bad score text."""
    sets = parse_score(score_text)
    if isinstance(sets, ScoreError):
        log.info("Singles match not rated: %s", sets.message)
        return sets

    winner = determine_winner(sets)
    if winner == "A":
        result = update_singles_ratings(player_a, player_b, sets)
        change_a, change_b = result.winner, result.loser
    else:
        result = update_singles_ratings(player_b, player_a, sets)
        change_a, change_b = result.loser, result.winner

    log.info(
        "Singles %s won by %s: A %+d, B %+d",
        format_score(sets), winner, change_a.delta, change_b.delta,
    )
    return MatchRating(sets=sets, winner=winner, changes_a=[change_a], changes_b=[change_b])


def rate_doubles_match(
    score_text: str,
    team_a: Sequence[PlayerRatingInput],
    team_b: Sequence[PlayerRatingInput],
) -> Union[MatchRating, ScoreError]:
    """Rate a doubles match, or return the ``ScoreError`` for bad score text.

    Raises ValueError if either team is empty.
    """
    sets = parse_score(score_text)
    if isinstance(sets, ScoreError):
        log.info("Doubles match not rated: %s", sets.message)
        return sets

    winner = determine_winner(sets)
    changes_a, changes_b = update_doubles_ratings(team_a, team_b, sets)
    log.info(
        "Doubles %s won by %s: A %+d each, B %+d each",
        format_score(sets), winner, changes_a[0].delta, changes_b[0].delta,
    )
    return MatchRating(sets=sets, winner=winner, changes_a=changes_a, changes_b=changes_b)
