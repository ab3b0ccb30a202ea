"""
MMR (Matchmaking Rating) calculations using an ELO system.
Pure functions for rating changes after singles and doubles tennis matches.

Rating swings are scaled by two things beyond the classic ELO formula:
- experience: new players move faster (tiered K-factor)
- dominance: lopsided wins count more than narrow ones (score differential)

Updates are deliberately not zero-sum: each side uses its own K-factor and
both deltas are clamped away from zero.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

from . import config
from .logging_config import get_logger
from .models import PlayerRatingInput, RatingChange, RatingTier, SetScore, SinglesRatingChanges
from .rules import determine_winner
from .score import ScoreError, parse_score

log = get_logger(__name__)

K_FACTOR_NEW = 40          # fewer than 10 games
K_FACTOR_MID = 30          # 10 to 29 games
K_FACTOR_ESTABLISHED = 20  # 30+ games

MIN_DELTA = 5
MIN_DELTA_NARROW = 3  # floor when the multiplier discounts a narrow win

DOUBLES_SHARE = 0.5

NEUTRAL_MULTIPLIER = 1.0

# 10 ** 300 is still a finite float
MAX_EXPONENT = 300

RATING_TIERS: list[tuple[float, RatingTier]] = [
    (1600, RatingTier("Elite", "#FFD700")),
    (1400, RatingTier("Advanced", "#C0C0C0")),
    (1200, RatingTier("Intermediate", "#CD7F32")),
    (1000, RatingTier("Beginner", "#4CAF50")),
]
NEW_PLAYER_TIER = RatingTier("New Player", "#2196F3")


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def expected_score(rating_self: float, rating_opponent: float) -> float:
    """
    Calculate the expected score for a player against an opponent.

    Args:
        rating_self: Rating of the player
        rating_opponent: Rating of the opponent

    Returns:
        Probability of the player winning, between 0 and 1.
        expected_score(a, b) + expected_score(b, a) == 1.
        Rating gaps beyond MAX_EXPONENT * 400 saturate instead of overflowing.
    """
    exponent = (rating_opponent - rating_self) / 400
    exponent = max(-MAX_EXPONENT, min(MAX_EXPONENT, exponent))
    return 1 / (1 + math.pow(10, exponent))


def k_factor(games_played: float) -> int:
    """Maximum rating swing per match for a player with this much experience."""
    if games_played < 10:
        return K_FACTOR_NEW
    if games_played < 30:
        return K_FACTOR_MID
    return K_FACTOR_ESTABLISHED


def score_differential_multiplier(sets: Union[Sequence[SetScore], str]) -> float:
    """
    Scale factor in [0.5, 1.5] rewarding dominant wins and discounting narrow ones.

    The ratio is (winner games - loser games) / total games, summed over all
    sets with tie-break points ignored:
        > 0.6            -> 1.5
        > 0.4            -> 1.25
        > 0.2            -> 1.10
        tie-break played
        or < 0.15        -> 0.75
        otherwise        -> 1.0

    Accepts parsed sets or raw score text. Never raises: unparsable text or
    a match with no games yields the neutral 1.0.
    """
    if isinstance(sets, str):
        parsed = parse_score(sets)
        if isinstance(parsed, ScoreError):
            log.debug("Neutral multiplier for unparsable score %r (%s)", sets, parsed.kind.value)
            return NEUTRAL_MULTIPLIER
        sets = parsed
    if not sets:
        return NEUTRAL_MULTIPLIER

    winner = determine_winner(sets)
    games_a = sum(s.games_a for s in sets)
    games_b = sum(s.games_b for s in sets)
    games_winner, games_loser = (games_a, games_b) if winner == "A" else (games_b, games_a)
    had_tiebreak = any(s.tiebreak is not None for s in sets)

    try:
        ratio = (games_winner - games_loser) / (games_winner + games_loser)
    except ZeroDivisionError:
        log.debug("Neutral multiplier for match with no games played")
        return NEUTRAL_MULTIPLIER

    if ratio > 0.6:
        return 1.5
    if ratio > 0.4:
        return 1.25
    if ratio > 0.2:
        return 1.10
    if had_tiebreak or ratio < 0.15:
        return 0.75
    return NEUTRAL_MULTIPLIER


def update_singles_ratings(
    winner: PlayerRatingInput,
    loser: PlayerRatingInput,
    sets: Union[Sequence[SetScore], str, None] = None,
) -> SinglesRatingChanges:
    """
    Calculate new ratings for the winner and loser of a singles match.

    Args:
        winner: Current rating snapshot of the match winner
        loser: Current rating snapshot of the match loser
        sets: Match score used for the differential multiplier; None means neutral

    Returns:
        The new rating and applied delta for each player. The winner always
        gains and the loser always drops by at least MIN_DELTA (MIN_DELTA_NARROW
        when the multiplier is below 1).
    """
    expected_winner = expected_score(winner.rating, loser.rating)
    expected_loser = expected_score(loser.rating, winner.rating)

    k_winner = k_factor(winner.games_played)
    k_loser = k_factor(loser.games_played)

    multiplier = NEUTRAL_MULTIPLIER if sets is None else score_differential_multiplier(sets)

    raw_winner = round_half_away(k_winner * (1 - expected_winner) * multiplier)
    raw_loser = round_half_away(k_loser * (0 - expected_loser) * multiplier)

    floor = MIN_DELTA_NARROW if multiplier < 1.0 else MIN_DELTA
    winner_delta = max(floor, raw_winner)
    loser_delta = min(-floor, raw_loser)

    log.debug(
        "Singles update: winner %.1f (k=%s, exp=%.3f) %+d, loser %.1f (k=%s, exp=%.3f) %+d, multiplier=%.2f",
        winner.rating, k_winner, expected_winner, winner_delta,
        loser.rating, k_loser, expected_loser, loser_delta, multiplier,
    )

    return SinglesRatingChanges(
        winner=RatingChange(winner.rating + winner_delta, winner_delta),
        loser=RatingChange(loser.rating + loser_delta, loser_delta),
    )


def team_rating(ratings: Sequence[float]) -> float:
    """
    Calculate the effective team rating from individual player ratings.
    Uses the average rating as the team's effective rating.

    Args:
        ratings: List of individual player ratings

    Returns:
        Team's effective rating (the default rating for an empty team)
    """
    if not ratings:
        return config.DEFAULT_RATING
    return sum(ratings) / len(ratings)


def update_doubles_ratings(
    team_a: Sequence[PlayerRatingInput],
    team_b: Sequence[PlayerRatingInput],
    sets: Sequence[SetScore],
) -> tuple[list[RatingChange], list[RatingChange]]:
    """
    Apply rating changes to every player in a doubles match.

    The match is rated as a singles match between the two team averages,
    with the average games played of all players as the shared experience.
    Each player then receives half of their side's delta, since a doubles
    result is shared between two players.

    Args:
        team_a: Rating snapshots for team A players
        team_b: Rating snapshots for team B players
        sets: Parsed match score; decides the winning team and the multiplier

    Returns:
        Tuple of (changes_team_a, changes_team_b), in input order
    """
    if not team_a or not team_b:
        raise ValueError("Each doubles team needs at least one player")

    players = [*team_a, *team_b]
    avg_games = sum(p.games_played for p in players) / len(players)
    side_a = PlayerRatingInput(team_rating([p.rating for p in team_a]), avg_games)
    side_b = PlayerRatingInput(team_rating([p.rating for p in team_b]), avg_games)

    winner_side = determine_winner(sets)
    if winner_side == "A":
        result = update_singles_ratings(side_a, side_b, sets)
    else:
        result = update_singles_ratings(side_b, side_a, sets)

    winner_delta = round_half_away(result.winner.delta * DOUBLES_SHARE)
    loser_delta = round_half_away(result.loser.delta * DOUBLES_SHARE)
    delta_a, delta_b = (winner_delta, loser_delta) if winner_side == "A" else (loser_delta, winner_delta)

    log.debug(
        "Doubles update: team A avg %.1f %+d each, team B avg %.1f %+d each",
        side_a.rating, delta_a, side_b.rating, delta_b,
    )

    return (
        [RatingChange(p.rating + delta_a, delta_a) for p in team_a],
        [RatingChange(p.rating + delta_b, delta_b) for p in team_b],
    )


def initial_rating() -> float:
    return config.DEFAULT_RATING


def rating_tier(rating: float) -> RatingTier:
    """Division a rating falls into, highest threshold first."""
    for threshold, tier in RATING_TIERS:
        if rating >= threshold:
            return tier
    return NEW_PLAYER_TIER


def rating_difference_message(rating_a: float, rating_b: float) -> str:
    """Short pre-match blurb describing how close two players are."""
    diff = abs(rating_a - rating_b)
    if diff < 50:
        return "Evenly matched!"
    if diff < 150:
        return "Competitive match"
    if diff < 300:
        return "Underdog opportunity!"
    return "David vs Goliath!"
