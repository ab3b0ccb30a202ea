from typing import Sequence

from .models import MatchStats, SetScore, Side


def set_winner(s: SetScore) -> Side:
    """
    Returns the side credited with a set.

    Tie-break points are ignored; the game count already reflects them (7-6).
    A level set (e.g. 6-6) is credited to B. Such a set cannot end a real
    match, and the permissive default is kept for compatibility with
    previously recorded scores.
    """
    return "A" if s.games_a > s.games_b else "B"


def sets_won(sets: Sequence[SetScore]) -> tuple[int, int]:
    """Returns (sets_a, sets_b)."""
    sets_a = sum(1 for s in sets if set_winner(s) == "A")
    return sets_a, len(sets) - sets_a


def determine_winner(sets: Sequence[SetScore]) -> Side:
    """
    Determines the match winner from set outcomes.
    The side with more sets wins; an even split goes to B like a level set.
    Raises ValueError for an empty match.
    """
    if not sets:
        raise ValueError("A match needs at least one set")
    sets_a, sets_b = sets_won(sets)
    return "A" if sets_a > sets_b else "B"


def match_stats(sets: Sequence[SetScore]) -> MatchStats:
    """
    Sets and games won per side, plus the winner.
    Raises ValueError for an empty match.
    """
    sets_a, sets_b = sets_won(sets)
    return MatchStats(
        sets_a=sets_a,
        sets_b=sets_b,
        games_a=sum(s.games_a for s in sets),
        games_b=sum(s.games_b for s in sets),
        winner=determine_winner(sets),
    )


def is_standard_set(a: int, b: int) -> bool:
    """
    Returns True if (a, b) is a finished set under standard tennis rules.
    - 6-0 through 6-4
    - 7-5 (won by two after 5-5)
    - 7-6 (tie-break at 6-6)
    Mirrored scores are accepted too. The score parser does not call this;
    it is informational for callers that want to flag unusual results.
    """
    if a < 0 or b < 0:
        return False
    hi, lo = max(a, b), min(a, b)
    if hi == 6:
        return lo <= 4
    if hi == 7:
        return lo in (5, 6)
    return False


def is_match_complete(sets: Sequence[SetScore], sets_to_win: int = 2) -> bool:
    """
    True once either side has won ``sets_to_win`` sets (best of three by default).

    Examples:
        6-4, 6-3         -> True
        6-4              -> False
        6-4, 3-6, 7-6    -> True
    """
    sets_a, sets_b = sets_won(sets)
    return sets_a >= sets_to_win or sets_b >= sets_to_win
