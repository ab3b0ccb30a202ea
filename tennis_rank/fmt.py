from typing import Optional, Sequence

from .models import SetScore
from .score import format_score


def _number(value: float) -> str:
	return str(int(value)) if float(value).is_integer() else str(value)


def format_rating_display(rating: float, change: Optional[int] = None) -> str:
	"""Render a rating with an optional change indicator, e.g. ``1215 ↑15`` or ``1185 ↓15``."""
	if change is None:
		return _number(rating)
	arrow = "↑" if change > 0 else "↓"
	return f"{_number(rating)} {arrow}{abs(change)}"


def format_match_result(winner_name: str, loser_name: str, sets: Sequence[SetScore]) -> str:
	"""One-line result such as ``Ann def. Bea 6-4, 6-3``.

	``sets`` are reported as recorded, from side A's point of view.
	"""
	return f"{winner_name} def. {loser_name} {format_score(sets)}"
