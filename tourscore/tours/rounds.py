"""Round lifecycle and format helpers shared by the scoring modules."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List

from .formats import is_match_play_format
from .models import Round

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_round_completed(round_: Round) -> bool:
    return round_.status == "completed" or round_.completed_at is not None


def is_stableford_scoring(round_: Round) -> bool:
    return round_.format == "stroke-play" and round_.settings.stableford_scoring


def has_handicaps_enabled(round_: Round) -> bool:
    return round_.settings.strokes_given


def is_match_play_round(round_: Round) -> bool:
    """Explicit ``is_match_play`` wins; otherwise derive it from the format."""

    if round_.is_match_play is not None:
        return round_.is_match_play
    return is_match_play_format(round_.format)


def get_total_par(round_: Round) -> int:
    if round_.total_par:
        return round_.total_par
    return sum(hole.par for hole in round_.hole_info)


def _completed_sort_key(round_: Round) -> datetime:
    completed = round_.completed_at
    if completed is None:
        return _EPOCH
    if completed.tzinfo is None:
        return completed.replace(tzinfo=timezone.utc)
    return completed


def get_most_recent_round(rounds: Iterable[Round]) -> Round | None:
    """Return the first in-progress round, else the latest completed one.

    With several in-progress rounds the first one in list order wins.
    """

    candidates = list(rounds)
    active = next((r for r in candidates if r.status == "in-progress"), None)
    if active is not None:
        return active

    completed = sorted(
        get_completed_rounds(candidates), key=_completed_sort_key, reverse=True
    )
    return completed[0] if completed else None


def get_completed_rounds(rounds: Iterable[Round]) -> List[Round]:
    return [r for r in rounds if is_round_completed(r)]


def get_conceded_hole_strokes(par: int, is_match_play: bool) -> int:
    """Strokes booked for a conceded hole: none in match play, double par otherwise."""

    return 0 if is_match_play else par * 2


__all__ = [
    "get_completed_rounds",
    "get_conceded_hole_strokes",
    "get_most_recent_round",
    "get_total_par",
    "has_handicaps_enabled",
    "is_match_play_round",
    "is_round_completed",
    "is_stableford_scoring",
]
