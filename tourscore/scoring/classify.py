"""Per-hole score classification relative to par."""

from __future__ import annotations

from typing import Literal, NamedTuple

ScoreBucket = Literal["eagleOrBetter", "birdie", "par", "bogey", "doubleOrWorse"]


class Classification(NamedTuple):
    bucket: ScoreBucket
    to_par: int


def bucket_for(to_par: int) -> ScoreBucket:
    if to_par <= -2:
        return "eagleOrBetter"
    if to_par == -1:
        return "birdie"
    if to_par == 0:
        return "par"
    if to_par == 1:
        return "bogey"
    return "doubleOrWorse"


def classify(score: int, par: int) -> Classification:
    """Bucket a played hole. Callers only pass played (positive) scores."""

    to_par = score - par
    return Classification(bucket=bucket_for(to_par), to_par=to_par)


def score_name(score: int | None, par: int) -> str:
    if not score:
        return "No Score"
    if score == 1:
        return "Hole-in-One"
    to_par = score - par
    if to_par <= -3:
        return "Double Eagle"
    if to_par == -2:
        return "Eagle"
    if to_par == -1:
        return "Birdie"
    if to_par == 0:
        return "Par"
    if to_par == 1:
        return "Bogey"
    if to_par == 2:
        return "Double Bogey"
    return f"+{to_par}"


def format_to_par(to_par: int | float) -> str:
    if to_par == 0:
        return "E"
    return f"+{to_par}" if to_par > 0 else f"{to_par}"


__all__ = [
    "Classification",
    "ScoreBucket",
    "bucket_for",
    "classify",
    "format_to_par",
    "score_name",
]
