"""Handicap stroke allocation across holes ordered by stroke index."""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Sequence

from tourscore.config import get_settings
from tourscore.tours.models import HoleInfo, Round

logger = logging.getLogger(__name__)

FULL_ROUND_HOLES = 18


class StrokeIndexError(ValueError):
    """Hole handicap indices are not a permutation of ``1..n``."""


def _stroke_indexes(hole_info: Sequence[HoleInfo]) -> List[int]:
    # Holes without a usable index rank by their position.
    return [
        hole.handicap if hole.handicap and hole.handicap > 0 else position + 1
        for position, hole in enumerate(hole_info)
    ]


def stroke_index_problems(hole_info: Sequence[HoleInfo]) -> List[str]:
    n = len(hole_info)
    problems: List[str] = []

    missing = [h.number for h in hole_info if not h.handicap or h.handicap <= 0]
    if missing:
        problems.append(f"holes without a stroke index: {missing}")

    out_of_range = [h.number for h in hole_info if h.handicap and h.handicap > n]
    if out_of_range:
        problems.append(f"stroke index above {n} on holes: {out_of_range}")

    counts = Counter(h.handicap for h in hole_info if h.handicap and h.handicap > 0)
    duplicates = sorted(index for index, count in counts.items() if count > 1)
    if duplicates:
        problems.append(f"duplicate stroke indexes: {duplicates}")

    return problems


def allocate_handicap_strokes(
    hole_info: Sequence[HoleInfo],
    handicap_strokes: int | None,
    *,
    strict: bool | None = None,
) -> List[int]:
    """Spread ``handicap_strokes`` over the holes, hardest first.

    Every hole gets ``strokes // n``; the remaining ``strokes % n`` go one each
    to the holes with the lowest stroke index. The result keeps the order of
    ``hole_info`` and always sums to ``handicap_strokes``.
    """

    holes = list(hole_info)
    n = len(holes)
    if n == 0:
        return []

    total = max(0, int(handicap_strokes or 0))
    if total == 0:
        return [0] * n

    problems = stroke_index_problems(holes)
    if problems:
        if strict is None:
            strict = get_settings().strict_stroke_index
        if strict:
            raise StrokeIndexError("; ".join(problems))
        logger.warning("allocating strokes over malformed stroke index: %s", problems)

    indexes = _stroke_indexes(holes)
    order = sorted(range(n), key=lambda position: indexes[position])

    base, remainder = divmod(total, n)
    allocation = [base] * n
    for position in order[:remainder]:
        allocation[position] += 1
    return allocation


def allocate_handicap_strokes_per_hole(round_: Round, player_id: str) -> List[int]:
    record = round_.scores.get(player_id)
    strokes = record.handicap_strokes if record is not None else None
    return allocate_handicap_strokes(round_.hole_info, strokes)


def strokes_for_hole(player_handicap: float | None, hole_handicap: int | None) -> int:
    """Strokes a player receives on one hole of an 18-hole stroke index."""

    if not player_handicap or not hole_handicap:
        return 0
    base = int(player_handicap // FULL_ROUND_HOLES)
    remaining = player_handicap % FULL_ROUND_HOLES
    return base + (1 if hole_handicap <= remaining else 0)


def handicap_strokes_for_round(round_: Round, player_handicap: float | None) -> int:
    if not round_.settings.strokes_given or not player_handicap:
        return 0
    return sum(
        strokes_for_hole(player_handicap, hole.handicap)
        for hole in round_.hole_info
        if hole.handicap
    )


__all__ = [
    "StrokeIndexError",
    "allocate_handicap_strokes",
    "allocate_handicap_strokes_per_hole",
    "handicap_strokes_for_round",
    "stroke_index_problems",
    "strokes_for_hole",
]
