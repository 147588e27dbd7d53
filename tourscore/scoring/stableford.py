"""Stableford points from net-to-par per hole."""

from __future__ import annotations

import logging
import math

from tourscore.config import STABLEFORD_MAX_POINTS
from tourscore.tours.models import Round, Tour, is_played
from tourscore.tours.rounds import is_round_completed

from .handicap import allocate_handicap_strokes_per_hole

logger = logging.getLogger(__name__)

DEFAULT_PAR = 4


def stableford_points(net_to_par: int) -> int:
    """Net par is worth 2; each stroke better adds one, capped at 0..6."""

    return max(0, min(STABLEFORD_MAX_POINTS, 2 - net_to_par))


def calculate_stableford_for_player(round_: Round, player_id: str) -> float:
    record = round_.scores.get(player_id)
    if record is None:
        return 0

    manual = record.stableford_manual
    if manual is not None and math.isfinite(manual):
        return manual

    holes = round_.hole_info
    allocation = allocate_handicap_strokes_per_hole(round_, player_id)

    total = 0
    for index, gross in enumerate(record.scores[: len(holes)]):
        if not is_played(gross):
            continue
        par = holes[index].par or DEFAULT_PAR
        net = gross - allocation[index]
        total += stableford_points(net - par)
    return total


def calculate_tournament_stableford(tour: Tour, player_id: str) -> float:
    total = 0
    for round_ in tour.rounds:
        if not is_round_completed(round_):
            logger.debug("skipping open round %s for stableford", round_.id)
            continue
        total += calculate_stableford_for_player(round_, player_id)
    return total


__all__ = [
    "calculate_stableford_for_player",
    "calculate_tournament_stableford",
    "stableford_points",
]
