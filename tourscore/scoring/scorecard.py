"""Build fresh score records from hole-by-hole entry."""

from __future__ import annotations

from typing import Optional, Sequence

from tourscore.tours.models import HoleStroke, PlayerScore, Round, TeamScore, is_played
from tourscore.tours.rounds import get_total_par

from .handicap import handicap_strokes_for_round


def _gross(scores: Sequence[HoleStroke]) -> int:
    return sum(s for s in scores if is_played(s))


def build_player_score(
    round_: Round,
    player_id: str,
    scores: Sequence[HoleStroke],
    player_handicap: Optional[float] = None,
) -> PlayerScore:
    total_par = get_total_par(round_)
    total_score = _gross(scores)
    strokes = handicap_strokes_for_round(round_, player_handicap)

    net_score = net_to_par = None
    if strokes > 0:
        net_score = total_score - strokes
        net_to_par = net_score - total_par

    return PlayerScore(
        player_id=player_id,
        scores=list(scores),
        total_score=total_score,
        total_to_par=total_score - total_par,
        handicap_strokes=strokes or None,
        net_score=net_score,
        net_to_par=net_to_par,
    )


def build_team_score(
    round_: Round, team_id: str, scores: Sequence[HoleStroke]
) -> TeamScore:
    """Team records are stored in ``round.scores`` under ``record.key``."""

    total_score = _gross(scores)
    return TeamScore(
        team_id=team_id,
        scores=list(scores),
        total_score=total_score,
        total_to_par=total_score - get_total_par(round_),
    )


__all__ = ["build_player_score", "build_team_score"]
