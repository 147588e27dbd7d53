from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tourscore.api.security import require_api_key
from tourscore.scoring.format_config import validate_format_setup
from tourscore.scoring.handicap import StrokeIndexError
from tourscore.scoring.leaderboard import (
    SortBy,
    calculate_leaderboard,
    calculate_team_leaderboard,
)
from tourscore.scoring.matchplay import calculate_matches_won
from tourscore.scoring.player_stats import calculate_aggregate_player_stats
from tourscore.scoring.progress import calculate_progress
from tourscore.scoring.stableford import calculate_tournament_stableford
from tourscore.scoring.team_stats import calculate_team_stats
from tourscore.tours.models import Round, Tour

from . import dump, dump_all

router = APIRouter(
    prefix="/api/tours", tags=["tours"], dependencies=[Depends(require_api_key)]
)


def _round_or_404(tour: Tour, round_id: str) -> Round:
    round_ = tour.find_round(round_id)
    if round_ is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="round not found"
        )
    return round_


@router.post("/stats/players/{player_id}")
def player_stats(player_id: str, tour: Tour) -> Dict[str, Any]:
    stats = dump(calculate_aggregate_player_stats(tour.rounds, player_id))
    stats["matchesWon"] = calculate_matches_won(tour, player_id)
    return stats


@router.post("/stats/teams/{team_id}")
def team_stats(team_id: str, tour: Tour) -> Dict[str, Any]:
    stats = calculate_team_stats(tour, team_id)
    if stats is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="team not found"
        )
    return dump(stats)


@router.post("/stableford/{player_id}")
def tournament_stableford(player_id: str, tour: Tour) -> Dict[str, Any]:
    try:
        points = calculate_tournament_stableford(tour, player_id)
    except StrokeIndexError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return {"playerId": player_id, "points": points}


@router.post("/leaderboard")
def leaderboard(
    tour: Tour,
    kind: Literal["individual", "team"] = Query(default="individual", alias="type"),
    sort_by: SortBy = Query(default="gross", alias="sortBy"),
    round_id: Optional[str] = Query(default=None, alias="roundId"),
) -> List[Dict[str, Any]]:
    if round_id is not None:
        _round_or_404(tour, round_id)
    if kind == "team":
        return dump_all(calculate_team_leaderboard(tour, round_id))
    return dump_all(calculate_leaderboard(tour, round_id, sort_by))


@router.post("/rounds/{round_id}/progress")
def round_progress(round_id: str, tour: Tour) -> Dict[str, Any]:
    return dump(calculate_progress(tour, _round_or_404(tour, round_id)))


@router.post("/rounds/{round_id}/validate")
def validate_round(round_id: str, tour: Tour) -> Dict[str, Any]:
    errors = validate_format_setup(tour, _round_or_404(tour, round_id))
    return {"valid": not errors, "errors": errors}


__all__ = ["router"]
