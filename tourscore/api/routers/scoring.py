from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tourscore.api.security import require_api_key
from tourscore.scoring.handicap import (
    StrokeIndexError,
    allocate_handicap_strokes_per_hole,
)
from tourscore.scoring.matchplay import compute_match_state
from tourscore.scoring.player_stats import (
    calculate_detailed_player_stats,
    calculate_hole_winners,
)
from tourscore.scoring.stableford import calculate_stableford_for_player
from tourscore.tours.models import MatchPlayRound, Round

from . import dump, dump_all

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/scoring", tags=["scoring"], dependencies=[Depends(require_api_key)]
)


class HoleWinnersRequest(BaseModel):
    round: Round
    player_ids: Optional[List[str]] = Field(
        default=None, validation_alias=AliasChoices("player_ids", "playerIds")
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchStatusRequest(BaseModel):
    match: MatchPlayRound
    total_holes: int = Field(
        default=18, validation_alias=AliasChoices("total_holes", "totalHoles")
    )
    team_a_name: str = Field(
        default="Team A", validation_alias=AliasChoices("team_a_name", "teamAName")
    )
    team_b_name: str = Field(
        default="Team B", validation_alias=AliasChoices("team_b_name", "teamBName")
    )

    model_config = ConfigDict(populate_by_name=True)


def _unprocessable(exc: StrokeIndexError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
    )


@router.post("/allocation")
def allocation(
    round_: Round, player_id: str = Query(alias="playerId")
) -> Dict[str, Any]:
    try:
        strokes = allocate_handicap_strokes_per_hole(round_, player_id)
    except StrokeIndexError as exc:
        logger.info("rejected stroke index for round %s: %s", round_.id, exc)
        raise _unprocessable(exc) from exc
    return {"playerId": player_id, "roundId": round_.id, "strokes": strokes}


@router.post("/stableford")
def stableford(
    round_: Round, player_id: str = Query(alias="playerId")
) -> Dict[str, Any]:
    try:
        points = calculate_stableford_for_player(round_, player_id)
    except StrokeIndexError as exc:
        raise _unprocessable(exc) from exc
    return {"playerId": player_id, "roundId": round_.id, "points": points}


@router.post("/stats")
def player_round_stats(
    round_: Round, player_id: str = Query(alias="playerId")
) -> Dict[str, Any]:
    stats = calculate_detailed_player_stats(round_, player_id)
    if stats is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="no scores for player"
        )
    return dump(stats)


@router.post("/hole-winners")
def hole_winners(body: HoleWinnersRequest) -> List[Dict[str, Any]]:
    return dump_all(calculate_hole_winners(body.round, body.player_ids))


@router.post("/match-status")
def match_status(body: MatchStatusRequest) -> Dict[str, Any]:
    state = compute_match_state(
        body.match,
        body.total_holes,
        team_a_name=body.team_a_name,
        team_b_name=body.team_b_name,
    )
    return dump(state)


__all__ = ["router"]
