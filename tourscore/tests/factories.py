"""Snapshot factories for scoring tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from tourscore.tours.models import HoleInfo, Player, Round, Team, Tour


def make_holes(
    pars: Sequence[int], handicaps: Optional[Sequence[int]] = None
) -> List[HoleInfo]:
    indexes = list(handicaps) if handicaps is not None else range(1, len(pars) + 1)
    return [
        HoleInfo(number=i + 1, par=par, handicap=indexes[i])
        for i, par in enumerate(pars)
    ]


def player_record(
    player_id: str, scores: Sequence[Optional[int]], **extra: Any
) -> Dict[str, Any]:
    """Score payload in the camelCase shape the scoring app stores."""

    payload: Dict[str, Any] = {
        "playerId": player_id,
        "scores": list(scores),
        "totalScore": sum(s for s in scores if s),
        "totalToPar": 0,
    }
    payload.update(extra)
    return payload


def make_round(
    round_id: str = "r1",
    *,
    pars: Sequence[int] = (4, 4, 4, 4),
    handicaps: Optional[Sequence[int]] = None,
    scores: Optional[Dict[str, Dict[str, Any]]] = None,
    **fields: Any,
) -> Round:
    data: Dict[str, Any] = {
        "id": round_id,
        "name": f"Round {round_id}",
        "courseName": "Test Links",
        "holes": len(pars),
        "holeInfo": [h.model_dump() for h in make_holes(pars, handicaps)],
        "scores": scores or {},
    }
    data.update(fields)
    return Round.model_validate(data)


def make_tour(
    *,
    players: Sequence[Player] = (),
    teams: Optional[Sequence[Team]] = None,
    rounds: Sequence[Round] = (),
    **fields: Any,
) -> Tour:
    return Tour(
        id=fields.pop("id", "tour1"),
        name=fields.pop("name", "Test Tour"),
        players=list(players),
        teams=list(teams) if teams is not None else None,
        rounds=list(rounds),
        **fields,
    )


def two_player_team(team_id: str = "t1") -> tuple[Team, Player, Player]:
    p1 = Player(id=f"{team_id}-p1", name="Player 1", team_id=team_id)
    p2 = Player(id=f"{team_id}-p2", name="Player 2", team_id=team_id)
    team = Team(id=team_id, name=f"Team {team_id}", player_ids=[p1.id, p2.id])
    return team, p1, p2
