"""Match play and Ryder Cup scoring."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from tourscore.tours.models import (
    MatchPlayHole,
    MatchPlayRound,
    MatchPoints,
    Round,
    RyderCupTournament,
    Tour,
    is_played,
)
from tourscore.tours.rounds import is_match_play_round, is_round_completed

HoleOutcome = Literal["team-a", "team-b", "tie"]
MatchStatusCode = Literal["not-started", "in-progress", "dormie", "complete"]


class MatchState(BaseModel):
    holes_played: int = Field(serialization_alias="holesPlayed")
    holes_remaining: int = Field(serialization_alias="holesRemaining")
    team_a_wins: int = Field(serialization_alias="teamAWins")
    team_b_wins: int = Field(serialization_alias="teamBWins")
    lead: int
    status_code: MatchStatusCode = Field(serialization_alias="statusCode")
    status_text: str = Field(serialization_alias="statusText")
    is_complete: bool = Field(serialization_alias="isComplete")
    winner: Optional[Literal["team-a", "team-b", "halved"]] = None
    points: MatchPoints = Field(default_factory=MatchPoints)
    holes: List[MatchPlayHole] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def hole_result(
    team_a_score: int | None, team_b_score: int | None
) -> HoleOutcome | None:
    if not (is_played(team_a_score) and is_played(team_b_score)):
        return None
    if team_a_score == team_b_score:
        return "tie"
    return "team-a" if team_a_score < team_b_score else "team-b"


def _lead_phrase(lead: int, team_a_name: str, team_b_name: str) -> str:
    if lead == 0:
        return "All square"
    if lead > 0:
        return f"{team_a_name} {lead} up"
    return f"{team_b_name} {-lead} up"


def compute_match_state(
    match: MatchPlayRound,
    total_holes: int,
    *,
    team_a_name: str = "Team A",
    team_b_name: str = "Team B",
) -> MatchState:
    """Derive status, winner and points for a match from its hole scores.

    Returns fresh hole objects with ``result`` filled in for every hole both
    sides have played; the match passed in is left untouched.
    """

    holes: List[MatchPlayHole] = []
    team_a_wins = team_b_wins = holes_played = 0
    for hole in match.holes[:total_holes]:
        outcome = hole_result(hole.team_a_score, hole.team_b_score)
        holes.append(hole.model_copy(update={"result": outcome}))
        if outcome is None:
            continue
        holes_played += 1
        if outcome == "team-a":
            team_a_wins += 1
        elif outcome == "team-b":
            team_b_wins += 1

    lead = team_a_wins - team_b_wins
    remaining = total_holes - holes_played
    leader = team_a_name if lead > 0 else team_b_name
    points = MatchPoints()
    winner: Optional[Literal["team-a", "team-b", "halved"]] = None

    if holes_played == 0:
        code: MatchStatusCode = "not-started"
        text = "Not started"
    elif remaining == 0:
        code = "complete"
        if lead == 0:
            text = "Halved"
            winner = "halved"
            points = MatchPoints(team_a=0.5, team_b=0.5)
        else:
            text = f"{leader} wins {abs(lead)} up"
    elif abs(lead) > remaining:
        code = "complete"
        text = f"{leader} wins {abs(lead)}&{remaining}"
    elif lead != 0 and abs(lead) == remaining:
        code = "dormie"
        text = f"Dormie — {_lead_phrase(lead, team_a_name, team_b_name)}"
    else:
        code = "in-progress"
        text = _lead_phrase(lead, team_a_name, team_b_name)

    if code == "complete" and lead != 0:
        winner = "team-a" if lead > 0 else "team-b"
        a_won = lead > 0
        points = MatchPoints(team_a=float(a_won), team_b=float(not a_won))

    if holes_played:
        last_played = max(i for i, h in enumerate(holes) if h.result is not None)
        holes[last_played] = holes[last_played].model_copy(
            update={"match_status": text}
        )

    return MatchState(
        holes_played=holes_played,
        holes_remaining=remaining,
        team_a_wins=team_a_wins,
        team_b_wins=team_b_wins,
        lead=lead,
        status_code=code,
        status_text=text,
        is_complete=code == "complete",
        winner=winner,
        points=points,
        holes=holes,
    )


def ryder_cup_points(
    ryder_cup: RyderCupTournament, total_holes: int
) -> Tuple[float, float]:
    team_a = team_b = 0.0
    for match in ryder_cup.matches:
        state = compute_match_state(match, total_holes)
        team_a += state.points.team_a
        team_b += state.points.team_b
    return team_a, team_b


def is_match_participant(match: MatchPlayRound, player_id: str) -> bool:
    return match.side_of(player_id) is not None


def _player_matches(round_: Round, player_id: str) -> List[MatchPlayRound]:
    if round_.ryder_cup is None:
        return []
    return [m for m in round_.ryder_cup.matches if is_match_participant(m, player_id)]


def plays_in_ryder_cup(round_: Round, player_id: str) -> bool:
    return bool(_player_matches(round_, player_id))


def get_player_score_from_ryder_cup(round_: Round, player_id: str) -> int:
    """Strokes of the player's side on holes both sides have played."""

    total = 0
    for match in _player_matches(round_, player_id):
        side = match.side_of(player_id)
        for hole in match.holes:
            if hole_result(hole.team_a_score, hole.team_b_score) is None:
                continue
            total += hole.team_a_score if side == "team-a" else hole.team_b_score
    return total


def has_ryder_cup_scores(round_: Round, player_id: str) -> bool:
    return any(
        hole_result(hole.team_a_score, hole.team_b_score) is not None
        for match in _player_matches(round_, player_id)
        for hole in match.holes
    )


def calculate_matches_won(tour: Tour, player_id: str) -> float:
    """Completed matches won by the player's side; a halved match counts half."""

    won = 0.0
    for round_ in tour.rounds:
        if not is_match_play_round(round_) or round_.ryder_cup is None:
            continue
        if not is_round_completed(round_):
            continue
        for match in _player_matches(round_, player_id):
            if not match.is_complete:
                continue
            if match.winner == "halved":
                won += 0.5
            elif match.winner is not None and match.winner == match.side_of(player_id):
                won += 1
    return won


__all__ = [
    "HoleOutcome",
    "MatchState",
    "MatchStatusCode",
    "calculate_matches_won",
    "compute_match_state",
    "get_player_score_from_ryder_cup",
    "has_ryder_cup_scores",
    "hole_result",
    "is_match_participant",
    "plays_in_ryder_cup",
    "ryder_cup_points",
]
