"""One place that decides how a team's score for a round is derived.

Leaderboards, team statistics and round progress all go through
``resolve_team_round_score`` so they never disagree about a team's number:

* a stored team record (scramble, alternate shot) is used as-is;
* best-ball rounds take the lowest played member score on each hole;
* anything else sums the members' gross totals.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from tourscore.tours.models import Round, is_played
from tourscore.tours.rounds import get_total_par

from .format_config import get_format_config

TeamScoreMethod = Literal["team-score", "best-ball", "sum"]


class TeamRoundScore(BaseModel):
    team_id: str = Field(serialization_alias="teamId")
    round_id: str = Field(serialization_alias="roundId")
    method: TeamScoreMethod
    score: int = 0
    to_par: int = Field(default=0, serialization_alias="toPar")
    holes_played: int = Field(default=0, serialization_alias="holesPlayed")
    players_with_scores: int = Field(
        default=0, serialization_alias="playersWithScores"
    )
    total_players: int = Field(default=0, serialization_alias="totalPlayers")
    net_score: Optional[int] = Field(default=None, serialization_alias="netScore")
    net_to_par: Optional[int] = Field(default=None, serialization_alias="netToPar")
    handicap_strokes: Optional[int] = Field(
        default=None, serialization_alias="handicapStrokes"
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def has_scores(self) -> bool:
        if self.method == "team-score":
            return self.holes_played > 0
        return self.score > 0 or self.holes_played > 0


def team_score_method(round_: Round, team_id: str) -> TeamScoreMethod:
    record = round_.team_record(team_id)
    if record is not None and record.is_team_score:
        return "team-score"
    if get_format_config(round_).type == "best-ball":
        return "best-ball"
    return "sum"


def _hole_count(round_: Round) -> int:
    return len(round_.hole_info) or round_.holes


def _member_scores_at(
    round_: Round, member_ids: Sequence[str], index: int
) -> List[int]:
    scores: List[int] = []
    for member_id in member_ids:
        record = round_.player_record(member_id)
        if record is None or index >= len(record.scores):
            continue
        value = record.scores[index]
        if is_played(value):
            scores.append(value)
    return scores


def _members_with_played_holes(round_: Round, member_ids: Sequence[str]) -> int:
    count = 0
    for member_id in member_ids:
        record = round_.player_record(member_id)
        if record is not None and record.has_played_hole():
            count += 1
    return count


def resolve_team_round_score(
    round_: Round,
    team_id: str,
    member_ids: Sequence[str],
    *,
    charge_full_roster: bool = False,
) -> TeamRoundScore:
    """Summed rounds are compared against par for each member who posted a
    score, or for every rostered member when ``charge_full_roster`` is set.
    """

    method = team_score_method(round_, team_id)
    total_par = get_total_par(round_)
    result = TeamRoundScore(
        team_id=team_id,
        round_id=round_.id,
        method=method,
        total_players=len(member_ids),
    )

    if method == "team-score":
        record = round_.team_record(team_id)
        result.score = record.total_score
        result.to_par = record.total_score - total_par
        result.holes_played = len(record.played_holes())
        result.players_with_scores = len(member_ids) if result.holes_played else 0
        return result

    hole_bests: List[int] = []
    for index in range(_hole_count(round_)):
        scores = _member_scores_at(round_, member_ids, index)
        if scores:
            hole_bests.append(min(scores))
    result.holes_played = len(hole_bests)
    result.players_with_scores = _members_with_played_holes(round_, member_ids)

    if method == "best-ball":
        result.score = sum(hole_bests)
        result.to_par = result.score - total_par
        return result

    net_score = 0
    handicap_strokes = 0
    has_handicap = False
    posted = 0
    for member_id in member_ids:
        record = round_.player_record(member_id)
        if record is None or record.total_score <= 0:
            continue
        posted += 1
        result.score += record.total_score
        net_score += (
            record.net_score if record.net_score is not None else record.total_score
        )
        handicap_strokes += record.handicap_strokes or 0
        has_handicap = has_handicap or bool(record.handicap_strokes)

    team_par = total_par * (len(member_ids) if charge_full_roster else posted)
    result.to_par = result.score - team_par
    if has_handicap:
        result.net_score = net_score
        result.net_to_par = net_score - team_par
        result.handicap_strokes = handicap_strokes
    return result


__all__ = [
    "TeamRoundScore",
    "TeamScoreMethod",
    "resolve_team_round_score",
    "team_score_method",
]
