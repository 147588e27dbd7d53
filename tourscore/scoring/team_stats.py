"""Team statistics across a tour: round scores, momentum and best performers."""

from __future__ import annotations

import logging
from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from tourscore.config import BEST_PERFORMERS_LIMIT, MOMENTUM_THRESHOLD, MOMENTUM_WINDOW
from tourscore.tours.models import Player, Round, Team, Tour, team_members
from tourscore.tours.rounds import get_total_par, is_match_play_round

from .matchplay import plays_in_ryder_cup
from .player_stats import AggregatePlayerStats, calculate_aggregate_player_stats
from .team_scores import TeamRoundScore, resolve_team_round_score

logger = logging.getLogger(__name__)

Momentum = Literal["improving", "stable", "declining", "no-data"]


class PlayerStats(BaseModel):
    player: Player
    rounds_played: int = Field(default=0, serialization_alias="roundsPlayed")
    stroke_play_rounds: int = Field(
        default=0, serialization_alias="strokePlayRounds"
    )
    match_play_rounds: int = Field(default=0, serialization_alias="matchPlayRounds")
    total_score: int = Field(default=0, serialization_alias="totalScore")
    average_score: float = Field(default=0.0, serialization_alias="averageScore")
    best_score: int = Field(default=0, serialization_alias="bestScore")
    best_round_id: Optional[str] = Field(
        default=None, serialization_alias="bestRoundId"
    )
    to_par: int = Field(default=0, serialization_alias="toPar")
    detailed: Optional[AggregatePlayerStats] = None

    model_config = ConfigDict(populate_by_name=True)


class TeamStats(BaseModel):
    team: Team
    rounds_played: int = Field(default=0, serialization_alias="roundsPlayed")
    total_score: int = Field(default=0, serialization_alias="totalScore")
    average_score: float = Field(default=0.0, serialization_alias="averageScore")
    best_score: int = Field(default=0, serialization_alias="bestScore")
    worst_score: int = Field(default=0, serialization_alias="worstScore")
    to_par: int = Field(default=0, serialization_alias="toPar")
    best_performers: List[PlayerStats] = Field(
        default_factory=list, serialization_alias="bestPerformers"
    )
    momentum: Momentum = "no-data"
    recent_scores: List[int] = Field(
        default_factory=list, serialization_alias="recentScores"
    )
    round_scores: List[TeamRoundScore] = Field(
        default_factory=list, serialization_alias="roundScores"
    )
    player_stats: List[PlayerStats] = Field(
        default_factory=list, serialization_alias="playerStats"
    )

    model_config = ConfigDict(populate_by_name=True)


def calculate_momentum(scores: Sequence[int]) -> Momentum:
    """Compare the older and newer half of the most recent team scores.

    Lower is better, so a falling average reads as ``improving``. Odd windows
    put the middle score in the older half.
    """

    recent = list(scores)[-MOMENTUM_WINDOW:]
    if len(recent) < 2:
        return "no-data"

    split = (len(recent) + 1) // 2
    first, second = recent[:split], recent[split:]
    improvement = sum(first) / len(first) - sum(second) / len(second)
    if improvement > MOMENTUM_THRESHOLD:
        return "improving"
    if improvement < -MOMENTUM_THRESHOLD:
        return "declining"
    return "stable"


def get_momentum_indicator(momentum: Momentum) -> str:
    return {
        "improving": "📈",
        "declining": "📉",
        "stable": "➡️",
    }.get(momentum, "❓")


def _player_stats(tour: Tour, player: Player) -> PlayerStats:
    stats = PlayerStats(player=player)
    stroke_scores: List[tuple[Round, int]] = []

    for round_ in tour.rounds:
        if is_match_play_round(round_):
            if plays_in_ryder_cup(round_, player.id):
                stats.match_play_rounds += 1
            continue
        record = round_.player_record(player.id)
        if record is not None:
            stroke_scores.append((round_, record.total_score))

    stats.stroke_play_rounds = len(stroke_scores)
    stats.rounds_played = stats.stroke_play_rounds + stats.match_play_rounds
    if stroke_scores:
        stats.total_score = sum(score for _, score in stroke_scores)
        stats.average_score = stats.total_score / len(stroke_scores)
        best_round, best = min(stroke_scores, key=lambda item: item[1])
        stats.best_score = best
        stats.best_round_id = best_round.id
        stats.to_par = sum(score - get_total_par(r) for r, score in stroke_scores)

    stats.detailed = calculate_aggregate_player_stats(tour.rounds, player.id)
    return stats


def _team_round_scores(
    tour: Tour, team: Team, member_ids: Sequence[str]
) -> List[TeamRoundScore]:
    results: List[TeamRoundScore] = []
    for round_ in tour.rounds:
        if is_match_play_round(round_):
            logger.debug("team %s: skipping match play round %s", team.id, round_.id)
            continue
        has_team_record = round_.team_record(team.id) is not None
        has_member_record = any(round_.player_record(m) is not None for m in member_ids)
        if has_team_record or has_member_record:
            results.append(
                resolve_team_round_score(
                    round_, team.id, member_ids, charge_full_roster=True
                )
            )
    return results


def calculate_team_stats(tour: Tour, team_id: str) -> TeamStats | None:
    team = tour.find_team(team_id)
    if team is None:
        return None

    members = team_members(tour, team)
    if not members:
        return TeamStats(team=team)

    player_stats = [_player_stats(tour, player) for player in members]
    member_ids = [p.id for p in members]
    round_scores = _team_round_scores(tour, team, member_ids)
    scores = [r.score for r in round_scores]

    stats = TeamStats(team=team, round_scores=round_scores)
    stats.rounds_played = len(scores)
    if scores:
        stats.total_score = sum(scores)
        stats.average_score = stats.total_score / len(scores)
        stats.best_score = min(scores)
        stats.worst_score = max(scores)
        stats.to_par = sum(r.to_par for r in round_scores)
    stats.recent_scores = scores[-MOMENTUM_WINDOW:]
    stats.momentum = calculate_momentum(scores)

    ranked = sorted(
        (ps for ps in player_stats if ps.stroke_play_rounds > 0),
        key=lambda ps: ps.average_score,
    )
    stats.best_performers = ranked[:BEST_PERFORMERS_LIMIT]
    stats.player_stats = [ps for ps in player_stats if ps.rounds_played > 0]
    return stats


__all__ = [
    "Momentum",
    "PlayerStats",
    "TeamStats",
    "calculate_momentum",
    "calculate_team_stats",
    "get_momentum_indicator",
]
