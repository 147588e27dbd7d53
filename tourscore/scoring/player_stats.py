"""Per-round and multi-round player statistics, plus hole winners."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from tourscore.tours.models import Round, is_played
from tourscore.tours.rounds import is_match_play_round

from . import streaks
from .classify import classify
from .streaks import Streak

logger = logging.getLogger(__name__)

FRONT_NINE_HOLES = 9


class HoleHighlight(BaseModel):
    hole_number: int = Field(serialization_alias="holeNumber")
    score: int
    to_par: int = Field(serialization_alias="toPar")

    model_config = ConfigDict(populate_by_name=True)


class NineHoleSummary(BaseModel):
    score: int = 0
    to_par: int = Field(default=0, serialization_alias="toPar")
    birdies: int = 0
    pars: int = 0
    bogeys: int = 0
    holes_played: int = Field(default=0, serialization_alias="holesPlayed")

    model_config = ConfigDict(populate_by_name=True)


class DetailedPlayerStats(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    round_id: str = Field(serialization_alias="roundId")
    birdie_count: int = Field(default=0, serialization_alias="birdieCount")
    par_count: int = Field(default=0, serialization_alias="parCount")
    bogey_count: int = Field(default=0, serialization_alias="bogeyCount")
    double_bogey_or_worse: int = Field(
        default=0, serialization_alias="doubleBogeyOrWorse"
    )
    eagle_or_better: int = Field(default=0, serialization_alias="eagleOrBetter")
    best_hole: Optional[HoleHighlight] = Field(
        default=None, serialization_alias="bestHole"
    )
    worst_hole: Optional[HoleHighlight] = Field(
        default=None, serialization_alias="worstHole"
    )
    current_streak: Streak = Field(
        default_factory=Streak, serialization_alias="currentStreak"
    )
    front9: NineHoleSummary = Field(default_factory=NineHoleSummary)
    back9: NineHoleSummary = Field(default_factory=NineHoleSummary)

    model_config = ConfigDict(populate_by_name=True)


class HoleWinner(BaseModel):
    hole_number: int = Field(serialization_alias="holeNumber")
    winner_ids: List[str] = Field(serialization_alias="winnerIds")
    score: int
    to_par: int = Field(serialization_alias="toPar")
    is_tied: bool = Field(serialization_alias="isTied")

    model_config = ConfigDict(populate_by_name=True)


class AggregatePlayerStats(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    rounds_played: int = Field(default=0, serialization_alias="roundsPlayed")
    total_birdies: int = Field(default=0, serialization_alias="totalBirdies")
    total_pars: int = Field(default=0, serialization_alias="totalPars")
    total_bogeys: int = Field(default=0, serialization_alias="totalBogeys")
    total_double_bogey_or_worse: int = Field(
        default=0, serialization_alias="totalDoubleBogeyOrWorse"
    )
    total_eagle_or_better: int = Field(
        default=0, serialization_alias="totalEagleOrBetter"
    )
    average_score_per_round: float = Field(
        default=0.0, serialization_alias="averageScorePerRound"
    )
    best_round_score: int = Field(default=0, serialization_alias="bestRoundScore")
    best_round_id: Optional[str] = Field(
        default=None, serialization_alias="bestRoundId"
    )

    model_config = ConfigDict(populate_by_name=True)


_BUCKET_FIELDS = {
    "eagleOrBetter": "eagle_or_better",
    "birdie": "birdie_count",
    "par": "par_count",
    "bogey": "bogey_count",
    "doubleOrWorse": "double_bogey_or_worse",
}

_NINE_FIELDS = {"birdie": "birdies", "par": "pars", "bogey": "bogeys"}


def calculate_detailed_player_stats(
    round_: Round, player_id: str
) -> DetailedPlayerStats | None:
    """Single left-to-right scan of one entity's hole scores."""

    record = round_.scores.get(player_id)
    if record is None:
        return None

    holes = round_.hole_info
    stats = DetailedPlayerStats(player_id=player_id, round_id=round_.id)
    streak = streaks.NO_STREAK

    for index, score in enumerate(record.scores):
        if not is_played(score) or index >= len(holes):
            streak = streaks.reset(streak)
            continue

        bucket, to_par = classify(score, holes[index].par)
        field = _BUCKET_FIELDS[bucket]
        setattr(stats, field, getattr(stats, field) + 1)

        if stats.best_hole is None or to_par < stats.best_hole.to_par:
            stats.best_hole = HoleHighlight(
                hole_number=index + 1, score=score, to_par=to_par
            )
        if stats.worst_hole is None or to_par > stats.worst_hole.to_par:
            stats.worst_hole = HoleHighlight(
                hole_number=index + 1, score=score, to_par=to_par
            )

        nine = stats.front9 if index < FRONT_NINE_HOLES else stats.back9
        nine.score += score
        nine.to_par += to_par
        nine.holes_played += 1
        nine_field = _NINE_FIELDS.get(bucket)
        if nine_field is not None:
            setattr(nine, nine_field, getattr(nine, nine_field) + 1)

        streak = streaks.advance(streak, to_par)

    stats.current_streak = streak
    return stats


def calculate_hole_winners(
    round_: Round, player_ids: Optional[Sequence[str]] = None
) -> List[HoleWinner]:
    """Lowest score wins each hole; holes nobody has played are left out.

    Without ``player_ids`` every score record in the round is considered.
    """

    considered = list(player_ids) if player_ids is not None else list(round_.scores)
    winners: List[HoleWinner] = []

    for index, hole in enumerate(round_.hole_info):
        hole_scores: List[tuple[str, int]] = []
        for player_id in considered:
            record = round_.scores.get(player_id)
            if record is None or index >= len(record.scores):
                continue
            score = record.scores[index]
            if is_played(score):
                hole_scores.append((player_id, score))

        if not hole_scores:
            continue

        lowest = min(score for _, score in hole_scores)
        winner_ids = [player_id for player_id, score in hole_scores if score == lowest]
        winners.append(
            HoleWinner(
                hole_number=index + 1,
                winner_ids=winner_ids,
                score=lowest,
                to_par=lowest - hole.par,
                is_tied=len(winner_ids) > 1,
            )
        )

    return winners


def calculate_aggregate_player_stats(
    rounds: Iterable[Round], player_id: str
) -> AggregatePlayerStats:
    """Fold detailed stats over stroke-play rounds; match play is skipped."""

    aggregate = AggregatePlayerStats(player_id=player_id)
    total_score = 0
    best_score: int | None = None

    for round_ in rounds:
        if is_match_play_round(round_):
            logger.debug("skipping match play round %s", round_.id)
            continue

        stats = calculate_detailed_player_stats(round_, player_id)
        if stats is None:
            continue

        aggregate.total_birdies += stats.birdie_count
        aggregate.total_pars += stats.par_count
        aggregate.total_bogeys += stats.bogey_count
        aggregate.total_double_bogey_or_worse += stats.double_bogey_or_worse
        aggregate.total_eagle_or_better += stats.eagle_or_better

        round_score = round_.scores[player_id].total_score
        total_score += round_score
        aggregate.rounds_played += 1
        if best_score is None or round_score < best_score:
            best_score = round_score
            aggregate.best_round_id = round_.id

    if aggregate.rounds_played:
        aggregate.average_score_per_round = total_score / aggregate.rounds_played
    aggregate.best_round_score = best_score if best_score is not None else 0
    return aggregate


__all__ = [
    "AggregatePlayerStats",
    "DetailedPlayerStats",
    "HoleHighlight",
    "HoleWinner",
    "NineHoleSummary",
    "calculate_aggregate_player_stats",
    "calculate_detailed_player_stats",
    "calculate_hole_winners",
]
