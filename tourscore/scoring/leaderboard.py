"""Individual and team leaderboards for a single round or a whole tour.

Every team number comes from :func:`resolve_team_round_score`, except for
match play rounds where the members' Ryder Cup strokes are summed instead.
Entries without a score always sort last and ties keep tour order.
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from tourscore.tours.models import Player, Round, Team, Tour, team_members
from tourscore.tours.rounds import (
    get_total_par,
    is_match_play_round,
    is_round_completed,
)

from .matchplay import get_player_score_from_ryder_cup, has_ryder_cup_scores
from .team_scores import resolve_team_round_score

logger = logging.getLogger(__name__)

SortBy = Literal["gross", "net"]


class LeaderboardEntry(BaseModel):
    player: Player
    total_score: int = Field(default=0, serialization_alias="totalScore")
    total_to_par: int = Field(default=0, serialization_alias="totalToPar")
    net_score: Optional[int] = Field(default=None, serialization_alias="netScore")
    net_to_par: Optional[int] = Field(default=None, serialization_alias="netToPar")
    handicap_strokes: Optional[int] = Field(
        default=None, serialization_alias="handicapStrokes"
    )
    rounds_played: int = Field(default=0, serialization_alias="roundsPlayed")
    position: int = 0

    model_config = ConfigDict(populate_by_name=True)


class TeamLeaderboardEntry(BaseModel):
    team: Team
    total_score: int = Field(default=0, serialization_alias="totalScore")
    total_to_par: int = Field(default=0, serialization_alias="totalToPar")
    net_score: Optional[int] = Field(default=None, serialization_alias="netScore")
    net_to_par: Optional[int] = Field(default=None, serialization_alias="netToPar")
    total_handicap_strokes: Optional[int] = Field(
        default=None, serialization_alias="totalHandicapStrokes"
    )
    players_with_scores: int = Field(
        default=0, serialization_alias="playersWithScores"
    )
    total_players: int = Field(default=0, serialization_alias="totalPlayers")
    position: int = 0

    model_config = ConfigDict(populate_by_name=True)


def sort_and_position_teams(
    entries: List[TeamLeaderboardEntry],
) -> List[TeamLeaderboardEntry]:
    def key(entry: TeamLeaderboardEntry) -> tuple[bool, int]:
        score = entry.net_score if entry.net_score is not None else entry.total_score
        return entry.total_score == 0, score

    ranked = sorted(entries, key=key)
    for index, entry in enumerate(ranked):
        entry.position = index + 1
    return ranked


def _sort_and_position_players(
    entries: List[LeaderboardEntry], sort_by: SortBy
) -> List[LeaderboardEntry]:
    def key(entry: LeaderboardEntry) -> tuple[bool, int]:
        to_par = entry.total_to_par
        if sort_by == "net" and entry.net_to_par is not None:
            to_par = entry.net_to_par
        return entry.total_score == 0, to_par

    ranked = sorted(entries, key=key)
    for index, entry in enumerate(ranked):
        entry.position = index + 1
    return ranked


def calculate_team_round_leaderboard(
    tour: Tour, round_: Round
) -> List[TeamLeaderboardEntry]:
    entries: List[TeamLeaderboardEntry] = []
    for team in tour.teams or []:
        member_ids = [p.id for p in team_members(tour, team)]
        resolved = resolve_team_round_score(round_, team.id, member_ids)
        entries.append(
            TeamLeaderboardEntry(
                team=team,
                total_score=resolved.score,
                total_to_par=resolved.to_par,
                net_score=resolved.net_score,
                net_to_par=resolved.net_to_par,
                total_handicap_strokes=resolved.handicap_strokes,
                players_with_scores=resolved.players_with_scores,
                total_players=resolved.total_players,
            )
        )
    return sort_and_position_teams(entries)


def _member_has_scores(tour: Tour, member_id: str) -> bool:
    for round_ in tour.rounds:
        record = round_.player_record(member_id)
        if record is not None and record.total_score > 0:
            return True
        if is_match_play_round(round_) and has_ryder_cup_scores(round_, member_id):
            return True
    return False


def calculate_tournament_team_leaderboard(tour: Tour) -> List[TeamLeaderboardEntry]:
    """Team totals over every completed round of the tour."""

    completed = [r for r in tour.rounds if is_round_completed(r)]
    entries: List[TeamLeaderboardEntry] = []

    for team in tour.teams or []:
        member_ids = [p.id for p in team_members(tour, team)]
        entry = TeamLeaderboardEntry(team=team, total_players=len(member_ids))
        net_score = net_to_par = handicap_strokes = 0
        has_handicap = False

        for round_ in completed:
            if is_match_play_round(round_):
                member_scores = [
                    get_player_score_from_ryder_cup(round_, m) for m in member_ids
                ]
                score = sum(s for s in member_scores if s > 0)
                to_par = score - get_total_par(round_)
                round_net, round_net_to_par = score, to_par
            else:
                resolved = resolve_team_round_score(round_, team.id, member_ids)
                score, to_par = resolved.score, resolved.to_par
                round_net, round_net_to_par = score, to_par
                if resolved.net_score is not None:
                    has_handicap = True
                    round_net = resolved.net_score
                    round_net_to_par = resolved.net_to_par
                    handicap_strokes += resolved.handicap_strokes or 0

            entry.total_score += score
            entry.total_to_par += to_par
            net_score += round_net
            net_to_par += round_net_to_par

        if has_handicap:
            entry.net_score = net_score
            entry.net_to_par = net_to_par
            entry.total_handicap_strokes = handicap_strokes
        entry.players_with_scores = sum(
            1 for m in member_ids if _member_has_scores(tour, m)
        )
        entries.append(entry)

    return sort_and_position_teams(entries)


def calculate_team_leaderboard(
    tour: Tour, round_id: Optional[str] = None
) -> List[TeamLeaderboardEntry]:
    if not tour.teams:
        return []
    if round_id is None:
        return calculate_tournament_team_leaderboard(tour)
    round_ = tour.find_round(round_id)
    if round_ is None:
        logger.debug("team leaderboard: unknown round %s", round_id)
        return []
    return calculate_team_round_leaderboard(tour, round_)


def calculate_individual_round_leaderboard(
    tour: Tour, round_: Round, sort_by: SortBy = "gross"
) -> List[LeaderboardEntry]:
    entries: List[LeaderboardEntry] = []
    for player in tour.players:
        record = round_.player_record(player.id)
        if record is None:
            continue
        entries.append(
            LeaderboardEntry(
                player=player,
                total_score=record.total_score,
                total_to_par=record.total_to_par,
                net_score=record.net_score,
                net_to_par=record.net_to_par,
                handicap_strokes=record.handicap_strokes or None,
                rounds_played=1 if record.has_played_hole() else 0,
            )
        )
    return _sort_and_position_players(entries, sort_by)


def calculate_individual_tournament_leaderboard(
    tour: Tour, sort_by: SortBy = "gross"
) -> List[LeaderboardEntry]:
    """Player records summed over every round; team records are ignored."""

    entries: List[LeaderboardEntry] = []
    for player in tour.players:
        records = [
            record
            for record in (r.player_record(player.id) for r in tour.rounds)
            if record is not None
        ]
        if not records:
            continue

        entry = LeaderboardEntry(player=player)
        net_score = net_to_par = handicap_strokes = 0
        has_handicap = False
        for record in records:
            entry.total_score += record.total_score
            entry.total_to_par += record.total_to_par
            net_score += (
                record.net_score if record.net_score is not None else record.total_score
            )
            net_to_par += (
                record.net_to_par
                if record.net_to_par is not None
                else record.total_to_par
            )
            handicap_strokes += record.handicap_strokes or 0
            has_handicap = has_handicap or bool(record.handicap_strokes)
            if record.has_played_hole():
                entry.rounds_played += 1

        if has_handicap:
            entry.net_score = net_score
            entry.net_to_par = net_to_par
            entry.handicap_strokes = handicap_strokes
        entries.append(entry)

    return _sort_and_position_players(entries, sort_by)


def calculate_leaderboard(
    tour: Tour, round_id: Optional[str] = None, sort_by: SortBy = "gross"
) -> List[LeaderboardEntry]:
    if round_id is None:
        return calculate_individual_tournament_leaderboard(tour, sort_by)
    round_ = tour.find_round(round_id)
    if round_ is None:
        logger.debug("leaderboard: unknown round %s", round_id)
        return []
    return calculate_individual_round_leaderboard(tour, round_, sort_by)


__all__ = [
    "LeaderboardEntry",
    "SortBy",
    "TeamLeaderboardEntry",
    "calculate_individual_round_leaderboard",
    "calculate_individual_tournament_leaderboard",
    "calculate_leaderboard",
    "calculate_team_leaderboard",
    "calculate_team_round_leaderboard",
    "calculate_tournament_team_leaderboard",
    "sort_and_position_teams",
]
