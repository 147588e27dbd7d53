"""Pydantic models for tours, rounds, score records and Ryder Cup matches.

Field names are snake_case in Python and camelCase on the wire, so payloads
written by the scoring app validate unchanged and ``model_dump(by_alias=True)``
reproduces them.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from .formats import PlayFormat, RyderCupSession

TEAM_KEY_PREFIX = "team_"

HoleStroke = Optional[int]
"""A per-hole stroke count; ``None`` means the hole has not been played."""


def is_played(value: Any) -> bool:
    return value is not None and value > 0


def team_score_key(team_id: str) -> str:
    return f"{TEAM_KEY_PREFIX}{team_id}"


def _normalise_stroke(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value) or value <= 0:
            return None
    return value


class HoleInfo(BaseModel):
    number: int
    par: int
    yardage: Optional[int] = None
    handicap: Optional[int] = None
    closest_to_pin: bool = Field(
        default=False,
        validation_alias=AliasChoices("closest_to_pin", "closestToPin"),
        serialization_alias="closestToPin",
    )
    longest_drive: bool = Field(
        default=False,
        validation_alias=AliasChoices("longest_drive", "longestDrive"),
        serialization_alias="longestDrive",
    )

    model_config = ConfigDict(populate_by_name=True)


class _ScoreRecordBase(BaseModel):
    scores: List[HoleStroke] = Field(default_factory=list)
    total_score: int = Field(
        default=0,
        validation_alias=AliasChoices("total_score", "totalScore"),
        serialization_alias="totalScore",
    )
    total_to_par: int = Field(
        default=0,
        validation_alias=AliasChoices("total_to_par", "totalToPar"),
        serialization_alias="totalToPar",
    )
    handicap_strokes: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("handicap_strokes", "handicapStrokes"),
        serialization_alias="handicapStrokes",
    )
    net_score: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("net_score", "netScore"),
        serialization_alias="netScore",
    )
    net_to_par: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("net_to_par", "netToPar"),
        serialization_alias="netToPar",
    )
    stableford_manual: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("stableford_manual", "stablefordManual"),
        serialization_alias="stablefordManual",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("scores", mode="before")
    @classmethod
    def _unplayed_as_none(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [_normalise_stroke(v) for v in value]
        return value

    def played_holes(self) -> List[tuple[int, int]]:
        """``(index, strokes)`` for every played slot, in hole order."""

        return [(i, s) for i, s in enumerate(self.scores) if is_played(s)]

    def has_played_hole(self) -> bool:
        return any(is_played(s) for s in self.scores)


class PlayerScore(_ScoreRecordBase):
    kind: Literal["player"] = "player"
    player_id: str = Field(
        validation_alias=AliasChoices("player_id", "playerId"),
        serialization_alias="playerId",
    )


class TeamScore(_ScoreRecordBase):
    kind: Literal["team"] = "team"
    team_id: str = Field(
        validation_alias=AliasChoices("team_id", "teamId"),
        serialization_alias="teamId",
    )
    is_team_score: bool = Field(
        default=True,
        validation_alias=AliasChoices("is_team_score", "isTeamScore"),
        serialization_alias="isTeamScore",
    )

    @property
    def key(self) -> str:
        return team_score_key(self.team_id)


ScoreRecord = Annotated[Union[PlayerScore, TeamScore], Field(discriminator="kind")]


def _tag_score_payload(key: str, payload: Any) -> Any:
    if not isinstance(payload, dict) or "kind" in payload:
        return payload
    tagged = dict(payload)
    is_team = bool(tagged.get("isTeamScore", tagged.get("is_team_score")))
    if is_team or key.startswith(TEAM_KEY_PREFIX):
        tagged["kind"] = "team"
        if not tagged.get("teamId") and not tagged.get("team_id"):
            tagged["team_id"] = key.removeprefix(TEAM_KEY_PREFIX)
    else:
        tagged["kind"] = "player"
        if not tagged.get("playerId") and not tagged.get("player_id"):
            tagged["player_id"] = key
    return tagged


class RoundSettings(BaseModel):
    strokes_given: bool = Field(
        default=False,
        validation_alias=AliasChoices("strokes_given", "strokesGiven"),
        serialization_alias="strokesGiven",
    )
    match_play_format: Optional[Literal["singles", "teams"]] = Field(
        default=None,
        validation_alias=AliasChoices("match_play_format", "matchPlayFormat"),
        serialization_alias="matchPlayFormat",
    )
    skins_value: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("skins_value", "skinsValue"),
        serialization_alias="skinsValue",
    )
    team_scoring: Optional[Literal["best-ball", "scramble", "alternate-shot"]] = Field(
        default=None,
        validation_alias=AliasChoices("team_scoring", "teamScoring"),
        serialization_alias="teamScoring",
    )
    stableford_scoring: bool = Field(
        default=False,
        validation_alias=AliasChoices("stableford_scoring", "stablefordScoring"),
        serialization_alias="stablefordScoring",
    )
    ryder_cup_session: Optional[RyderCupSession] = Field(
        default=None,
        validation_alias=AliasChoices("ryder_cup_session", "ryderCupSession"),
        serialization_alias="ryderCupSession",
    )
    match_play_type: Optional[Literal["singles", "foursomes", "four-ball"]] = Field(
        default=None,
        validation_alias=AliasChoices("match_play_type", "matchPlayType"),
        serialization_alias="matchPlayType",
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchPlayHole(BaseModel):
    hole_number: int = Field(
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    team_a_score: int = Field(
        default=0,
        validation_alias=AliasChoices("team_a_score", "teamAScore"),
        serialization_alias="teamAScore",
    )
    team_b_score: int = Field(
        default=0,
        validation_alias=AliasChoices("team_b_score", "teamBScore"),
        serialization_alias="teamBScore",
    )
    result: Optional[Literal["team-a", "team-b", "tie"]] = None
    match_status: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("match_status", "matchStatus"),
        serialization_alias="matchStatus",
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchSide(BaseModel):
    id: str
    player_ids: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("player_ids", "playerIds"),
        serialization_alias="playerIds",
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchPoints(BaseModel):
    team_a: float = Field(
        default=0.0,
        validation_alias=AliasChoices("team_a", "teamA"),
        serialization_alias="teamA",
    )
    team_b: float = Field(
        default=0.0,
        validation_alias=AliasChoices("team_b", "teamB"),
        serialization_alias="teamB",
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchPlayRound(BaseModel):
    id: str
    round_id: str = Field(
        validation_alias=AliasChoices("round_id", "roundId"),
        serialization_alias="roundId",
    )
    format: Literal["singles", "foursomes", "four-ball"] = "singles"
    team_a: MatchSide = Field(
        validation_alias=AliasChoices("team_a", "teamA"),
        serialization_alias="teamA",
    )
    team_b: MatchSide = Field(
        validation_alias=AliasChoices("team_b", "teamB"),
        serialization_alias="teamB",
    )
    holes: List[MatchPlayHole] = Field(default_factory=list)
    status: Literal["in-progress", "completed"] = "in-progress"
    result: Literal["team-a", "team-b", "tie", "ongoing"] = "ongoing"
    points: MatchPoints = Field(default_factory=MatchPoints)
    completed_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("completed_at", "completedAt"),
        serialization_alias="completedAt",
    )
    is_complete: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_complete", "isComplete"),
        serialization_alias="isComplete",
    )
    winner: Optional[Literal["team-a", "team-b", "halved"]] = None

    model_config = ConfigDict(populate_by_name=True)

    def side_of(self, player_id: str) -> Literal["team-a", "team-b"] | None:
        if player_id in self.team_a.player_ids:
            return "team-a"
        if player_id in self.team_b.player_ids:
            return "team-b"
        return None


class RyderCupSessions(BaseModel):
    day1_foursomes: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("day1_foursomes", "day1Foursomes"),
        serialization_alias="day1Foursomes",
    )
    day1_four_ball: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("day1_four_ball", "day1FourBall"),
        serialization_alias="day1FourBall",
    )
    day2_foursomes: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("day2_foursomes", "day2Foursomes"),
        serialization_alias="day2Foursomes",
    )
    day2_four_ball: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("day2_four_ball", "day2FourBall"),
        serialization_alias="day2FourBall",
    )
    day3_singles: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("day3_singles", "day3Singles"),
        serialization_alias="day3Singles",
    )

    model_config = ConfigDict(populate_by_name=True)


class RyderCupTournament(BaseModel):
    team_a_points: float = Field(
        default=0.0,
        validation_alias=AliasChoices("team_a_points", "teamAPoints"),
        serialization_alias="teamAPoints",
    )
    team_b_points: float = Field(
        default=0.0,
        validation_alias=AliasChoices("team_b_points", "teamBPoints"),
        serialization_alias="teamBPoints",
    )
    target_points: float = Field(
        default=14.5,
        validation_alias=AliasChoices("target_points", "targetPoints"),
        serialization_alias="targetPoints",
    )
    matches: List[MatchPlayRound] = Field(default_factory=list)
    sessions: RyderCupSessions = Field(default_factory=RyderCupSessions)

    model_config = ConfigDict(populate_by_name=True)


class Round(BaseModel):
    id: str
    name: str = ""
    course_name: str = Field(
        default="",
        validation_alias=AliasChoices("course_name", "courseName"),
        serialization_alias="courseName",
    )
    format: PlayFormat = "stroke-play"
    holes: int = 18
    hole_info: List[HoleInfo] = Field(
        default_factory=list,
        validation_alias=AliasChoices("hole_info", "holeInfo"),
        serialization_alias="holeInfo",
    )
    total_par: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("total_par", "totalPar"),
        serialization_alias="totalPar",
    )
    player_ids: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("player_ids", "playerIds"),
        serialization_alias="playerIds",
    )
    settings: RoundSettings = Field(default_factory=RoundSettings)
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    started_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("started_at", "startedAt"),
        serialization_alias="startedAt",
    )
    completed_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("completed_at", "completedAt"),
        serialization_alias="completedAt",
    )
    scores: Dict[str, ScoreRecord] = Field(default_factory=dict)
    status: Literal["created", "in-progress", "completed"] = "created"
    ryder_cup: Optional[RyderCupTournament] = Field(
        default=None,
        validation_alias=AliasChoices("ryder_cup", "ryderCup"),
        serialization_alias="ryderCup",
    )
    is_match_play: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_match_play", "isMatchPlay"),
        serialization_alias="isMatchPlay",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("scores", mode="before")
    @classmethod
    def _tag_records(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: _tag_score_payload(key, payload) for key, payload in value.items()}

    def player_record(self, player_id: str) -> PlayerScore | None:
        record = self.scores.get(player_id)
        return record if isinstance(record, PlayerScore) else None

    def team_record(self, team_id: str) -> TeamScore | None:
        record = self.scores.get(team_score_key(team_id))
        return record if isinstance(record, TeamScore) else None


class Player(BaseModel):
    id: str
    name: str = ""
    handicap: Optional[float] = None
    team_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("team_id", "teamId"),
        serialization_alias="teamId",
    )
    user_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )

    model_config = ConfigDict(populate_by_name=True)


class Team(BaseModel):
    id: str
    name: str = ""
    captain_id: str = Field(
        default="",
        validation_alias=AliasChoices("captain_id", "captainId"),
        serialization_alias="captainId",
    )
    player_ids: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("player_ids", "playerIds"),
        serialization_alias="playerIds",
    )
    color: str = "#3b82f6"

    model_config = ConfigDict(populate_by_name=True)


class Tour(BaseModel):
    id: str
    name: str = ""
    description: Optional[str] = None
    format: Literal["individual", "team", "ryder-cup"] = "individual"
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    shareable_url: str = Field(
        default="",
        validation_alias=AliasChoices("shareable_url", "shareableUrl"),
        serialization_alias="shareableUrl",
    )
    players: List[Player] = Field(default_factory=list)
    teams: Optional[List[Team]] = None
    rounds: List[Round] = Field(default_factory=list)
    is_active: bool = Field(
        default=True,
        validation_alias=AliasChoices("is_active", "isActive"),
        serialization_alias="isActive",
    )
    archived: bool = False

    model_config = ConfigDict(populate_by_name=True)

    def find_team(self, team_id: str) -> Team | None:
        return next((t for t in self.teams or [] if t.id == team_id), None)

    def find_round(self, round_id: str) -> Round | None:
        return next((r for r in self.rounds if r.id == round_id), None)

    def find_player(self, player_id: str) -> Player | None:
        return next((p for p in self.players if p.id == player_id), None)


def team_members(tour: Tour, team: Team) -> List[Player]:
    """Players assigned to ``team`` either via ``team_id`` or the team roster."""

    roster = set(team.player_ids)
    return [p for p in tour.players if p.team_id == team.id or p.id in roster]


__all__ = [
    "HoleInfo",
    "HoleStroke",
    "MatchPlayHole",
    "MatchPlayRound",
    "MatchPoints",
    "MatchSide",
    "Player",
    "PlayerScore",
    "Round",
    "RoundSettings",
    "RyderCupSessions",
    "RyderCupTournament",
    "ScoreRecord",
    "TEAM_KEY_PREFIX",
    "Team",
    "TeamScore",
    "Tour",
    "is_played",
    "team_members",
    "team_score_key",
]
