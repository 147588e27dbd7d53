"""Round format configuration and team setup validation."""

from __future__ import annotations

from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from tourscore.tours.models import Player, Round, Team, Tour

ScoringFormat = Literal["individual", "scramble", "best-ball", "alternate-shot"]


class FormatConfig(BaseModel):
    type: ScoringFormat
    display_name: str = Field(serialization_alias="displayName")
    description: str
    is_team_based: bool = Field(serialization_alias="isTeamBased")
    allows_hole_by_hole: bool = Field(
        default=True, serialization_alias="allowsHoleByHole"
    )
    allows_total_score: bool = Field(serialization_alias="allowsTotalScore")
    requires_teams: bool = Field(serialization_alias="requiresTeams")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


SCRAMBLE = FormatConfig(
    type="scramble",
    display_name="Team Scramble",
    description="All players hit, choose best shot, repeat",
    is_team_based=True,
    allows_total_score=True,
    requires_teams=True,
)
BEST_BALL = FormatConfig(
    type="best-ball",
    display_name="Best Ball",
    description="Each team counts its best score per hole",
    is_team_based=True,
    allows_total_score=False,
    requires_teams=True,
)
ALTERNATE_SHOT = FormatConfig(
    type="alternate-shot",
    display_name="Alternate Shot",
    description="Partners take turns hitting same ball",
    is_team_based=True,
    allows_total_score=True,
    requires_teams=True,
)
FOURSOMES_MATCH_PLAY = FormatConfig(
    type="alternate-shot",
    display_name="Foursomes (Match Play)",
    description="Partners alternate shots, holes won decide the match",
    is_team_based=True,
    allows_total_score=False,
    requires_teams=True,
)
FOUR_BALL_MATCH_PLAY = FormatConfig(
    type="best-ball",
    display_name="Four-Ball (Match Play)",
    description="Best ball of each pair decides each hole",
    is_team_based=True,
    allows_total_score=False,
    requires_teams=True,
)
SINGLES_MATCH_PLAY = FormatConfig(
    type="individual",
    display_name="Singles (Match Play)",
    description="Head to head, holes won decide the match",
    is_team_based=False,
    allows_total_score=False,
    requires_teams=False,
)
INDIVIDUAL = FormatConfig(
    type="individual",
    display_name="Individual",
    description="Individual stroke play",
    is_team_based=False,
    allows_total_score=True,
    requires_teams=False,
)

_BY_FORMAT = {
    "scramble": SCRAMBLE,
    "best-ball": BEST_BALL,
    "alternate-shot": ALTERNATE_SHOT,
    "foursomes-match-play": FOURSOMES_MATCH_PLAY,
    "four-ball-match-play": FOUR_BALL_MATCH_PLAY,
    "singles-match-play": SINGLES_MATCH_PLAY,
}


def get_format_config(round_: Round) -> FormatConfig:
    if round_.format == "best-ball" and round_.settings.team_scoring == "scramble":
        return SCRAMBLE
    return _BY_FORMAT.get(round_.format, INDIVIDUAL)


def validate_format_setup(tour: Tour, round_: Round) -> List[str]:
    errors: List[str] = []
    config = get_format_config(round_)
    if not config.requires_teams:
        return errors

    if not tour.teams:
        errors.append(f"{config.display_name} format requires teams to be created")

    if tour.teams is not None:
        rostered = {pid for team in tour.teams for pid in team.player_ids}
        unassigned = [
            p for p in tour.players if not p.team_id and p.id not in rostered
        ]
        if unassigned:
            errors.append(f"{len(unassigned)} players are not assigned to teams")

    return errors


class ScoringEntities(BaseModel):
    entities: List[Union[Team, Player]]
    type: Literal["teams", "players"]
    count: int


def get_scoring_entities(tour: Tour, config: FormatConfig) -> ScoringEntities:
    if config.is_team_based and tour.teams is not None:
        return ScoringEntities(
            entities=list(tour.teams), type="teams", count=len(tour.teams)
        )
    return ScoringEntities(
        entities=list(tour.players), type="players", count=len(tour.players)
    )


__all__ = [
    "FormatConfig",
    "ScoringEntities",
    "ScoringFormat",
    "get_format_config",
    "get_scoring_entities",
    "validate_format_setup",
]
