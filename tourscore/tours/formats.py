"""Play formats and their static metadata."""

from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PlayFormat = Literal[
    "stroke-play",
    "match-play",
    "scramble",
    "best-ball",
    "alternate-shot",
    "skins",
    "foursomes-match-play",
    "four-ball-match-play",
    "singles-match-play",
]

RyderCupSession = Literal[
    "day1-foursomes",
    "day1-four-ball",
    "day2-foursomes",
    "day2-four-ball",
    "day3-singles",
]


class FormatInfo(BaseModel):
    name: str
    description: str
    team_compatible: bool = Field(serialization_alias="teamCompatible")
    match_play: bool = Field(default=False, serialization_alias="matchPlay")
    ryder_cup: bool = Field(default=False, serialization_alias="ryderCup")
    players_per_team: Optional[int] = Field(
        default=None, serialization_alias="playersPerTeam"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


GOLF_FORMATS: Dict[str, FormatInfo] = {
    "stroke-play": FormatInfo(
        name="Stroke Play",
        description="Traditional golf - lowest total score wins",
        team_compatible=True,
    ),
    "match-play": FormatInfo(
        name="Match Play",
        description="Head-to-head competition, win holes to win match",
        team_compatible=True,
        match_play=True,
    ),
    "scramble": FormatInfo(
        name="Scramble",
        description="Team plays from the best shot each time",
        team_compatible=True,
    ),
    "best-ball": FormatInfo(
        name="Best Ball",
        description="Count the best individual score on each hole",
        team_compatible=True,
    ),
    "alternate-shot": FormatInfo(
        name="Alternate Shot",
        description="Partners take turns hitting the same ball",
        team_compatible=True,
    ),
    "skins": FormatInfo(
        name="Skins",
        description="Win money/points for winning individual holes",
        team_compatible=False,
    ),
    "foursomes-match-play": FormatInfo(
        name="Foursomes",
        description=(
            "Alternate shot match play - partners take turns, match play scoring"
        ),
        team_compatible=True,
        match_play=True,
        ryder_cup=True,
        players_per_team=2,
    ),
    "four-ball-match-play": FormatInfo(
        name="Four-Ball",
        description="Best ball match play - individual scores, best ball vs best ball",
        team_compatible=True,
        match_play=True,
        ryder_cup=True,
        players_per_team=2,
    ),
    "singles-match-play": FormatInfo(
        name="Singles",
        description="Individual match play - head to head competition",
        team_compatible=False,
        match_play=True,
        ryder_cup=True,
        players_per_team=1,
    ),
}

_DEFAULT_SESSIONS: Dict[str, RyderCupSession] = {
    "foursomes-match-play": "day1-foursomes",
    "four-ball-match-play": "day1-four-ball",
    "singles-match-play": "day3-singles",
}


def is_match_play_format(play_format: str) -> bool:
    return GOLF_FORMATS[play_format].match_play


def is_ryder_cup_format(play_format: str) -> bool:
    return GOLF_FORMATS[play_format].ryder_cup


def get_players_per_team(play_format: str) -> int:
    return GOLF_FORMATS[play_format].players_per_team or 1


def requires_teams(play_format: str) -> bool:
    return get_players_per_team(play_format) > 1 or "team" in play_format


def get_session_from_format(play_format: str) -> RyderCupSession | None:
    """Default Ryder Cup session for a format; callers may override the day."""

    return _DEFAULT_SESSIONS.get(play_format)


__all__ = [
    "FormatInfo",
    "GOLF_FORMATS",
    "PlayFormat",
    "RyderCupSession",
    "get_players_per_team",
    "get_session_from_format",
    "is_match_play_format",
    "is_ryder_cup_format",
    "requires_teams",
]
