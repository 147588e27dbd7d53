"""Tour, round and score-record data model."""

from .formats import GOLF_FORMATS, PlayFormat  # noqa: F401
from .models import (  # noqa: F401
    HoleInfo,
    MatchPlayRound,
    Player,
    PlayerScore,
    Round,
    Team,
    TeamScore,
    Tour,
    is_played,
    team_score_key,
)
