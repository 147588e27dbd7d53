"""Pure scoring computations over tour and round snapshots."""

from .classify import classify, format_to_par  # noqa: F401
from .handicap import StrokeIndexError, allocate_handicap_strokes  # noqa: F401
from .leaderboard import calculate_leaderboard, calculate_team_leaderboard  # noqa: F401
from .player_stats import (  # noqa: F401
    calculate_aggregate_player_stats,
    calculate_detailed_player_stats,
    calculate_hole_winners,
)
from .stableford import calculate_stableford_for_player  # noqa: F401
from .team_stats import calculate_team_stats  # noqa: F401
