"""Round progress: how many scoring entities have started posting scores."""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel

from tourscore.tours.models import Round, Tour, team_members

from .format_config import get_format_config, get_scoring_entities
from .team_scores import resolve_team_round_score


class RoundProgress(BaseModel):
    completed: int
    total: int
    percentage: int
    type: Literal["teams", "players"]


def calculate_progress(tour: Tour, round_: Round) -> RoundProgress:
    config = get_format_config(round_)
    entities = get_scoring_entities(tour, config)

    if entities.type == "teams":
        completed = 0
        for team in tour.teams or []:
            member_ids = [p.id for p in team_members(tour, team)]
            if resolve_team_round_score(round_, team.id, member_ids).has_scores:
                completed += 1
    else:
        completed = sum(
            1 for record in round_.scores.values() if record.has_played_hole()
        )

    percentage = 0
    if entities.count:
        percentage = math.floor(completed / entities.count * 100 + 0.5)
    return RoundProgress(
        completed=completed,
        total=entities.count,
        percentage=percentage,
        type=entities.type,
    )


__all__ = ["RoundProgress", "calculate_progress"]
