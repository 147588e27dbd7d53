"""Streak state machine over consecutive played holes.

States are ``none``, ``birdie``, ``par``, ``bogey``, ``under-par`` and
``over-par``. ``advance`` is the pure transition; ``reset`` models an
unplayed hole breaking contiguity.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Literal, Optional

from pydantic import BaseModel, ConfigDict

StreakType = Literal["none", "birdie", "par", "bogey", "under-par", "over-par"]


class Streak(BaseModel):
    type: StreakType = "none"
    length: int = 0

    model_config = ConfigDict(frozen=True)


NO_STREAK = Streak()

_CONTINUES: Dict[str, Callable[[int], bool]] = {
    "birdie": lambda to_par: to_par == -1,
    "par": lambda to_par: to_par == 0,
    "bogey": lambda to_par: to_par == 1,
    "under-par": lambda to_par: to_par < 0,
    "over-par": lambda to_par: to_par > 0,
}


def seed(to_par: int) -> Streak:
    if to_par == -1:
        return Streak(type="birdie", length=1)
    if to_par == 0:
        return Streak(type="par", length=1)
    if to_par == 1:
        return Streak(type="bogey", length=1)
    if to_par < 0:
        return Streak(type="under-par", length=1)
    return Streak(type="over-par", length=1)


def advance(state: Streak, to_par: int) -> Streak:
    continues = _CONTINUES.get(state.type)
    if continues is not None and continues(to_par):
        return Streak(type=state.type, length=state.length + 1)
    return seed(to_par)


def reset(_state: Streak) -> Streak:
    return NO_STREAK


def run(to_pars: Iterable[Optional[int]]) -> Streak:
    """Fold holes in order; ``None`` marks an unplayed hole."""

    state = NO_STREAK
    for to_par in to_pars:
        state = reset(state) if to_par is None else advance(state, to_par)
    return state


def format_streak(streak: Streak) -> str:
    if streak.type == "none" or streak.length == 0:
        return "No active streak"
    label = {
        "birdie": "Birdie",
        "par": "Par",
        "bogey": "Bogey",
        "under-par": "Under Par",
        "over-par": "Over Par",
    }[streak.type]
    plural = "s" if streak.length > 1 else ""
    return f"{label} streak: {streak.length} hole{plural}"


__all__ = [
    "NO_STREAK",
    "Streak",
    "StreakType",
    "advance",
    "format_streak",
    "reset",
    "run",
    "seed",
]
