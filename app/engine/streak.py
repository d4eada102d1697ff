# app/engine/streak.py
from typing import NamedTuple


class StreakState(NamedTuple):
    current: int = 0
    longest: int = 0


def update_streak(
    state: StreakState, has_logged_today: bool, has_logged_yesterday: bool
) -> StreakState:
    """
    Advance a streak for a new log.

    Only the first log of a day moves the streak: it continues when there
    was a log yesterday and restarts at 1 otherwise. Later logs on the same
    day leave it unchanged. `longest` never decreases.
    """
    if has_logged_today:
        current = state.current
    elif has_logged_yesterday:
        current = state.current + 1
    else:
        current = 1

    return StreakState(current=current, longest=max(state.longest, current))
