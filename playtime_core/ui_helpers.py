"""
Small, UI-agnostic helpers shared by app.py. They only read a Schedule.
"""
from __future__ import annotations
from bisect import bisect_right
from typing import List, Optional, Tuple

from .config import TIER_LABELS
from .models import Player, PlayerStats, Rotation, Schedule, Substitution


def format_time(seconds: float) -> str:
    """Seconds -> 'm:ss'."""
    if seconds < 0:
        raise ValueError(f"cannot format negative time: {seconds}")
    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"

def display_name(p: Player) -> str:
    return f"{p.name} ({TIER_LABELS[p.strong]})"

def find_rotation_at(schedule: Schedule, game_time: float) -> Optional[Tuple[int, int]]:
    """
    (period_idx, rotation_idx), both 0-based, of the rotation covering game_time,
    or None once the game is over. Rotations are contiguous, so a bisect on start
    times is enough.
    """
    flat = schedule.all_rotations()
    if not flat:
        return None
    starts = [r.start_time for r in flat]
    i = bisect_right(starts, game_time) - 1
    if i < 0 or game_time >= flat[i].end_time:
        return None
    rot = flat[i]
    return rot.period - 1, rot.rotation_number - 1

def rotation_at(schedule: Schedule, game_time: float) -> Optional[Rotation]:
    loc = find_rotation_at(schedule, game_time)
    if loc is None:
        return None
    p, r = loc
    return schedule.rotations[p][r]

def players_on_field_at(schedule: Schedule, game_time: float) -> List[str]:
    rot = rotation_at(schedule, game_time)
    return list(rot.players) if rot else []

def time_until_next_rotation(schedule: Schedule, game_time: float) -> int:
    # clamped: between a period rollover and the next tick this would go negative
    rot = rotation_at(schedule, game_time)
    if rot is None:
        return 0
    return max(0, int(rot.end_time - game_time))

def next_substitution(stats: PlayerStats, game_time: float) -> Optional[Substitution]:
    for sub in stats.substitution_times:
        if sub.time > game_time:
            return sub
    return None
