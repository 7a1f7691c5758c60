"""
Game clock. Functions mutate a GameState in place; the Schedule is only read.
"""
from __future__ import annotations
import logging
from typing import Optional

from .models import GameState, Schedule
from .ui_helpers import find_rotation_at

logger = logging.getLogger(__name__)


def new_game() -> GameState:
    """Fresh clock for a newly generated schedule (the old state is discarded)."""
    return GameState()

def toggle_play(state: GameState, schedule: Optional[Schedule]):
    if schedule is None:
        return
    if not state.is_playing and state.game_time >= schedule.stats.total_game_time:
        return
    state.is_playing = not state.is_playing

def reset_game(state: GameState):
    state.game_time = 0
    state.current_period = 0
    state.current_rotation = 0
    state.is_playing = False

def tick(state: GameState, schedule: Optional[Schedule]):
    """Advance one second; pauses itself at the final whistle."""
    if not state.is_playing or schedule is None:
        return
    total = schedule.stats.total_game_time
    new_time = state.game_time + 1

    loc = find_rotation_at(schedule, new_time)
    if loc is not None:
        state.current_period, state.current_rotation = loc

    if new_time >= total:
        state.is_playing = False
        new_time = total
        logger.info("Game clock reached %ss, pausing", total)
    state.game_time = new_time
