"""
+/- controls for GameSettings. Each returns an updated copy; floors are applied
instead of raising.
"""
from __future__ import annotations
import math
from typing import Union

from .config import MIN_PERIODS, MIN_PERIOD_LENGTH, MIN_PLAYERS_ON_FIELD, PERIOD_LENGTH_STEP
from .models import GameSettings


def _with(settings: GameSettings, **update) -> GameSettings:
    return settings.model_copy(update=update)

def increment_periods(settings: GameSettings) -> GameSettings:
    return _with(settings, periods=settings.periods + 1)

def decrement_periods(settings: GameSettings) -> GameSettings:
    return _with(settings, periods=max(MIN_PERIODS, settings.periods - 1))

def increment_period_length(settings: GameSettings) -> GameSettings:
    return _with(settings, period_length=settings.period_length + PERIOD_LENGTH_STEP)

def decrement_period_length(settings: GameSettings) -> GameSettings:
    return _with(settings, period_length=max(MIN_PERIOD_LENGTH, settings.period_length - PERIOD_LENGTH_STEP))

def increment_players_on_field(settings: GameSettings) -> GameSettings:
    return _with(settings, players_on_field=settings.players_on_field + 1)

def decrement_players_on_field(settings: GameSettings) -> GameSettings:
    return _with(settings, players_on_field=max(MIN_PLAYERS_ON_FIELD, settings.players_on_field - 1))

def set_rotation_duration(settings: GameSettings, minutes: Union[float, str, None]) -> GameSettings:
    """Override in minutes; anything that isn't a positive number leaves settings as they were."""
    try:
        value = float(minutes)
    except (TypeError, ValueError):
        return settings
    if math.isnan(value) or math.isinf(value) or value <= 0:
        return settings
    return _with(settings, rotation_duration=value * 60)

def clear_rotation_duration(settings: GameSettings) -> GameSettings:
    return _with(settings, rotation_duration=None)

def toggle_balance(settings: GameSettings) -> GameSettings:
    return _with(settings, balance_strength=not settings.balance_strength)
