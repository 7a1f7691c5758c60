from __future__ import annotations
from playtime_core import controls
from playtime_core.config import DEFAULT_SETTINGS
from playtime_core.models import GameSettings

def test_defaults():
    s = GameSettings(**DEFAULT_SETTINGS)
    assert (s.periods, s.period_length, s.players_on_field) == (4, 600, 5)
    assert s.rotation_duration is None
    assert s.total_game_time == 2400

def test_steppers_respect_floors():
    s = GameSettings(periods=1, period_length=60, players_on_field=1)
    assert controls.decrement_periods(s).periods == 1
    assert controls.decrement_period_length(s).period_length == 60
    assert controls.decrement_players_on_field(s).players_on_field == 1

    s = controls.increment_periods(s)
    s = controls.increment_period_length(s)
    s = controls.increment_players_on_field(s)
    assert (s.periods, s.period_length, s.players_on_field) == (2, 120, 2)
    assert controls.decrement_period_length(s).period_length == 60

def test_rotation_duration_override():
    s = GameSettings()
    s2 = controls.set_rotation_duration(s, 2.5)
    assert s2.rotation_duration == 150
    assert controls.set_rotation_duration(s, "3").rotation_duration == 180
    for bad in (0, -1, "abc", None, float("nan")):
        assert controls.set_rotation_duration(s2, bad) == s2
    assert controls.clear_rotation_duration(s2).rotation_duration is None

def test_toggle_balance():
    s = GameSettings()
    assert s.balance_strength
    assert not controls.toggle_balance(s).balance_strength
