from __future__ import annotations
import pytest

from playtime_core.engine import generate_schedule
from playtime_core.models import Player
from playtime_core.ui_helpers import (
    display_name, find_rotation_at, format_time, next_substitution,
    players_on_field_at, time_until_next_rotation,
)

def _six_player_schedule():
    return generate_schedule(["A", "B", "C", "D", "E", "F"], 3, 2, 300)

def test_format_time():
    assert format_time(0) == "0:00"
    assert format_time(65) == "1:05"
    assert format_time(3599) == "59:59"
    assert format_time(600) == "10:00"
    assert format_time(150.0) == "2:30"

def test_format_time_negative():
    with pytest.raises(ValueError):
        format_time(-5)

def test_find_rotation_at():
    sched = _six_player_schedule()
    assert find_rotation_at(sched, 0) == (0, 0)
    assert find_rotation_at(sched, 149) == (0, 0)
    assert find_rotation_at(sched, 150) == (0, 1)
    assert find_rotation_at(sched, 300) == (1, 0)
    assert find_rotation_at(sched, 599) == (1, 1)
    assert find_rotation_at(sched, 600) is None

def test_players_and_countdown():
    sched = _six_player_schedule()
    assert players_on_field_at(sched, 160) == ["D", "E", "F"]
    assert time_until_next_rotation(sched, 100) == 50
    assert time_until_next_rotation(sched, 299) == 1
    # past full time nothing is counted down
    assert time_until_next_rotation(sched, 600) == 0
    assert players_on_field_at(sched, 600) == []

def test_next_substitution():
    sched = _six_player_schedule()
    a = sched.stats.player_stats["A"]
    sub = next_substitution(a, 0)
    assert (sub.type, sub.time) == ("out", 150)
    sub = next_substitution(a, 150)
    assert (sub.type, sub.time) == ("in", 300)
    assert next_substitution(a, 450) is None

def test_display_name():
    assert display_name(Player(name="Sam", strong=True)) == "Sam (Strong)"
    assert display_name(Player(name="Lee")) == "Lee (Developing)"
