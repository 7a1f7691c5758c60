from __future__ import annotations
import pytest

from playtime_core.csv_io import (
    build_template_csv, export_schedule_csv, parse_roster_csv,
    player_stats_to_dataframe, roster_to_dataframe, schedule_to_dataframe,
)
from playtime_core.engine import generate_schedule
from playtime_core.export_pdf import render_schedule_pdf
from playtime_core.models import Player

def test_parse_roster_with_aliases():
    data = b"Player,Tier\nAlex,1\nBlake,0\n ,1\nAlex,0\nCasey,yes\n"
    players = parse_roster_csv(data)
    assert [p.name for p in players] == ["Alex", "Blake", "Casey"]
    assert [p.strong for p in players] == [True, False, True]

def test_parse_roster_names_only():
    players = parse_roster_csv(b"name\nA\nB\n")
    assert [(p.name, p.strong) for p in players] == [("A", False), ("B", False)]

def test_parse_roster_requires_name():
    with pytest.raises(ValueError):
        parse_roster_csv(b"Who,Tier\nA,1\n")

def test_template_round_trips():
    players = parse_roster_csv(build_template_csv())
    assert [(p.name, p.strong) for p in players] == [("Alex Quinn", True), ("Blake Diaz", False)]
    df = roster_to_dataframe(players)
    assert list(df.columns) == ["Name", "Strong"]

def test_schedule_tables():
    sched = generate_schedule(["A", "B", "C", "D", "E", "F"], 3, 2, 300)
    df = schedule_to_dataframe(sched)
    assert len(df) == 4
    assert list(df.columns) == ["Period", "Rotation", "Start", "End", "Minutes", "Players"]
    assert df.iloc[1]["Start"] == "2:30"
    assert df.iloc[1]["Players"] == "D, E, F"

    stats = player_stats_to_dataframe(sched)
    assert list(stats["Player"]) == ["A", "B", "C", "D", "E", "F"]
    assert set(stats["Minutes"]) == {5.0}

    csv_text = export_schedule_csv(sched).decode("utf-8")
    assert csv_text.startswith("Period,Rotation,Start,End,Minutes,Players")

def test_schedule_table_tier_columns():
    roster = [Player(name=n, strong=n in "AB") for n in "ABCD"]
    df = schedule_to_dataframe(generate_schedule(roster, 2, 1, 300))
    assert "Strong" in df.columns and "Developing" in df.columns
    assert set(df["Strong"]) == {1}

def test_pdf_export():
    sched = generate_schedule(["A", "B", "C", "D", "E", "F"], 3, 2, 300)
    pdf = render_schedule_pdf(sched)
    assert pdf.startswith(b"%PDF")
