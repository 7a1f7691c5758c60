# app.py
from __future__ import annotations
import logging
import time
from typing import List, Optional

import pandas as pd
import streamlit as st

from playtime_core.config import DEFAULT_SETTINGS, TIER_LABELS, configure_logging, ui_css
from playtime_core.models import GameSettings, GameState, Player, Schedule
from playtime_core.engine import ConfigurationError, calculate_optimal_duration, generate_schedule
from playtime_core import controls, roster as roster_ops
from playtime_core.csv_io import parse_roster_csv, build_template_csv, schedule_to_dataframe, player_stats_to_dataframe
from playtime_core.game import new_game, reset_game, tick, toggle_play
from playtime_core.ui_helpers import (
    format_time, next_substitution, players_on_field_at, rotation_at, time_until_next_rotation,
)

configure_logging()
logger = logging.getLogger(__name__)

# ---------- Page & Theme ----------
st.set_page_config(page_title="Player Rotation Manager", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("roster", [])                      # List[Player] dumps
    ss.setdefault("settings", GameSettings(**DEFAULT_SETTINGS).model_dump())
    ss.setdefault("schedule", None)                  # Schedule | None
    ss.setdefault("gamestate", GameState().model_dump())

_init_state()

def _roster() -> List[Player]:
    return [Player(**p) for p in st.session_state["roster"]]

def _set_roster(players: List[Player]):
    st.session_state["roster"] = [p.model_dump() for p in players]

def _settings() -> GameSettings:
    return GameSettings(**st.session_state["settings"])

def _set_settings(s: GameSettings):
    st.session_state["settings"] = s.model_dump()

def _schedule() -> Optional[Schedule]:
    return st.session_state["schedule"]

def _gamestate() -> GameState:
    return GameState(**st.session_state["gamestate"])

def _set_gamestate(gs: GameState):
    st.session_state["gamestate"] = gs.model_dump()

# --- compatibility rerun helper (Streamlit >=1.31 uses st.rerun) ---
def _safe_rerun():
    """Rerun compatible with both new and older Streamlit versions."""
    if hasattr(st, "rerun"):
        st.rerun()
    else:  # fallback for older releases
        st.experimental_rerun()

def _stepper(label: str, value: str, dec, inc, key: str):
    st.markdown(f"**{label}**")
    c1, c2, c3 = st.columns([1, 2, 1])
    with c1:
        if st.button("−", key=f"{key}_dec"):
            _set_settings(dec(_settings()))
            _safe_rerun()
    with c2:
        st.markdown(f"<div style='text-align:center;padding-top:6px'>{value}</div>", unsafe_allow_html=True)
    with c3:
        if st.button("+", key=f"{key}_inc"):
            _set_settings(inc(_settings()))
            _safe_rerun()

# ---------- Sidebar: game settings ----------
def sidebar():
    s = _settings()
    with st.sidebar:
        st.header("Game Settings")
        _stepper("Number of Periods", str(s.periods),
                 controls.decrement_periods, controls.increment_periods, "periods")
        _stepper("Period Length (minutes)", str(s.period_length // 60),
                 controls.decrement_period_length, controls.increment_period_length, "plen")
        _stepper("Players on Field", str(s.players_on_field),
                 controls.decrement_players_on_field, controls.increment_players_on_field, "onfield")

        st.markdown("**Rotation Duration (minutes)**")
        n_players = len(st.session_state["roster"])
        advice = None
        if n_players:
            advice = calculate_optimal_duration(n_players, s.players_on_field, s.period_length)
        current = s.rotation_duration / 60 if s.rotation_duration else None
        placeholder = f"Optimal: {advice.rotation_length_minutes:.1f}" if advice else "Auto"
        raw = st.text_input("Override", value=f"{current:g}" if current else "", placeholder=placeholder,
                            key="dur_override", label_visibility="collapsed")
        if raw.strip():
            updated = controls.set_rotation_duration(s, raw)
            if updated.rotation_duration != s.rotation_duration:
                _set_settings(updated)
        if st.button("Reset to Optimal", key="dur_reset"):
            _set_settings(controls.clear_rotation_duration(_settings()))
            st.session_state.pop("dur_override", None)
            _safe_rerun()
        if advice:
            st.caption(f"Recommended: {advice.rotation_length_minutes:.1f} minutes "
                       f"({advice.rotations_per_period} rotations per period)")

        balance = st.toggle("Balance strong / developing players", value=s.balance_strength, key="balance")
        if balance != s.balance_strength:
            _set_settings(controls.toggle_balance(_settings()))

# ---------- Roster ----------
def roster_section():
    st.subheader("Players")
    c1, c2 = st.columns([1, 1])
    with c1:
        st.caption("Option 1: Add individual player")
        with st.form("add_one", clear_on_submit=True):
            name = st.text_input("Player name", placeholder="Enter player name")
            strong = st.checkbox(TIER_LABELS[True])
            if st.form_submit_button("Add"):
                _set_roster(roster_ops.add_player(_roster(), name, strong=strong))
        st.caption("Option 3: Upload a roster CSV")
        up = st.file_uploader("Roster CSV", type=["csv"], key="uploader_roster", label_visibility="collapsed")
        if up is not None and st.button("Load CSV", key="load_csv"):
            try:
                loaded = parse_roster_csv(up)
            except (ValueError, pd.errors.ParserError) as e:
                st.error(f"Import error: {e}")
            else:
                merged = _roster()
                for p in loaded:
                    merged = roster_ops.add_player(merged, p.name, strong=p.strong)
                _set_roster(merged)
                st.success(f"Loaded {len(loaded)} players.")
        st.download_button("Download CSV Template", data=build_template_csv(),
                           file_name="roster_template.csv", key="dl_tpl")
    with c2:
        st.caption("Option 2: Paste player list (commas, semicolons or new lines)")
        with st.form("add_bulk", clear_on_submit=True):
            text = st.text_area("Names", height=110, label_visibility="collapsed",
                                placeholder="John Smith\nJane Doe, Mike Johnson\nSam Wilson; Alex Davis")
            if st.form_submit_button("Add All"):
                _set_roster(roster_ops.bulk_add_players(_roster(), text))

    players = _roster()
    h1, h2 = st.columns([4, 1])
    with h1:
        st.markdown(f"**Current Players ({len(players)})**")
    with h2:
        if players and st.button("Clear All", key="clear_all"):
            _set_roster(roster_ops.clear_roster(players))
            _safe_rerun()

    for idx, p in enumerate(players):
        c1, c2, c3 = st.columns([4, 2, 1])
        with c1:
            st.write(p.name)
        with c2:
            if st.button(TIER_LABELS[p.strong], key=f"tier_{idx}_{p.name}"):
                _set_roster(roster_ops.toggle_strength(_roster(), p.name))
                _safe_rerun()
        with c3:
            if st.button("✕", key=f"rm_{idx}_{p.name}"):
                _set_roster(roster_ops.remove_player(_roster(), p.name))
                _safe_rerun()

def _generate():
    s = _settings()
    players = _roster()
    if len(players) < s.players_on_field:
        st.error("Need at least as many players as positions on the field!")
        return
    try:
        schedule = generate_schedule(
            players, s.players_on_field, s.periods, s.period_length,
            override_duration=s.rotation_duration, balance_strength=s.balance_strength,
        )
    except ConfigurationError as e:
        st.error(f"Can't build a schedule: {e}")
        return
    logger.info("New schedule: %d players, %d rotations", len(players), schedule.stats.total_rotations)
    # replace everything from the previous schedule at once
    st.session_state["schedule"] = schedule
    _set_gamestate(new_game())

# ---------- Game clock ----------
def clock_section(schedule: Schedule):
    gs = _gamestate()
    c1, c2, c3 = st.columns([2, 1, 1])
    with c1:
        st.markdown(f"<div class='clock'>{format_time(gs.game_time)}</div>", unsafe_allow_html=True)
        st.caption(f"of {format_time(schedule.stats.total_game_time)}")
    with c2:
        if st.button("Pause" if gs.is_playing else "Play", key="play", type="primary"):
            toggle_play(gs, schedule)
            _set_gamestate(gs)
            _safe_rerun()
    with c3:
        if st.button("Reset", key="reset"):
            reset_game(gs)
            _set_gamestate(gs)
            _safe_rerun()

    rot = rotation_at(schedule, gs.game_time)
    if rot is not None:
        st.markdown(f"**Period {rot.period} • Rotation {rot.rotation_number}** · next change in "
                    f"{format_time(time_until_next_rotation(schedule, gs.game_time))}")
        chips = "".join(f"<span class='chip'>{n}</span>" for n in players_on_field_at(schedule, gs.game_time))
        st.markdown(chips, unsafe_allow_html=True)
    else:
        st.markdown("**Full time**")

# ---------- Schedule & stats ----------
def schedule_section(schedule: Schedule):
    st_ = schedule.stats
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Rotation length", format_time(st_.rotation_duration),
              None if st_.is_using_optimal_duration else "override", delta_color="off")
    m2.metric("Rotations / period", st_.rotations_per_period)
    m3.metric("Target minutes", f"{st_.target_minutes_per_player:.1f}")
    m4.metric("Max difference", f"{st_.max_time_difference:.1f} min")

    gs = _gamestate()
    df = schedule_to_dataframe(schedule)
    current = rotation_at(schedule, gs.game_time)

    def _highlight(row):
        on = current is not None and row["Period"] == current.period and row["Rotation"] == current.rotation_number
        return ["background-color: rgba(38,124,245,.25)" if on else "" for _ in row]

    st.subheader("Rotation Schedule")
    st.dataframe(df.style.apply(_highlight, axis=1), use_container_width=True, hide_index=True)

    st.subheader("Playing Time")
    stats_df = player_stats_to_dataframe(schedule)
    stats_df["Next Sub"] = [
        _next_sub_label(schedule, name, gs.game_time) for name in stats_df["Player"]
    ]
    st.dataframe(stats_df, use_container_width=True, hide_index=True)

def _next_sub_label(schedule: Schedule, name: str, game_time: int) -> str:
    sub = next_substitution(schedule.stats.player_stats[name], game_time)
    if sub is None:
        return "-"
    return f"{sub.type.upper()} @ {format_time(sub.time)}"

# ---------- Main ----------
st.title("Player Rotation Manager")
sidebar()
roster_section()

if st.button("Generate Schedule", key="generate", type="primary"):
    _generate()

schedule = _schedule()
if schedule is not None:
    clock_section(schedule)
    schedule_section(schedule)

    gs = _gamestate()
    if gs.is_playing:
        time.sleep(1)
        tick(gs, schedule)
        _set_gamestate(gs)
        _safe_rerun()
