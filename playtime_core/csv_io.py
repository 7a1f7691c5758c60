from __future__ import annotations
import io
from typing import Dict, Iterable, List

import pandas as pd

from .config import TIER_LABELS
from .models import Player, Schedule
from .ui_helpers import format_time

CSV_HEADERS = ["Name", "Strong"]
HEADER_ALIASES = {
    # canonical -> set of aliases
    "Name": {"name", "player", "full name"},
    "Strong": {"strong", "tier", "strength", "skill"},
}
TRUTHY = {"1", "true", "yes", "y", "x", "strong", "high"}


def _header_map(cols: Iterable[str]) -> Dict[str, str]:
    """
    Build a mapping from provided column -> canonical header.
    Case-insensitive, uses HEADER_ALIASES, leaves unknown columns untouched.
    """
    out = {}
    for c in cols:
        lc = str(c).strip().lower()
        mapped = None
        for k, aliases in HEADER_ALIASES.items():
            if lc == k.lower() or lc in aliases:
                mapped = k
                break
        out[c] = mapped if mapped else c
    return out

def _truthy(v) -> bool:
    if pd.isna(v):
        return False
    s = str(v).strip().lower()
    if s in TRUTHY:
        return True
    try:
        return float(s) != 0
    except ValueError:
        return False

def parse_roster_csv(file) -> List[Player]:
    """
    Parse uploaded CSV (bytes or file-like) into players.
    Blank names are skipped, repeated names keep the first row.
    """
    if isinstance(file, (bytes, bytearray)):
        df = pd.read_csv(io.BytesIO(file))
    else:
        df = pd.read_csv(file)

    df = df.rename(columns=_header_map(df.columns))
    if "Name" not in df.columns:
        raise ValueError(f"Missing required column 'Name' (got {list(df.columns)})")
    if "Strong" not in df.columns:
        df["Strong"] = False

    players: List[Player] = []
    seen = set()
    for _, r in df.iterrows():
        name = "" if pd.isna(r["Name"]) else str(r["Name"]).strip()
        if not name or name in seen:
            continue
        seen.add(name)
        players.append(Player(name=name, strong=_truthy(r["Strong"])))
    return players

def build_template_csv() -> bytes:
    example = (
        "Name,Strong\n"
        "Alex Quinn,1\n"
        "Blake Diaz,0\n"
    )
    return example.encode("utf-8")

def roster_to_dataframe(players: List[Player]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Name": p.name, "Strong": p.strong} for p in players],
        columns=CSV_HEADERS,
    )

def schedule_to_dataframe(schedule: Schedule) -> pd.DataFrame:
    rows = []
    for rot in schedule.all_rotations():
        row = {
            "Period": rot.period,
            "Rotation": rot.rotation_number,
            "Start": format_time(rot.start_time),
            "End": format_time(rot.end_time),
            "Minutes": round(rot.duration_minutes, 2),
            "Players": ", ".join(rot.players),
        }
        if rot.strong_count is not None:
            row[TIER_LABELS[True]] = rot.strong_count
            row[TIER_LABELS[False]] = rot.developing_count
        rows.append(row)
    return pd.DataFrame(rows)

def player_stats_to_dataframe(schedule: Schedule) -> pd.DataFrame:
    rows = []
    for name, ps in schedule.stats.player_stats.items():
        rows.append({
            "Player": name,
            "Minutes": round(ps.total_minutes, 2),
            "Rotations": ps.rotation_count,
            "Periods": ", ".join(str(p) for p in ps.periods_played),
            "% of Game": ps.percentage_of_game,
            "vs Target (min)": ps.difference_from_target,
        })
    return pd.DataFrame(rows)

def export_schedule_csv(schedule: Schedule) -> bytes:
    buf = io.StringIO()
    schedule_to_dataframe(schedule).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
