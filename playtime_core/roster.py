"""
Roster editing. Every function returns a new list and quietly ignores bad input
(blank or duplicate names, unknown players) so typing in the UI stays forgiving.
"""
from __future__ import annotations
from typing import List

from .config import BULK_SPLIT
from .models import Player


def names_of(roster: List[Player]) -> List[str]:
    return [p.name for p in roster]

def add_player(roster: List[Player], name: str, strong: bool = False) -> List[Player]:
    name = (name or "").strip()
    if not name or name in names_of(roster):
        return list(roster)
    return list(roster) + [Player(name=name, strong=strong)]

def parse_bulk_names(text: str) -> List[str]:
    """Split pasted text on newlines/commas/semicolons; trimmed, blanks and repeats dropped."""
    out: List[str] = []
    for chunk in BULK_SPLIT.split(text or ""):
        n = chunk.strip()
        if n and n not in out:
            out.append(n)
    return out

def bulk_add_players(roster: List[Player], text: str) -> List[Player]:
    existing = set(names_of(roster))
    fresh = [Player(name=n) for n in parse_bulk_names(text) if n not in existing]
    return list(roster) + fresh

def remove_player(roster: List[Player], name: str) -> List[Player]:
    return [p for p in roster if p.name != name]

def toggle_strength(roster: List[Player], name: str) -> List[Player]:
    return [p.model_copy(update={"strong": not p.strong}) if p.name == name else p for p in roster]

def clear_roster(roster: List[Player]) -> List[Player]:
    return []
