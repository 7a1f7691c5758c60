from __future__ import annotations
import logging
import math
from typing import Dict, List, Optional, Sequence, Set, Union

import numpy as np

from .models import (
    DurationAdvice, Player, PlayerStats, Rotation, Schedule, ScheduleStats, Substitution
)

logger = logging.getLogger(__name__)

RosterEntry = Union[Player, str]


class ConfigurationError(ValueError):
    """Roster/settings combination that cannot produce a schedule."""


# -----------------------
# Duration advisor
# -----------------------
def calculate_optimal_duration(total_players: int, players_on_field: int, period_length: int) -> DurationAdvice:
    """Shortest number of equal rotations per period that lets every player get on once."""
    rotations = math.ceil(total_players / players_on_field)
    recommended = int(period_length // rotations)
    return DurationAdvice(
        recommended_duration=recommended,
        rotations_per_period=rotations,
        rotation_length_minutes=recommended / 60,
    )


# -----------------------
# Validation
# -----------------------
def _as_players(roster: Sequence[RosterEntry]) -> List[Player]:
    return [Player(name=p) if isinstance(p, str) else p for p in roster]

def validate_configuration(players: List[Player], players_on_field: int, periods: int, period_length: int):
    problem = None
    names = [p.name for p in players]
    if periods < 1:
        problem = f"periods must be at least 1 (got {periods})"
    elif period_length <= 0:
        problem = f"period length must be positive (got {period_length})"
    elif players_on_field < 1:
        problem = f"players on field must be at least 1 (got {players_on_field})"
    elif len(players) < players_on_field:
        problem = f"need at least {players_on_field} players, roster has {len(players)}"
    elif any(not n for n in names):
        problem = "player names must not be empty"
    elif len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        problem = f"duplicate player names: {', '.join(dupes)}"
    if problem:
        logger.warning("Rejected rotation settings: %s", problem)
        raise ConfigurationError(problem)


# -----------------------
# Queue selection
# -----------------------
def _select_players(queue: List[str], on_field: int, strong: Dict[str, bool], balanced: bool) -> List[str]:
    if not balanced:
        return queue[:on_field]

    strong_target = math.ceil(on_field / 2)
    developing_target = on_field - strong_target
    picked: List[str] = []
    n_strong = n_dev = 0
    for name in queue:
        if strong[name]:
            if n_strong < strong_target:
                picked.append(name)
                n_strong += 1
        elif n_dev < developing_target:
            picked.append(name)
            n_dev += 1
        if len(picked) == on_field:
            return picked

    # one tier ran dry: backfill from whoever is left, still in queue order
    chosen = set(picked)
    for name in queue:
        if len(picked) == on_field:
            break
        if name not in chosen:
            picked.append(name)
    return picked

def _requeue(queue: List[str], picked: List[str]) -> List[str]:
    chosen = set(picked)
    return [n for n in queue if n not in chosen] + list(picked)


# -----------------------
# Generator
# -----------------------
def generate_schedule(
    roster: Sequence[RosterEntry],
    players_on_field: int,
    periods: int,
    period_length: int,
    override_duration: Optional[float] = None,
    balance_strength: bool = True,
) -> Schedule:
    """
    Greedy, single-pass rotation plan.

    Before every rotation the queue is stable-sorted by seconds played, the
    first `players_on_field` go on (or a strong/developing split when
    balancing), and they move to the back of the queue. The last rotation of
    a period is shortened to fit whatever time is left.

    Raises ConfigurationError before doing any work if the settings can't be
    scheduled. The caller's roster is never modified.
    """
    players = _as_players(roster)
    validate_configuration(players, players_on_field, periods, period_length)

    optimal = calculate_optimal_duration(len(players), players_on_field, period_length)
    use_override = override_duration is not None and override_duration > 0
    if use_override:
        duration = override_duration
        logger.info("Using %ss rotations instead of advised %ss", duration, optimal.recommended_duration)
    else:
        duration = max(1, optimal.recommended_duration)

    names = [p.name for p in players]
    strong = {p.name: bool(p.strong) for p in players}
    balanced = bool(balance_strength) and any(strong.values())

    played: Dict[str, float] = {n: 0 for n in names}
    counts: Dict[str, int] = {n: 0 for n in names}
    periods_played: Dict[str, Set[int]] = {n: set() for n in names}
    subs: Dict[str, List[Substitution]] = {n: [] for n in names}

    queue = list(names)
    rotations: List[List[Rotation]] = []

    for period in range(1, periods + 1):
        period_start = (period - 1) * period_length
        remaining = period_length
        period_rotations: List[Rotation] = []

        while remaining > 0:
            queue = sorted(queue, key=played.__getitem__)
            on = _select_players(queue, players_on_field, strong, balanced)
            queue = _requeue(queue, on)

            slot = min(duration, remaining)
            start = period_start + (period_length - remaining)
            end = start + slot
            number = len(period_rotations) + 1

            n_strong = sum(1 for n in on if strong[n]) if balanced else None
            period_rotations.append(Rotation(
                period=period,
                rotation_number=number,
                players=list(on),
                start_time=start,
                end_time=end,
                strong_count=n_strong,
                developing_count=(len(on) - n_strong) if balanced else None,
            ))

            for name in on:
                subs[name].append(Substitution(
                    type="in", time=start, period=period, rotation=number, game_minute=int(start // 60)))
                subs[name].append(Substitution(
                    type="out", time=end, period=period, rotation=number, game_minute=int(end // 60)))
                played[name] += slot
                counts[name] += 1
                periods_played[name].add(period)

            remaining -= slot

        rotations.append(period_rotations)

    stats = _summarize(
        names, played, counts, periods_played, subs,
        players_on_field=players_on_field,
        total_game_time=periods * period_length,
        rotations=rotations,
        duration=duration,
        optimal=optimal,
        use_override=use_override,
        balanced=balanced,
    )
    logger.debug(
        "Generated %d rotations for %d players (%ss each, spread %ss)",
        stats.total_rotations, len(names), duration, stats.max_spread_seconds,
    )
    return Schedule(rotations=rotations, stats=stats)


# -----------------------
# Statistics
# -----------------------
def _summarize(
    names: List[str],
    played: Dict[str, float],
    counts: Dict[str, int],
    periods_played: Dict[str, Set[int]],
    subs: Dict[str, List[Substitution]],
    *,
    players_on_field: int,
    total_game_time: int,
    rotations: List[List[Rotation]],
    duration: float,
    optimal: DurationAdvice,
    use_override: bool,
    balanced: bool,
) -> ScheduleStats:
    target = players_on_field / len(names) * total_game_time
    totals = np.array([played[n] for n in names], dtype=float)
    spread = float(np.ptp(totals))

    player_stats = {
        n: PlayerStats(
            total_seconds=played[n],
            rotation_count=counts[n],
            periods_played=sorted(periods_played[n]),
            substitution_times=subs[n],
            percentage_of_game=round(played[n] / total_game_time * 100, 1),
            difference_from_target=round((played[n] - target) / 60, 2),
        )
        for n in names
    }
    return ScheduleStats(
        player_stats=player_stats,
        average_minutes=float(totals.mean()) / 60,
        target_minutes_per_player=target / 60,
        total_rotations=sum(len(p) for p in rotations),
        rotation_duration=duration,
        total_game_time=total_game_time,
        max_time_difference=spread / 60,
        max_spread_seconds=spread,
        rotations_per_period=len(rotations[0]) if rotations else 0,
        optimal=optimal,
        is_using_optimal_duration=not use_override,
        balanced=balanced,
    )
