"""Fantasy point totals from stat lines and league weights."""

from __future__ import annotations

import math
from typing import Callable, Dict, Literal, Mapping

from draftboard.estimation import resolve_complete_games, resolve_quality_starts, resolve_shutouts
from draftboard.innings import innings_value
from draftboard.models import (
    BatterRecord,
    BattingStats,
    PitcherRecord,
    PitchingStats,
    PlayerRecord,
    ScoringSettings,
    TwoWayRecord,
)


PlayerView = Literal["all", "batters", "pitchers"]

# Categories that may be blank on an upload and are filled by estimation.
_DERIVED_PITCHING: Dict[str, Callable[[PitchingStats, bool], float]] = {
    "QS": resolve_quality_starts,
    "CG": resolve_complete_games,
    "ShO": resolve_shutouts,
}


def _weighted(weight: object, value: float) -> float:
    if not isinstance(weight, (int, float)) or not math.isfinite(weight):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return weight * value


def _round_tenth(points: float) -> float:
    # Halves round up: 30.25 -> 30.3.
    return math.floor(points * 10 + 0.5) / 10


def calculate_batter_points(stats: BattingStats, weights: Mapping[str, float]) -> float:
    total = sum((_weighted(weight, stats.value(category)) for category, weight in weights.items()), 0.0)
    return _round_tenth(total)


def pitching_category_value(stats: PitchingStats, category: str, use_baseball_ip: bool = False) -> float:
    if category == "IP":
        return innings_value(stats.value("IP"), use_baseball_ip)
    if category in _DERIVED_PITCHING:
        return _DERIVED_PITCHING[category](stats, use_baseball_ip)
    return stats.value(category)


def calculate_pitcher_points(
    stats: PitchingStats,
    weights: Mapping[str, float],
    use_baseball_ip: bool = False,
) -> float:
    total = 0.0
    for category, weight in weights.items():
        if not weight:
            continue
        total += _weighted(weight, pitching_category_value(stats, category, use_baseball_ip))
    return _round_tenth(total)


def calculate_player_points(
    player: PlayerRecord,
    settings: ScoringSettings,
    view: PlayerView = "all",
    use_baseball_ip: bool = False,
) -> float:
    """Total points for one player under the active view.

    Each side is rounded to a tenth before the sides are added. A two-way
    record scores both sides in the ``all`` view and one side otherwise. A
    single-role record outside its view scores zero.
    """

    match player:
        case BatterRecord(batting=batting):
            if view == "pitchers":
                return 0.0
            return calculate_batter_points(batting, settings.batting)
        case PitcherRecord(pitching=pitching):
            if view == "batters":
                return 0.0
            return calculate_pitcher_points(pitching, settings.pitching, use_baseball_ip)
        case TwoWayRecord(batting=batting, pitching=pitching):
            total = 0.0
            if view in ("all", "batters"):
                total += calculate_batter_points(batting, settings.batting)
            if view in ("all", "pitchers"):
                total += calculate_pitcher_points(pitching, settings.pitching, use_baseball_ip)
            return total
        case _:
            raise TypeError(f"Unsupported player record: {type(player).__name__}")
