"""Scoring aggregation for batters, pitchers and two-way players."""

from .points import (
    PlayerView,
    calculate_batter_points,
    calculate_pitcher_points,
    calculate_player_points,
    pitching_category_value,
)

__all__ = [
    "PlayerView",
    "calculate_batter_points",
    "calculate_pitcher_points",
    "calculate_player_points",
    "pitching_category_value",
]
