"""Statistical estimates for stats missing from uploaded projections."""

from .outcomes import (
    adjusted_innings,
    estimate_complete_games,
    estimate_quality_starts,
    estimate_shutouts,
    resolve_complete_games,
    resolve_quality_starts,
    resolve_shutouts,
)

__all__ = [
    "adjusted_innings",
    "estimate_complete_games",
    "estimate_quality_starts",
    "estimate_shutouts",
    "resolve_complete_games",
    "resolve_quality_starts",
    "resolve_shutouts",
]
