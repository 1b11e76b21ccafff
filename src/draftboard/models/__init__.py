"""Typed records produced and consumed by the engine."""

from .group import (
    DEFAULT_BATTING_WEIGHTS,
    DEFAULT_PITCHING_WEIGHTS,
    ProjectionGroup,
    ScoringSettings,
)
from .player import (
    POSITION_ORDER,
    BatterRecord,
    BattingStats,
    Eligibility,
    IdSource,
    PitcherRecord,
    PitchingStats,
    PlayerRecord,
    PlayerRole,
    Position,
    StatBlock,
    TwoWayRecord,
)

__all__ = [
    "DEFAULT_BATTING_WEIGHTS",
    "DEFAULT_PITCHING_WEIGHTS",
    "POSITION_ORDER",
    "BatterRecord",
    "BattingStats",
    "Eligibility",
    "IdSource",
    "PitcherRecord",
    "PitchingStats",
    "PlayerRecord",
    "PlayerRole",
    "Position",
    "ProjectionGroup",
    "ScoringSettings",
    "StatBlock",
    "TwoWayRecord",
]
