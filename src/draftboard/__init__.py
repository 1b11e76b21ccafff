"""Projection normalization and scoring engine for fantasy-baseball draft boards."""

from draftboard.models import (
    BatterRecord,
    Eligibility,
    PitcherRecord,
    PlayerRecord,
    ProjectionGroup,
    ScoringSettings,
    TwoWayRecord,
)

__all__ = [
    "BatterRecord",
    "Eligibility",
    "PitcherRecord",
    "PlayerRecord",
    "ProjectionGroup",
    "ScoringSettings",
    "TwoWayRecord",
]
