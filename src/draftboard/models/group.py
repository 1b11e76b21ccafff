"""Projection groups and league scoring settings."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import BatterRecord, IdSource, PitcherRecord, TwoWayRecord


DEFAULT_BATTING_WEIGHTS: Dict[str, float] = {
    "R": 1,
    "H": 0,
    "1B": 1,
    "2B": 2,
    "3B": 3,
    "HR": 4,
    "RBI": 1,
    "SB": 1,
    "CS": -1,
    "BB": 1,
    "SO": -1,
    "HBP": 1,
    "SF": 0,
    "GDP": 0,
}

DEFAULT_PITCHING_WEIGHTS: Dict[str, float] = {
    "IP": 3,
    "W": 5,
    "L": -5,
    "QS": 3,
    "CG": 0,
    "ShO": 0,
    "SV": 5,
    "BS": -3,
    "HLD": 2,
    "SO": 1,
    "H": -1,
    "ER": -2,
    "HR": -1,
    "BB": -1,
    "HBP": -1,
}


class ScoringSettings(BaseModel):
    """Points-per-unit weights for batting and pitching categories."""

    name: str = "Default"
    batting: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_BATTING_WEIGHTS))
    pitching: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_PITCHING_WEIGHTS))

    model_config = ConfigDict(frozen=True)


class ProjectionGroup(BaseModel):
    """Named bundle of uploaded batters, pitchers and derived two-way records."""

    id: str
    name: str
    created_at: datetime
    batters: List[BatterRecord] = Field(default_factory=list)
    pitchers: List[PitcherRecord] = Field(default_factory=list)
    two_way: List[TwoWayRecord] = Field(default_factory=list)
    batter_id_source: Optional[IdSource] = None
    pitcher_id_source: Optional[IdSource] = None
    eligibility_imported_at: Optional[datetime] = None
    eligibility_season: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def can_merge_two_way(self) -> bool:
        return (
            self.batter_id_source is not None
            and self.batter_id_source != "generated"
            and self.pitcher_id_source is not None
            and self.pitcher_id_source != "generated"
        )
