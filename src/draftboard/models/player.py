"""Canonical player models shared across ingestion, eligibility and scoring."""

from __future__ import annotations

import math
from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Position = Literal["C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH"]
POSITION_ORDER: Tuple[str, ...] = ("C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH")

IdSource = Literal["MLBAMID", "PlayerId", "custom", "generated"]
PlayerRole = Literal["batter", "pitcher"]


class StatBlock(BaseModel):
    """Counting and rate stats keyed by their projection-file column names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def categories(cls) -> Tuple[str, ...]:
        return tuple(field.alias or name for name, field in cls.model_fields.items())

    @classmethod
    def field_for(cls, category: str) -> Optional[str]:
        for name, field in cls.model_fields.items():
            if category == name or category == field.alias:
                return name
        return None

    def value(self, category: str) -> float:
        name = self.field_for(category)
        if name is None:
            return 0.0
        raw = getattr(self, name)
        if raw is None or not math.isfinite(raw):
            return 0.0
        return float(raw)


class BattingStats(StatBlock):
    G: float = 0.0
    PA: float = 0.0
    AB: float = 0.0
    H: float = 0.0
    singles: float = Field(0.0, alias="1B")
    doubles: float = Field(0.0, alias="2B")
    triples: float = Field(0.0, alias="3B")
    HR: float = 0.0
    R: float = 0.0
    RBI: float = 0.0
    BB: float = 0.0
    IBB: float = 0.0
    SO: float = 0.0
    HBP: float = 0.0
    SF: float = 0.0
    SH: float = 0.0
    GDP: float = 0.0
    SB: float = 0.0
    CS: float = 0.0
    AVG: float = 0.0
    OBP: float = 0.0
    SLG: float = 0.0
    OPS: float = 0.0
    ISO: float = 0.0
    BABIP: float = 0.0
    wrc_plus: float = Field(0.0, alias="wRC+")
    WAR: float = 0.0


class PitchingStats(StatBlock):
    W: float = 0.0
    L: float = 0.0
    QS: float = 0.0
    CG: float = 0.0
    ShO: float = 0.0
    G: float = 0.0
    GS: float = 0.0
    SV: float = 0.0
    HLD: float = 0.0
    BS: float = 0.0
    IP: float = 0.0
    H: float = 0.0
    R: float = 0.0
    ER: float = 0.0
    HR: float = 0.0
    BB: float = 0.0
    IBB: float = 0.0
    HBP: float = 0.0
    SO: float = 0.0
    ERA: float = 0.0
    WHIP: float = 0.0
    k_per_9: float = Field(0.0, alias="K/9")
    bb_per_9: float = Field(0.0, alias="BB/9")
    FIP: float = 0.0
    WAR: float = 0.0


class Eligibility(BaseModel):
    """Positions and pitching roles a player qualifies for in one season."""

    position_games: Dict[str, float] = Field(default_factory=dict)
    eligible_positions: List[str] = Field(default_factory=list)
    is_sp: bool = False
    is_rp: bool = False
    source_season: int
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class _PlayerBase(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    team: str = ""
    player_id: str = ""
    mlbam_id: str = ""
    adp: Optional[float] = None
    eligibility: Optional[Eligibility] = None

    model_config = ConfigDict(frozen=True)


class BatterRecord(_PlayerBase):
    kind: Literal["batter"] = "batter"
    batting: BattingStats = Field(default_factory=BattingStats)


class PitcherRecord(_PlayerBase):
    kind: Literal["pitcher"] = "pitcher"
    pitching: PitchingStats = Field(default_factory=PitchingStats)


class TwoWayRecord(_PlayerBase):
    kind: Literal["two-way"] = "two-way"
    batting: BattingStats = Field(default_factory=BattingStats)
    pitching: PitchingStats = Field(default_factory=PitchingStats)


PlayerRecord = Annotated[
    Union[BatterRecord, PitcherRecord, TwoWayRecord],
    Field(discriminator="kind"),
]
