"""Helpers to parse projection CSV/TSV uploads into typed player records."""

from __future__ import annotations

import csv
import io
import logging
import math
import re
import unicodedata
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
from uuid import uuid4

from draftboard.models import (
    BatterRecord,
    BattingStats,
    IdSource,
    PitcherRecord,
    PitchingStats,
    PlayerRole,
    ProjectionGroup,
    StatBlock,
    TwoWayRecord,
)


logger = logging.getLogger(__name__)

BATTER_MARKER_COLUMNS = ("PA", "AB", "1B", "2B", "3B", "SB", "CS", "AVG", "OBP", "SLG")
PITCHER_MARKER_COLUMNS = ("ERA", "WHIP", "IP", "GS", "SV", "QS", "CG", "ShO", "K/9", "BB/9")
OUTCOME_COLUMNS = ("QS", "CG", "ShO")
# Rate and display columns. A bad value here reads as 0 (ADP as None) and the
# row is kept with a warning.
OPTIONAL_COLUMNS = frozenset(
    {"AVG", "OBP", "SLG", "OPS", "ISO", "BABIP", "wRC+", "WHIP", "K/9", "BB/9", "FIP", "WAR", "ADP"}
)

_NAME_COLUMNS = ("Name", "name")
_TEAM_COLUMNS = ("Team", "team")
_ID_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "MLBAMID": ("MLBAMID", "mlbamid"),
    "PlayerId": ("PlayerId", "playerid"),
}
_NAME_SUFFIX_TOKENS = {"jr", "sr", "ii", "iii", "iv", "v"}


class ProjectionFileError(ValueError):
    """The upload cannot be read as a projection table at all."""


@dataclass(frozen=True)
class IdConfig:
    source: IdSource
    custom_column: Optional[str] = None


@dataclass(frozen=True)
class MissingOutcomes:
    total_players: int
    missing_player_ids: Tuple[str, ...]


@dataclass
class ParseResult:
    players: List[Union[BatterRecord, PitcherRecord]]
    role: PlayerRole
    row_count: int
    errors: List[str]
    id_source: IdSource
    available_columns: List[str]
    needs_id_selection: bool
    missing_outcomes: Optional[Dict[str, MissingOutcomes]] = None


@dataclass
class TwoWayMerge:
    two_way: List[TwoWayRecord] = field(default_factory=list)
    batters: List[BatterRecord] = field(default_factory=list)
    pitchers: List[PitcherRecord] = field(default_factory=list)


class _RowError(ValueError):
    pass


def detect_delimiter(content: str) -> str:
    first_line = content.split("\n", 1)[0]
    return "\t" if first_line.count("\t") > first_line.count(",") else ","


def detect_role(headers: Sequence[str]) -> PlayerRole:
    columns = set(headers)
    batter_matches = sum(1 for col in BATTER_MARKER_COLUMNS if col in columns)
    pitcher_matches = sum(1 for col in PITCHER_MARKER_COLUMNS if col in columns)
    return "batter" if batter_matches > pitcher_matches else "pitcher"


def detect_id_source(headers: Sequence[str]) -> IdSource:
    lowered = {header.lower() for header in headers}
    for source, candidates in _ID_COLUMNS.items():
        if any(candidate.lower() in lowered for candidate in candidates):
            return source
    return "generated"


def _first(row: Mapping[str, Optional[str]], columns: Sequence[str]) -> str:
    for column in columns:
        value = row.get(column)
        if value is not None and value.strip():
            return value.strip()
    return ""


def _parse_number(raw: Optional[str], column: str) -> Optional[float]:
    if raw is None:
        return None
    text = raw.strip().replace(",", "")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise _RowError(f"column '{column}' value '{raw.strip()}' is not numeric") from None
    if not math.isfinite(value):
        raise _RowError(f"column '{column}' value '{raw.strip()}' is not finite")
    return value


def _parse_optional(row: Mapping[str, Optional[str]], column: str, notes: List[str]) -> Optional[float]:
    try:
        return _parse_number(row.get(column), column)
    except _RowError as exc:
        notes.append(f"{exc}; ignored")
        return None


def _parse_stats(
    row: Mapping[str, Optional[str]],
    block: type[StatBlock],
    notes: List[str],
) -> StatBlock:
    values: Dict[str, float] = {}
    for category in block.categories():
        if category in OPTIONAL_COLUMNS:
            value = _parse_optional(row, category, notes)
        else:
            value = _parse_number(row.get(category), category)
        if value is not None:
            values[category] = value
    return block.model_validate(values)


def _normalize_name(name: str) -> str:
    folded = unicodedata.normalize("NFKD", name)
    ascii_name = "".join(ch for ch in folded if not unicodedata.combining(ch))
    cleaned = re.sub(r"[^a-z0-9]+", " ", ascii_name.lower())
    tokens = [tok for tok in cleaned.split() if tok and tok not in _NAME_SUFFIX_TOKENS]
    return "".join(tokens)


def generated_player_id(role: PlayerRole, name: str, team: str) -> str:
    """Stable identifier built from row content for uploads without an id column."""

    team_token = re.sub(r"[^A-Z0-9]", "", team.upper()) or "FA"
    return f"{role}-{_normalize_name(name)}-{team_token}"


class _IdResolver:
    def __init__(self, role: PlayerRole, config: IdConfig):
        self.role = role
        self.config = config
        self.seen: Dict[str, int] = {}

    def _column_value(self, row: Mapping[str, Optional[str]]) -> str:
        if self.config.source in _ID_COLUMNS:
            return _first(row, _ID_COLUMNS[self.config.source])
        if self.config.source == "custom" and self.config.custom_column:
            return _first(row, (self.config.custom_column,))
        return ""

    def resolve(self, row: Mapping[str, Optional[str]], name: str, team: str) -> Tuple[str, Optional[str]]:
        provided = self._column_value(row)
        if provided:
            if provided in self.seen:
                raise _RowError(f"duplicate identifier '{provided}'")
            self.seen[provided] = 1
            return provided, None

        base = generated_player_id(self.role, name, team)
        count = self.seen.get(base, 0) + 1
        self.seen[base] = count
        player_id = base if count == 1 else f"{base}-{count}"
        note = None
        if self.config.source != "generated":
            note = f"no {self.config.custom_column or self.config.source} value; generated '{player_id}'"
        return player_id, note


def parse_projection_text(
    content: str,
    force_role: Optional[PlayerRole] = None,
    id_config: Optional[IdConfig] = None,
) -> ParseResult:
    """Parse uploaded projection text into batter or pitcher records.

    Bad rows are skipped and described in ``errors``; only a file with no
    header or no ``Name`` column raises :class:`ProjectionFileError`.
    """

    text = content.removeprefix("\ufeff")
    if not text.strip():
        raise ProjectionFileError("projection file is empty")

    delimiter = detect_delimiter(text)
    reader = csv.DictReader(io.StringIO(text), delimiter=delimiter)
    headers = [header.strip() for header in (reader.fieldnames or [])]
    reader.fieldnames = headers
    if not any(column in headers for column in _NAME_COLUMNS):
        raise ProjectionFileError("projection file has no Name column")

    role = force_role or detect_role(headers)
    detected_source = detect_id_source(headers)
    needs_id_selection = id_config is None and detected_source == "generated"
    config = id_config or IdConfig(source=detected_source)
    logger.debug(
        "Parsing %s projections (delimiter=%r, id_source=%s)", role, delimiter, config.source
    )

    ids = _IdResolver(role, config)
    block = BattingStats if role == "batter" else PitchingStats
    errors: List[str] = []
    players: List[Union[BatterRecord, PitcherRecord]] = []
    missing: Dict[str, List[str]] = {stat: [] for stat in OUTCOME_COLUMNS}

    for index, row in enumerate(reader, start=1):
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        notes: List[str] = []
        try:
            name = _first(row, _NAME_COLUMNS)
            if not name:
                raise _RowError("missing player name")
            team = _first(row, _TEAM_COLUMNS)
            stats = _parse_stats(row, block, notes)
            adp = _parse_optional(row, "ADP", notes)
            player_id, note = ids.resolve(row, name, team)
        except _RowError as exc:
            message = f"Row {index}: {exc}"
            logger.warning("Skipping projection row: %s", message)
            errors.append(message)
            continue
        if note:
            notes.append(note)
        for text in notes:
            message = f"Row {index}: {text}"
            logger.warning("Projection row kept with warning: %s", message)
            errors.append(message)

        common = {
            "id": player_id,
            "name": name,
            "team": team,
            "player_id": _first(row, _ID_COLUMNS["PlayerId"]),
            "mlbam_id": _first(row, _ID_COLUMNS["MLBAMID"]),
            "adp": adp,
        }
        if role == "batter":
            players.append(BatterRecord(batting=stats, **common))
            continue

        players.append(PitcherRecord(pitching=stats, **common))
        for stat in OUTCOME_COLUMNS:
            if (row.get(stat) or "").strip() == "":
                missing[stat].append(player_id)

    missing_outcomes = None
    if role == "pitcher":
        missing_outcomes = {
            stat: MissingOutcomes(total_players=len(players), missing_player_ids=tuple(ids_))
            for stat, ids_ in missing.items()
        }

    return ParseResult(
        players=players,
        role=role,
        row_count=len(players),
        errors=errors,
        id_source=config.source,
        available_columns=headers,
        needs_id_selection=needs_id_selection,
        missing_outcomes=missing_outcomes,
    )


def load_projection_file(
    path: Path,
    *,
    force_role: Optional[PlayerRole] = None,
    id_config: Optional[IdConfig] = None,
) -> ParseResult:
    return parse_projection_text(
        path.read_text(encoding="utf-8-sig"),
        force_role=force_role,
        id_config=id_config,
    )


def merge_two_way(
    batters: Sequence[BatterRecord],
    pitchers: Sequence[PitcherRecord],
) -> TwoWayMerge:
    """Join batters and pitchers on exact identifier into two-way records."""

    pitchers_by_id = {pitcher.id: pitcher for pitcher in pitchers}
    result = TwoWayMerge()
    matched: set[str] = set()

    for batter in batters:
        pitcher = pitchers_by_id.get(batter.id)
        if pitcher is None:
            result.batters.append(batter)
            continue
        matched.add(batter.id)
        result.two_way.append(
            TwoWayRecord(
                id=batter.id,
                name=batter.name or pitcher.name,
                team=batter.team or pitcher.team,
                player_id=batter.player_id or pitcher.player_id,
                mlbam_id=batter.mlbam_id or pitcher.mlbam_id,
                adp=batter.adp if batter.adp is not None else pitcher.adp,
                batting=batter.batting,
                pitching=pitcher.pitching,
            )
        )

    result.pitchers = [pitcher for pitcher in pitchers if pitcher.id not in matched]
    return result


def build_projection_group(
    name: str,
    *,
    batters: Optional[ParseResult] = None,
    pitchers: Optional[ParseResult] = None,
    created_at: Optional[datetime] = None,
) -> ProjectionGroup:
    """Bundle confirmed uploads into a new projection group."""

    if not name.strip():
        raise ValueError("projection group name is required")
    if batters is None and pitchers is None:
        raise ValueError("at least one projection upload is required")

    batter_records = [p for p in (batters.players if batters else []) if isinstance(p, BatterRecord)]
    pitcher_records = [p for p in (pitchers.players if pitchers else []) if isinstance(p, PitcherRecord)]
    two_way: List[TwoWayRecord] = []
    if batter_records and pitcher_records:
        two_way = merge_two_way(batter_records, pitcher_records).two_way

    return ProjectionGroup(
        id=str(uuid4()),
        name=name.strip(),
        created_at=created_at or datetime.now(timezone.utc),
        batters=batter_records,
        pitchers=pitcher_records,
        two_way=two_way,
        batter_id_source=batters.id_source if batters else None,
        pitcher_id_source=pitchers.id_source if pitchers else None,
    )
