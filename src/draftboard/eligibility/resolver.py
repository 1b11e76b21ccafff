"""Position and pitching-role eligibility from season game logs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from draftboard.config.eligibility import DEFAULT_ELIGIBILITY_RULES, EligibilityRules
from draftboard.models import (
    POSITION_ORDER,
    BatterRecord,
    Eligibility,
    PitcherRecord,
    PlayerRecord,
    TwoWayRecord,
)


@dataclass(frozen=True)
class PitchingGames:
    games: float = 0.0
    games_started: float = 0.0


@dataclass(frozen=True)
class SeasonStatsLookup:
    """Season logs keyed by MLBAM id, as returned by the stats lookup."""

    fielding: Mapping[str, Mapping[str, float]] = field(default_factory=dict)
    pitching: Mapping[str, PitchingGames] = field(default_factory=dict)
    primary_position: Mapping[str, str] = field(default_factory=dict)


def empty_position_games() -> Dict[str, float]:
    return {pos: 0.0 for pos in POSITION_ORDER}


def normalize_position_games(raw: Mapping[str, object]) -> Dict[str, float]:
    games = empty_position_games()
    for pos in POSITION_ORDER:
        value = raw.get(pos)
        if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
            games[pos] = float(value)
    return games


def _has_fielding(position_games: Optional[Mapping[str, float]]) -> bool:
    return bool(position_games) and any(value > 0 for value in position_games.values())


def compute_hitter_eligibility(
    position_games: Mapping[str, float],
    season: int,
    warnings: Sequence[str] = (),
    *,
    rules: EligibilityRules = DEFAULT_ELIGIBILITY_RULES,
) -> Eligibility:
    games = normalize_position_games(position_games)
    threshold = rules.position_threshold(sum(games.values()))
    eligible = [pos for pos in POSITION_ORDER if games[pos] > 0 and games[pos] >= threshold]
    return Eligibility(
        position_games=games,
        eligible_positions=eligible,
        source_season=season,
        warnings=list(warnings),
    )


def compute_pitcher_eligibility(
    games: float,
    games_started: float,
    season: int,
    warnings: Sequence[str] = (),
    *,
    rules: EligibilityRules = DEFAULT_ELIGIBILITY_RULES,
) -> Eligibility:
    relief_apps = max(0.0, games - games_started)
    start_share = games_started / games if games > 0 else 0.0
    relief_share = relief_apps / games if games > 0 else 0.0
    return Eligibility(
        position_games=empty_position_games(),
        eligible_positions=[],
        is_sp=games_started >= rules.sp_min_starts or start_share >= rules.sp_min_start_share,
        is_rp=relief_apps >= rules.rp_min_relief_apps or relief_share >= rules.rp_min_relief_share,
        source_season=season,
        warnings=list(warnings),
    )


_PROFILE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "OF": ("LF", "CF", "RF"),
    "IF": ("1B", "2B", "3B", "SS"),
}


def eligibility_from_profile_position(
    position: str,
    season: int,
    warnings: Sequence[str] = (),
) -> Eligibility:
    """Eligibility implied by a player's listed primary position alone."""

    normalized = position.strip().upper()
    notes = list(warnings)
    eligible: List[str] = []
    is_sp = is_rp = False

    if normalized == "P":
        is_sp = is_rp = True
    elif normalized == "SP":
        is_sp = True
    elif normalized == "RP":
        is_rp = True
    elif normalized in _PROFILE_GROUPS:
        eligible.extend(_PROFILE_GROUPS[normalized])
    elif normalized in POSITION_ORDER:
        eligible.append(normalized)
    else:
        notes.append(f"Unknown profile position: {position}")

    return Eligibility(
        position_games=empty_position_games(),
        eligible_positions=eligible,
        is_sp=is_sp,
        is_rp=is_rp,
        source_season=season,
        warnings=notes,
    )


def resolve_batting_eligibility(
    position_games: Optional[Mapping[str, float]],
    profile_position: Optional[str],
    season: int,
    warnings: Sequence[str] = (),
) -> Eligibility:
    notes = list(warnings)
    if not _has_fielding(position_games) and profile_position:
        notes.append(f"Profile fallback: {profile_position}")
        return eligibility_from_profile_position(profile_position, season, notes)
    if not _has_fielding(position_games):
        notes.append("No fielding stats found")
    return compute_hitter_eligibility(position_games or {}, season, notes)


def resolve_pitching_eligibility(
    pitching: Optional[PitchingGames],
    profile_position: Optional[str],
    season: int,
    warnings: Sequence[str] = (),
) -> Eligibility:
    notes = list(warnings)
    if pitching is None and profile_position:
        notes.append(f"Profile fallback: {profile_position}")
        return eligibility_from_profile_position(profile_position, season, notes)
    if pitching is None:
        notes.append("No pitching stats found")
        pitching = PitchingGames()
    return compute_pitcher_eligibility(pitching.games, pitching.games_started, season, notes)


def merge_two_way_eligibility(batting: Eligibility, pitching: Eligibility) -> Eligibility:
    """Union both sides; roles come from pitching, warnings keep duplicates."""

    positions = set(batting.eligible_positions) | set(pitching.eligible_positions)
    return Eligibility(
        position_games=dict(batting.position_games),
        eligible_positions=[pos for pos in POSITION_ORDER if pos in positions],
        is_sp=pitching.is_sp,
        is_rp=pitching.is_rp,
        source_season=batting.source_season,
        warnings=[*batting.warnings, *pitching.warnings],
    )


def resolve_player_eligibility(
    record: PlayerRecord,
    lookup: SeasonStatsLookup,
    season: int,
) -> Eligibility:
    mlbam_id = record.mlbam_id
    warnings: List[str] = [] if mlbam_id else ["Missing MLBAMID"]
    fielding = lookup.fielding.get(mlbam_id) if mlbam_id else None
    pitching = lookup.pitching.get(mlbam_id) if mlbam_id else None
    profile_position = lookup.primary_position.get(mlbam_id) if mlbam_id else None

    match record:
        case BatterRecord():
            return resolve_batting_eligibility(fielding, profile_position, season, warnings)
        case PitcherRecord():
            return resolve_pitching_eligibility(pitching, profile_position, season, warnings)
        case TwoWayRecord():
            return merge_two_way_eligibility(
                resolve_batting_eligibility(fielding, profile_position, season, warnings),
                resolve_pitching_eligibility(pitching, profile_position, season, warnings),
            )
        case _:
            raise TypeError(f"Unsupported player record: {type(record).__name__}")
