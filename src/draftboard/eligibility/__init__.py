"""Position eligibility resolution and batch import."""

from .importer import EligibilityImportError, apply_eligibility, import_eligibility
from .resolver import (
    PitchingGames,
    SeasonStatsLookup,
    compute_hitter_eligibility,
    compute_pitcher_eligibility,
    eligibility_from_profile_position,
    empty_position_games,
    merge_two_way_eligibility,
    normalize_position_games,
    resolve_batting_eligibility,
    resolve_pitching_eligibility,
    resolve_player_eligibility,
)
from .stats_api import (
    PEOPLE_BATCH_SIZE,
    MlbStatsClient,
    parse_fielding_stats,
    parse_people_stats,
    parse_pitching_stats,
)

__all__ = [
    "EligibilityImportError",
    "MlbStatsClient",
    "PEOPLE_BATCH_SIZE",
    "PitchingGames",
    "SeasonStatsLookup",
    "apply_eligibility",
    "compute_hitter_eligibility",
    "compute_pitcher_eligibility",
    "eligibility_from_profile_position",
    "empty_position_games",
    "import_eligibility",
    "merge_two_way_eligibility",
    "normalize_position_games",
    "parse_fielding_stats",
    "parse_people_stats",
    "parse_pitching_stats",
    "resolve_batting_eligibility",
    "resolve_pitching_eligibility",
    "resolve_player_eligibility",
]
