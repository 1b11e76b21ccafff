"""Input adapters that turn uploaded projection files into records."""

from .outcomes import OutcomeSelection, apply_outcome_estimates
from .projections import (
    IdConfig,
    OPTIONAL_COLUMNS,
    MissingOutcomes,
    ParseResult,
    ProjectionFileError,
    TwoWayMerge,
    build_projection_group,
    detect_delimiter,
    detect_id_source,
    detect_role,
    generated_player_id,
    load_projection_file,
    merge_two_way,
    parse_projection_text,
)

__all__ = [
    "IdConfig",
    "MissingOutcomes",
    "OPTIONAL_COLUMNS",
    "OutcomeSelection",
    "ParseResult",
    "ProjectionFileError",
    "TwoWayMerge",
    "apply_outcome_estimates",
    "build_projection_group",
    "detect_delimiter",
    "detect_id_source",
    "detect_role",
    "generated_player_id",
    "load_projection_file",
    "merge_two_way",
    "parse_projection_text",
]
