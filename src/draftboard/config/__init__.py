"""Configuration helpers for estimation models, eligibility and scoring."""

from draftboard.models.group import DEFAULT_BATTING_WEIGHTS, DEFAULT_PITCHING_WEIGHTS, ScoringSettings

from .eligibility import DEFAULT_ELIGIBILITY_RULES, EligibilityRules
from .environment import import_yield_every, stats_api_url
from .regression import (
    MIN_STARTS_FOR_ESTIMATE,
    OutcomeModel,
    OutcomeStat,
    get_outcome_model,
    iter_outcome_models,
)

DEFAULT_SCORING = ScoringSettings(
    name="Default",
    batting=DEFAULT_BATTING_WEIGHTS,
    pitching=DEFAULT_PITCHING_WEIGHTS,
)

__all__ = [
    "DEFAULT_ELIGIBILITY_RULES",
    "DEFAULT_SCORING",
    "MIN_STARTS_FOR_ESTIMATE",
    "EligibilityRules",
    "OutcomeModel",
    "OutcomeStat",
    "get_outcome_model",
    "import_yield_every",
    "iter_outcome_models",
    "stats_api_url",
]
