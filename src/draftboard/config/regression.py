"""Fixed linear models used to estimate pitching outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal


OutcomeStat = Literal["QS", "CG", "ShO"]

# Below this many starts every estimate is zero.
MIN_STARTS_FOR_ESTIMATE = 6


@dataclass(frozen=True)
class OutcomeModel:
    stat: str
    intercept: float
    games_started: float
    adjusted_innings: float
    era: float
    # Innings assumed per relief appearance, removed before the fit is applied.
    relief_innings_per_appearance: float

    def predict(self, games_started: float, adjusted_innings: float, era: float) -> float:
        return (
            self.intercept
            + self.games_started * games_started
            + self.adjusted_innings * adjusted_innings
            + self.era * era
        )


_OUTCOME_MODELS: Dict[str, OutcomeModel] = {
    "QS": OutcomeModel(
        stat="QS",
        intercept=1.6601858118151562,
        games_started=-0.6387303455623031,
        adjusted_innings=0.1952732531471503,
        era=-0.5647520638483603,
        relief_innings_per_appearance=1.81,
    ),
    "CG": OutcomeModel(
        stat="CG",
        intercept=0.0913277786691081,
        games_started=-0.056865541289444044,
        adjusted_innings=0.011711275081015677,
        era=-0.0193119643732167,
        relief_innings_per_appearance=1.59,
    ),
    "ShO": OutcomeModel(
        stat="ShO",
        intercept=0.06309944584999562,
        games_started=-0.0223845818844781,
        adjusted_innings=0.004565597329477387,
        era=-0.011101129116249924,
        relief_innings_per_appearance=1.62,
    ),
}


def iter_outcome_models() -> Iterable[OutcomeModel]:
    """Return an iterator of all configured outcome models."""

    return _OUTCOME_MODELS.values()


def get_outcome_model(stat: str) -> OutcomeModel:
    """Fetch the model for ``QS``, ``CG`` or ``ShO``, raising KeyError if missing."""

    if stat not in _OUTCOME_MODELS:
        raise KeyError(f"No outcome model configured for stat={stat!r}")
    return _OUTCOME_MODELS[stat]
