"""Back-fill estimated QS/CG/ShO for pitchers uploaded without those columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from draftboard.estimation import (
    estimate_complete_games,
    estimate_quality_starts,
    estimate_shutouts,
)
from draftboard.models import PitcherRecord, PitchingStats

from .projections import MissingOutcomes


@dataclass(frozen=True)
class OutcomeSelection:
    QS: bool = False
    CG: bool = False
    ShO: bool = False

    def any(self) -> bool:
        return self.QS or self.CG or self.ShO


def _inputs(stats: PitchingStats, use_baseball_ip: bool) -> dict:
    return {
        "games_started": stats.GS,
        "games": stats.G,
        "innings": stats.IP,
        "era": stats.ERA,
        "use_baseball_ip": use_baseball_ip,
    }


def apply_outcome_estimates(
    pitchers: Sequence[PitcherRecord],
    missing: Optional[Mapping[str, MissingOutcomes]],
    selection: OutcomeSelection,
    use_baseball_ip: bool = False,
) -> Sequence[PitcherRecord]:
    """Write estimates into records whose upload lacked the selected stats.

    Only pitchers listed as missing a stat, and whose value is not already
    positive, are touched. Returns ``pitchers`` itself when nothing changes.
    """

    if not missing or not selection.any() or not pitchers:
        return pitchers

    missing_ids = {stat: set(summary.missing_player_ids) for stat, summary in missing.items()}
    changed = False
    updated: List[PitcherRecord] = []

    for pitcher in pitchers:
        stats = pitcher.pitching
        patch: dict = {}

        if selection.QS and pitcher.id in missing_ids.get("QS", ()) and stats.QS <= 0:
            patch["QS"] = estimate_quality_starts(**_inputs(stats, use_baseball_ip))

        if selection.CG and pitcher.id in missing_ids.get("CG", ()) and stats.CG <= 0:
            patch["CG"] = estimate_complete_games(**_inputs(stats, use_baseball_ip))

        if selection.ShO and pitcher.id in missing_ids.get("ShO", ()) and stats.ShO <= 0:
            complete_games = patch.get("CG", stats.CG)
            if complete_games <= 0:
                complete_games = estimate_complete_games(**_inputs(stats, use_baseball_ip))
            patch["ShO"] = estimate_shutouts(
                complete_games=complete_games, **_inputs(stats, use_baseball_ip)
            )

        if patch:
            changed = True
            pitcher = pitcher.model_copy(update={"pitching": stats.model_copy(update=patch)})
        updated.append(pitcher)

    return updated if changed else pitchers
