"""Thresholds for position and pitching-role eligibility."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EligibilityRules:
    # A position always counts once a player logs this many games there.
    position_games_cap: int = 20
    # Otherwise the position must hold this share of all fielding games.
    position_games_share: float = 0.25
    sp_min_starts: int = 5
    sp_min_start_share: float = 0.25
    rp_min_relief_apps: int = 8
    rp_min_relief_share: float = 0.25

    def position_threshold(self, total_games: float) -> float:
        """Games needed at one position given ``total_games`` in the field.

        Early in a season the share term is small, so a handful of games
        qualifies; the requirement grows with playing time up to the cap.
        """

        return min(float(self.position_games_cap), max(0.0, self.position_games_share * total_games))


DEFAULT_ELIGIBILITY_RULES = EligibilityRules()
