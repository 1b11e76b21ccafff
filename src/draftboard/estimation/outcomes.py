"""Quality start, complete game and shutout estimates for pitchers.

Each ``resolve_*`` function follows the same order: an uploaded count above
zero always wins; a line without starts, usable innings or an ERA resolves to
zero; anything else goes through the fixed linear model for that stat.
"""

from __future__ import annotations

from typing import Optional

from draftboard.config.regression import MIN_STARTS_FOR_ESTIMATE, OutcomeModel, get_outcome_model
from draftboard.innings import innings_value
from draftboard.models import PitchingStats


def adjusted_innings(
    innings: float,
    games: Optional[float],
    games_started: float,
    relief_innings_per_appearance: float,
) -> float:
    """Innings left for starts once relief appearances take their share."""

    appearances = games if games else games_started
    relief_apps = max(appearances - games_started, 0.0)
    return innings - relief_apps * relief_innings_per_appearance


def _estimate(
    model: OutcomeModel,
    *,
    games_started: float,
    innings: float,
    era: float,
    games: Optional[float],
    use_baseball_ip: bool,
) -> float:
    ip = innings_value(innings, use_baseball_ip)
    if games_started <= 0 or ip <= 0 or era <= 0:
        return 0.0
    if games_started < MIN_STARTS_FOR_ESTIMATE:
        return 0.0

    adj_ip = adjusted_innings(ip, games, games_started, model.relief_innings_per_appearance)
    estimate = model.predict(games_started, adj_ip, era)
    return max(estimate, 0.0)


def estimate_quality_starts(
    *,
    games_started: float,
    innings: float,
    era: float,
    games: Optional[float] = None,
    use_baseball_ip: bool = False,
) -> float:
    return _estimate(
        get_outcome_model("QS"),
        games_started=games_started,
        innings=innings,
        era=era,
        games=games,
        use_baseball_ip=use_baseball_ip,
    )


def estimate_complete_games(
    *,
    games_started: float,
    innings: float,
    era: float,
    games: Optional[float] = None,
    use_baseball_ip: bool = False,
) -> float:
    return _estimate(
        get_outcome_model("CG"),
        games_started=games_started,
        innings=innings,
        era=era,
        games=games,
        use_baseball_ip=use_baseball_ip,
    )


def estimate_shutouts(
    *,
    games_started: float,
    innings: float,
    era: float,
    complete_games: float,
    games: Optional[float] = None,
    use_baseball_ip: bool = False,
) -> float:
    """Shutout estimate for a line whose complete games are already resolved.

    The fitted model has no complete-games term, so ``complete_games`` does not
    move the result.
    """

    return _estimate(
        get_outcome_model("ShO"),
        games_started=games_started,
        innings=innings,
        era=era,
        games=games,
        use_baseball_ip=use_baseball_ip,
    )


def _has_signal(stats: PitchingStats, use_baseball_ip: bool) -> bool:
    if stats.value("GS") <= 0:
        return False
    if innings_value(stats.value("IP"), use_baseball_ip) <= 0:
        return False
    return stats.value("ERA") > 0


def resolve_quality_starts(stats: PitchingStats, use_baseball_ip: bool = False) -> float:
    provided = stats.value("QS")
    if provided > 0:
        return provided
    if not _has_signal(stats, use_baseball_ip):
        return 0.0
    return estimate_quality_starts(
        games_started=stats.value("GS"),
        games=stats.value("G"),
        innings=stats.value("IP"),
        era=stats.value("ERA"),
        use_baseball_ip=use_baseball_ip,
    )


def resolve_complete_games(stats: PitchingStats, use_baseball_ip: bool = False) -> float:
    provided = stats.value("CG")
    if provided > 0:
        return provided
    if not _has_signal(stats, use_baseball_ip):
        return 0.0
    return estimate_complete_games(
        games_started=stats.value("GS"),
        games=stats.value("G"),
        innings=stats.value("IP"),
        era=stats.value("ERA"),
        use_baseball_ip=use_baseball_ip,
    )


def resolve_shutouts(stats: PitchingStats, use_baseball_ip: bool = False) -> float:
    provided = stats.value("ShO")
    if provided > 0:
        return provided
    if not _has_signal(stats, use_baseball_ip):
        return 0.0
    return estimate_shutouts(
        games_started=stats.value("GS"),
        games=stats.value("G"),
        innings=stats.value("IP"),
        era=stats.value("ERA"),
        complete_games=resolve_complete_games(stats, use_baseball_ip),
        use_baseball_ip=use_baseball_ip,
    )
