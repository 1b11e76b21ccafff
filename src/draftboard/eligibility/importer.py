"""Batch eligibility import for a whole projection group."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from draftboard.config.environment import import_yield_every
from draftboard.models import Eligibility, PlayerRecord, ProjectionGroup

from .resolver import SeasonStatsLookup, resolve_player_eligibility


logger = logging.getLogger(__name__)

SeasonStatsFetcher = Callable[[Sequence[str], int], Awaitable[SeasonStatsLookup]]
ProgressCallback = Callable[[int, str], None]


class EligibilityImportError(RuntimeError):
    """The batch could not complete; nothing from it should be kept."""

    def __init__(self, message: str, season: int):
        super().__init__(message)
        self.message = message
        self.season = season


def group_players(group: ProjectionGroup) -> List[PlayerRecord]:
    return [*group.batters, *group.pitchers, *group.two_way]


async def import_eligibility(
    group: ProjectionGroup,
    season: int,
    fetch: SeasonStatsFetcher,
    *,
    on_progress: Optional[ProgressCallback] = None,
    yield_every: Optional[int] = None,
) -> Dict[str, Eligibility]:
    """Fetch season logs and resolve eligibility for every player in ``group``.

    The loop hands control back to the event loop every ``yield_every``
    players and reports progress after each one. Any failure aborts the whole
    batch with :class:`EligibilityImportError`; a retry starts over. Must not
    run concurrently for the same group.
    """

    players = group_players(group)
    step = yield_every if yield_every and yield_every > 0 else import_yield_every()
    logger.info("Importing %d eligibility for %d players in %r", season, len(players), group.name)

    if not players:
        if on_progress is not None:
            on_progress(100, "")
        return {}

    mlbam_ids = [player.mlbam_id.strip() for player in players if player.mlbam_id.strip()]
    eligibility_by_id: Dict[str, Eligibility] = {}
    total = len(players)
    try:
        lookup = await fetch(mlbam_ids, season)
        for index, player in enumerate(players):
            eligibility_by_id[player.id] = resolve_player_eligibility(player, lookup, season)
            if on_progress is not None:
                on_progress(round((index + 1) / total * 100), player.name)
            if index % step == 0:
                await asyncio.sleep(0)
    except Exception as exc:
        logger.warning("Eligibility import for %r failed: %s", group.name, exc)
        raise EligibilityImportError(f"Failed to import eligibility: {exc}", season) from exc

    logger.info("Resolved eligibility for %d players in %r", len(eligibility_by_id), group.name)
    return eligibility_by_id


def apply_eligibility(
    group: ProjectionGroup,
    eligibility_by_id: Mapping[str, Eligibility],
    season: int,
    *,
    imported_at: Optional[datetime] = None,
) -> ProjectionGroup:
    """Return a copy of ``group`` with every player's eligibility replaced."""

    def attach(records):
        return [
            record.model_copy(update={"eligibility": eligibility_by_id.get(record.id)})
            for record in records
        ]

    return group.model_copy(
        update={
            "batters": attach(group.batters),
            "pitchers": attach(group.pitchers),
            "two_way": attach(group.two_way),
            "eligibility_imported_at": imported_at or datetime.now(timezone.utc),
            "eligibility_season": season,
        }
    )
