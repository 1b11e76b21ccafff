"""Season fielding/pitching logs from the MLB Stats API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

import httpx

from draftboard.config.environment import stats_api_url
from draftboard.models import POSITION_ORDER

from .resolver import PitchingGames, SeasonStatsLookup, empty_position_games


logger = logging.getLogger(__name__)

PEOPLE_BATCH_SIZE = 50


def _count(stat: Mapping[str, Any], *keys: str) -> float:
    for key in keys:
        raw = stat.get(key)
        if raw is None:
            continue
        try:
            return float(raw)
        except (TypeError, ValueError):
            return 0.0
    return 0.0


def parse_fielding_stats(data: Mapping[str, Any]) -> Dict[str, Dict[str, float]]:
    """Parse a ``/stats?group=fielding`` payload into games by position."""

    result: Dict[str, Dict[str, float]] = {}
    stats = data.get("stats") or [{}]
    for split in stats[0].get("splits", []):
        player_id = (split.get("player") or {}).get("id")
        position = (split.get("position") or {}).get("abbreviation")
        if not player_id or position not in POSITION_ORDER:
            continue
        games = result.setdefault(str(player_id), empty_position_games())
        games[position] += _count(split.get("stat") or {}, "games")
    return result


def parse_pitching_stats(data: Mapping[str, Any]) -> Dict[str, PitchingGames]:
    """Parse a ``/stats?group=pitching`` payload into games and starts."""

    result: Dict[str, PitchingGames] = {}
    stats = data.get("stats") or [{}]
    for split in stats[0].get("splits", []):
        player_id = (split.get("player") or {}).get("id")
        if not player_id:
            continue
        stat = split.get("stat") or {}
        result[str(player_id)] = PitchingGames(
            games=_count(stat, "games", "gamesPlayed"),
            games_started=_count(stat, "gamesStarted"),
        )
    return result


def parse_people_stats(data: Mapping[str, Any]) -> SeasonStatsLookup:
    """Parse a hydrated ``/people`` payload.

    A player traded mid-season has one pitching split per team; the split with
    the most games (then starts) is kept.
    """

    fielding: Dict[str, Dict[str, float]] = {}
    pitching: Dict[str, PitchingGames] = {}
    primary_position: Dict[str, str] = {}

    for person in data.get("people", []):
        person_id = person.get("id")
        if not person_id:
            continue
        key = str(person_id)

        abbreviation = (person.get("primaryPosition") or {}).get("abbreviation")
        if abbreviation:
            primary_position[key] = abbreviation

        for block in person.get("stats", []):
            group = (block.get("group") or {}).get("displayName")
            splits = block.get("splits", [])
            if group == "fielding":
                for split in splits:
                    position = (split.get("position") or {}).get("abbreviation")
                    if position not in POSITION_ORDER:
                        continue
                    games = fielding.setdefault(key, empty_position_games())
                    games[position] += _count(split.get("stat") or {}, "games")
            elif group == "pitching":
                for split in splits:
                    stat = split.get("stat") or {}
                    candidate = PitchingGames(
                        games=_count(stat, "games", "gamesPlayed"),
                        games_started=_count(stat, "gamesStarted"),
                    )
                    current = pitching.get(key)
                    if current is None or (candidate.games, candidate.games_started) > (
                        current.games,
                        current.games_started,
                    ):
                        pitching[key] = candidate

    return SeasonStatsLookup(fielding=fielding, pitching=pitching, primary_position=primary_position)


class MlbStatsClient:
    """Async lookup of season logs for a batch of MLBAM ids.

    Transport failures and non-2xx responses propagate; callers decide
    whether to retry.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        self._base_url = (base_url or stats_api_url()).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(10.0, connect=5.0))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "MlbStatsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _get(self, path: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s %s", url, dict(params))
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def fetch_season_fielding(self, season: int) -> Dict[str, Dict[str, float]]:
        data = await self._get(
            "/stats",
            {"stats": "season", "group": "fielding", "season": season, "sportId": 1},
        )
        return parse_fielding_stats(data)

    async def fetch_season_pitching(self, season: int) -> Dict[str, PitchingGames]:
        data = await self._get(
            "/stats",
            {"stats": "season", "group": "pitching", "season": season, "sportId": 1},
        )
        return parse_pitching_stats(data)

    async def fetch_season_stats(self, person_ids: Iterable[str], season: int) -> SeasonStatsLookup:
        unique_ids: List[str] = list(dict.fromkeys(pid for pid in person_ids if pid))
        fielding: Dict[str, Mapping[str, float]] = {}
        pitching: Dict[str, PitchingGames] = {}
        primary_position: Dict[str, str] = {}

        for start in range(0, len(unique_ids), PEOPLE_BATCH_SIZE):
            batch = unique_ids[start : start + PEOPLE_BATCH_SIZE]
            data = await self._get(
                "/people",
                {
                    "personIds": ",".join(batch),
                    "hydrate": f"stats(group=[fielding,pitching],type=[season],season={season})",
                },
            )
            parsed = parse_people_stats(data)
            fielding.update(parsed.fielding)
            pitching.update(parsed.pitching)
            primary_position.update(parsed.primary_position)

        logger.debug(
            "Fetched season %d logs for %d ids (%d fielding, %d pitching)",
            season,
            len(unique_ids),
            len(fielding),
            len(pitching),
        )
        return SeasonStatsLookup(fielding=fielding, pitching=pitching, primary_position=primary_position)
