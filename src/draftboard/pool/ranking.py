"""Ranking passes over a projection group."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from draftboard.innings import uses_baseball_notation
from draftboard.models import PlayerRecord, ProjectionGroup, ScoringSettings, TwoWayRecord
from draftboard.scoring import PlayerView, calculate_player_points


@dataclass(frozen=True)
class RankedPlayer:
    """Player with projected points for a single ranking pass."""

    player: PlayerRecord
    projected_points: float
    rank: int


def group_uses_baseball_ip(group: ProjectionGroup) -> bool:
    """Whether every pitcher IP figure in the group reads as baseball notation."""

    values: List[float] = [pitcher.pitching.IP for pitcher in group.pitchers]
    values.extend(player.pitching.IP for player in group.two_way)
    return uses_baseball_notation(values)


def _without(records: Iterable[PlayerRecord], ids: set[str]) -> List[PlayerRecord]:
    return [record for record in records if record.id not in ids]


def select_players(
    group: ProjectionGroup,
    view: PlayerView,
    merge_two_way: bool = False,
) -> List[PlayerRecord]:
    """Players shown for ``view``.

    With merging on (and allowed for the group), two-way records replace
    their single-role halves. A view with nothing but two-way records falls
    back to those.
    """

    two_way: Sequence[TwoWayRecord] = group.two_way
    merged = merge_two_way and group.can_merge_two_way and bool(two_way)
    two_way_ids = {player.id for player in two_way}

    if view == "all":
        if merged:
            return [*_without(group.batters, two_way_ids), *_without(group.pitchers, two_way_ids), *two_way]
        if not group.batters and not group.pitchers and two_way:
            return list(two_way)
        return [*group.batters, *group.pitchers]

    side: Sequence[PlayerRecord] = group.batters if view == "batters" else group.pitchers
    if merged:
        return [*_without(side, two_way_ids), *two_way]
    if not side and two_way:
        return list(two_way)
    return list(side)


def rank_players(
    group: ProjectionGroup,
    settings: ScoringSettings,
    view: PlayerView = "all",
    *,
    merge_two_way: bool = False,
    use_baseball_ip: Optional[bool] = None,
) -> List[RankedPlayer]:
    """Score and order the players for one view, highest points first."""

    if use_baseball_ip is None:
        use_baseball_ip = group_uses_baseball_ip(group)
    players = select_players(group, view, merge_two_way)
    scored = [
        (player, calculate_player_points(player, settings, view, use_baseball_ip))
        for player in players
    ]
    scored.sort(key=lambda item: item[1], reverse=True)
    return [
        RankedPlayer(player=player, projected_points=points, rank=index)
        for index, (player, points) in enumerate(scored, start=1)
    ]

