"""Ranking utilities over projection groups."""

from .ranking import RankedPlayer, group_uses_baseball_ip, rank_players, select_players

__all__ = [
    "RankedPlayer",
    "group_uses_baseball_ip",
    "rank_players",
    "select_players",
]
