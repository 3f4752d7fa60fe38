"""Teammate affinity: who a player wins and loses with."""

from typing import Iterable

from .constants import AFFINITY_TOP_N
from .models import AffinityEntry, AffinityReport, Match, Outcome


def count_shared_results(player: str, matches: Iterable[Match]) -> dict[str, AffinityEntry]:
    """
    Count matches `player` won or lost together with each other participant.

    Matches with opposite outcomes only register the teammate, they add
    nothing to either counter.

    Returns:
        Dict of teammate name -> AffinityEntry, in first-encounter order
    """
    mates: dict[str, AffinityEntry] = {}

    for match in matches:
        own = match.results.get(player)
        if own is None:
            continue

        for teammate, outcome in match.results.items():
            if teammate == player:
                continue
            entry = mates.setdefault(teammate, AffinityEntry(name=teammate))
            if outcome is own:
                if outcome is Outcome.WIN:
                    entry.won += 1
                else:
                    entry.lost += 1

    return mates


def calculate_affinity(
    player: str,
    matches: Iterable[Match],
    limit: int = AFFINITY_TOP_N,
) -> AffinityReport:
    """
    Rank a player's best and worst partners over the full match history.

    Best partners sort by win rate, then shared wins. Worst partners sort by
    loss rate, then shared losses. Partners without any shared result are
    left out, and the same partner may show up in both lists.
    """
    candidates = [e for e in count_shared_results(player, matches).values() if e.total > 0]

    best = sorted(candidates, key=lambda e: (e.win_rate, e.won), reverse=True)[:limit]
    worst = sorted(candidates, key=lambda e: (e.loss_rate, e.lost), reverse=True)[:limit]

    return AffinityReport(player=player, best=best, worst=worst)
