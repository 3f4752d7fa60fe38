"""Per-player aggregation over a set of matches."""

from datetime import datetime
from typing import Iterable, Sequence

from .constants import POINTS_PER_LOSS, POINTS_PER_WIN, STREAK_WINDOW
from .models import Match, Outcome, PlayerStat


def chronological_key(match: Match) -> tuple[bool, datetime]:
    """Sort key placing matches oldest first and unknown dates last."""
    return (match.date is None, match.date or datetime.min)


def sort_chronologically(matches: Iterable[Match]) -> list[Match]:
    """Return matches oldest first. Unknown dates go last, ties keep input order."""
    return sorted(matches, key=chronological_key)


def calculate_stats(
    matches: Iterable[Match],
    roster: Sequence[str],
    streak_window: int = STREAK_WINDOW,
) -> list[PlayerStat]:
    """
    Aggregate played/won/points/percentage/streak for every roster player.

    Scoring:
        - Loss: 1 point
        - Win: 2 points

    Args:
        matches: Matches to aggregate (any order)
        roster: All players; each gets a record even with no matches
        streak_window: Number of most recent results kept as the streak

    Returns:
        List of PlayerStat in roster order
    """
    stats = {name: PlayerStat(name=name) for name in roster}
    results: dict[str, list[str]] = {name: [] for name in roster}

    for match in sort_chronologically(matches):
        for name, outcome in match.results.items():
            stat = stats.get(name)
            if stat is None:
                continue

            stat.played += 1
            if outcome is Outcome.WIN:
                stat.won += 1
                stat.points += POINTS_PER_WIN
            else:
                stat.points += POINTS_PER_LOSS
            results[name].append(outcome.symbol)

    for name, stat in stats.items():
        stat.percentage = stat.won / stat.played * 100 if stat.played else 0.0
        stat.streak = results[name][-streak_window:]

    return list(stats.values())
