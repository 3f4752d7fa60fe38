"""Month filtering, qualification threshold and rankings."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence

from .constants import (
    ALL_MONTHS,
    DEFAULT_SORT_COLUMN,
    QUALIFICATION_RATIO,
    SORTABLE_COLUMNS,
    TOP_N,
)
from .models import Match, PlayerStat, TopLists

_MONTH_KEY_RE = re.compile(r'^\d{4}-(0[1-9]|1[0-2])$')

TOP_LIST_METRICS = ('points', 'played', 'percentage')


def month_key(match_date: Optional[datetime]) -> Optional[str]:
    """Format a date as 'YYYY-MM'. Unknown dates have no month."""
    if match_date is None:
        return None
    return f'{match_date.year:04d}-{match_date.month:02d}'


def is_month_key(value: str) -> bool:
    """Check for a 'YYYY-MM' month key."""
    return bool(_MONTH_KEY_RE.match(value))


def available_months(matches: Iterable[Match]) -> list[str]:
    """Distinct month keys of dated matches, newest first."""
    keys = {month_key(m.date) for m in matches if m.date is not None}
    return sorted(keys, reverse=True)


def filter_by_month(matches: Iterable[Match], month: Optional[str] = ALL_MONTHS) -> list[Match]:
    """
    Keep the matches played in `month`.

    'all' (or None) keeps every match, including the ones with unknown dates.
    """
    if month is None or month == ALL_MONTHS:
        return list(matches)
    return [m for m in matches if month_key(m.date) == month]


def qualification_threshold(match_count: int, ratio: float = QUALIFICATION_RATIO) -> float:
    """Minimum matches played to appear in the top lists."""
    return match_count * ratio


def qualified_players(stats: Iterable[PlayerStat], threshold: float) -> list[PlayerStat]:
    """Players that reached the threshold."""
    return [s for s in stats if s.played >= threshold]


def top_players(
    stats: Sequence[PlayerStat],
    metric: str,
    threshold: float,
    limit: int = TOP_N,
) -> list[PlayerStat]:
    """
    Best qualified players by one metric, highest first.

    Ties keep the order of `stats` (roster order).
    """
    if metric not in TOP_LIST_METRICS:
        raise ValueError(f'Unknown top list metric: {metric}')
    qualified = qualified_players(stats, threshold)
    return sorted(qualified, key=lambda s: getattr(s, metric), reverse=True)[:limit]


def build_top_lists(
    stats: Sequence[PlayerStat],
    match_count: int,
    ratio: float = QUALIFICATION_RATIO,
    limit: int = TOP_N,
) -> TopLists:
    """Top points, matches played and win percentage for the filtered set."""
    threshold = qualification_threshold(match_count, ratio)
    return TopLists(
        threshold=threshold,
        points=top_players(stats, 'points', threshold, limit),
        played=top_players(stats, 'played', threshold, limit),
        percentage=top_players(stats, 'percentage', threshold, limit),
    )


def monthly_mvp(stats: Sequence[PlayerStat]) -> Optional[PlayerStat]:
    """Player with the most points, or None if nobody scored."""
    best = None
    for stat in stats:
        if best is None or stat.points > best.points:
            best = stat
    if best is None or best.points <= 0:
        return None
    return best


@dataclass(frozen=True)
class SortState:
    """Current column sort of the stats table."""
    column: str = DEFAULT_SORT_COLUMN
    descending: bool = True

    def toggle(self, column: str) -> 'SortState':
        """Flip direction on the same column, start descending on a new one."""
        if column not in SORTABLE_COLUMNS:
            raise ValueError(f'Cannot sort by column: {column}')
        if column == self.column:
            return SortState(column, not self.descending)
        return SortState(column, True)


def sort_stats(stats: Iterable[PlayerStat], state: SortState = SortState()) -> list[PlayerStat]:
    """Sort the stats table. Names compare case-insensitively, other columns numerically."""
    if state.column not in SORTABLE_COLUMNS:
        raise ValueError(f'Cannot sort by column: {state.column}')
    if state.column == 'name':
        return sorted(stats, key=lambda s: s.name.casefold(), reverse=state.descending)
    return sorted(stats, key=lambda s: getattr(s, state.column), reverse=state.descending)
