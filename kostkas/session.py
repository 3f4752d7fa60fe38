"""League session: loaded data plus the current view selection.

Every view is recomputed from the match list on request; nothing derived is
kept between calls.
"""

import logging
from typing import Optional, Sequence

from .affinity import calculate_affinity
from .constants import ALL_MONTHS
from .history import match_history
from .models import (
    AffinityReport,
    BalancedTeams,
    LeagueData,
    Match,
    MatchSummary,
    PlayerStat,
    PlayerDetails,
    TeamRecords,
    TopLists,
)
from .ranking import (
    SortState,
    available_months,
    build_top_lists,
    filter_by_month,
    is_month_key,
    monthly_mvp,
    qualification_threshold,
    sort_stats,
)
from .schemas import LeagueConfig
from .stats import calculate_stats
from .team_generator import generate_balanced_teams
from .teams import find_team_records

logger = logging.getLogger('kostkas.session')


class LeagueSession:
    """Current dataset, month filter and table sort for one viewer."""

    def __init__(
        self,
        data: LeagueData,
        config: Optional[LeagueConfig] = None,
        month: str = ALL_MONTHS,
        sort: SortState = SortState(),
    ):
        self.data = data
        self.config = config or LeagueConfig()
        self.month = ALL_MONTHS
        self.sort = sort
        self.select_month(month)

    @property
    def roster(self) -> list[str]:
        return self.data.roster

    def months(self) -> list[str]:
        """Months with dated matches, newest first."""
        return available_months(self.data.matches)

    def select_month(self, month: Optional[str]) -> None:
        """Switch the month filter ('all' or 'YYYY-MM')."""
        month = month or ALL_MONTHS
        if month != ALL_MONTHS and not is_month_key(month):
            raise ValueError(f"Month must be 'all' or YYYY-MM, got {month!r}")
        self.month = month
        logger.debug(f'Month filter set to {month}')

    def sort_by(self, column: str) -> SortState:
        """Apply a column click to the table sort."""
        self.sort = self.sort.toggle(column)
        return self.sort

    def filtered_matches(self) -> list[Match]:
        return filter_by_month(self.data.matches, self.month)

    def player_stats(self) -> list[PlayerStat]:
        """Stats table for the current month, in the current sort order."""
        stats = calculate_stats(self.filtered_matches(), self.roster, self.config.streak_window)
        return sort_stats(stats, self.sort)

    def season_stats(self) -> list[PlayerStat]:
        """Whole-season stats in roster order."""
        return calculate_stats(self.data.matches, self.roster, self.config.streak_window)

    def threshold(self) -> float:
        return qualification_threshold(len(self.filtered_matches()), self.config.qualification_ratio)

    def top_lists(self) -> TopLists:
        filtered = self.filtered_matches()
        stats = calculate_stats(filtered, self.roster, self.config.streak_window)
        return build_top_lists(
            stats, len(filtered), self.config.qualification_ratio, self.config.top_n
        )

    def mvp(self) -> Optional[PlayerStat]:
        """Top scorer of the current selection."""
        stats = calculate_stats(self.filtered_matches(), self.roster, self.config.streak_window)
        return monthly_mvp(stats)

    def team_records(self) -> TeamRecords:
        return find_team_records(self.filtered_matches())

    def affinity(self, player: str) -> AffinityReport:
        """Best and worst partners over the full history."""
        if player not in self.roster:
            raise KeyError(f'Unknown player: {player}')
        return calculate_affinity(player, self.data.matches, self.config.affinity_top_n)

    def player(self, name: str) -> PlayerDetails:
        """Stats under the month filter plus full-history partners for one player."""
        report = self.affinity(name)
        stats = calculate_stats(self.filtered_matches(), self.roster, self.config.streak_window)
        stat = next(s for s in stats if s.name == name)
        return PlayerDetails(stat=stat, affinity=report)

    def generate_teams(self, selected: Sequence[str]) -> BalancedTeams:
        """Balanced teams from season-to-date stats."""
        return generate_balanced_teams(
            selected, self.season_stats(), self.config.team_score_win_weight
        )

    def history(self) -> list[MatchSummary]:
        return match_history(self.data.matches, self.roster)
