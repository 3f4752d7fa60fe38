from .models import (
    Outcome,
    Match,
    LeagueData,
    PlayerStat,
    TopLists,
    AffinityEntry,
    AffinityReport,
    PlayerDetails,
    TeamGroup,
    TeamRecords,
    TeamMember,
    BalancedTeams,
    MatchSummary,
)
from .match_parser import parse_matches, parse_date, decode_outcome
from .stats import calculate_stats
from .ranking import (
    SortState,
    month_key,
    available_months,
    filter_by_month,
    qualification_threshold,
    build_top_lists,
    monthly_mvp,
    sort_stats,
)
from .affinity import calculate_affinity
from .teams import aggregate_team_groups, find_team_records
from .team_generator import generate_balanced_teams, player_score
from .validators import TeamSelectionError, validate_team_selection, validate_league
from .history import match_history
from .session import LeagueSession
from .excel_parser import read_grid_from_excel, parse_league_from_excel
from .data_fetcher import DataFetchError, SheetFetcher, load_league

__all__ = [
    # Models
    'Outcome',
    'Match',
    'LeagueData',
    'PlayerStat',
    'TopLists',
    'AffinityEntry',
    'AffinityReport',
    'PlayerDetails',
    'TeamGroup',
    'TeamRecords',
    'TeamMember',
    'BalancedTeams',
    'MatchSummary',
    # Parsing
    'parse_matches',
    'parse_date',
    'decode_outcome',
    # Aggregation and rankings
    'calculate_stats',
    'SortState',
    'month_key',
    'available_months',
    'filter_by_month',
    'qualification_threshold',
    'build_top_lists',
    'monthly_mvp',
    'sort_stats',
    'calculate_affinity',
    'aggregate_team_groups',
    'find_team_records',
    'match_history',
    # Team generation
    'generate_balanced_teams',
    'player_score',
    'TeamSelectionError',
    'validate_team_selection',
    'validate_league',
    # Session
    'LeagueSession',
    # Data loading
    'read_grid_from_excel',
    'parse_league_from_excel',
    'DataFetchError',
    'SheetFetcher',
    'load_league',
]
