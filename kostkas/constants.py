"""Constants for the Kostkas league statistics engine."""

from pathlib import Path

# Grid layout: A = match number, B = date, C = expected players, D.. = players
ID_COLUMN = 0
DATE_COLUMN = 1
COUNT_COLUMN = 2
PLAYER_START_COLUMN = 3

# Sheet holding the match table in the league workbook
DEFAULT_SHEET_NAME = 'Partidos'

# Spreadsheet serial dates count days from this epoch (1900 leap-year bug included)
EXCEL_EPOCH = (1899, 12, 30)

# Points awarded per outcome
POINTS_PER_LOSS = 1
POINTS_PER_WIN = 2

# Ranking and team-generation tuning
QUALIFICATION_RATIO = 0.25
STREAK_WINDOW = 5
TOP_N = 5
AFFINITY_TOP_N = 3
TEAM_SCORE_WIN_WEIGHT = 1.5

# Month filter value meaning "whole season"
ALL_MONTHS = 'all'

# Columns accepted by the stats table sort
SORTABLE_COLUMNS = ('name', 'played', 'won', 'points', 'percentage')
DEFAULT_SORT_COLUMN = 'points'

# Remote spreadsheet export
REQUEST_TIMEOUT = 30

# Paths
PROJECT_DIR = Path(__file__).parent.parent
DATA_DIR = PROJECT_DIR / 'data'
CONFIG_PATH = DATA_DIR / 'league_config.json'
