"""Match table parsing.

Turns a decoded spreadsheet grid into match records and the player roster.
Row 0 holds the headers; each following row is one match laid out as

    [match id, date, expected players, <player 1 result>, <player 2 result>, ...]

A player result of 1 means the player lost, 2 means they won; any other value
means they did not take part in that match.
"""

import logging
import math
from datetime import date, datetime, timedelta
from typing import Any, Optional, Sequence

from dateutil import parser as date_parser

from .constants import (
    COUNT_COLUMN,
    DATE_COLUMN,
    EXCEL_EPOCH,
    ID_COLUMN,
    PLAYER_START_COLUMN,
)
from .models import LeagueData, Match, Outcome

logger = logging.getLogger('kostkas.parser')

_EXCEL_EPOCH = datetime(*EXCEL_EPOCH)

# Fields missing from a date string resolve against this, never against today
_DATE_DEFAULT = datetime(2000, 1, 1)


def _cell(row: Sequence[Any], index: int) -> Any:
    """Cell value at index, None past the end of a ragged row."""
    return row[index] if index < len(row) else None


def _to_naive_local(value: datetime) -> datetime:
    """Drop timezone info so every match date compares with every other."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """
    Convert a date cell into a datetime.

    Examples:
        datetime(2025, 1, 10) -> datetime(2025, 1, 10)
        45667 -> datetime(2025, 1, 10)          (spreadsheet serial)
        "2025-01-10" -> datetime(2025, 1, 10)
        "pending" -> None

    Returns:
        The datetime, or None when the date is missing or unparseable.
    """
    if isinstance(value, datetime):
        return _to_naive_local(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return _EXCEL_EPOCH + timedelta(days=value)
        except (OverflowError, ValueError):
            logger.debug(f'Date serial out of range: {value!r}')
            return None
    if isinstance(value, str) and value.strip():
        try:
            return _to_naive_local(date_parser.parse(value.strip(), default=_DATE_DEFAULT))
        except (ValueError, OverflowError):
            logger.debug(f'Unparseable date: {value!r}')
            return None
    return None


def decode_outcome(value: Any) -> Optional[Outcome]:
    """
    Decode a player result cell.

    1 and 2 are accepted as ints, integral floats or numeric strings.
    Anything else (blank, 0, text, booleans) means the player did not play.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        if value == Outcome.LOSS:
            return Outcome.LOSS
        if value == Outcome.WIN:
            return Outcome.WIN
    return None


def parse_roster(
    headers: Sequence[Any], player_start_column: int = PLAYER_START_COLUMN
) -> dict[str, int]:
    """
    Map player names to their column index.

    Blank header cells are skipped without shifting the mapping, so every
    player keeps reading from its own column.

    Returns:
        Dict of player name -> column index, in column order
    """
    columns: dict[str, int] = {}
    for index in range(player_start_column, len(headers)):
        header = headers[index]
        if not isinstance(header, str) or not header.strip():
            continue
        name = header.strip()
        if name in columns:
            logger.warning(
                f'Duplicate player column "{name}" at index {index}, '
                f'keeping column {columns[name]}'
            )
            continue
        columns[name] = index
    return columns


def parse_matches(
    grid: Optional[Sequence[Sequence[Any]]],
    player_start_column: int = PLAYER_START_COLUMN,
) -> LeagueData:
    """
    Parse a match grid into match records and roster.

    Args:
        grid: Rows of cell values, first row is the header
        player_start_column: Index of the first player column

    Returns:
        LeagueData with matches in row order and the roster in column order
    """
    if not grid:
        logger.info('Empty match grid, nothing to parse')
        return LeagueData()

    columns = parse_roster(grid[0], player_start_column)
    matches = []

    for row_number, row in enumerate(grid[1:], start=2):
        if not row:
            continue
        match_id = _cell(row, ID_COLUMN)
        if not match_id:
            continue

        raw_date = _cell(row, DATE_COLUMN)
        match_date = parse_date(raw_date)
        if match_date is None and raw_date not in (None, ''):
            logger.warning(f'Row {row_number} (match {match_id}): unknown date {raw_date!r}')

        match = Match(
            id=match_id,
            date=match_date,
            expected_count=_cell(row, COUNT_COLUMN),
        )
        for name, index in columns.items():
            outcome = decode_outcome(_cell(row, index))
            if outcome is not None:
                match.results[name] = outcome

        matches.append(match)

    logger.info(f'Parsed {len(matches)} matches for {len(columns)} players')
    return LeagueData(matches=matches, roster=list(columns))
