"""Excel workbook reading utilities."""

import io
import logging
from pathlib import Path
from typing import Any

import openpyxl

from .constants import DEFAULT_SHEET_NAME, PLAYER_START_COLUMN
from .match_parser import parse_matches
from .models import LeagueData

logger = logging.getLogger('kostkas.excel')


def _is_empty_row(row: tuple[Any, ...]) -> bool:
    return all(value is None or value == '' for value in row)


def read_grid_from_excel(
    source: str | Path | bytes,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> list[list[Any]]:
    """
    Read the match sheet of a workbook as a grid of cell values.

    Uses `sheet_name` when the workbook has it, otherwise the first sheet.
    Date-formatted cells come back as datetimes. Trailing empty rows are dropped.

    Args:
        source: Path to the .xlsx file or its raw bytes
        sheet_name: Preferred sheet name

    Returns:
        List of rows, each a list of cell values
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    wb = openpyxl.load_workbook(source, read_only=True, data_only=True)
    try:
        if sheet_name in wb.sheetnames:
            ws = wb[sheet_name]
        else:
            ws = wb[wb.sheetnames[0]]
            logger.info(f'Sheet "{sheet_name}" not found, using "{ws.title}"')

        grid = [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    while grid and _is_empty_row(tuple(grid[-1])):
        grid.pop()

    logger.debug(f'Read {len(grid)} rows from sheet "{ws.title}"')
    return grid


def parse_league_from_excel(
    source: str | Path | bytes,
    sheet_name: str = DEFAULT_SHEET_NAME,
    player_start_column: int = PLAYER_START_COLUMN,
) -> LeagueData:
    """Read a workbook and parse its match sheet."""
    grid = read_grid_from_excel(source, sheet_name)
    return parse_matches(grid, player_start_column)
