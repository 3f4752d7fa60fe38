"""Match table retrieval: spreadsheet export download with local-file fallback."""

import logging
import time
import urllib.request
import zipfile
from pathlib import Path
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urlsplit, urlunsplit

from openpyxl.utils.exceptions import InvalidFileException

from .constants import DEFAULT_SHEET_NAME, PLAYER_START_COLUMN, REQUEST_TIMEOUT
from .excel_parser import parse_league_from_excel
from .models import LeagueData

logger = logging.getLogger('kostkas.fetcher')


class DataFetchError(RuntimeError):
    """Raised when the match table can't be retrieved or read."""


def google_sheet_export_url(sheet_id: str) -> str:
    """xlsx export URL of a Google Sheets document."""
    return f'https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=xlsx'


class SheetFetcher:
    """Downloads the league workbook from a spreadsheet export URL."""

    def __init__(self, url: str, timeout: float = REQUEST_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def build_url(self) -> str:
        """Export URL with a timestamp parameter so caches never serve stale data."""
        parts = urlsplit(self.url)
        stamp = urlencode({'v': int(time.time() * 1000)})
        query = f'{parts.query}&{stamp}' if parts.query else stamp
        return urlunsplit(parts._replace(query=query))

    def fetch(self) -> bytes:
        """
        Download the workbook bytes.

        Raises:
            DataFetchError: On network errors, non-200 status or an HTML
                response (typically a login page)
        """
        url = self.build_url()
        req = urllib.request.Request(url, headers={'User-Agent': 'Kostkas-Stats'})
        logger.info(f'Fetching match table from {self.url}')

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                status = response.status
                content_type = response.headers.get('Content-Type', '')
                data = response.read()
        except HTTPError as e:
            raise DataFetchError(f'Error fetching data: HTTP {e.code}') from e
        except (URLError, TimeoutError) as e:
            raise DataFetchError(f'Error fetching data: {e}') from e

        if status != 200 or 'text/html' in content_type:
            raise DataFetchError(
                f'Error fetching data: Invalid Content-Type ({content_type}) or HTTP Code ({status})'
            )

        logger.debug(f'Downloaded {len(data)} bytes')
        return data


def _parse_workbook(source, sheet_name: str, player_start_column: int) -> LeagueData:
    try:
        return parse_league_from_excel(source, sheet_name, player_start_column)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise DataFetchError(f'Could not read workbook: {e}') from e


def load_league(
    url: Optional[str] = None,
    local_path: Optional[str | Path] = None,
    sheet_name: str = DEFAULT_SHEET_NAME,
    player_start_column: int = PLAYER_START_COLUMN,
    timeout: float = REQUEST_TIMEOUT,
) -> LeagueData:
    """
    Load the league from the remote export, falling back to a local workbook.

    Args:
        url: Spreadsheet export URL (tried first when given)
        local_path: Local .xlsx used when the download fails or no URL is set
        sheet_name: Sheet holding the match table
        player_start_column: Index of the first player column
        timeout: Download timeout in seconds

    Returns:
        Parsed LeagueData

    Raises:
        DataFetchError: If no source could be loaded
    """
    if not url and local_path is None:
        raise DataFetchError('No data source configured (need a URL or a local file)')

    if url:
        try:
            data = SheetFetcher(url, timeout).fetch()
            return _parse_workbook(data, sheet_name, player_start_column)
        except DataFetchError as e:
            if local_path is None:
                raise
            logger.warning(f'{e}. Falling back to {local_path}')

    local_path = Path(local_path)
    if not local_path.exists():
        raise DataFetchError(f'Local workbook not found: {local_path}')

    logger.info(f'Loading match table from {local_path}')
    return _parse_workbook(local_path, sheet_name, player_start_column)
