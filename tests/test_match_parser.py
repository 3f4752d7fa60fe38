"""Unit tests for match table parsing."""

from datetime import date, datetime

import pytest

from kostkas.match_parser import decode_outcome, parse_date, parse_matches, parse_roster
from kostkas.models import Outcome


class TestRosterParsing:
    """Tests for roster derivation from the header row."""

    def test_roster_from_player_columns(self):
        """Test roster is the non-empty header names from column D onward."""
        headers = ['Num', 'Fecha', 'Jugadores', 'Ana', 'Bea', 'Carla']
        assert list(parse_roster(headers)) == ['Ana', 'Bea', 'Carla']

    def test_blank_headers_are_skipped_without_shifting_columns(self):
        """Test gaps in the header keep each player on its own column."""
        headers = ['Num', 'Fecha', 'Jugadores', 'Ana', '', None, 'Bea', 7]
        assert parse_roster(headers) == {'Ana': 3, 'Bea': 6}

    def test_first_three_columns_never_players(self):
        """Test text in the id/date/count headers doesn't become a player."""
        headers = ['Ana', 'Bea', 'Carla', 'Dani']
        assert list(parse_roster(headers)) == ['Dani']

    def test_names_are_stripped(self):
        """Test whitespace around names is removed and blank names skipped."""
        headers = ['Num', 'Fecha', 'Jugadores', ' Ana ', '   ']
        assert list(parse_roster(headers)) == ['Ana']

    def test_whitespace_only_header_keeps_later_columns(self):
        """Test a whitespace header is dropped and the next player keeps its column."""
        headers = ['Num', 'Fecha', 'Jugadores', 'Ana ', ' ', 'Bea']
        assert parse_roster(headers) == {'Ana': 3, 'Bea': 5}

    def test_duplicate_name_keeps_first_column(self):
        """Test a repeated player column is ignored."""
        headers = ['Num', 'Fecha', 'Jugadores', 'Ana', 'Bea', 'Ana']
        assert parse_roster(headers) == {'Ana': 3, 'Bea': 4}


class TestOutcomeDecoding:
    """Tests for result cell decoding."""

    @pytest.mark.parametrize('value,expected', [
        (1, Outcome.LOSS),
        (2, Outcome.WIN),
        (1.0, Outcome.LOSS),
        (2.0, Outcome.WIN),
        ('1', Outcome.LOSS),
        (' 2 ', Outcome.WIN),
        ('2.0', Outcome.WIN),
    ])
    def test_played_values(self, value, expected):
        """Test 1/2 decode as numbers or numeric strings."""
        assert decode_outcome(value) is expected

    @pytest.mark.parametrize('value', [None, '', '  ', 0, '0', 3, 1.5, 'x', 'W', True, False, float('nan')])
    def test_not_played_values(self, value):
        """Test every other value means the player did not play."""
        assert decode_outcome(value) is None


class TestDateParsing:
    """Tests for date cell conversion."""

    def test_datetime_passthrough(self):
        """Test datetimes from the workbook are used as-is."""
        value = datetime(2025, 1, 10, 19, 30)
        assert parse_date(value) == value

    def test_date_becomes_midnight(self):
        """Test plain dates become midnight datetimes."""
        assert parse_date(date(2025, 1, 10)) == datetime(2025, 1, 10)

    def test_spreadsheet_serial(self):
        """Test serial 45667 is 10 January 2025."""
        assert parse_date(45667) == datetime(2025, 1, 10)

    def test_fractional_serial_keeps_time(self):
        """Test the fractional part of a serial is the time of day."""
        assert parse_date(45667.5) == datetime(2025, 1, 10, 12, 0)

    def test_iso_string(self):
        """Test ISO date strings are parsed."""
        assert parse_date('2025-01-10') == datetime(2025, 1, 10)

    def test_timezone_aware_string_becomes_naive(self):
        """Test aware datetimes are converted so they compare with naive ones."""
        parsed = parse_date('2025-01-10T10:00:00+00:00')
        assert parsed is not None
        assert parsed.tzinfo is None

    def test_partial_strings_do_not_depend_on_today(self):
        """Test missing month and day resolve to January 1 on every run."""
        assert parse_date('2025') == datetime(2025, 1, 1)
        assert parse_date('March 2025') == datetime(2025, 3, 1)

    @pytest.mark.parametrize('value', [None, '', 'sin fecha', True, float('inf')])
    def test_unknown_dates(self, value):
        """Test missing and unparseable dates yield None."""
        assert parse_date(value) is None


class TestParseMatches:
    """Tests for full grid parsing."""

    def test_end_to_end_single_match(self):
        """Test the two-player, one-match scenario."""
        grid = [
            ['Num', 'Date', 'Count', 'Ana', 'Bea'],
            [1, '2025-01-10', 2, 2, 1],
        ]
        data = parse_matches(grid)

        assert data.roster == ['Ana', 'Bea']
        assert len(data.matches) == 1
        match = data.matches[0]
        assert match.id == 1
        assert match.date == datetime(2025, 1, 10)
        assert match.expected_count == 2
        assert match.results == {'Ana': Outcome.WIN, 'Bea': Outcome.LOSS}

    @pytest.mark.parametrize('grid', [None, []])
    def test_empty_grid(self, grid):
        """Test an empty grid gives an empty roster and no matches."""
        data = parse_matches(grid)
        assert data.roster == []
        assert data.matches == []

    def test_header_only(self):
        """Test a header without data rows gives a roster and no matches."""
        data = parse_matches([['Num', 'Date', 'Count', 'Ana']])
        assert data.roster == ['Ana']
        assert data.matches == []

    def test_rows_without_id_are_skipped(self):
        """Test rows with an empty id cell are dropped silently."""
        grid = [
            ['Num', 'Date', 'Count', 'Ana'],
            [None, '2025-01-10', 1, 2],
            ['', '2025-01-11', 1, 2],
            [0, '2025-01-12', 1, 2],
            [],
            [4, '2025-01-13', 1, 2],
        ]
        data = parse_matches(grid)
        assert [m.id for m in data.matches] == [4]

    def test_id_kept_verbatim(self):
        """Test non-numeric ids are preserved as given."""
        grid = [['Num', 'Date', 'Count', 'Ana'], ['A-7', '2025-01-10', 1, 2]]
        assert parse_matches(grid).matches[0].id == 'A-7'

    def test_gap_columns_map_to_right_player(self):
        """Test values under blank headers are ignored and players keep their column."""
        grid = [
            ['Num', 'Date', 'Count', 'Ana', '', 'Bea'],
            [1, '2025-01-10', 2, 2, 2, 1],
        ]
        match = parse_matches(grid).matches[0]
        assert match.results == {'Ana': Outcome.WIN, 'Bea': Outcome.LOSS}

    def test_non_participants_omitted(self):
        """Test blanks, zeros and text leave the player out of the match."""
        grid = [
            ['Num', 'Date', 'Count', 'Ana', 'Bea', 'Carla', 'Dani'],
            [1, '2025-01-10', 1, 2, 0, 'baja', None],
        ]
        assert parse_matches(grid).matches[0].results == {'Ana': Outcome.WIN}

    def test_ragged_rows(self):
        """Test rows shorter than the header treat missing cells as blank."""
        grid = [
            ['Num', 'Date', 'Count', 'Ana', 'Bea'],
            [1, '2025-01-10', 1, 2],
        ]
        assert parse_matches(grid).matches[0].results == {'Ana': Outcome.WIN}

    def test_unknown_date_match_is_kept(self):
        """Test an unparseable date keeps the match with date None."""
        grid = [['Num', 'Date', 'Count', 'Ana'], [1, 'pendiente', 1, 1]]
        data = parse_matches(grid)
        assert len(data.matches) == 1
        assert data.matches[0].date is None

    def test_row_order_preserved(self):
        """Test matches come out in row order, not date order."""
        grid = [
            ['Num', 'Date', 'Count', 'Ana'],
            [2, '2025-02-01', 1, 1],
            [1, '2025-01-01', 1, 2],
        ]
        assert [m.id for m in parse_matches(grid).matches] == [2, 1]

    def test_custom_player_start_column(self):
        """Test the first player column can be moved."""
        grid = [['Num', 'Date', 'Ana', 'Bea'], [1, '2025-01-10', 2, 1]]
        data = parse_matches(grid, player_start_column=2)
        assert data.roster == ['Ana', 'Bea']
