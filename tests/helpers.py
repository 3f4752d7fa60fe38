"""Match builders shared by the tests."""

from datetime import datetime

from kostkas.models import Match, Outcome

W = Outcome.WIN
L = Outcome.LOSS


def make_match(match_id, when, **results):
    """Build a Match; `when` is a (y, m, d) tuple or None."""
    match_date = datetime(*when) if when else None
    return Match(id=match_id, date=match_date, expected_count=len(results), results=dict(results))
