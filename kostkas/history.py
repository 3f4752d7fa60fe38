"""Match history view."""

from typing import Iterable, Sequence

from .models import Match, MatchSummary


def match_history(matches: Iterable[Match], roster: Sequence[str]) -> list[MatchSummary]:
    """
    List every match newest first with its winners and losers.

    Matches with unknown dates go last, in row order. Names follow roster order.
    """
    matches = list(matches)
    dated = sorted((m for m in matches if m.date is not None), key=lambda m: m.date, reverse=True)
    undated = [m for m in matches if m.date is None]

    return [
        MatchSummary(
            id=m.id,
            date=m.date,
            expected_count=m.expected_count,
            winners=m.winners(roster),
            losers=m.losers(roster),
        )
        for m in dated + undated
    ]
