"""Ad-hoc team records: exact sets of players that won or lost together."""

from typing import Iterable

from .models import Match, TeamGroup, TeamRecords


def team_key(players: Iterable[str]) -> str:
    """Order-independent key for a set of players."""
    return ','.join(sorted(players))


def aggregate_team_groups(matches: Iterable[Match]) -> list[TeamGroup]:
    """
    Group matches by their exact winner set and loser set.

    A set of players that won one match and lost another accumulates both
    counts on the same group.

    Returns:
        List of TeamGroup in first-appearance order
    """
    groups: dict[str, TeamGroup] = {}

    for match in matches:
        winners = match.winners()
        losers = match.losers()

        if winners:
            key = team_key(winners)
            group = groups.setdefault(key, TeamGroup(players=tuple(sorted(winners))))
            group.won += 1

        if losers:
            key = team_key(losers)
            group = groups.setdefault(key, TeamGroup(players=tuple(sorted(losers))))
            group.lost += 1

    return list(groups.values())


def find_team_records(matches: Iterable[Match]) -> TeamRecords:
    """
    Find the most winning and the most losing team.

    Best: most wins, then best win ratio (no losses is the best ratio),
    then key. Worst: most losses, then key. The key tie-break keeps the
    choice independent of match order.
    """
    groups = aggregate_team_groups(matches)
    if not groups:
        return TeamRecords()

    best = min(groups, key=lambda g: (-g.won, -g.win_rate, g.key))
    worst = min(groups, key=lambda g: (-g.lost, g.key))
    return TeamRecords(best=best, worst=worst)
