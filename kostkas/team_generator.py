"""Balanced team generation by snake draft."""

import logging
from collections.abc import Mapping
from typing import Iterable, Optional, Sequence, Union

from .constants import TEAM_SCORE_WIN_WEIGHT
from .models import BalancedTeams, PlayerStat, TeamMember
from .validators import TeamSelectionError, validate_team_selection

logger = logging.getLogger('kostkas.team_generator')


def player_score(stat: Optional[PlayerStat], win_weight: float = TEAM_SCORE_WIN_WEIGHT) -> float:
    """
    Strength score used to balance teams.

    Score = win percentage (0-100) + wins * win_weight. Players without
    recorded matches score 0.
    """
    if stat is None or stat.played == 0:
        return 0.0
    return stat.percentage + stat.won * win_weight


def snake_draft(ordered: Sequence[TeamMember]) -> tuple[list[TeamMember], list[TeamMember]]:
    """
    Split players (strongest first) into two teams.

    Players are taken in pairs. Even pairs send the first player to team A
    and the second to team B; odd pairs reverse it. A trailing unpaired
    player goes where the first of its pair would.
    """
    team_a: list[TeamMember] = []
    team_b: list[TeamMember] = []

    for k, start in enumerate(range(0, len(ordered), 2)):
        pair = ordered[start:start + 2]
        first, second = (team_a, team_b) if k % 2 == 0 else (team_b, team_a)
        first.append(pair[0])
        if len(pair) > 1:
            second.append(pair[1])

    return team_a, team_b


def generate_balanced_teams(
    selected: Sequence[str],
    stats: Union[Mapping[str, PlayerStat], Iterable[PlayerStat]],
    win_weight: float = TEAM_SCORE_WIN_WEIGHT,
) -> BalancedTeams:
    """
    Build two balanced teams from the selected players.

    Args:
        selected: Player names, at least 2, no repeats
        stats: Season-to-date stats (list or name -> PlayerStat mapping)
        win_weight: Weight of each win in the player score

    Returns:
        BalancedTeams with both rosters and their average win percentage

    Raises:
        TeamSelectionError: If the selection is invalid
    """
    errors = validate_team_selection(selected)
    if errors:
        raise TeamSelectionError('; '.join(errors))

    if not isinstance(stats, Mapping):
        stats = {s.name: s for s in stats}

    members = []
    for name in selected:
        stat = stats.get(name)
        if stat is None:
            logger.debug(f'No stats for {name}, scoring as 0')
        members.append(TeamMember(
            name=name,
            percentage=stat.percentage if stat else 0.0,
            won=stat.won if stat else 0,
            score=player_score(stat, win_weight),
        ))

    ordered = sorted(members, key=lambda m: m.score, reverse=True)
    team_a, team_b = snake_draft(ordered)

    logger.info(
        f'Generated teams of {len(team_a)} and {len(team_b)} from {len(selected)} players'
    )
    return BalancedTeams(team_a=team_a, team_b=team_b)
