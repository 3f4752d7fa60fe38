"""Dashboard export: JSON snapshot and tabular stats."""

from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, Optional

import polars as pl

from .models import PlayerStat, TeamGroup
from .session import LeagueSession
from .utils import save_json

STATS_COLUMNS = ['name', 'played', 'won', 'points', 'percentage', 'streak']


def stats_frame(stats: Iterable[PlayerStat]) -> pl.DataFrame:
    """Stats table as a DataFrame, streak joined into a string like 'WWLW'."""
    rows = [
        {
            'name': s.name,
            'played': s.played,
            'won': s.won,
            'points': s.points,
            'percentage': round(s.percentage, 1),
            'streak': ''.join(s.streak),
        }
        for s in stats
    ]
    schema = {
        'name': pl.Utf8,
        'played': pl.Int64,
        'won': pl.Int64,
        'points': pl.Int64,
        'percentage': pl.Float64,
        'streak': pl.Utf8,
    }
    return pl.DataFrame(rows, schema=schema)


def _team_dict(group: Optional[TeamGroup]) -> Optional[dict[str, Any]]:
    if group is None:
        return None
    return {'players': list(group.players), 'won': group.won, 'lost': group.lost}


def build_dashboard(session: LeagueSession) -> dict[str, Any]:
    """JSON-ready snapshot of every view for the current selection."""
    top = session.top_lists()
    mvp = session.mvp()
    teams = session.team_records()

    return {
        'month': session.month,
        'months': session.months(),
        'match_count': len(session.filtered_matches()),
        'threshold': top.threshold,
        'sort': {'column': session.sort.column, 'descending': session.sort.descending},
        'stats': [asdict(s) for s in session.player_stats()],
        'top': {
            'points': [s.name for s in top.points],
            'played': [s.name for s in top.played],
            'percentage': [s.name for s in top.percentage],
        },
        'mvp': asdict(mvp) if mvp else None,
        'best_team': _team_dict(teams.best),
        'worst_team': _team_dict(teams.worst),
    }


def save_dashboard(path: Path | str, session: LeagueSession) -> dict[str, Any]:
    """Write the dashboard snapshot as JSON and return it."""
    dashboard = build_dashboard(session)
    save_json(path, dashboard)
    return dashboard


def save_stats_csv(path: Path | str, stats: Iterable[PlayerStat]) -> None:
    """Write the stats table as CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    stats_frame(stats).write_csv(path)
