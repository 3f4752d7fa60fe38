#!/usr/bin/env python3
"""
Kostkas League Stats CLI

Loads the match table (spreadsheet export URL, falling back to a local
workbook) and prints the standings, top lists, MVP and team records.

Usage:
    python league_stats.py --file data/kostkas.xlsx
    python league_stats.py --file data/kostkas.xlsx --month 2025-01 --sort percentage
    python league_stats.py --file data/kostkas.xlsx --player Ana
    python league_stats.py --file data/kostkas.xlsx --teams Ana Bea Carla Dani
    python league_stats.py --source https://docs.google.com/.../export?format=xlsx -o web/stats.json
"""

import argparse
import logging
import sys
from pathlib import Path

from kostkas import (
    DataFetchError,
    LeagueSession,
    SortState,
    TeamSelectionError,
    load_league,
    validate_league,
)
from kostkas.config import get_config
from kostkas.data_fetcher import google_sheet_export_url
from kostkas.export import save_dashboard, save_stats_csv
from kostkas.logging_config import get_logger, setup_logging


def print_standings(session: LeagueSession) -> None:
    label = 'Whole season' if session.month == 'all' else session.month
    direction = 'desc' if session.sort.descending else 'asc'
    print(f"\n{'=' * 60}")
    print(f'STANDINGS - {label} ({len(session.filtered_matches())} matches, '
          f'sorted by {session.sort.column} {direction})')
    print('=' * 60)
    print(f"  {'Player':<20} {'PJ':>4} {'PG':>4} {'Pts':>5} {'%':>7}  Streak")
    for s in session.player_stats():
        print(f'  {s.name:<20} {s.played:>4} {s.won:>4} {s.points:>5} '
              f"{s.percentage:>6.1f}%  {''.join(s.streak)}")


def print_top_lists(session: LeagueSession) -> None:
    top = session.top_lists()
    print(f'\nTop lists (min. {top.threshold:g} matches played)')
    sections = [
        ('Points', top.points, lambda s: f'{s.points} pts'),
        ('Played', top.played, lambda s: f'{s.played} PJ'),
        ('Win %', top.percentage, lambda s: f'{s.percentage:.1f}%'),
    ]
    for title, players, value in sections:
        print(f'  {title}:')
        if not players:
            print('    Not enough data')
        for rank, s in enumerate(players, 1):
            print(f'    {rank}. {s.name}: {value(s)}')

    mvp = session.mvp()
    if mvp:
        print(f'\nMVP: {mvp.name} - {mvp.points} pts | {mvp.won} wins | {mvp.percentage:.0f}%')


def print_team_records(session: LeagueSession) -> None:
    records = session.team_records()
    if records.best is None:
        print('\nTeams: not enough data')
        return
    print(f"\nBest team ({records.best.won} wins): {', '.join(records.best.players)}")
    print(f"Worst team ({records.worst.lost} losses): {', '.join(records.worst.players)}")


def print_player(session: LeagueSession, player: str) -> None:
    details = session.player(player)
    s = details.stat
    report = details.affinity
    print(f'\n{player}: {s.played} PJ | {s.won} PG | {s.points} pts | '
          f"{s.percentage:.1f}% | streak {''.join(s.streak) or '-'}")
    print('Partners (whole season)')
    print('  Wins most with:')
    if not report.best:
        print('    Not enough data')
    for entry in report.best:
        print(f'    {entry.name}: {entry.won} W / {entry.lost} L ({entry.win_rate:.0%})')
    print('  Loses most with:')
    if not report.worst:
        print('    Not enough data')
    for entry in report.worst:
        print(f'    {entry.name}: {entry.lost} L / {entry.won} W ({entry.loss_rate:.0%})')


def print_teams(session: LeagueSession, selected: list[str]) -> None:
    teams = session.generate_teams(selected)
    for label, members, average in (
        ('Team A', teams.team_a, teams.average_a),
        ('Team B', teams.team_b, teams.average_b),
    ):
        print(f'\n{label} (avg {average:.1f}%)')
        for m in members:
            print(f'  {m.name}: {m.percentage:.1f}% / {m.won} wins')


def print_history(session: LeagueSession) -> None:
    print('\nMatch history')
    for summary in session.history():
        when = summary.date.strftime('%Y-%m-%d') if summary.date else 'Unknown date'
        print(f'  #{summary.id} {when} ({summary.expected_count} players)')
        print(f"    Winners: {', '.join(summary.winners) or '-'}")
        print(f"    Losers:  {', '.join(summary.losers) or '-'}")


def main():
    parser = argparse.ArgumentParser(description="Kostkas league statistics")
    parser.add_argument(
        "--source", "-s",
        default=None,
        help="Spreadsheet export URL (xlsx)",
    )
    parser.add_argument(
        "--sheet-id",
        default=None,
        help="Google Sheets document id (builds the xlsx export URL)",
    )
    parser.add_argument(
        "--file", "-f",
        default=None,
        help="Local workbook used when the download fails or no URL is given",
    )
    parser.add_argument(
        "--sheet",
        default=None,
        help="Sheet with the match table (default from config)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to league_config.json",
    )
    parser.add_argument(
        "--month", "-m",
        default="all",
        help="Month to show (YYYY-MM) or 'all'",
    )
    parser.add_argument(
        "--sort",
        default=None,
        choices=["name", "played", "won", "points", "percentage"],
        help="Column to sort the standings by",
    )
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="Sort ascending instead of descending",
    )
    parser.add_argument(
        "--player", "-p",
        default=None,
        help="Show best and worst partners for this player",
    )
    parser.add_argument(
        "--teams", "-t",
        nargs="+",
        default=None,
        help="Generate two balanced teams from these players",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Print the match history",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the dashboard JSON to this path",
    )
    parser.add_argument(
        "--csv",
        default=None,
        help="Write the standings table as CSV to this path",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and errors",
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level=level, log_to_file=False)
    logger = get_logger('cli')

    try:
        config = get_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        sys.exit(1)

    url = args.source or config.source_url
    if args.sheet_id:
        url = google_sheet_export_url(args.sheet_id)
    local_file = args.file or config.local_file

    try:
        data = load_league(
            url=url,
            local_path=local_file,
            sheet_name=args.sheet or config.sheet_name,
            player_start_column=config.player_start_column,
            timeout=config.request_timeout,
        )
    except DataFetchError as e:
        print(f"❌ {e}")
        sys.exit(1)

    logger.info(f'Loaded {len(data.matches)} matches for {len(data.roster)} players')

    errors, warnings = validate_league(data)
    for warning in warnings:
        print(f"⚠️  {warning}")
    if errors:
        for error in errors:
            print(f"❌ {error}")
        sys.exit(1)

    try:
        session = LeagueSession(data, config=config, month=args.month)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if args.sort or args.ascending:
        session.sort = SortState(args.sort or session.sort.column, not args.ascending)

    print_standings(session)
    print_top_lists(session)
    print_team_records(session)

    if args.player:
        if args.player not in session.roster:
            print(f"❌ Unknown player: {args.player}")
            sys.exit(1)
        print_player(session, args.player)

    if args.teams:
        try:
            print_teams(session, args.teams)
        except TeamSelectionError as e:
            print(f"❌ {e}")
            sys.exit(1)

    if args.history:
        print_history(session)

    if args.output:
        save_dashboard(Path(args.output), session)
        print(f"\nDashboard saved to {args.output}")

    if args.csv:
        save_stats_csv(Path(args.csv), session.player_stats())
        print(f"Standings saved to {args.csv}")


if __name__ == "__main__":
    main()
