"""Validation functions for team selections and loaded league data."""

from typing import Sequence

from .models import LeagueData


class TeamSelectionError(ValueError):
    """Raised when the team generator gets an unusable player selection."""


def validate_team_selection(selected: Sequence[str]) -> list[str]:
    """
    Validate a player selection for the team generator.

    Checks:
    - At least 2 players selected
    - No blank names
    - No player selected twice

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if len(selected) < 2:
        errors.append(f'Select at least 2 players to generate teams (got {len(selected)})')

    if any(not name or not name.strip() for name in selected):
        errors.append('Selection contains a blank player name')

    seen = set()
    duplicates = set()
    for name in selected:
        if name in seen:
            duplicates.add(name)
        seen.add(name)

    if duplicates:
        errors.append(f'Players selected more than once: {", ".join(sorted(duplicates))}')

    return errors


def validate_league(data: LeagueData) -> tuple[list[str], list[str]]:
    """
    Check a loaded match table for problems worth reporting.

    Errors:
    - Matches were found but no player columns

    Warnings:
    - Matches with unknown dates (kept, but left out of monthly views)
    - Matches nobody played
    - Expected player count differing from recorded results

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    if data.matches and not data.roster:
        errors.append(f'{len(data.matches)} matches found but no player columns in the header')

    for match in data.matches:
        if match.date is None:
            warnings.append(f'Match {match.id} has an unknown date')

        recorded = len(match.results)
        if recorded == 0:
            warnings.append(f'Match {match.id} has no recorded results')
            continue

        expected = match.expected_count
        if isinstance(expected, (int, float)) and not isinstance(expected, bool):
            if expected != recorded:
                warnings.append(
                    f'Match {match.id} expected {expected:g} players but has {recorded} results'
                )

    return errors, warnings
