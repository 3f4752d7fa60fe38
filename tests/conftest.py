"""Shared fixtures for the stats engine tests."""

from datetime import datetime

import pytest


@pytest.fixture
def league_grid():
    """Small league: four players, five dated matches over two months plus one undated."""
    return [
        ['Num', 'Fecha', 'Jugadores', 'Ana', 'Bea', 'Carla', 'Dani'],
        [1, datetime(2025, 1, 10), 4, 2, 2, 1, 1],
        [2, datetime(2025, 1, 17), 4, 2, 1, 2, 1],
        [3, datetime(2025, 1, 24), 4, 2, 2, 1, 1],
        [4, datetime(2025, 2, 7), 4, 1, 1, 2, 2],
        [5, datetime(2025, 2, 14), 3, 2, '', 1, 2],
        [6, 'sin fecha', 2, 1, 2, None, None],
    ]
