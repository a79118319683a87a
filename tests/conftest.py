from __future__ import annotations

import pytest

from crickedge_api import cache

from factories import team


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def five_teams():
    return [
        team("A", 10, 1.2),
        team("B", 8, 0.8),
        team("C", 6, 0.3),
        team("D", 4, -0.1),
        team("E", 2, -0.9),
    ]


@pytest.fixture
def standings_rows():
    """CrickEdge /teams JSON shape."""
    return [
        {"name": "India", "points": 10, "nrr": 1.5, "runsScored": 900, "oversFaced": 150, "runsConceded": 800, "oversBowled": 150},
        {"name": "Australia", "points": 8, "nrr": 0.9, "runsScored": 880, "oversFaced": 150, "runsConceded": 820, "oversBowled": 150},
        {"name": "England", "points": 6, "nrr": 0.2, "runsScored": 850, "oversFaced": 150, "runsConceded": 840, "oversBowled": 150},
        {"name": "Pakistan", "points": 4, "nrr": -0.3, "runsScored": 820, "oversFaced": 150, "runsConceded": 860, "oversBowled": 150},
        {"name": "Sri Lanka", "points": 2, "nrr": -0.5, "runsScored": 500, "oversFaced": 100, "runsConceded": 450, "oversBowled": 100},
    ]
