from __future__ import annotations

import pytest

from crickedge_api.nrr_math import InvalidFormatError
from crickedge_api.standings_loader import load_fixtures, load_standing, load_standings


def test_load_camel_case_row(standings_rows):
    s = load_standing(standings_rows[4])
    assert s.team_name == "Sri Lanka"
    assert s.points == 2
    assert s.nrr == -0.5
    assert (s.runs_scored, s.overs_faced, s.runs_conceded, s.overs_bowled) == (500, 100, 450, 100)


def test_load_snake_case_row_with_string_numbers():
    s = load_standing({
        "team_name": "Nepal", "points": "6", "nrr": "-0.25",
        "runs_scored": "640", "overs_faced": "98.5", "runs_conceded": "610", "overs_bowled": 100,
    })
    assert s.team_name == "Nepal"
    assert s.points == 6.0
    assert s.nrr == -0.25
    assert s.overs_faced == 98.5
    assert s.overs_bowled == 100.0


def test_missing_and_garbage_numbers_default_to_zero():
    s = load_standing({"name": "Oman", "points": None, "nrr": "nan", "runsScored": "n/a"})
    assert (s.points, s.nrr, s.runs_scored, s.overs_faced) == (0.0, 0.0, 0.0, 0.0)


def test_blank_name_is_missing():
    assert load_standing({"name": "   ", "points": 2}).team_name is None
    assert load_standing({"points": 2}).team_name is None


def test_balls_notation_is_decoded():
    s = load_standing({"name": "UAE", "oversFaced": "49.3", "oversBowled": 50}, overs_notation="balls")
    assert s.overs_faced == pytest.approx(49.5)
    assert s.overs_bowled == 50.0


def test_balls_notation_garbage_raises():
    with pytest.raises(InvalidFormatError, match="UAE"):
        load_standings([{"name": "UAE", "oversFaced": "lots"}], overs_notation="balls")


def test_balls_notation_strict():
    rows = [{"name": "UAE", "oversFaced": "49.9"}]
    assert load_standings(rows, overs_notation="balls")[0].overs_faced == pytest.approx(50.5)
    with pytest.raises(InvalidFormatError):
        load_standings(rows, overs_notation="balls", strict_overs=True)


def test_unknown_notation():
    with pytest.raises(ValueError):
        load_standings([], overs_notation="fractional")


def test_non_mapping_rows_become_none(standings_rows):
    out = load_standings([standings_rows[0], "junk", None])
    assert out[0].team_name == "India"
    assert out[1:] == [None, None]


def test_load_standings_none():
    assert load_standings(None) == []
    assert load_fixtures(None) == []


def test_load_fixtures_keeps_spelling():
    out = load_fixtures([
        {"team1": " india ", "team2": "Australia", "match_name": "Final"},
        {"team1": "Nepal"},
        7,
    ])
    assert out[0].team1 == " india "
    assert out[0].team2 == "Australia"
    assert out[0].match_name == "Final"
    assert out[1].team2 is None
    assert out[2] is None


def test_balls_notation_non_numeric_balls_raises():
    with pytest.raises(InvalidFormatError, match="UAE"):
        load_standings([{"name": "UAE", "oversFaced": "49.x"}], overs_notation="balls")
