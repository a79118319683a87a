from __future__ import annotations

from crickedge_api.models import TeamStanding, UpcomingFixture


def team(name, points, nrr=0.0, runs_scored=500, overs_faced=100, runs_conceded=450, overs_bowled=100):
    return TeamStanding(
        team_name=name,
        points=points,
        nrr=nrr,
        runs_scored=runs_scored,
        overs_faced=overs_faced,
        runs_conceded=runs_conceded,
        overs_bowled=overs_bowled,
    )


def fixture(team1, team2, match_name=None):
    return UpcomingFixture(team1=team1, team2=team2, match_name=match_name)
