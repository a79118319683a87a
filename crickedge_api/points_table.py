# crickedge_api/points_table.py
from __future__ import annotations

from typing import Iterable, List, Optional

from crickedge_api.models import TeamStanding
from crickedge_api.nrr_math import round_nrr


def rank_standings(standings: Iterable[Optional[TeamStanding]]) -> List[TeamStanding]:
    """
    Returns a new list sorted by:
    1) Points (desc)
    2) NRR (desc)
    Remaining ties keep input order (sorted() is stable, also with reverse=True).
    Missing rows (None) are dropped.
    """
    rows = [r for r in standings if r is not None]
    return sorted(rows, key=lambda r: (r.points, r.nrr), reverse=True)


def team_nrr(team: TeamStanding) -> float:
    """
    NRR recomputed from the aggregates. A side with no overs yet contributes a
    run rate of 0, as on a published points table.
    """
    rr_for = team.runs_scored / team.overs_faced if team.overs_faced else 0.0
    rr_against = team.runs_conceded / team.overs_bowled if team.overs_bowled else 0.0
    return rr_for - rr_against


def standings_table(standings: Iterable[Optional[TeamStanding]]) -> List[dict]:
    out: List[dict] = []
    for idx, r in enumerate(rank_standings(standings), start=1):
        out.append({
            "pos": idx,
            "team": r.team_name,
            "points": r.points,
            "nrr": r.nrr,
            "computed_nrr": round_nrr(team_nrr(r)),
            "runs_scored": r.runs_scored,
            "overs_faced": r.overs_faced,
            "runs_conceded": r.runs_conceded,
            "overs_bowled": r.overs_bowled,
        })
    return out
