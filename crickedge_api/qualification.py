# crickedge_api/qualification.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from crickedge_api.models import QualificationScenario, TeamStanding, UpcomingFixture
from crickedge_api.nrr_math import round_nrr
from crickedge_api.points_table import rank_standings
from crickedge_api.scenario import (
    DegenerateInputError,
    describe_batting_first,
    describe_chasing,
    project_batting_first_nrr,
    project_chasing_nrr,
)

# Top-4 qualify; the 4th placed team is the one to catch
QUALIFYING_SPOTS = 4

Diagnostic = Callable[[str], None]


class InsufficientTeamsError(ValueError):
    """Raised when there are too few teams to locate the cutoff position."""
    pass


def _noop(_msg: str) -> None:
    return None


def _norm_name(name: object) -> str:
    if name is None:
        return ""
    return str(name).strip().lower()


def find_cutoff_team(standings: Sequence[Optional[TeamStanding]]) -> TeamStanding:
    """
    Team at the last qualifying position after ranking by points, then NRR.
    """
    ranked = rank_standings(standings)
    if len(ranked) < QUALIFYING_SPOTS:
        raise InsufficientTeamsError(
            f"Need at least {QUALIFYING_SPOTS} teams to find the cutoff, got {len(ranked)}"
        )
    return ranked[QUALIFYING_SPOTS - 1]


def _opponent_for(team_key: str, fixture: UpcomingFixture) -> Optional[str]:
    """
    Returns the other side (original casing) if team_key plays in fixture, else None.
    """
    t1 = _norm_name(fixture.team1)
    t2 = _norm_name(fixture.team2)
    if t1 == team_key:
        return fixture.team2
    if t2 == team_key:
        return fixture.team1
    return None


def generate_scenarios(
    standings: Sequence[Optional[TeamStanding]],
    fixtures: Sequence[Optional[UpcomingFixture]],
    target_team_name: Optional[str] = None,
    *,
    diagnostic: Optional[Diagnostic] = None,
) -> List[QualificationScenario]:
    """
    What-if narratives for every team currently below the cutoff on points.

    - Every team with fewer points than the 4th placed team is a target,
      in standings order. target_team_name does NOT narrow this down.
    - For each target, fixtures it plays in (trimmed, case-insensitive match)
      yield one scenario each, in fixture order.
    - Rows with missing names, teams with negative aggregates and fixtures
      with a missing side are skipped.

    Raises InsufficientTeamsError if standings has 1..3 teams.
    """
    log = diagnostic or _noop

    if not standings:
        return []

    cutoff = find_cutoff_team(standings)
    required_nrr = cutoff.nrr
    log(f"cutoff team={cutoff.team_name} points={cutoff.points} nrr={required_nrr} (target arg={target_team_name!r})")

    scenarios: List[QualificationScenario] = []

    for team in standings:
        if team is None or not team.team_name:
            log("skip standings row without team_name")
            continue
        if team.points >= cutoff.points:
            continue

        # Projections depend on the team only, not on the opponent
        try:
            batting_first_nrr = project_batting_first_nrr(team)
            chasing_nrr = project_chasing_nrr(team)
        except DegenerateInputError as e:
            log(f"skip team with unusable aggregates: {e}")
            continue

        team_key = _norm_name(team.team_name)

        for fx in fixtures:
            if fx is None or not fx.team1 or not fx.team2:
                log(f"skip fixture with missing side: {getattr(fx, 'match_name', None)!r}")
                continue
            if _norm_name(fx.team1) == _norm_name(fx.team2):
                log(f"skip fixture with identical sides: {fx.match_name!r}")
                continue

            opponent = _opponent_for(team_key, fx)
            if opponent is None:
                continue
            if not str(opponent).strip():
                log(f"skip fixture without opponent for {team.team_name}: {fx.match_name!r}")
                continue

            scenarios.append(QualificationScenario(
                match=f"{team.team_name} vs {opponent}",
                batting_first_scenario=describe_batting_first(team, opponent, batting_first_nrr),
                chasing_scenario=describe_chasing(team, chasing_nrr),
                batting_first_nrr=round_nrr(batting_first_nrr),
                chasing_nrr=round_nrr(chasing_nrr),
                required_nrr=required_nrr,
            ))

    return scenarios


def scenarios_by_fixture(
    standings: Sequence[Optional[TeamStanding]],
    fixtures: Sequence[Optional[UpcomingFixture]],
    *,
    diagnostic: Optional[Diagnostic] = None,
) -> List[QualificationScenario]:
    """
    One scenario per upcoming fixture (the first one found), for the
    "Qualification Scenarios" page. Fixtures that produce nothing are dropped.
    """
    out: List[QualificationScenario] = []
    for fx in fixtures:
        if fx is None:
            continue
        found = generate_scenarios(standings, [fx], fx.team1, diagnostic=diagnostic)
        if found:
            out.append(found[0])
    return out
