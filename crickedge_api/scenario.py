# crickedge_api/scenario.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from crickedge_api.models import TeamStanding
from crickedge_api.nrr_math import format_nrr, net_run_rate


class DegenerateInputError(ValueError):
    """Raised when a team's aggregates are negative, so a projection is meaningless."""
    pass


# -----------------------------
# Fixed what-if assumptions (50-over model)
# -----------------------------
@dataclass(frozen=True)
class BattingFirstAssumption:
    """Team bats first, posts a big total, then bowls the opponent out cheaply."""
    overs_faced: float = 50
    runs_scored: int = 300
    opponent_runs: int = 150
    overs_bowled: float = 30


@dataclass(frozen=True)
class ChasingAssumption:
    """Opponent sets a par total over the full 50; team chases it quickly."""
    opponent_runs: int = 250
    opponent_overs: float = 50
    chase_overs: float = 30

    @property
    def target_runs(self) -> int:
        # Winning needs one run more than the opponent
        return self.opponent_runs + 1


BATTING_FIRST = BattingFirstAssumption()
CHASING = ChasingAssumption()


def _check_aggregates(team: TeamStanding) -> None:
    for field in ("runs_scored", "overs_faced", "runs_conceded", "overs_bowled"):
        if getattr(team, field) < 0:
            raise DegenerateInputError(f"{team.team_name}: {field} cannot be negative")


# -----------------------------
# Projections
# -----------------------------
def project_batting_first_nrr(team: TeamStanding, assumption: BattingFirstAssumption = BATTING_FIRST) -> float:
    _check_aggregates(team)
    return net_run_rate(
        team.runs_scored + assumption.runs_scored,
        team.overs_faced + assumption.overs_faced,
        team.runs_conceded + assumption.opponent_runs,
        team.overs_bowled + assumption.overs_bowled,
    )


def project_chasing_nrr(team: TeamStanding, assumption: ChasingAssumption = CHASING) -> float:
    _check_aggregates(team)
    return net_run_rate(
        team.runs_scored + assumption.target_runs,
        team.overs_faced + assumption.chase_overs,
        team.runs_conceded + assumption.opponent_runs,
        team.overs_bowled + assumption.opponent_overs,
    )


# -----------------------------
# Narratives
# -----------------------------
def describe_batting_first(team: TeamStanding, opponent_name: str, projected_nrr: float) -> str:
    a = BATTING_FIRST
    return (
        f"If {team.team_name} scores {a.runs_scored}+ and restricts {opponent_name} "
        f"under {a.opponent_runs} in {a.overs_bowled:g} overs, new NRR will be ~{format_nrr(projected_nrr)}"
    )


def describe_chasing(team: TeamStanding, projected_nrr: float) -> str:
    a = CHASING
    return f"If {team.team_name} chases {a.target_runs} in under {a.chase_overs:g} overs, new NRR will be ~{format_nrr(projected_nrr)}"


def build_batting_first(team: TeamStanding, opponent_name: str, required_nrr: Optional[float] = None) -> str:
    """
    "If <team> scores 300+ and restricts <opponent> under 150 in 30 overs, new NRR will be ~x.xxx"

    required_nrr is accepted for the caller's context only; the projection
    does not depend on it.
    """
    return describe_batting_first(team, opponent_name, project_batting_first_nrr(team))


def build_chasing(team: TeamStanding, opponent_name: str, required_nrr: Optional[float] = None) -> str:
    """
    "If <team> chases 251 in under 30 overs, new NRR will be ~x.xxx"

    opponent_name and required_nrr are not part of the sentence.
    """
    return describe_chasing(team, project_chasing_nrr(team))
