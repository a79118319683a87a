# crickedge_api/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


# -----------------------------
# Standings row (one per team)
# -----------------------------
@dataclass(frozen=True)
class TeamStanding:
    """
    A team's aggregate tournament record at calculation time.
    Overs are DECIMAL overs (49.5 == 49 overs 3 balls), not overs.balls notation.
    """
    team_name: Optional[str]

    points: float = 0
    nrr: float = 0.0

    runs_scored: float = 0
    overs_faced: float = 0.0
    runs_conceded: float = 0
    overs_bowled: float = 0.0


# -----------------------------
# Upcoming fixture
# -----------------------------
@dataclass(frozen=True)
class UpcomingFixture:
    team1: Optional[str]
    team2: Optional[str]

    # Diagnostics only
    match_name: Optional[str] = None


# -----------------------------
# Output: one what-if narrative
# -----------------------------
@dataclass(frozen=True)
class QualificationScenario:
    match: str
    batting_first_scenario: str
    chasing_scenario: str

    # Rounded (3dp) projections behind the two narratives
    batting_first_nrr: Optional[float] = None
    chasing_nrr: Optional[float] = None
    required_nrr: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Frontend shape (camelCase keys)."""
        return {
            "match": self.match,
            "battingFirstScenario": self.batting_first_scenario,
            "chasingScenario": self.chasing_scenario,
            "battingFirstNRR": self.batting_first_nrr,
            "chasingNRR": self.chasing_nrr,
            "requiredNRR": self.required_nrr,
        }
