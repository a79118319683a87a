# main.py
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Literal, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from crickedge_api.cache import get_or_fetch
from crickedge_api.backend_client import BackendError, fetch_teams, fetch_upcoming_matches

from crickedge_api.config import (
    validate_config,
    TEAMS_CACHE_TTL_SECONDS,
    FIXTURES_CACHE_TTL_SECONDS,
    STANDINGS_OVERS_NOTATION,
    STRICT_OVERS,
    DEBUG_SCENARIOS,
)
from crickedge_api.log import get_logger

from crickedge_api.models import QualificationScenario
from crickedge_api.nrr_math import decimal_overs
from crickedge_api.points_table import standings_table
from crickedge_api.qualification import find_cutoff_team, generate_scenarios, scenarios_by_fixture
from crickedge_api.standings_loader import load_fixtures, load_standings

logger = get_logger("crickedge.api")

STALE_TTL_SECONDS = 24 * 3600

# -----------------------
# App
# -----------------------
app = FastAPI(
    title="CrickEdge Qualification Scenario API",
    version="0.1.0",
    description="Net Run Rate what-if scenarios for teams outside the top-4 cutoff",
)


@app.on_event("startup")
def on_startup():
    validate_config()


@app.get("/health")
def health_check():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


# -----------------------
# Helpers
# -----------------------
def _diagnostic() -> Optional[Callable[[str], None]]:
    return logger.debug if DEBUG_SCENARIOS else None


def _cutoff_info(standings) -> Optional[Dict[str, Any]]:
    if not standings:
        return None
    cutoff = find_cutoff_team(standings)
    return {"team": cutoff.team_name, "points": cutoff.points, "nrr": cutoff.nrr}


def _scenario_response(standings, scenarios: List[QualificationScenario]) -> Dict[str, Any]:
    return {
        "cutoff": _cutoff_info(standings),
        "table": standings_table(standings),
        "scenarios_count": len(scenarios),
        "scenarios": [s.to_dict() for s in scenarios],
    }


def _get_rows_cached(name: str, fetch: Callable[[], List[Any]], ttl_seconds: int) -> Dict[str, Any]:
    """
    Cache-first backend fetch with fresh/stale fallback.
    Returns {"rows": [...], "stale": bool}.
    """
    try:
        rows, stale = get_or_fetch(
            name,
            fetch,
            ttl_seconds=ttl_seconds,
            stale_ttl_seconds=STALE_TTL_SECONDS,
            fallback_on=(BackendError,),
        )
    except BackendError as e:
        logger.error("Unable to fetch %s: %s", name, e)
        raise HTTPException(status_code=502, detail=f"Unable to fetch {name}: {str(e)}")

    if stale:
        logger.warning("Serving stale %s", name)
    return {"rows": rows, "stale": stale}


# -----------------------
# Scenario endpoints (caller-supplied standings)
# -----------------------
OversNotation = Literal["decimal", "balls"]


class ScenarioRequest(BaseModel):
    standings: list[Dict[str, Any]] = Field(default_factory=list, description="Rows shaped like CrickEdge /teams")
    fixtures: list[Dict[str, Any]] = Field(default_factory=list, description="Rows with team1, team2, match_name")
    target_team: Optional[str] = Field(None, description="Accepted for compatibility; does not filter targets")
    overs_notation: OversNotation = Field(STANDINGS_OVERS_NOTATION, description="decimal (49.5) or balls (49.3)")


@app.post("/api/qualification/scenarios")
def qualification_scenarios(req: ScenarioRequest):
    try:
        standings = load_standings(req.standings, overs_notation=req.overs_notation, strict_overs=STRICT_OVERS)
        fixtures = load_fixtures(req.fixtures)
        scenarios = generate_scenarios(standings, fixtures, req.target_team, diagnostic=_diagnostic())
        return _scenario_response(standings, scenarios)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/qualification/scenarios/by-fixture")
def qualification_scenarios_by_fixture(req: ScenarioRequest):
    try:
        standings = load_standings(req.standings, overs_notation=req.overs_notation, strict_overs=STRICT_OVERS)
        fixtures = load_fixtures(req.fixtures)
        scenarios = scenarios_by_fixture(standings, fixtures, diagnostic=_diagnostic())
        return _scenario_response(standings, scenarios)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# -----------------------
# Live scenarios (CrickEdge backend + cache)
# -----------------------
@app.get("/api/qualification/scenarios/live")
def qualification_scenarios_live():
    teams = _get_rows_cached("teams", fetch_teams, TEAMS_CACHE_TTL_SECONDS)
    upcoming = _get_rows_cached("upcoming-matches", fetch_upcoming_matches, FIXTURES_CACHE_TTL_SECONDS)

    if not teams["rows"]:
        raise HTTPException(status_code=502, detail="Backend returned no teams")

    try:
        standings = load_standings(teams["rows"], overs_notation=STANDINGS_OVERS_NOTATION, strict_overs=STRICT_OVERS)
        fixtures = load_fixtures(upcoming["rows"])
        scenarios = scenarios_by_fixture(standings, fixtures, diagnostic=_diagnostic())
        resp = _scenario_response(standings, scenarios)
    except ValueError as e:
        raise HTTPException(status_code=502, detail=str(e))

    resp["stale"] = teams["stale"] or upcoming["stale"]
    if not fixtures:
        resp["note"] = "No upcoming matches scheduled"
    return resp


# -----------------------
# Overs conversion
# -----------------------
class OversRequest(BaseModel):
    overs: Union[str, int, float] = Field(..., description="e.g. 49.3 (49 overs, 3 balls)")
    strict: bool = Field(STRICT_OVERS, description="Reject ball counts above 5")


@app.post("/api/overs/decimal")
def overs_decimal(req: OversRequest):
    try:
        value = decimal_overs(req.overs, strict=req.strict)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    # "49.x" style input decodes to nan, which JSON cannot carry
    return {"input": req.overs, "decimal_overs": None if math.isnan(value) else value}
