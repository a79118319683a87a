# crickedge_api/standings_loader.py
from __future__ import annotations

import math
from typing import Any, Iterable, List, Literal, Mapping, Optional

from crickedge_api.models import TeamStanding, UpcomingFixture
from crickedge_api.nrr_math import InvalidFormatError, decimal_overs

OversNotation = Literal["decimal", "balls"]


def _first(row: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        v = row.get(k)
        if v is not None:
            return v
    return None


def _safe_float(x: object, default: float = 0.0) -> float:
    try:
        if x is None:
            return default
        sx = str(x).strip()
        if not sx or sx.lower() == "nan":
            return default
        return float(sx)
    except (TypeError, ValueError):
        return default


def _overs(x: object, notation: OversNotation, strict: bool) -> float:
    if x is None or str(x).strip() == "":
        return 0.0
    if notation == "balls":
        value = decimal_overs(x, strict=strict)
        # A nan aggregate cannot go out in a JSON table
        if math.isnan(value):
            raise InvalidFormatError(f"Invalid overs: {x!r}")
        return value
    return _safe_float(x)


def _clean_name(x: object) -> Optional[str]:
    if x is None:
        return None
    s = str(x)
    # Keep original spacing/casing, blank means missing
    return s if s.strip() else None


def load_standing(row: Any, *, overs_notation: OversNotation = "decimal", strict_overs: bool = False) -> Optional[TeamStanding]:
    """
    One CrickEdge /teams row -> TeamStanding.

    Accepts:
      - team_name or name
      - camelCase (runsScored) or snake_case (runs_scored) aggregates
    Returns None for rows that are not mappings.
    """
    if not isinstance(row, Mapping):
        return None

    return TeamStanding(
        team_name=_clean_name(_first(row, "team_name", "name")),
        points=_safe_float(row.get("points")),
        nrr=_safe_float(row.get("nrr")),
        runs_scored=_safe_float(_first(row, "runsScored", "runs_scored", "total_runs")),
        overs_faced=_overs(_first(row, "oversFaced", "overs_faced", "total_overs"), overs_notation, strict_overs),
        runs_conceded=_safe_float(_first(row, "runsConceded", "runs_conceded", "total_runs_conceded")),
        overs_bowled=_overs(_first(row, "oversBowled", "overs_bowled", "total_overs_bowled"), overs_notation, strict_overs),
    )


def load_standings(
    rows: Optional[Iterable[Any]],
    *,
    overs_notation: OversNotation = "decimal",
    strict_overs: bool = False,
) -> List[Optional[TeamStanding]]:
    """
    Order is preserved; unusable rows become None so the calculator skips them.
    Raises InvalidFormatError (balls notation only) when an overs value is garbage.
    """
    if overs_notation not in ("decimal", "balls"):
        raise ValueError(f"Unknown overs notation: {overs_notation}")

    out: List[Optional[TeamStanding]] = []
    for row in rows or []:
        try:
            out.append(load_standing(row, overs_notation=overs_notation, strict_overs=strict_overs))
        except InvalidFormatError as e:
            name = row.get("team_name") or row.get("name")
            raise InvalidFormatError(f"{name}: {e}") from e
    return out


def load_fixture(row: Any) -> Optional[UpcomingFixture]:
    if not isinstance(row, Mapping):
        return None
    return UpcomingFixture(
        team1=_clean_name(row.get("team1") or row.get("team_1")),
        team2=_clean_name(row.get("team2") or row.get("team_2")),
        match_name=_clean_name(row.get("match_name")),
    )


def load_fixtures(rows: Optional[Iterable[Any]]) -> List[Optional[UpcomingFixture]]:
    return [load_fixture(r) for r in (rows or [])]
