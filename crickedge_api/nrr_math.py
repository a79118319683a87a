# crickedge_api/nrr_math.py
from __future__ import annotations

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

OversLike = Union[str, int, float]

BALLS_PER_OVER = 6
NRR_DECIMALS = 3

_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


class InvalidFormatError(ValueError):
    """Raised when an overs value has no parseable leading integer."""
    pass


def _leading_int(part: str) -> int:
    m = _LEADING_INT_RE.match(part.strip())
    if not m:
        raise ValueError(part)
    return int(m.group(0))


def decimal_overs(overs: OversLike, *, strict: bool = False) -> float:
    """
    Converts cricket overs notation to decimal overs.

    Supported inputs:
    - "49.3", "7.2", "20" (string overs notation)
    - 50 (int overs)
    - 49.3 (float) -> treated as "49.3"

    Rule: ".x" means x balls. Example: 49.3 = 49 + 3/6 = 49.5 overs.

    The ball count is NOT range-checked unless strict=True: "49.9" decodes to
    49 + 9/6 = 50.5. Existing stored figures were produced that way.
    A ball part with no digits ("49.x") gives nan; only a missing leading
    integer raises InvalidFormatError.
    """
    if overs is None or isinstance(overs, bool):
        raise InvalidFormatError(f"Invalid overs: {overs!r}")

    s = str(overs).strip()
    whole_part, _, ball_part = s.partition(".")

    try:
        whole = _leading_int(whole_part)
    except ValueError:
        raise InvalidFormatError(f"Invalid overs: {overs!r}") from None

    if ball_part.strip() == "":
        balls = 0
    else:
        try:
            balls = _leading_int(ball_part)
        except ValueError:
            if strict:
                raise InvalidFormatError(f"Invalid overs format: {overs!r} (balls part is not a number)") from None
            return math.nan

    if strict and (balls < 0 or balls >= BALLS_PER_OVER):
        raise InvalidFormatError(f"Invalid overs format: {overs!r} (balls part must be 0-5)")

    return whole + balls / BALLS_PER_OVER


def run_rate(runs: float, overs: float) -> float:
    """
    runs / overs, with IEEE semantics on zero overs (inf or nan) instead of
    ZeroDivisionError.
    """
    if overs == 0:
        if runs == 0 or math.isnan(runs):
            return math.nan
        return math.copysign(math.inf, runs) * math.copysign(1.0, overs)
    return runs / overs


def net_run_rate(runs_scored: float, overs_faced: float, runs_conceded: float, overs_bowled: float) -> float:
    """
    Net Run Rate = (runs_scored / overs_faced) - (runs_conceded / overs_bowled)
    """
    return run_rate(runs_scored, overs_faced) - run_rate(runs_conceded, overs_bowled)


def round_nrr(value: float) -> float:
    """
    Fixed 3dp rounding, ties away from zero (same digits as toFixed(3)).
    Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-NRR_DECIMALS)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_nrr(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{round_nrr(value):.{NRR_DECIMALS}f}"
