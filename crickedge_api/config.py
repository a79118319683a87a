# crickedge_api/config.py
from __future__ import annotations

import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_flag(name: str, default: str = "0") -> bool:
    return _get_env(name, default) == "1"


# -------------------------
# CrickEdge backend (teams + upcoming matches)
# -------------------------
CRICKEDGE_API_URL: str = _get_env("CRICKEDGE_API_URL", "https://cricket-scoreboard-backend.onrender.com/api")

# If 0, only the POST endpoints (caller-supplied standings) work
CRICKEDGE_BACKEND_ENABLED: bool = _get_env_flag("CRICKEDGE_BACKEND_ENABLED", "1")

BACKEND_TIMEOUT_SECONDS: int = _get_env_int("BACKEND_TIMEOUT_SECONDS", 12)

# Cache TTLs
TEAMS_CACHE_TTL_SECONDS: int = _get_env_int("TEAMS_CACHE_TTL_SECONDS", 120)
FIXTURES_CACHE_TTL_SECONDS: int = _get_env_int("FIXTURES_CACHE_TTL_SECONDS", 900)


# -------------------------
# Calculator behaviour
# -------------------------
# "decimal": backend sends overs as decimal overs (49.5)
# "balls":   backend sends overs.balls notation (49.3)
STANDINGS_OVERS_NOTATION: str = _get_env("STANDINGS_OVERS_NOTATION", "decimal").lower()

# Opt-in: reject ball counts above 5 in overs.balls notation
STRICT_OVERS: bool = _get_env_flag("STRICT_OVERS")

# Route calculator skip/trace messages to the debug logger
DEBUG_SCENARIOS: bool = _get_env_flag("DEBUG_SCENARIOS")

LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()


def validate_config() -> None:
    if not CRICKEDGE_API_URL.startswith("http"):
        raise RuntimeError("CRICKEDGE_API_URL must start with http/https")

    if BACKEND_TIMEOUT_SECONDS <= 0:
        raise RuntimeError("BACKEND_TIMEOUT_SECONDS must be positive")

    # TTL validation
    if TEAMS_CACHE_TTL_SECONDS <= 0:
        raise RuntimeError("TEAMS_CACHE_TTL_SECONDS must be positive")

    if FIXTURES_CACHE_TTL_SECONDS <= 0:
        raise RuntimeError("FIXTURES_CACHE_TTL_SECONDS must be positive")

    if STANDINGS_OVERS_NOTATION not in ("decimal", "balls"):
        raise RuntimeError("STANDINGS_OVERS_NOTATION must be 'decimal' or 'balls'")

    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise RuntimeError(f"Unknown LOG_LEVEL: {LOG_LEVEL}")
