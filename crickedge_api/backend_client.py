# crickedge_api/backend_client.py
from __future__ import annotations

from typing import Any, Dict, List, Optional
import requests

from crickedge_api import config
from crickedge_api.log import get_logger

logger = get_logger("crickedge.backend")


class BackendError(Exception):
    """Raised when a CrickEdge backend call fails or is misconfigured."""
    pass


def get_json(endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """
    GET <CRICKEDGE_API_URL>/<endpoint> and return the decoded JSON body.
    """
    if not config.CRICKEDGE_BACKEND_ENABLED:
        raise BackendError("CrickEdge backend is disabled (set CRICKEDGE_BACKEND_ENABLED=1 to enable).")

    if not config.CRICKEDGE_API_URL.startswith("http"):
        raise BackendError("CRICKEDGE_API_URL must start with http/https")

    url = f"{config.CRICKEDGE_API_URL.rstrip('/')}/{endpoint.lstrip('/')}"

    try:
        resp = requests.get(url, params=dict(params or {}), timeout=config.BACKEND_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logger.warning("GET %s failed: %s", url, e)
        raise BackendError(f"Network error: {e}") from e

    if resp.status_code != 200:
        logger.warning("GET %s -> HTTP %s", url, resp.status_code)
        raise BackendError(f"HTTP {resp.status_code}: {resp.text}")

    try:
        return resp.json()
    except ValueError as e:
        raise BackendError(f"Invalid JSON response: {e}") from e


def _expect_list(data: Any, endpoint: str) -> List[Any]:
    if not isinstance(data, list):
        raise BackendError(f"/{endpoint} returned {type(data).__name__}, expected a list")
    return data


def fetch_teams() -> List[Any]:
    """Raw standings rows from /teams."""
    rows = _expect_list(get_json("teams"), "teams")
    logger.info("Fetched %d team rows", len(rows))
    return rows


def fetch_upcoming_matches() -> List[Any]:
    """Raw fixture rows from /upcoming-matches."""
    rows = _expect_list(get_json("upcoming-matches"), "upcoming-matches")
    logger.info("Fetched %d upcoming matches", len(rows))
    return rows
