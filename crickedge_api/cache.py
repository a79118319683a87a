# crickedge_api/cache.py
from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional, Tuple, Type

# In-memory TTL cache for backend payloads (single-instance deploys)
# key -> (expires_at_epoch, value)
_cache: Dict[str, Tuple[float, Any]] = {}

# Distinguishes "not cached" from a cached None
_MISSING = object()


def make_key(namespace: str, *parts: str) -> str:
    """
    Namespaced cache key.
    Example:
      make_key("teams", "fresh") -> "teams:fresh"
    """
    namespace = namespace.strip()
    cleaned = [str(p).strip() for p in parts if str(p).strip()]
    if not namespace or not cleaned:
        raise ValueError("Cache namespace and key must be non-empty")
    return ":".join([namespace, *cleaned])


def get(key: str, default: Any = None) -> Optional[Any]:
    item = _cache.get(key)
    if item is None:
        return default

    expires_at, value = item
    if time.time() > expires_at:
        del _cache[key]
        return default
    return value


def set(key: str, value: Any, ttl_seconds: int = 60) -> None:
    # Non-positive TTL means "don't cache"
    if ttl_seconds > 0:
        _cache[key] = (time.time() + ttl_seconds, value)


def clear() -> None:
    _cache.clear()


def get_or_fetch(
    namespace: str,
    fetch: Callable[[], Any],
    *,
    ttl_seconds: int,
    stale_ttl_seconds: int,
    fallback_on: Tuple[Type[BaseException], ...] = (Exception,),
) -> Tuple[Any, bool]:
    """
    Fresh value if cached, else fetch() and store it under both a fresh and a
    long-lived stale key. If fetch() raises one of fallback_on and a stale copy
    exists, that copy is returned instead.

    Returns (value, is_stale). Re-raises when there is nothing stale to serve.
    """
    key_fresh = make_key(namespace, "fresh")
    key_stale = make_key(namespace, "stale")

    cached = get(key_fresh, _MISSING)
    if cached is not _MISSING:
        return cached, False

    try:
        value = fetch()
    except fallback_on:
        stale = get(key_stale, _MISSING)
        if stale is _MISSING:
            raise
        return stale, True

    set(key_fresh, value, ttl_seconds=ttl_seconds)
    set(key_stale, value, ttl_seconds=stale_ttl_seconds)
    return value, False
