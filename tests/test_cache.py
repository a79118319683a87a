from __future__ import annotations

import pytest

from crickedge_api import cache


def test_make_key():
    assert cache.make_key("teams", "fresh") == "teams:fresh"
    assert cache.make_key(" teams ", "", "stale") == "teams:stale"
    with pytest.raises(ValueError):
        cache.make_key("", "x")
    with pytest.raises(ValueError):
        cache.make_key("teams", " ")


def test_set_get():
    cache.set("k", [1, 2], ttl_seconds=30)
    assert cache.get("k") == [1, 2]
    assert cache.get("missing") is None


def test_invalid_ttl_is_not_cached():
    cache.set("k", "v", ttl_seconds=0)
    assert cache.get("k") is None


def test_expiry(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(cache.time, "time", lambda: now[0])
    cache.set("k", "v", ttl_seconds=10)
    now[0] = 1009.0
    assert cache.get("k") == "v"
    now[0] = 1011.0
    assert cache.get("k") is None


class Boom(Exception):
    pass


def test_get_or_fetch_caches_fresh_value():
    calls = []

    def fetch():
        calls.append(1)
        return ["row"]

    assert cache.get_or_fetch("teams", fetch, ttl_seconds=30, stale_ttl_seconds=300) == (["row"], False)
    assert cache.get_or_fetch("teams", fetch, ttl_seconds=30, stale_ttl_seconds=300) == (["row"], False)
    assert len(calls) == 1
    assert cache.get("teams:stale") == ["row"]


def test_get_or_fetch_serves_stale_on_error():
    cache.set("teams:stale", ["old"], ttl_seconds=300)

    def fetch():
        raise Boom("down")

    assert cache.get_or_fetch("teams", fetch, ttl_seconds=30, stale_ttl_seconds=300, fallback_on=(Boom,)) == (["old"], True)


def test_get_or_fetch_reraises_without_stale():
    def fetch():
        raise Boom("down")

    with pytest.raises(Boom):
        cache.get_or_fetch("teams", fetch, ttl_seconds=30, stale_ttl_seconds=300, fallback_on=(Boom,))


def test_get_or_fetch_other_errors_propagate():
    cache.set("teams:stale", ["old"], ttl_seconds=300)

    def fetch():
        raise KeyError("bug")

    with pytest.raises(KeyError):
        cache.get_or_fetch("teams", fetch, ttl_seconds=30, stale_ttl_seconds=300, fallback_on=(Boom,))


def test_get_default_for_missing_key():
    marker = object()
    assert cache.get("nothing", marker) is marker


def test_get_or_fetch_caches_none():
    calls = []

    def fetch():
        calls.append(1)
        return None

    assert cache.get_or_fetch("empty", fetch, ttl_seconds=30, stale_ttl_seconds=300) == (None, False)
    assert cache.get_or_fetch("empty", fetch, ttl_seconds=30, stale_ttl_seconds=300) == (None, False)
    assert len(calls) == 1
