# tests/test_metrics_cache.py
from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime, timezone

from redis.exceptions import ConnectionError as RedisConnectionError

from domain.entities import ActivityLevel, Gender, UserProfile
from domain.use_cases import calculate_all_metrics
from infra.cache.metrics_cache import MetricsCache, cached_metrics, profile_fingerprint

NOW = datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)
PROFILE = UserProfile(
    age=30,
    gender=Gender.MALE,
    weight_kg=70,
    height_cm=175,
    country="NO",
    activity_level=ActivityLevel.LIGHT,
)


class FakeRedis:
    def __init__(self):
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    async def delete(self, *keys):
        for k in keys:
            self.store.pop(k, None)


class DownRedis:
    async def get(self, key):
        raise RedisConnectionError("connection refused")

    async def setex(self, key, ttl, value):
        raise RedisConnectionError("connection refused")

    async def delete(self, *keys):
        raise RedisConnectionError("connection refused")


def _cache(client=None) -> MetricsCache:
    return MetricsCache(client or FakeRedis(), ttl_sec=120, prefix="test")


def _compute(profile: UserProfile):
    return calculate_all_metrics(profile, calculated_at=NOW)


# ── entries ──────────────────────────────────────────────────────────
def test_key_and_ttl():
    client = FakeRedis()
    cache = _cache(client)
    asyncio.run(cache.set(42, PROFILE, _compute(PROFILE)))
    assert cache.key(42) == "test:42"
    assert client.ttls == {"test:42": 120}


def test_roundtrip_hit():
    cache = _cache()
    metrics = _compute(PROFILE)

    async def run():
        await cache.set(1, PROFILE, metrics)
        return await cache.get(1, PROFILE)

    assert asyncio.run(run()) == metrics


def test_changed_profile_is_a_miss():
    cache = _cache()

    async def run():
        await cache.set(1, PROFILE, _compute(PROFILE))
        return await cache.get(1, replace(PROFILE, weight_kg=72))

    assert asyncio.run(run()) is None


def test_fingerprint_tracks_profile():
    assert profile_fingerprint(PROFILE) == profile_fingerprint(replace(PROFILE))
    assert profile_fingerprint(PROFILE) != profile_fingerprint(replace(PROFILE, age=31))
    assert len(profile_fingerprint(PROFILE)) == 32


def test_invalidate():
    cache = _cache()

    async def run():
        await cache.set(1, PROFILE, _compute(PROFILE))
        await cache.invalidate(1)
        return await cache.get(1, PROFILE)

    assert asyncio.run(run()) is None


def test_corrupt_entry_is_a_miss():
    client = FakeRedis()
    client.store["test:1"] = '{"fingerprint": "x"}'
    assert asyncio.run(_cache(client).get(1, PROFILE)) is None


def test_refresh_stores_new_result():
    cache = _cache()
    updated = replace(PROFILE, weight_kg=75)

    async def run():
        await cache.set(1, PROFILE, _compute(PROFILE))
        fresh = await cache.refresh(1, updated, _compute)
        return fresh, await cache.get(1, updated)

    fresh, stored = asyncio.run(run())
    assert fresh == stored
    assert fresh.water_ml != _compute(PROFILE).water_ml


# ── decorator ────────────────────────────────────────────────────────
def test_cached_metrics_computes_once():
    calls = []
    cache = _cache()

    @cached_metrics(cache)
    def compute(profile):
        calls.append(profile)
        return _compute(profile)

    async def run():
        first = await compute(7, PROFILE)
        second = await compute(7, PROFILE)
        return first, second

    first, second = asyncio.run(run())
    assert first == second
    assert len(calls) == 1


def test_cached_metrics_force_refresh_and_profile_change():
    calls = []
    cache = _cache()

    @cached_metrics(cache)
    def compute(profile):
        calls.append(profile)
        return _compute(profile)

    async def run():
        await compute(7, PROFILE)
        await compute(7, PROFILE, force_refresh=True)
        await compute(7, replace(PROFILE, age=31))

    asyncio.run(run())
    assert len(calls) == 3


def test_redis_outage_degrades_to_compute():
    calls = []

    @cached_metrics(_cache(DownRedis()))
    def compute(profile):
        calls.append(profile)
        return _compute(profile)

    async def run():
        await compute(7, PROFILE)
        return await compute(7, PROFILE)

    metrics = asyncio.run(run())
    assert metrics.water_ml > 0
    assert len(calls) == 2


def test_default_client_is_shared_redis():
    from infra.cache.redis import redis_client

    cache = MetricsCache()
    assert cache.client is redis_client
    assert cache.ttl_sec > 0
