from __future__ import annotations

import functools
import hashlib
from typing import Any, Awaitable, Callable, Protocol

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError
from redis.exceptions import RedisError

from core.config import settings
from domain.dtos import ComprehensiveHealthMetrics
from domain.entities import UserProfile
from domain.use_cases import recalculate_metrics


log = structlog.get_logger(__name__)

_profile_adapter = TypeAdapter(UserProfile)

MetricsFn = Callable[..., ComprehensiveHealthMetrics]


class AsyncKV(Protocol):
    async def get(self, key: str) -> Any: ...
    async def setex(self, key: str, ttl: int, value: str) -> Any: ...
    async def delete(self, *keys: str) -> Any: ...


class _Entry(BaseModel):
    fingerprint: str
    metrics: ComprehensiveHealthMetrics


def profile_fingerprint(profile: UserProfile) -> str:
    return hashlib.sha256(_profile_adapter.dump_json(profile)).hexdigest()[:32]


class MetricsCache:
    """Per-user TTL cache of computed metrics.

    An entry is only served back for the exact profile it was computed from;
    any profile change is a miss even before ``invalidate`` is called.
    """

    def __init__(
        self,
        client: AsyncKV | None = None,
        *,
        ttl_sec: int | None = None,
        prefix: str | None = None,
    ) -> None:
        if client is None:
            from infra.cache.redis import redis_client

            client = redis_client
        self.client = client
        self.ttl_sec = ttl_sec or settings.metrics_cache_ttl_sec
        self.prefix = prefix or settings.metrics_cache_prefix

    def key(self, user_id: int | str) -> str:
        return f"{self.prefix}:{user_id}"

    async def get(self, user_id: int | str, profile: UserProfile) -> ComprehensiveHealthMetrics | None:
        key = self.key(user_id)
        try:
            raw = await self.client.get(key)
        except RedisError as e:
            log.warning("metrics_cache_get_failed", key=key, error=str(e))
            return None
        if not raw:
            return None

        try:
            entry = _Entry.model_validate_json(raw)
        except ValidationError as e:
            log.warning("metrics_cache_entry_invalid", key=key, error=str(e))
            return None

        if entry.fingerprint != profile_fingerprint(profile):
            log.info("metrics_cache_stale", key=key)
            return None
        log.debug("metrics_cache_hit", key=key)
        return entry.metrics

    async def set(
        self, user_id: int | str, profile: UserProfile, metrics: ComprehensiveHealthMetrics
    ) -> None:
        key = self.key(user_id)
        entry = _Entry(fingerprint=profile_fingerprint(profile), metrics=metrics)
        try:
            await self.client.setex(key, self.ttl_sec, entry.model_dump_json())
        except RedisError as e:
            log.warning("metrics_cache_set_failed", key=key, error=str(e))

    async def invalidate(self, user_id: int | str) -> None:
        key = self.key(user_id)
        try:
            await self.client.delete(key)
        except RedisError as e:
            log.warning("metrics_cache_invalidate_failed", key=key, error=str(e))
        else:
            log.info("metrics_cache_invalidated", key=key)

    async def refresh(
        self,
        user_id: int | str,
        profile: UserProfile,
        compute: MetricsFn = recalculate_metrics,
        **kwargs: Any,
    ) -> ComprehensiveHealthMetrics:
        """Drop the user's entry and store a fresh computation for the updated profile."""
        await self.invalidate(user_id)
        metrics = compute(profile, **kwargs)
        await self.set(user_id, profile, metrics)
        return metrics


def cached_metrics(
    cache: MetricsCache,
) -> Callable[[MetricsFn], Callable[..., Awaitable[ComprehensiveHealthMetrics]]]:
    def decorator(fn: MetricsFn) -> Callable[..., Awaitable[ComprehensiveHealthMetrics]]:
        @functools.wraps(fn)
        async def wrapper(
            user_id: int | str,
            profile: UserProfile,
            *,
            force_refresh: bool = False,
            **kwargs: Any,
        ) -> ComprehensiveHealthMetrics:
            if force_refresh:
                return await cache.refresh(user_id, profile, fn, **kwargs)

            hit = await cache.get(user_id, profile)
            if hit is not None:
                return hit

            metrics = fn(profile, **kwargs)
            await cache.set(user_id, profile, metrics)
            return metrics

        return wrapper

    return decorator
