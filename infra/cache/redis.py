from __future__ import annotations

import redis.asyncio as redis

from core.config import settings


# connects lazily on first command
redis_client = redis.from_url(settings.redis_url, decode_responses=True)
