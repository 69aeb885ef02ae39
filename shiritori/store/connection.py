# shiritori/store/connection.py
from __future__ import annotations

import logging

from redis.asyncio import Redis

from shiritori.settings import Settings

logger = logging.getLogger(__name__)


async def open_store(settings: Settings) -> Redis:
    """
    Open the single long-lived store connection for this process.
    Game state never goes through it; it is owned by the process host.
    """
    r = Redis.from_url(
        settings.API_REDIS_URL,
        username=settings.API_REDIS_USERNAME,
        password=settings.API_REDIS_PASSWORD,
        decode_responses=False,
    )
    await r.ping()
    logger.info("Store connection opened")
    return r


async def close_store(r: Redis) -> None:
    await r.aclose()
    logger.info("Store connection closed")
