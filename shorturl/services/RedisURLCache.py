import logging
from typing import Optional
import redis.exceptions
from shorturl.core.config import settings
from shorturl.db.Connection import database

logger = logging.getLogger(__name__)

CACHE_ERRORS = (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)


def _cache_key(short_code: str) -> str:
    return f"url:{short_code}"


def get(short_code: str) -> Optional[str]:
    if database.redis_client is None:
        return None

    try:
        cached_url = database.redis_client.get(_cache_key(short_code))
    except CACHE_ERRORS:
        logger.warning(f"Redis connection failed for {short_code}")
        return None

    if cached_url:
        if isinstance(cached_url, (bytes, bytearray)):
            cached_url = cached_url.decode()
        logger.info(f"Redirect cache HIT for {short_code} -> {cached_url}")
        return cached_url

    return None


def put(short_code: str, original_url: str):
    if database.redis_client is None:
        return

    try:
        database.redis_client.setex(_cache_key(short_code), settings.CACHE_TTL, original_url)
        logger.debug(f"Cached {short_code} -> {original_url[:50]}")
    except CACHE_ERRORS:
        logger.warning(f"Failed to cache {short_code}, Redis unavailable")
