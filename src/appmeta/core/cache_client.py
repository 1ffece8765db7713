"""
cache_client.py
- Provides the Redis client for the app metadata cache.
"""

import redis
from loguru import logger
from redis.backoff import NoBackoff
from redis.retry import Retry

from appmeta.core.exceptions import ClientError


def make_cache_client(settings):
    """
    Build a Redis client for the metadata cache. Commands are never retried.

    Args:
        settings (Settings): Resolved settings carrying cache host, port and timeout.

    Returns:
        redis.Redis: Client; no connection is opened until the first command.
    """
    try:
        rdb = redis.Redis(
            host=settings.cache_host,
            port=settings.cache_port,
            socket_timeout=settings.cache_timeout,
            retry=Retry(NoBackoff(), 0),
            decode_responses=True,
        )
    except (redis.RedisError, ValueError) as e:
        raise ClientError(f"failed to create cache client: {e}") from e

    logger.debug(f"[cache] Using cache at {settings.cache_host}:{settings.cache_port}")
    return rdb
