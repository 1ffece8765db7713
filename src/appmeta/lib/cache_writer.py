"""
cache_writer.py
- Serializes the metadata mapping and stores it in the app metadata cache.
- Keys follow app-meta.<appID>; values never expire and replace any previous value.
"""

import json

import redis
from loguru import logger

from appmeta.core.constants import CACHE_KEY_PREFIX
from appmeta.core.exceptions import CacheWriteError, SerializationError


def cache_key(app_id):
    return f"{CACHE_KEY_PREFIX}{app_id}"


def encode_meta(meta):
    """Compact JSON with the mapping's insertion order kept."""
    try:
        return json.dumps(meta, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to create app meta json: {e}") from e


def write_meta(rdb, app_id, meta, dry_run=False):
    """
    Store meta in the cache under app-meta.<app_id> with no expiration.

    Args:
        rdb (redis.Redis): Cache client. Unused in dry-run mode.
        app_id (str): Application identifier.
        meta (dict): Metadata mapping.
        dry_run (bool): If True, only log what would be written.

    Returns:
        str: The cache key.
    """
    key = cache_key(app_id)
    value = encode_meta(meta)

    if dry_run:
        logger.info(f"[cache] (Dry Run) Would set {key} = {value}")
        return key

    try:
        rdb.set(key, value)
    except redis.RedisError as e:
        raise CacheWriteError(f"failed to set app meta cache data: {e}") from e

    logger.info(f"[cache] ✅ Set {key}")
    return key
