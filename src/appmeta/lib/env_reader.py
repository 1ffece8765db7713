"""
env_reader.py
- Reads the workload identity (host, job, task, plugin) from environment variables.
- All-or-nothing: the first missing or empty variable aborts the run.
"""

import os
from loguru import logger

from appmeta.core.constants import APP_ID_ENV, ENV_TO_META
from appmeta.core.exceptions import MissingEnvError


def read_required_env(environ=None):
    """
    Build the base metadata mapping from the required environment variables.

    Args:
        environ (Mapping): Environment to read. Defaults to os.environ.

    Returns:
        dict: {"host": ..., "job": ..., "task": ..., "plugin": ...}

    Raises:
        MissingEnvError: For the first required variable that is unset or empty.
    """
    env = os.environ if environ is None else environ
    meta = {}

    for env_key, meta_key in ENV_TO_META.items():
        value = env.get(env_key)
        if not value:
            raise MissingEnvError(env_key)
        meta[meta_key] = value

    logger.debug(f"[env] Read identity fields: {sorted(meta)}")
    return meta


def read_app_id(required, environ=None):
    """
    Read the application identifier used as the cache key suffix.

    Returns None when the identifier is absent and not required.
    """
    env = os.environ if environ is None else environ
    app_id = env.get(APP_ID_ENV) or None
    if required and app_id is None:
        raise MissingEnvError(APP_ID_ENV)
    return app_id
