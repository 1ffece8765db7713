#!/usr/bin/env python3
"""
collect.py
- One-shot metadata collection for a workload init step.
- Reads identity env vars, looks up the node's labels, then writes the mapping to the app meta cache.
- Every failure raises an AppMetaError; the entrypoint turns it into a nonzero exit.
"""

import redis
from loguru import logger

from appmeta.core.cache_client import make_cache_client
from appmeta.core.kube_client import make_core_api
from appmeta.lib.cache_writer import write_meta
from appmeta.lib.env_reader import read_app_id, read_required_env
from appmeta.lib.node_labels import fetch_node_labels, merge_node_labels


def run(settings, kubeconfig, environ=None, api=None, rdb=None):
    """
    Run the collection procedure once.

    Args:
        settings (Settings): Resolved settings.
        kubeconfig (str): Kubeconfig path; "" for in-cluster config.
        environ (Mapping): Environment to read. Defaults to os.environ.
        api: Optional prebuilt CoreV1Api client.
        rdb: Optional prebuilt Redis client.

    Returns:
        dict: The collected metadata mapping.
    """
    meta = read_required_env(environ)
    app_id = read_app_id(required=not settings.dry_run, environ=environ)

    if api is None:
        api = make_core_api(kubeconfig)

    labels = fetch_node_labels(api, meta["host"])
    merge_node_labels(meta, labels, settings.node_labels)

    logger.info(f"[collect] meta: {meta}")

    if settings.dry_run:
        if app_id is None:
            logger.info("[collect] (Dry Run) No app id set, skipping cache write.")
        else:
            write_meta(None, app_id, meta, dry_run=True)
        return meta

    owns_client = rdb is None
    if owns_client:
        rdb = make_cache_client(settings)
    try:
        write_meta(rdb, app_id, meta)
    finally:
        if owns_client:
            try:
                rdb.close()
            except redis.RedisError as e:
                logger.warning(f"[collect] Failed to close cache client: {e}")

    return meta
