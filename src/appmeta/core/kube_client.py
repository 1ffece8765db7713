"""
kube_client.py
- Builds the Kubernetes CoreV1 client used for node lookups.
- Resolves the --kubeconfig default and falls back to in-cluster config when running in a pod.
"""

import os

import yaml
from kubernetes import client, config
from loguru import logger

from appmeta.core.exceptions import ClientError, ConfigError


def default_kubeconfig_path():
    """Return ~/.kube/config when a home directory is known, else ""."""
    home = os.path.expanduser("~")
    if not home or home == "~":
        return ""
    return os.path.join(home, ".kube", "config")


def in_cluster():
    """
    Whether we are running in cluster (on the pod) or outside.
    """
    return os.getenv("KUBERNETES_SERVICE_HOST") is not None


def load_kube_config(kubeconfig):
    """
    Load Kubernetes client configuration.

    Args:
        kubeconfig (str): Path to a kubeconfig file. Empty means in-cluster config.

    Raises:
        ConfigError: If no usable configuration could be loaded.
    """
    if kubeconfig and not os.path.exists(kubeconfig):
        if not in_cluster():
            raise ConfigError(f"failed to get config: kubeconfig {kubeconfig} does not exist")
        logger.debug(f"[kube] {kubeconfig} not found, using in-cluster config.")
        kubeconfig = ""

    try:
        if kubeconfig:
            config.load_kube_config(config_file=kubeconfig)
            logger.debug(f"[kube] Loaded kubeconfig from {kubeconfig}")
        else:
            config.load_incluster_config()
            logger.debug("[kube] Loaded in-cluster configuration")
    except (config.ConfigException, yaml.YAMLError, OSError) as e:
        raise ConfigError(f"failed to get config: {e}") from e


def make_core_api(kubeconfig):
    """
    Load configuration and return a CoreV1Api client.

    Retries are disabled on the client so a failed lookup is sent exactly once.

    Raises:
        ConfigError: If the configuration could not be loaded.
        ClientError: If the client could not be constructed.
    """
    load_kube_config(kubeconfig)
    try:
        cfg = client.Configuration.get_default_copy()
        cfg.retries = False
        return client.CoreV1Api(client.ApiClient(cfg))
    except (TypeError, ValueError) as e:
        raise ClientError(f"failed to create clientset: {e}") from e
