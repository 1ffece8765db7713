"""
node_labels.py
- Fetches the node the workload is scheduled on and copies selected labels into the metadata.
- A label absent from the node is skipped, not an error.
"""

from kubernetes.client.exceptions import ApiException
from loguru import logger
from urllib3.exceptions import HTTPError

from appmeta.core.constants import DEFAULT_NODE_LABELS, ENV_TO_META, NODE_LOOKUP_TIMEOUT
from appmeta.core.exceptions import NodeLookupError


def fetch_node_labels(api, node_name, timeout=NODE_LOOKUP_TIMEOUT):
    """
    Read a node by name and return its labels.

    Args:
        api: kubernetes CoreV1Api client
        node_name (str): Node name, e.g. the HOST value.
        timeout (int): Request timeout in seconds.

    Returns:
        dict: Node labels, {} if the node carries none.

    Raises:
        NodeLookupError: If the node could not be fetched.
    """
    try:
        node = api.read_node(node_name, _request_timeout=timeout)
    except ApiException as e:
        raise NodeLookupError(f"failed to get node {node_name}: {e.status} {e.reason}") from e
    except (HTTPError, OSError) as e:
        raise NodeLookupError(f"failed to get node {node_name}: {e}") from e

    labels = node.metadata.labels or {}
    logger.debug(f"[node_labels] Node {node_name} has {len(labels)} label(s)")
    return labels


def merge_node_labels(meta, labels, keys=None):
    """
    Copy the selected node labels into meta under the same key.

    Identity fields are never overwritten by a label.
    """
    keys = DEFAULT_NODE_LABELS if keys is None else keys
    protected = set(ENV_TO_META.values())

    for key in keys:
        if key in protected:
            logger.warning(f"[node_labels] Ignoring label {key}: it would overwrite an identity field")
            continue
        if key in labels:
            meta[key] = labels[key]
        else:
            logger.debug(f"[node_labels] Label {key} not set on node, skipping")

    return meta
