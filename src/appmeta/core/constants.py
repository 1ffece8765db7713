"""
constants.py
- Project-wide constants shared across logic and runner scripts.
- Includes the env-to-meta field mapping, cache key layout and lookup timeouts.
"""

# --- Required Identity Fields (env var -> meta key) ---
# Order matters: validation reports the first missing variable in this order.
ENV_TO_META = {
    "HOST": "host",
    "JOB": "job",
    "TASK": "task",
    "PLUGIN": "plugin",
}

APP_ID_ENV = "WAGGLE_APP_ID"

# --- Node Lookup ---
NODE_LOOKUP_TIMEOUT = 10  # seconds
DEFAULT_NODE_LABELS = ["zone"]

# --- Metadata Cache ---
CACHE_KEY_PREFIX = "app-meta."
DEFAULT_CACHE_HOST = "wes-app-meta-cache"
DEFAULT_CACHE_PORT = 6379
