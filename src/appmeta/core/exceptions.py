class AppMetaError(Exception):
    """Base class for app-meta exceptions. Every subclass is fatal for the run."""


class ConfigError(AppMetaError):
    """Kubeconfig or settings could not be loaded."""


class ClientError(AppMetaError):
    """A Kubernetes or Redis client could not be constructed."""


class MissingEnvError(AppMetaError):
    """A required environment variable is unset or empty."""

    variable: str

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Env var {variable} is required and must be nonempty.")


class NodeLookupError(AppMetaError):
    """The node resource could not be fetched."""


class SerializationError(AppMetaError):
    """The metadata mapping could not be encoded."""


class CacheWriteError(AppMetaError):
    """The metadata could not be stored in the cache."""
