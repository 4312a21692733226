"""
Exceptions raised while preparing configuration queries.
"""


class ConfigQueryError(Exception):
    """Base exception for pulseconfig."""

    pass


class InvalidDatasetError(ConfigQueryError):
    """Raised when a context carries no usable dataset qualifier."""

    def __init__(self, dataset, reason: str = None):
        self.dataset = dataset
        self.reason = reason

        message = f"Invalid dataset qualifier: {dataset!r}"
        if reason:
            message = f"{message} ({reason})"

        super().__init__(message)


class InvalidConfigNameError(ConfigQueryError):
    """Raised when a configuration name cannot be embedded in a SQL literal."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid configuration name: {name!r}")
