class KubeFreeError(Exception):
    """Base exception for kubefree."""

    pass


class ConfigurationError(KubeFreeError):
    """Raised when the command options are inconsistent or invalid."""

    pass


class InvalidThresholdError(ConfigurationError):
    """Raised when the warn threshold is greater than the crit threshold."""

    def __init__(self, warn_threshold: int, crit_threshold: int):
        self.warn_threshold = warn_threshold
        self.crit_threshold = crit_threshold
        super().__init__(
            f"warn-threshold ({warn_threshold}) must be less than or equal to crit-threshold ({crit_threshold})"
        )


class InvalidSortResourceError(ConfigurationError):
    """Raised when the container list is asked to sort by an unknown resource."""

    pass


class CollaboratorError(KubeFreeError):
    """Raised when nodes or pods cannot be listed from the Kubernetes API."""

    pass


class MetricsUnavailableError(KubeFreeError):
    """Raised when no usage snapshot can be read from metrics-server."""

    pass
