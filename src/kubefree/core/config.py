# src/kubefree/core/config.py

import os

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """
    Handles the application's configuration by loading values from environment variables.

    These values only provide defaults: every one of them can be overridden
    on the command line, and the resulting flags are frozen into a
    `FreeOptions` value before any computation starts.

    Values are read when accessed, so a malformed variable surfaces as a
    ConfigurationError at the point the CLI resolves its options rather
    than at import.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

    @staticmethod
    def _get_number(key: str, default: str, cast):
        raw = os.getenv(key, default)
        try:
            return cast(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from None

    # --- Severity thresholds (percent) ---
    @property
    def WARN_THRESHOLD(self) -> int:
        return self._get_number("KUBEFREE_WARN_THRESHOLD", "60", int)

    @property
    def CRIT_THRESHOLD(self) -> int:
        return self._get_number("KUBEFREE_CRIT_THRESHOLD", "90", int)

    # --- Container list ---
    @property
    def SORT_BY_RESOURCE(self) -> str:
        """Raw value; 'cpu' or 'memory' is enforced when the options are built."""
        return os.getenv("KUBEFREE_SORT_BY_RESOURCE", "memory").strip().lower()

    # Upper bound for the metrics-server snapshot, in seconds.
    @property
    def METRICS_TIMEOUT(self) -> float:
        timeout = self._get_number("KUBEFREE_METRICS_TIMEOUT", "15", float)
        if timeout <= 0:
            raise ConfigurationError("KUBEFREE_METRICS_TIMEOUT must be a positive number of seconds.")
        return timeout

    def validate_instance(self):
        """Parses every numeric setting, raising ConfigurationError on the first bad one."""
        return self.WARN_THRESHOLD, self.CRIT_THRESHOLD, self.METRICS_TIMEOUT


# Instantiate the config to be imported by other modules
config = Config()
