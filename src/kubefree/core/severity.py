"""
Maps usage percentages onto the three severity bands used to color the
percentage columns.
"""

from enum import Enum

from .exceptions import InvalidThresholdError


class Severity(str, Enum):
    OK = "ok"
    WARN = "warn"
    CRIT = "crit"


class SeverityClassifier:
    """
    Classifies a percentage against a warn and a crit threshold.

        percentage < warn          : OK
        warn <= percentage < crit  : WARN
        crit <= percentage         : CRIT
    """

    def __init__(self, warn_threshold: int, crit_threshold: int):
        if warn_threshold > crit_threshold:
            raise InvalidThresholdError(warn_threshold, crit_threshold)
        self.warn_threshold = warn_threshold
        self.crit_threshold = crit_threshold

    def classify(self, percentage: int) -> Severity:
        if percentage < self.warn_threshold:
            return Severity.OK
        if percentage < self.crit_threshold:
            return Severity.WARN
        return Severity.CRIT

    def __repr__(self) -> str:
        return f"SeverityClassifier(warn={self.warn_threshold}, crit={self.crit_threshold})"
