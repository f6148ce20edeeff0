# src/kubefree/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod
from typing import Iterable


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """
    @abstractmethod
    def report(self, data: Iterable):
        """
        Takes node rollups or container rows and presents them in a specific
        format (e.g., console table).
        """
        pass
