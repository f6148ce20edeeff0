# src/kubefree/collectors/base_collector.py
"""
This module defines the abstract base class for the Kubernetes collectors.
Each collector wraps one API client and returns immutable snapshots built
from the models in `kubefree.models.resources`.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseCollector(ABC):
    """
    Abstract Base Class for all collectors.
    """

    def __init__(self):
        self._api = None

    @abstractmethod
    async def _create_client(self):
        """Returns a configured API client, or None when no cluster config is available."""
        pass

    async def _ensure_client(self):
        """Lazily initialize the Kubernetes client."""
        if self._api:
            return self._api

        self._api = await self._create_client()
        return self._api

    @abstractmethod
    async def collect(self, *args, **kwargs) -> Any:
        """
        The main method for a collector. It should fetch data from the
        Kubernetes API, parse it, and return Pydantic models.
        """
        pass

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            self._api = None
