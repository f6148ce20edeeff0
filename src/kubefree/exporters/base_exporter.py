# src/kubefree/exporters/base_exporter.py
from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Union

from ..models.resources import ContainerRow, NodeRollup

Record = Dict[str, Any]
Exportable = Union[NodeRollup, ContainerRow, Record]


class BaseExporter(ABC):
    """Abstract base class for file exporters.

    Subclasses set FORMAT and DEFAULT_FILENAME and implement `export`.
    Exported values are raw integers (millicores, bytes), never the
    formatted strings shown on the console.
    """

    FORMAT: str = ""
    DEFAULT_FILENAME: str = "kubefree-report"

    @staticmethod
    def to_records(data: Iterable[Exportable] | None) -> List[Record]:
        """Flattens node rollups and container rows into plain records."""
        return [item if isinstance(item, dict) else item.to_record() for item in data or []]

    def prepare_path(self, path: str | None) -> str:
        """Returns the output path, creating its parent directory."""
        out_path = path or self.DEFAULT_FILENAME
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        return out_path

    @abstractmethod
    async def export(self, data: Iterable[Exportable], path: str | None = None) -> str:
        """Export the provided records to disk. Return the written path."""
        raise NotImplementedError()
