"""Exporters writing the node summary or the container list to a file."""

from typing import Dict, Type

from ..core.exceptions import ConfigurationError
from .base_exporter import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter

EXPORTERS: Dict[str, Type[BaseExporter]] = {
    CSVExporter.FORMAT: CSVExporter,
    JSONExporter.FORMAT: JSONExporter,
}


def get_exporter(output_format: str) -> BaseExporter:
    """Returns the exporter for 'csv' or 'json'."""
    try:
        return EXPORTERS[output_format.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Invalid output format '{output_format}'. Must be one of: {', '.join(sorted(EXPORTERS))}."
        ) from None


__all__ = ["BaseExporter", "CSVExporter", "EXPORTERS", "JSONExporter", "get_exporter"]
