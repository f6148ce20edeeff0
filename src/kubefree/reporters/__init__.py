"""Reporters printing node rollups and container rows."""

from .console_reporter import ConsoleReporter
from .table_renderer import TableRenderer, render

__all__ = ["ConsoleReporter", "TableRenderer", "render"]
