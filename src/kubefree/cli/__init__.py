# src/kubefree/cli/__init__.py
"""
kubefree CLI Package

This package exposes the top-level Typer `app` used by the `kubefree` and
`kubectl-free` console entrypoints.
"""

import logging

# Re-export commonly patched symbols for tests
from ..reporters.console_reporter import ConsoleReporter
from .main import app

logger = logging.getLogger(__name__)

__all__ = ["app", "ConsoleReporter"]
