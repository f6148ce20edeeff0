# src/kubefree/cli/main.py
"""
This module is the main entry point for the kubefree CLI.
"""

import logging

import typer

from ..core.config import config
from .free import free

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kubefree",
    help="Show various requested resources on Kubernetes nodes.",
    add_completion=False,
)

app.command(
    epilog=(
        "Examples: kubefree | kubefree --pod | kubefree -l key=value | kubefree --bytes --without-unit | "
        "kubefree -g -B | kubefree --list --list-image | kubefree --list --list-all | kubefree --emoji"
    ),
)(free)


if __name__ == "__main__":
    app()
