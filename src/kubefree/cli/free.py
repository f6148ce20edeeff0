# src/kubefree/cli/free.py
"""
Implements the `kubefree` command: the node summary and, with --list, the
container list.
"""

import asyncio
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional, Union

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import CollaboratorError, ConfigurationError
from ..core.factory import get_processor
from ..core.formatter import byte_unit_from_flags
from ..exporters import get_exporter
from ..models.options import FreeOptions, UnitSystem
from ..models.resources import ContainerRow, NodeRollup
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    """
    Prints the version of kubefree.
    """
    if value:
        from .. import __version__

        typer.echo(f"Version: {__version__}")
        raise typer.Exit()


async def handle_export(data: List[Union[NodeRollup, ContainerRow]], options: FreeOptions):
    """Writes the report records to a JSON or CSV file."""
    exporter = get_exporter(options.output_format)

    output_path = Path(options.output_path) if options.output_path else Path.cwd() / exporter.DEFAULT_FILENAME

    try:
        written_path = await exporter.export(data, str(output_path))
    except OSError as e:
        logger.error(f"Failed to export report to {output_path}: {e}")
        logger.debug(traceback.format_exc())
        raise typer.Exit(code=1)

    logger.info(f"Successfully exported report to {written_path}")
    print(f"Report exported to: {written_path}", file=sys.stderr)


def free(
    nodes: Annotated[
        Optional[List[str]],
        typer.Argument(help="Names of the nodes to show. All nodes (matching --selector) when omitted."),
    ] = None,
    bytes_: Annotated[bool, typer.Option("--bytes", "-b", help="Print memory in bytes.")] = False,
    kilobytes: Annotated[bool, typer.Option("--kilobytes", "-k", help="Print memory in kilobytes.")] = False,
    megabytes: Annotated[bool, typer.Option("--megabytes", "-m", help="Print memory in megabytes (default).")] = False,
    gigabytes: Annotated[bool, typer.Option("--gigabytes", "-g", help="Print memory in gigabytes.")] = False,
    binary_prefix: Annotated[
        bool,
        typer.Option(
            "--binary-prefix", "-B", help='Use 1024 for basic unit calculation instead of 1000 (print like "KiB").'
        ),
    ] = False,
    without_unit: Annotated[bool, typer.Option("--without-unit", help="Do not print size with unit string.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Print without ansi color.")] = False,
    warn_threshold: Annotated[
        Optional[int],
        typer.Option(
            "--warn-threshold",
            help="Threshold of warn (yellow) color for percentage columns. Default: KUBEFREE_WARN_THRESHOLD or 60.",
        ),
    ] = None,
    crit_threshold: Annotated[
        Optional[int],
        typer.Option(
            "--crit-threshold",
            help="Threshold of critical (red) color for percentage columns. Default: KUBEFREE_CRIT_THRESHOLD or 90.",
        ),
    ] = None,
    pod: Annotated[bool, typer.Option("--pod", "-p", help="Show pod count and limit.")] = False,
    list_: Annotated[bool, typer.Option("--list", help="Show container list on node.")] = False,
    list_image: Annotated[bool, typer.Option("--list-image", help="Show container image in the list.")] = False,
    list_all: Annotated[
        bool, typer.Option("--list-all", help="Show containers even if they have no requests/limits.")
    ] = False,
    emoji: Annotated[bool, typer.Option("--emoji", help="Let's smile!! 😃 😭")] = False,
    all_namespaces: Annotated[
        bool,
        typer.Option(
            "--all-namespaces/--no-all-namespaces",
            help="List pod resources across all namespaces. Ignored when --namespace is given.",
        ),
    ] = True,
    namespace: Annotated[
        Optional[str], typer.Option("--namespace", "-n", help="Only count pods of this namespace.")
    ] = None,
    no_headers: Annotated[bool, typer.Option("--no-headers", help="Do not print table headers.")] = False,
    no_metrics: Annotated[
        bool, typer.Option("--no-metrics", help="Do not print node/container usage from metrics-server.")
    ] = False,
    compact_view: Annotated[
        bool,
        typer.Option("--compact-view/--full-view", help="Only print usage of containers in a compact view."),
    ] = True,
    sort_by_resource: Annotated[
        Optional[str],
        typer.Option(
            "--sort-by-resource",
            help="Sort container list by 'cpu' or 'memory' usage. Default: KUBEFREE_SORT_BY_RESOURCE or memory.",
        ),
    ] = None,
    selector: Annotated[
        Optional[str], typer.Option("--selector", "-l", help="Selector (label query) to filter nodes on.")
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option("--output", help="Output format (csv/json). If set, writes to a file instead of the console."),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output-path",
            help="Specify output file path. Default: './kubefree-report.<format>'",
            dir_okay=False,
            writable=True,
        ),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
):
    """
    Show various requested resources on Kubernetes nodes.
    """
    try:
        # Malformed environment defaults fail here, like malformed flags.
        config.validate_instance()
        options = FreeOptions(
            unit_system=UnitSystem.BINARY if binary_prefix else UnitSystem.DECIMAL,
            byte_unit=byte_unit_from_flags(bytes_, kilobytes, megabytes, gigabytes),
            without_unit=without_unit,
            no_color=no_color,
            warn_threshold=config.WARN_THRESHOLD if warn_threshold is None else warn_threshold,
            crit_threshold=config.CRIT_THRESHOLD if crit_threshold is None else crit_threshold,
            emoji=emoji,
            show_pods=pod,
            all_namespaces=all_namespaces,
            namespace=namespace,
            no_headers=no_headers,
            no_metrics=no_metrics,
            label_selector=selector,
            node_names=tuple(nodes or ()),
            list_containers=list_,
            list_image=list_image,
            list_all=list_all,
            compact_view=compact_view,
            sort_by_resource=config.SORT_BY_RESOURCE if sort_by_resource is None else sort_by_resource,
            output_format=output_format,
            output_path=output_path,
        )
    except ConfigurationError as e:
        logger.debug(f"Invalid options: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    async def _free_async():
        processor = get_processor(options)
        try:
            data = await processor.run()
        finally:
            await processor.close()

        if options.export_enabled:
            await handle_export(data, options)
        else:
            ConsoleReporter(options).report(data)

    try:
        asyncio.run(_free_async())
    except typer.Exit:
        raise
    except CollaboratorError as e:
        logger.debug(f"Kubernetes API request failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.debug(traceback.format_exc())
        raise typer.Exit(code=1)
