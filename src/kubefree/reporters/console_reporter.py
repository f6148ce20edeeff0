# src/kubefree/reporters/console_reporter.py
"""
A reporter that prints the node summary and the container list as aligned
text tables, using the 'rich' library for colors.
"""

import logging
from typing import Iterable, List, Optional

from rich.console import Console
from rich.text import Text

from ..core.formatter import DASH, QuantityFormatter
from ..core.severity import Severity
from ..models.options import FreeOptions
from ..models.resources import ContainerRow, NodeRollup, Resource
from .base_reporter import BaseReporter
from .table_renderer import Cell, TableRenderer

logger = logging.getLogger(__name__)

SEVERITY_STYLES = {
    Severity.OK: "green",
    Severity.WARN: "yellow",
    Severity.CRIT: "red",
}

STATUS_STYLES = {
    # node status
    "Ready": "green",
    "NotReady": "red",
    # pod phase
    "Running": "green",
    "Pending": "yellow",
    "Succeeded": "blue",
    "Failed": "red",
    "Unknown": "yellow",
}

STATUS_EMOJI = {
    "Ready": "😃",
    "NotReady": "😭",
    "Running": "😃",
    "Pending": "🤔",
    "Succeeded": "😎",
    "Failed": "😭",
    "Unknown": "😵",
}


class ConsoleReporter(BaseReporter):
    """
    Renders node rollups (`kubefree`) and container rows (`kubefree --list`)
    to the console.
    """

    def __init__(self, options: FreeOptions, console: Optional[Console] = None):
        self.options = options
        self.formatter = QuantityFormatter.from_options(options)
        self.classifier = options.classifier()
        self.console = console or Console(no_color=options.no_color, highlight=False, soft_wrap=True)

    # --- headers ---

    def free_header(self) -> List[str]:
        """Columns of the node summary."""
        o = self.options
        header = ["NAME", "STATUS"]
        for prefix in ("CPU", "MEM"):
            raw = [f"{prefix}/req", f"{prefix}/lim", f"{prefix}/alloc"]
            percent = [f"{prefix}/req%", f"{prefix}/lim%"]
            if not o.no_metrics:
                raw.insert(0, f"{prefix}/use")
                percent.insert(0, f"{prefix}/use%")
            header += raw + percent
        if o.show_pods:
            header += ["PODS", "PODS/alloc", "CONTAINERS"]
        return header

    def list_header(self) -> List[str]:
        """Columns of the container list."""
        o = self.options
        header = ["NODE NAME", "NAMESPACE", "POD NAME"]
        if not o.compact_view:
            header += ["POD AGE", "POD IP"]
        header += ["POD STATUS", "CONTAINER"]
        for prefix in ("CPU", "MEM"):
            header += [f"{prefix}/{column}" for column in self._list_resource_columns()]
        if o.list_image:
            header.append("IMAGE")
        return header

    def _list_resource_columns(self) -> List[str]:
        """use/req/lim columns shown per resource in the container list."""
        o = self.options
        if o.compact_view:
            return ["req", "lim"] if o.no_metrics else ["use"]
        return ["req", "lim"] if o.no_metrics else ["use", "req", "lim"]

    # --- cells ---

    def percent_cell(self, value: Optional[int]) -> Cell:
        if value is None:
            return DASH
        text = f"{value}%"
        if self.options.no_color:
            return text
        return Text(text, style=SEVERITY_STYLES[self.classifier.classify(value)])

    def status_cell(self, status: str) -> Cell:
        base, _, extra = status.partition(",")
        if self.options.emoji:
            emoji = STATUS_EMOJI.get(base, STATUS_EMOJI["Unknown"])
            return emoji + (f",{extra}" if extra else "")
        if self.options.no_color:
            return status
        text = Text(base, style=STATUS_STYLES.get(base, ""))
        if extra:
            text.append(f",{extra}")
        return text

    def free_row(self, rollup: NodeRollup) -> List[Cell]:
        o = self.options
        fmt = self.formatter
        row: List[Cell] = [rollup.node.name, self.status_cell(rollup.node.status)]
        for resource in (Resource.CPU, Resource.MEMORY):
            raw = [
                fmt.format(rollup.requests(resource), resource),
                fmt.format(rollup.limits(resource), resource),
                fmt.format(rollup.capacity.value(resource), resource),
            ]
            percent = [
                self.percent_cell(rollup.request_percent(resource)),
                self.percent_cell(rollup.limit_percent(resource)),
            ]
            if not o.no_metrics:
                raw.insert(0, fmt.format_usage(rollup.usage, resource))
                percent.insert(0, self.percent_cell(rollup.use_percent(resource)))
            row += raw + percent
        if o.show_pods:
            row += [str(rollup.pod_count), str(rollup.capacity.pods), str(rollup.container_count)]
        return row

    def list_row(self, row: ContainerRow) -> List[Cell]:
        o = self.options
        fmt = self.formatter
        cells: List[Cell] = [row.node_name, row.namespace, row.pod_name]
        if not o.compact_view:
            cells += [row.pod_age, row.pod_ip or ""]
        cells += [self.status_cell(row.pod_phase), row.container_name]

        for resource in (Resource.CPU, Resource.MEMORY):
            values = {
                "use": lambda: fmt.format_usage(row.usage, resource),
                "req": lambda: fmt.format_or_dash(row.resources.request(resource), resource),
                "lim": lambda: fmt.format_or_dash(row.resources.limit(resource), resource),
            }
            cells += [values[column]() for column in self._list_resource_columns()]

        if o.list_image:
            cells.append(row.image or "")
        return cells

    # --- output ---

    def _print(self, table: TableRenderer):
        text = table.render()
        if text.plain:
            self.console.print(text, end="")

    def report(self, data: Iterable):
        """Prints node rollups or container rows, depending on the list option."""
        if self.options.list_containers:
            self.report_list(data)
        else:
            self.report_free(data)

    def report_free(self, rollups: Iterable[NodeRollup]):
        table = TableRenderer(None if self.options.no_headers else self.free_header())
        for rollup in rollups:
            table.add_row(self.free_row(rollup))
        if not table.rows:
            logger.warning("No nodes to report.")
        self._print(table)

    def report_list(self, rows: Iterable[ContainerRow]):
        table = TableRenderer(None if self.options.no_headers else self.list_header())
        for row in rows:
            table.add_row(self.list_row(row))
        if not table.rows:
            logger.warning("No containers to report.")
        self._print(table)
