# src/kubefree/core/processor.py
import logging
from datetime import datetime
from typing import List, Optional, Union

from ..collectors.metrics_collector import MetricsCollector
from ..collectors.node_collector import NodeCollector
from ..collectors.pod_collector import PodCollector
from ..models.options import FreeOptions
from ..models.resources import ContainerRow, NodeRollup, UsageSnapshot
from .calculator import rollup
from .rows import build_container_rows, sort_rows

logger = logging.getLogger(__name__)


class FreeProcessor:
    """
    Orchestrates one kubefree run: reads nodes, the usage snapshot and the
    pods of every node, then hands them to the core calculations.

    Collaborator errors (nodes or pods that cannot be listed) propagate;
    a missing usage snapshot only empties the usage columns.
    """

    def __init__(
        self,
        options: FreeOptions,
        node_collector: NodeCollector,
        pod_collector: PodCollector,
        metrics_collector: MetricsCollector,
    ):
        self.options = options
        self.node_collector = node_collector
        self.pod_collector = pod_collector
        self.metrics_collector = metrics_collector

    async def _collect_nodes(self):
        return await self.node_collector.collect(
            names=self.options.node_names or None,
            label_selector=self.options.label_selector,
        )

    async def _collect_usage(self) -> Optional[UsageSnapshot]:
        if self.options.no_metrics:
            return None
        snapshot = await self.metrics_collector.collect()
        if snapshot is None:
            logger.warning("No usage snapshot available; usage columns will show '-'.")
        return snapshot

    async def free(self) -> List[NodeRollup]:
        """One rollup per node."""
        nodes = await self._collect_nodes()
        snapshot = await self._collect_usage()

        rollups = []
        for node in nodes:
            pods = await self.pod_collector.collect(node.name)
            usage = snapshot.node(node.name) if snapshot else None
            rollups.append(rollup(node, pods, usage))
        return rollups

    async def list_containers(self, now: Optional[datetime] = None) -> List[ContainerRow]:
        """One row per container, grouped by node and sorted by usage within each node."""
        nodes = await self._collect_nodes()
        snapshot = await self._collect_usage()

        result: List[ContainerRow] = []
        for node in nodes:
            pods = await self.pod_collector.collect(node.name)
            rows = build_container_rows(node.name, pods, snapshot, list_all=self.options.list_all, now=now)
            if not self.options.no_metrics:
                rows = sort_rows(rows, self.options.sort_by_resource)
            result.extend(rows)
        return result

    async def run(self) -> Union[List[NodeRollup], List[ContainerRow]]:
        """Runs the view selected by the options."""
        logger.info("Starting kubefree run (list=%s)...", self.options.list_containers)
        if self.options.list_containers:
            return await self.list_containers()
        return await self.free()

    async def close(self):
        for collector in (self.node_collector, self.pod_collector, self.metrics_collector):
            await collector.close()
