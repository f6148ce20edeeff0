# src/kubefree/collectors/metrics_collector.py
"""
Reads a usage snapshot from metrics-server through the metrics.k8s.io
aggregated API.

Metrics are optional: when the snapshot cannot be obtained the collector
returns None and every usage column is printed as a dash.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from kubefree.core.config import config
from kubefree.core.exceptions import MetricsUnavailableError
from kubefree.core.k8s_client import get_custom_objects_api
from kubefree.models.resources import UsageSample, UsageSnapshot

from ..utils.k8s_utils import parse_cpu_millicores, parse_memory_bytes
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)

METRICS_GROUP = "metrics.k8s.io"
METRICS_VERSION = "v1beta1"


def _to_sample(usage: Optional[Dict[str, Any]]) -> Optional[UsageSample]:
    """A sample needs both cpu and memory; a partial one counts as unmeasured."""
    usage = usage or {}
    cpu = parse_cpu_millicores(usage.get("cpu"))
    memory = parse_memory_bytes(usage.get("memory"))
    if cpu is None or memory is None:
        return None
    return UsageSample(cpu_millicores=cpu, memory_bytes=memory)


class MetricsCollector(BaseCollector):
    """Collects node and container usage from metrics-server."""

    def __init__(self, namespace: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__()
        self.namespace = namespace
        self.timeout = timeout if timeout is not None else config.METRICS_TIMEOUT

    async def _create_client(self):
        return await get_custom_objects_api()

    async def collect(self) -> Optional[UsageSnapshot]:
        """
        Returns one usage snapshot, or None when metrics are unavailable.
        Failures are logged, never raised.
        """
        try:
            snapshot = await asyncio.wait_for(self._fetch_snapshot(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Timed out after %ss waiting for metrics-server; usage is not shown.", self.timeout)
            return None
        except Exception as e:
            logger.warning("Metrics are unavailable; usage is not shown: %s", e)
            return None

        logger.debug(
            "Collected usage for %d nodes and %d containers.", len(snapshot.nodes), len(snapshot.containers)
        )
        return snapshot

    async def _fetch_snapshot(self) -> UsageSnapshot:
        api = await self._ensure_client()
        if not api:
            raise MetricsUnavailableError("Kubernetes client is not configured.")

        node_metrics = await api.list_cluster_custom_object(METRICS_GROUP, METRICS_VERSION, "nodes")
        if self.namespace:
            pod_metrics = await api.list_namespaced_custom_object(
                METRICS_GROUP, METRICS_VERSION, self.namespace, "pods"
            )
        else:
            pod_metrics = await api.list_cluster_custom_object(METRICS_GROUP, METRICS_VERSION, "pods")

        nodes = {}
        for item in node_metrics.get("items", []):
            sample = _to_sample(item.get("usage"))
            if sample is None:
                logger.debug("Skipping incomplete usage of node %s", item["metadata"]["name"])
                continue
            nodes[item["metadata"]["name"]] = sample

        containers = {}
        for item in pod_metrics.get("items", []):
            metadata = item["metadata"]
            for container in item.get("containers", []):
                key = (metadata.get("namespace", ""), metadata["name"], container["name"])
                sample = _to_sample(container.get("usage"))
                if sample is None:
                    logger.debug("Skipping incomplete usage of container %s/%s/%s", *key)
                    continue
                containers[key] = sample

        return UsageSnapshot(nodes=nodes, containers=containers)
