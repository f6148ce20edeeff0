# src/kubefree/collectors/node_collector.py

import logging
from typing import List, Optional, Sequence

from kubernetes_asyncio.client.rest import ApiException

from kubefree.core.exceptions import CollaboratorError
from kubefree.core.k8s_client import get_core_v1_api
from kubefree.models.resources import Capacity, NodeInfo

from ..utils.k8s_utils import parse_cpu_millicores, parse_memory_bytes, parse_quantity, resource_quantity
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class NodeCollector(BaseCollector):
    """Collects node status and allocatable capacity from the Kubernetes cluster."""

    async def _create_client(self):
        return await get_core_v1_api()

    async def collect(
        self, names: Optional[Sequence[str]] = None, label_selector: Optional[str] = None
    ) -> List[NodeInfo]:
        """
        Returns the nodes to report on.

        When `names` are given, exactly those nodes are read, in that order.
        Otherwise all nodes matching `label_selector` are listed.

        Raises:
            CollaboratorError: If the client is not configured, a named node
                does not exist or the API call fails.
        """
        api = await self._ensure_client()
        if not api:
            raise CollaboratorError("Kubernetes client is not configured; cannot list nodes.")

        try:
            if names:
                nodes = []
                for name in names:
                    try:
                        nodes.append(await api.read_node(name))
                    except ApiException as e:
                        if e.status == 404:
                            raise CollaboratorError(f"node '{name}' not found") from e
                        raise
            else:
                node_list = await api.list_node(label_selector=label_selector or "")
                nodes = node_list.items or []
        except ApiException as e:
            logger.error("Kubernetes API error while listing nodes: %s", e)
            raise CollaboratorError(f"failed to list nodes: {e.reason or e}") from e

        if not nodes:
            logger.warning("No nodes found in the cluster.")

        nodes_info = []
        for node in nodes:
            info = NodeInfo(
                name=node.metadata.name,
                status=self._node_status(node),
                capacity=self._extract_capacity(node),
            )
            logger.info(
                " -> Node '%s': status=%s, cpu=%sm, mem=%s, pods=%s",
                info.name,
                info.status,
                info.capacity.cpu_millicores,
                info.capacity.memory_bytes,
                info.capacity.pods,
            )
            nodes_info.append(info)
        return nodes_info

    @staticmethod
    def _node_status(node) -> str:
        """Ready / NotReady / Unknown from the Ready condition, plus SchedulingDisabled when cordoned."""
        status = "Unknown"
        conditions = (getattr(node, "status", None) and node.status.conditions) or []
        for condition in conditions:
            if condition.type == "Ready":
                if condition.status == "True":
                    status = "Ready"
                elif condition.status == "False":
                    status = "NotReady"
                break

        if getattr(node, "spec", None) and node.spec.unschedulable:
            status += ",SchedulingDisabled"
        return status

    @staticmethod
    def _extract_capacity(node) -> Capacity:
        """Allocatable CPU, memory and pods; missing values count as zero."""
        allocatable = getattr(node, "status", None) and node.status.allocatable
        try:
            pods = resource_quantity(allocatable, "pods")
            return Capacity(
                cpu_millicores=parse_cpu_millicores(resource_quantity(allocatable, "cpu")) or 0,
                memory_bytes=parse_memory_bytes(resource_quantity(allocatable, "memory")) or 0,
                pods=int(parse_quantity(pods)) if pods is not None else 0,
            )
        except ValueError as e:
            logger.warning("Could not parse allocatable resources of node '%s': %s", node.metadata.name, e)
            return Capacity()
