# src/kubefree/collectors/pod_collector.py
"""
Collects the pods bound to a node, with the resource requests and limits
of each of their containers, from the Kubernetes API.
"""

import logging
from typing import List, Optional

from kubernetes_asyncio.client.rest import ApiException

from kubefree.collectors.base_collector import BaseCollector
from kubefree.core.exceptions import CollaboratorError
from kubefree.core.k8s_client import get_core_v1_api
from kubefree.models.resources import ContainerInfo, PodInfo, ResourceSpec

from ..utils.k8s_utils import parse_cpu_millicores, parse_memory_bytes, resource_quantity

logger = logging.getLogger(__name__)

# Terminated pods no longer hold their requested resources on the node.
_FIELD_SELECTOR = "spec.nodeName={node},status.phase!=Succeeded,status.phase!=Failed"


class PodCollector(BaseCollector):
    """
    Connects to the K8s API to list the non-terminated pods of a node,
    either across all namespaces or within a single one.
    """

    def __init__(self, namespace: Optional[str] = None):
        super().__init__()
        self.namespace = namespace

    async def _create_client(self):
        api = await get_core_v1_api()
        if api:
            logger.debug("PodCollector initialized with centralized config.")
        else:
            logger.warning("PodCollector could not initialize Kubernetes client.")
        return api

    async def collect(self, node_name: str) -> List[PodInfo]:
        """
        Fetches the pods scheduled on `node_name`.

        Raises:
            CollaboratorError: If the client is not configured or the API call fails.
        """
        api = await self._ensure_client()
        if not api:
            raise CollaboratorError("Kubernetes client is not configured; cannot list pods.")

        field_selector = _FIELD_SELECTOR.format(node=node_name)
        try:
            if self.namespace:
                pod_list = await api.list_namespaced_pod(self.namespace, field_selector=field_selector)
            else:
                pod_list = await api.list_pod_for_all_namespaces(field_selector=field_selector)
        except ApiException as e:
            logger.error("Kubernetes API error while listing pods on node '%s': %s", node_name, e)
            raise CollaboratorError(f"failed to list pods on node '{node_name}': {e.reason or e}") from e

        pods = [self._to_pod_info(pod) for pod in pod_list.items or []]
        logger.debug("Collected %d pods on node '%s'.", len(pods), node_name)
        return pods

    def _to_pod_info(self, pod) -> PodInfo:
        status = pod.status
        containers = []
        if pod.spec and pod.spec.containers:
            containers = [self._to_container_info(pod, c) for c in pod.spec.containers]

        return PodInfo(
            name=pod.metadata.name,
            namespace=pod.metadata.namespace,
            ip=status.pod_ip if status else None,
            phase=(status.phase if status else None) or "Unknown",
            created=pod.metadata.creation_timestamp,
            containers=tuple(containers),
        )

    @staticmethod
    def _to_container_info(pod, container) -> ContainerInfo:
        resources = container.resources
        requests = resources.requests if resources else None
        limits = resources.limits if resources else None
        try:
            spec = ResourceSpec(
                cpu_request=parse_cpu_millicores(resource_quantity(requests, "cpu")),
                cpu_limit=parse_cpu_millicores(resource_quantity(limits, "cpu")),
                memory_request=parse_memory_bytes(resource_quantity(requests, "memory")),
                memory_limit=parse_memory_bytes(resource_quantity(limits, "memory")),
            )
        except ValueError as e:
            logger.warning(
                "Ignoring unparsable resources of container %s/%s/%s: %s",
                pod.metadata.namespace,
                pod.metadata.name,
                container.name,
                e,
            )
            spec = ResourceSpec()

        return ContainerInfo(name=container.name, image=container.image, resources=spec)
