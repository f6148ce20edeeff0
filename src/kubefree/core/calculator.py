# src/kubefree/core/calculator.py
"""
Node rollups: sums container requests and limits of the pods running on a
node and relates them, together with the node usage, to the node's
allocatable capacity.
"""

import logging
from typing import Iterable, Optional

from ..models.resources import NodeInfo, NodeRollup, PodInfo, Resource, UsageSample

logger = logging.getLogger(__name__)


def percentage(value: int, capacity: int) -> Optional[int]:
    """Integer percentage of capacity, rounded down. None when capacity is not positive."""
    if capacity <= 0:
        return None
    return (100 * value) // capacity


def rollup(node: NodeInfo, pods: Iterable[PodInfo], usage: Optional[UsageSample] = None) -> NodeRollup:
    """
    Computes the NodeRollup of a node.

    Pods must already be scoped to the node. Usage is the node-level sample
    from metrics-server; it is not derived from container usage.
    """
    totals = {
        "cpu_requests": 0,
        "cpu_limits": 0,
        "memory_requests": 0,
        "memory_limits": 0,
    }
    pod_count = 0
    container_count = 0

    for pod in pods:
        pod_count += 1
        for container in pod.containers:
            container_count += 1
            spec = container.resources
            totals["cpu_requests"] += spec.cpu_request or 0
            totals["cpu_limits"] += spec.cpu_limit or 0
            totals["memory_requests"] += spec.memory_request or 0
            totals["memory_limits"] += spec.memory_limit or 0

    capacity = node.capacity
    percents = {}
    for resource, prefix in ((Resource.CPU, "cpu"), (Resource.MEMORY, "memory")):
        alloc = capacity.value(resource)
        if alloc <= 0:
            logger.debug("Node '%s' has no allocatable %s; percentages omitted.", node.name, resource.value)
        percents[f"{prefix}_request_percent"] = percentage(totals[f"{prefix}_requests"], alloc)
        percents[f"{prefix}_limit_percent"] = percentage(totals[f"{prefix}_limits"], alloc)
        percents[f"{prefix}_use_percent"] = percentage(usage.value(resource), alloc) if usage else None

    return NodeRollup(
        node=node,
        usage=usage,
        pod_count=pod_count,
        container_count=container_count,
        **totals,
        **percents,
    )
