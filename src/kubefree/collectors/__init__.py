"""Collectors reading nodes, pods and usage metrics from the Kubernetes API."""

from .metrics_collector import MetricsCollector
from .node_collector import NodeCollector
from .pod_collector import PodCollector

__all__ = ["MetricsCollector", "NodeCollector", "PodCollector"]
