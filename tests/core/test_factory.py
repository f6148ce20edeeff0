# tests/core/test_factory.py

from kubefree.collectors.metrics_collector import MetricsCollector
from kubefree.collectors.node_collector import NodeCollector
from kubefree.collectors.pod_collector import PodCollector
from kubefree.core.factory import get_processor
from kubefree.core.processor import FreeProcessor
from kubefree.models.options import FreeOptions


def test_get_processor_wires_collectors():
    processor = get_processor(FreeOptions())
    assert isinstance(processor, FreeProcessor)
    assert isinstance(processor.node_collector, NodeCollector)
    assert isinstance(processor.pod_collector, PodCollector)
    assert isinstance(processor.metrics_collector, MetricsCollector)
    assert processor.pod_collector.namespace is None


def test_get_processor_scopes_to_namespace():
    processor = get_processor(FreeOptions(namespace="kube-system"))
    assert processor.pod_collector.namespace == "kube-system"
    assert processor.metrics_collector.namespace == "kube-system"
