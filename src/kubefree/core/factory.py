# src/kubefree/core/factory.py
"""
Factory functions to instantiate the FreeProcessor with real Kubernetes
collectors.
"""

import logging

from ..collectors.metrics_collector import MetricsCollector
from ..collectors.node_collector import NodeCollector
from ..collectors.pod_collector import PodCollector
from ..models.options import FreeOptions
from .config import config
from .processor import FreeProcessor

logger = logging.getLogger(__name__)


def get_processor(options: FreeOptions) -> FreeProcessor:
    """
    Builds a FreeProcessor whose pod and metrics collectors are scoped to the
    namespace selected by the options.
    """
    namespace = options.pod_namespace
    logger.info("Initializing collectors (namespace=%s)...", namespace or "<all>")
    return FreeProcessor(
        options=options,
        node_collector=NodeCollector(),
        pod_collector=PodCollector(namespace=namespace),
        metrics_collector=MetricsCollector(namespace=namespace, timeout=config.METRICS_TIMEOUT),
    )
