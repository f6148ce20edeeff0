# tests/conftest.py

from datetime import datetime, timezone

import pytest

from kubefree.models.resources import (
    Capacity,
    ContainerInfo,
    NodeInfo,
    PodInfo,
    ResourceSpec,
    UsageSample,
    UsageSnapshot,
)

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Autouse fixture isolating tests from the user's environment so the
    config defaults are predictable.
    """
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("KUBEFREE_WARN_THRESHOLD", raising=False)
    monkeypatch.delenv("KUBEFREE_CRIT_THRESHOLD", raising=False)
    monkeypatch.delenv("KUBEFREE_SORT_BY_RESOURCE", raising=False)
    monkeypatch.delenv("KUBEFREE_METRICS_TIMEOUT", raising=False)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def node():
    """Node with 3600m CPU and 5943857K memory allocatable."""
    return NodeInfo(
        name="node-1",
        status="Ready",
        capacity=Capacity(cpu_millicores=3600, memory_bytes=5943857000, pods=110),
    )


@pytest.fixture
def web_pod():
    """One pod with one container: requests 704m/807403K, limits 304m/375390K."""
    return PodInfo(
        name="web-0",
        namespace="default",
        ip="10.0.0.12",
        phase="Running",
        created=datetime(2024, 5, 1, 10, 30, 0, tzinfo=timezone.utc),
        containers=(
            ContainerInfo(
                name="nginx",
                image="nginx:1.25",
                resources=ResourceSpec(
                    cpu_request=704,
                    cpu_limit=304,
                    memory_request=807403000,
                    memory_limit=375390000,
                ),
            ),
        ),
    )


@pytest.fixture
def snapshot():
    return UsageSnapshot(
        nodes={"node-1": UsageSample(cpu_millicores=58, memory_bytes=2144333000)},
        containers={("default", "web-0", "nginx"): UsageSample(cpu_millicores=58, memory_bytes=2144333000)},
    )
