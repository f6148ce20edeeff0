# src/kubefree/models/resources.py
"""
This module defines the Pydantic data models shared by the collectors, the
core calculations and the reporters. Every model is frozen: snapshots read
from the cluster are never modified once built.

Quantities are integers: CPU in millicores, memory in bytes.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Resource(str, Enum):
    """The two compute resources kubefree reports on."""

    CPU = "cpu"
    MEMORY = "memory"


class Capacity(BaseModel):
    """Allocatable resources of a node."""

    model_config = ConfigDict(frozen=True)

    cpu_millicores: int = Field(0, ge=0, description="Allocatable CPU in millicores.")
    memory_bytes: int = Field(0, ge=0, description="Allocatable memory in bytes.")
    pods: int = Field(0, ge=0, description="Allocatable pod count, 0 when unpublished.")

    def value(self, resource: Resource) -> int:
        return self.cpu_millicores if resource == Resource.CPU else self.memory_bytes


class UsageSample(BaseModel):
    """
    A point-in-time usage measurement from metrics-server.

    A missing sample is represented by None wherever a sample is expected,
    so a measured zero stays distinguishable from "unknown".
    """

    model_config = ConfigDict(frozen=True)

    cpu_millicores: int = Field(..., description="Used CPU in millicores.")
    memory_bytes: int = Field(..., description="Used memory in bytes.")

    def value(self, resource: Resource) -> int:
        return self.cpu_millicores if resource == Resource.CPU else self.memory_bytes


class ResourceSpec(BaseModel):
    """
    Declared requests and limits of a container.

    None means the key is absent from the pod spec. A declared 0 is treated
    the same way when displaying or filtering containers.
    """

    model_config = ConfigDict(frozen=True)

    cpu_request: Optional[int] = Field(None, ge=0, description="Requested CPU in millicores.")
    cpu_limit: Optional[int] = Field(None, ge=0, description="CPU limit in millicores.")
    memory_request: Optional[int] = Field(None, ge=0, description="Requested memory in bytes.")
    memory_limit: Optional[int] = Field(None, ge=0, description="Memory limit in bytes.")

    @property
    def is_undeclared(self) -> bool:
        """True when none of the four fields carries a non-zero value."""
        return not any((self.cpu_request, self.cpu_limit, self.memory_request, self.memory_limit))

    def request(self, resource: Resource) -> Optional[int]:
        return self.cpu_request if resource == Resource.CPU else self.memory_request

    def limit(self, resource: Resource) -> Optional[int]:
        return self.cpu_limit if resource == Resource.CPU else self.memory_limit


class ContainerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Container name")
    image: Optional[str] = Field(None, description="Container image")
    resources: ResourceSpec = Field(default_factory=ResourceSpec)


class PodInfo(BaseModel):
    """A pod scheduled on a node, as listed from the Kubernetes API."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Pod name")
    namespace: str = Field(..., description="Pod namespace")
    ip: Optional[str] = Field(None, description="Pod IP")
    phase: str = Field("Unknown", description="Pod phase (Running, Pending, ...)")
    created: Optional[datetime] = Field(None, description="Creation timestamp, None when unset")
    containers: Tuple[ContainerInfo, ...] = Field(default_factory=tuple)


class NodeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Node name")
    status: str = Field("Unknown", description="Ready, NotReady or Unknown, possibly with SchedulingDisabled")
    capacity: Capacity = Field(default_factory=Capacity)


class UsageSnapshot(BaseModel):
    """
    One metrics-server snapshot: node usage keyed by node name and container
    usage keyed by (namespace, pod, container).
    """

    model_config = ConfigDict(frozen=True)

    nodes: Dict[str, UsageSample] = Field(default_factory=dict)
    containers: Dict[Tuple[str, str, str], UsageSample] = Field(default_factory=dict)

    def node(self, name: str) -> Optional[UsageSample]:
        return self.nodes.get(name)

    def container(self, namespace: str, pod: str, container: str) -> Optional[UsageSample]:
        return self.containers.get((namespace, pod, container))


class NodeRollup(BaseModel):
    """Aggregated requests, limits and usage of a node."""

    model_config = ConfigDict(frozen=True)

    node: NodeInfo
    cpu_requests: int = 0
    cpu_limits: int = 0
    memory_requests: int = 0
    memory_limits: int = 0
    usage: Optional[UsageSample] = None

    cpu_use_percent: Optional[int] = None
    cpu_request_percent: Optional[int] = None
    cpu_limit_percent: Optional[int] = None
    memory_use_percent: Optional[int] = None
    memory_request_percent: Optional[int] = None
    memory_limit_percent: Optional[int] = None

    pod_count: int = 0
    container_count: int = 0

    @property
    def capacity(self) -> Capacity:
        return self.node.capacity

    def requests(self, resource: Resource) -> int:
        return self.cpu_requests if resource == Resource.CPU else self.memory_requests

    def limits(self, resource: Resource) -> int:
        return self.cpu_limits if resource == Resource.CPU else self.memory_limits

    def use_percent(self, resource: Resource) -> Optional[int]:
        return self.cpu_use_percent if resource == Resource.CPU else self.memory_use_percent

    def request_percent(self, resource: Resource) -> Optional[int]:
        return self.cpu_request_percent if resource == Resource.CPU else self.memory_request_percent

    def limit_percent(self, resource: Resource) -> Optional[int]:
        return self.cpu_limit_percent if resource == Resource.CPU else self.memory_limit_percent

    def to_record(self) -> Dict[str, Any]:
        """Flat record with raw integers, used by the JSON/CSV exporters."""
        return {
            "name": self.node.name,
            "status": self.node.status,
            "cpu_use": self.usage.cpu_millicores if self.usage else None,
            "cpu_req": self.cpu_requests,
            "cpu_lim": self.cpu_limits,
            "cpu_alloc": self.capacity.cpu_millicores,
            "cpu_use_percent": self.cpu_use_percent,
            "cpu_req_percent": self.cpu_request_percent,
            "cpu_lim_percent": self.cpu_limit_percent,
            "mem_use": self.usage.memory_bytes if self.usage else None,
            "mem_req": self.memory_requests,
            "mem_lim": self.memory_limits,
            "mem_alloc": self.capacity.memory_bytes,
            "mem_use_percent": self.memory_use_percent,
            "mem_req_percent": self.memory_request_percent,
            "mem_lim_percent": self.memory_limit_percent,
            "pods": self.pod_count,
            "pods_alloc": self.capacity.pods,
            "containers": self.container_count,
        }


class ContainerRow(BaseModel):
    """One line of the container list: a container of a pod on a node."""

    model_config = ConfigDict(frozen=True)

    node_name: str
    namespace: str
    pod_name: str
    pod_age: str = "<unknown>"
    pod_ip: Optional[str] = None
    pod_phase: str = "Unknown"
    container_name: str
    image: Optional[str] = None
    resources: ResourceSpec = Field(default_factory=ResourceSpec)
    usage: Optional[UsageSample] = None

    def usage_value(self, resource: Resource) -> Optional[int]:
        return self.usage.value(resource) if self.usage else None

    def to_record(self) -> Dict[str, Any]:
        """Flat record with raw integers, used by the JSON/CSV exporters."""
        return {
            "node": self.node_name,
            "namespace": self.namespace,
            "pod": self.pod_name,
            "pod_age": self.pod_age,
            "pod_ip": self.pod_ip,
            "pod_status": self.pod_phase,
            "container": self.container_name,
            "cpu_use": self.usage_value(Resource.CPU),
            "cpu_req": self.resources.cpu_request,
            "cpu_lim": self.resources.cpu_limit,
            "mem_use": self.usage_value(Resource.MEMORY),
            "mem_req": self.resources.memory_request,
            "mem_lim": self.resources.memory_limit,
            "image": self.image,
        }
