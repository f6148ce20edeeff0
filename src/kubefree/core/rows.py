# src/kubefree/core/rows.py
"""
Builds the container list (`--list`) and orders it by resource usage.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from ..models.resources import ContainerRow, PodInfo, Resource, UsageSnapshot
from ..utils.date_utils import age
from .exceptions import InvalidSortResourceError

logger = logging.getLogger(__name__)


def parse_sort_resource(value: Union[str, Resource]) -> Resource:
    """Accepts 'cpu' or 'memory' (any case); anything else is a configuration error."""
    if isinstance(value, Resource):
        return value
    try:
        return Resource(str(value).strip().lower())
    except ValueError:
        raise InvalidSortResourceError(
            f"can only sort by {Resource.MEMORY.value!r} and {Resource.CPU.value!r}, not by given {value!r}"
        ) from None


def build_container_rows(
    node_name: str,
    pods: Iterable[PodInfo],
    snapshot: Optional[UsageSnapshot] = None,
    list_all: bool = False,
    now: Optional[datetime] = None,
) -> List[ContainerRow]:
    """
    Returns one ContainerRow per container of the given pods, in input order.

    Unless `list_all` is set, containers declaring no request and no limit
    are left out, whether or not usage was measured for them.
    """
    now = now or datetime.now(timezone.utc)
    rows: List[ContainerRow] = []

    for pod in pods:
        pod_age = age(pod.created, now)
        for container in pod.containers:
            if not list_all and container.resources.is_undeclared:
                logger.debug(
                    "Skipping container %s/%s/%s without requests or limits.",
                    pod.namespace,
                    pod.name,
                    container.name,
                )
                continue

            usage = snapshot.container(pod.namespace, pod.name, container.name) if snapshot else None
            rows.append(
                ContainerRow(
                    node_name=node_name,
                    namespace=pod.namespace,
                    pod_name=pod.name,
                    pod_age=pod_age,
                    pod_ip=pod.ip,
                    pod_phase=pod.phase,
                    container_name=container.name,
                    image=container.image,
                    resources=container.resources,
                    usage=usage,
                )
            )

    return rows


def sort_rows(rows: Iterable[ContainerRow], by: Union[str, Resource]) -> List[ContainerRow]:
    """
    Stable ascending sort by the usage of `by`.

    Rows with usage come first; rows without usage follow and keep their
    relative order, as do rows with equal usage.
    """
    resource = parse_sort_resource(by)

    def _key(row: ContainerRow):
        value = row.usage_value(resource)
        return (value is None, value or 0)

    return sorted(rows, key=_key)
