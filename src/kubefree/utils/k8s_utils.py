import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Binary suffixes are listed first so 'Mi' is matched before 'M'.
_SUFFIX_MULTIPLIERS = (
    ("Ki", Decimal(1024)),
    ("Mi", Decimal(1024**2)),
    ("Gi", Decimal(1024**3)),
    ("Ti", Decimal(1024**4)),
    ("Pi", Decimal(1024**5)),
    ("Ei", Decimal(1024**6)),
    ("n", Decimal("0.000000001")),
    ("u", Decimal("0.000001")),
    ("m", Decimal("0.001")),
    ("k", Decimal(1000)),
    ("M", Decimal(1000**2)),
    ("G", Decimal(1000**3)),
    ("T", Decimal(1000**4)),
    ("P", Decimal(1000**5)),
    ("E", Decimal(1000**6)),
)


def parse_quantity(quantity: Any) -> Decimal:
    """
    Parse a Kubernetes quantity ('250m', '1Gi', '2', '1500k') to a Decimal.
    Adapted from kubernetes-python utils.

    Raises:
        ValueError: If the quantity is not a valid number with a known suffix.
    """
    if isinstance(quantity, (int, float, Decimal)):
        return Decimal(quantity)

    text = str(quantity).strip()
    number, multiplier = text, Decimal(1)
    for suffix, factor in _SUFFIX_MULTIPLIERS:
        if text.endswith(suffix):
            number, multiplier = text[: -len(suffix)], factor
            break

    try:
        return Decimal(number) * multiplier
    except InvalidOperation:
        raise ValueError(f"Invalid Kubernetes quantity: {quantity!r}") from None


def parse_cpu_millicores(quantity: Any) -> Optional[int]:
    """
    Converts a K8s CPU quantity to millicores, rounding fractions up like
    Quantity.MilliValue(). None when the quantity is not set.
    """
    if quantity is None or quantity == "":
        return None
    return int(math.ceil(parse_quantity(quantity) * 1000))


def parse_memory_bytes(quantity: Any) -> Optional[int]:
    """Converts a K8s memory quantity to bytes, rounding up. None when not set."""
    if quantity is None or quantity == "":
        return None
    return int(math.ceil(parse_quantity(quantity)))


def resource_quantity(resources: Optional[Mapping[str, Any]], name: str) -> Optional[Any]:
    """Looks up `name` in a requests/limits/allocatable mapping which may be None."""
    if not resources:
        return None
    return resources.get(name)
