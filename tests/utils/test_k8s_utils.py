# tests/utils/test_k8s_utils.py

from decimal import Decimal

import pytest

from kubefree.utils.k8s_utils import parse_cpu_millicores, parse_memory_bytes, parse_quantity, resource_quantity


@pytest.mark.parametrize(
    "quantity, expected",
    [
        ("1", Decimal(1)),
        ("250m", Decimal("0.25")),
        ("1Ki", Decimal(1024)),
        ("1Mi", Decimal(1024**2)),
        ("2Gi", Decimal(2 * 1024**3)),
        ("5943857k", Decimal(5943857000)),
        ("1M", Decimal(10**6)),
        ("100n", Decimal("0.0000001")),
        (3, Decimal(3)),
    ],
)
def test_parse_quantity(quantity, expected):
    assert parse_quantity(quantity) == expected


def test_parse_quantity_rejects_garbage():
    with pytest.raises(ValueError):
        parse_quantity("lots")


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (None, None),
        ("", None),
        ("0", 0),
        ("500m", 500),
        ("2", 2000),
        ("1.5", 1500),
        ("123456n", 1),  # rounds up to the next millicore
        ("10000000n", 10),
    ],
)
def test_parse_cpu_millicores(quantity, expected):
    assert parse_cpu_millicores(quantity) == expected


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (None, None),
        ("0", 0),
        ("256Mi", 268435456),
        ("1Gi", 1073741824),
        ("1500k", 1500000),
    ],
)
def test_parse_memory_bytes(quantity, expected):
    assert parse_memory_bytes(quantity) == expected


def test_resource_quantity_handles_missing_mapping():
    assert resource_quantity(None, "cpu") is None
    assert resource_quantity({}, "cpu") is None
    assert resource_quantity({"cpu": "1"}, "cpu") == "1"
