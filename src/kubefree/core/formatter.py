# src/kubefree/core/formatter.py
"""
Turns raw quantities (millicores, bytes) into the strings shown in the
report columns.
"""

import logging
from typing import Optional, Tuple

from ..models.options import ByteUnit, FreeOptions, UnitSystem
from ..models.resources import Resource, UsageSample

logger = logging.getLogger(__name__)

DASH = "-"

_SI_UNITS = {
    ByteUnit.BYTE: (1, "B"),
    ByteUnit.KILO: (1000, "K"),
    ByteUnit.MEGA: (1000**2, "M"),
    ByteUnit.GIGA: (1000**3, "G"),
}

_BIN_UNITS = {
    ByteUnit.BYTE: (1, "B"),
    ByteUnit.KILO: (1024, "Ki"),
    ByteUnit.MEGA: (1024**2, "Mi"),
    ByteUnit.GIGA: (1024**3, "Gi"),
}

# Decimal SI suffixes keyed by power-of-ten exponent.
_DECIMAL_SUFFIXES = {-3: "m", 0: "", 3: "k", 6: "M", 9: "G", 12: "T", 15: "P", 18: "E"}


def byte_unit_from_flags(b: bool = False, k: bool = False, m: bool = False, g: bool = False) -> ByteUnit:
    """Returns the biggest selected unit, mega when nothing is selected."""
    if g:
        return ByteUnit.GIGA
    if m:
        return ByteUnit.MEGA
    if k:
        return ByteUnit.KILO
    if b:
        return ByteUnit.BYTE
    return ByteUnit.MEGA


def milli_quantity(millis: int) -> str:
    """
    Formats a millicore count the way Kubernetes prints a DecimalSI quantity:
    the largest exponent that keeps the mantissa integral wins.

        58 -> "58m", 3600 -> "3600m", 2000 -> "2", 2000000 -> "2k"
    """
    if millis == 0:
        return "0"
    sign = "-" if millis < 0 else ""
    mantissa = abs(millis)
    exponent = -3
    while mantissa % 1000 == 0 and exponent < 18:
        mantissa //= 1000
        exponent += 3
    return f"{sign}{mantissa}{_DECIMAL_SUFFIXES[exponent]}"


class QuantityFormatter:
    """Formats CPU and memory quantities according to the unit options."""

    def __init__(
        self,
        unit_system: UnitSystem = UnitSystem.DECIMAL,
        byte_unit: ByteUnit = ByteUnit.MEGA,
        without_unit: bool = False,
    ):
        self.unit_system = unit_system
        self.byte_unit = byte_unit
        self.without_unit = without_unit

    @classmethod
    def from_options(cls, options: FreeOptions) -> "QuantityFormatter":
        return cls(
            unit_system=options.unit_system,
            byte_unit=options.byte_unit,
            without_unit=options.without_unit,
        )

    @property
    def memory_unit(self) -> Tuple[int, str]:
        """(bytes per unit, suffix) for the configured memory unit."""
        units = _BIN_UNITS if self.unit_system == UnitSystem.BINARY else _SI_UNITS
        return units[self.byte_unit]

    def format(self, amount: int, resource: Resource) -> str:
        if amount < 0:
            logger.debug("Formatting negative %s quantity %d", resource.value, amount)

        if resource == Resource.CPU:
            if self.without_unit:
                return str(amount)
            return milli_quantity(amount)

        unit_bytes, suffix = self.memory_unit
        # int() truncates toward zero, like integer division on quantities
        value = int(amount / unit_bytes) if amount < 0 else amount // unit_bytes
        return f"{value}{'' if self.without_unit else suffix}"

    def format_or_dash(self, amount: Optional[int], resource: Resource) -> str:
        """Formats a request or limit; undeclared (None or 0) prints as a dash."""
        if not amount:
            return DASH
        return self.format(amount, resource)

    def format_usage(self, sample: Optional[UsageSample], resource: Resource) -> str:
        """Formats a usage sample; only a missing sample prints as a dash."""
        if sample is None:
            return DASH
        return self.format(sample.value(resource), resource)
