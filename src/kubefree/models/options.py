# src/kubefree/models/options.py
"""
The immutable option value passed to every kubefree component.

The CLI builds exactly one FreeOptions per invocation. Validation runs at
construction time so that a bad threshold or sort resource fails before any
cluster call is made.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.exceptions import ConfigurationError
from ..core.rows import parse_sort_resource
from ..core.severity import SeverityClassifier
from .resources import Resource


class UnitSystem(str, Enum):
    DECIMAL = "decimal"
    BINARY = "binary"


class ByteUnit(str, Enum):
    BYTE = "byte"
    KILO = "kilo"
    MEGA = "mega"
    GIGA = "giga"


class FreeOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    # unit options
    unit_system: UnitSystem = UnitSystem.DECIMAL
    byte_unit: ByteUnit = ByteUnit.MEGA
    without_unit: bool = False

    # color output options
    no_color: bool = False
    warn_threshold: int = 60
    crit_threshold: int = 90
    emoji: bool = False

    # general options
    show_pods: bool = False
    all_namespaces: bool = True
    namespace: Optional[str] = None
    no_headers: bool = False
    no_metrics: bool = False
    label_selector: Optional[str] = None
    node_names: Tuple[str, ...] = Field(default_factory=tuple)

    # list options
    list_containers: bool = False
    list_image: bool = False
    list_all: bool = False
    compact_view: bool = True
    sort_by_resource: Resource = Resource.MEMORY

    # export options
    output_format: Optional[str] = None
    output_path: Optional[Path] = None

    @field_validator("sort_by_resource", mode="before")
    @classmethod
    def _parse_sort_resource(cls, value):
        return parse_sort_resource(value)

    @field_validator("output_format", mode="before")
    @classmethod
    def _validate_output_format(cls, value):
        if value is None:
            return None
        value = str(value).lower()
        if value not in ("csv", "json"):
            raise ConfigurationError(f"Invalid output format '{value}'. Must be 'csv' or 'json'.")
        return value

    @model_validator(mode="after")
    def _validate_thresholds(self):
        # Raises InvalidThresholdError when warn > crit.
        SeverityClassifier(self.warn_threshold, self.crit_threshold)
        return self

    @property
    def pod_namespace(self) -> Optional[str]:
        """Namespace pods are listed from, None for all namespaces."""
        if self.namespace:
            return self.namespace
        if self.all_namespaces:
            return None
        return "default"

    @property
    def export_enabled(self) -> bool:
        return self.output_format is not None

    def classifier(self) -> SeverityClassifier:
        return SeverityClassifier(self.warn_threshold, self.crit_threshold)
