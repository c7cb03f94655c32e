"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class SourceRole(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class FieldOrigin(StrEnum):
    """Where a canonical field value in a final record came from."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    DERIVED = "derived"
    MANUAL = "manual"


class Confidence(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK: dict[Confidence, int] = {
    Confidence.LOW: 0,
    Confidence.MEDIUM: 1,
    Confidence.HIGH: 2,
}


class FieldKind(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


class RoofHeight(StrEnum):
    LOW = "Low Roof"
    MEDIUM = "Medium Roof"
    HIGH = "High Roof"


class RearWheels(StrEnum):
    SINGLE = "SRW"
    DUAL = "DRW"


class DataSource(StrEnum):
    """Storage label summarising which sources fed a record."""

    BOTH = "vin_decode_both"
    PRIMARY = "vin_decode_primary"
    SECONDARY = "vin_decode_secondary"
    MANUAL_ENTRY = "manual_entry"
