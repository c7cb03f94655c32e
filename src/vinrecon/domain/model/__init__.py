"""Public domain model surface."""

from __future__ import annotations

from vinrecon.domain.model.enums import (
    Confidence,
    DataSource,
    FieldKind,
    FieldOrigin,
    RearWheels,
    RoofHeight,
    SourceRole,
)
from vinrecon.domain.model.metadata import EnrichmentMetadata, ReconciliationResult
from vinrecon.domain.model.primitives import (
    VIN_LENGTH,
    CanonicalField,
    RawProviderResponse,
    Vin,
    VinValidationError,
    validate_vin,
)
from vinrecon.domain.model.vehicle import VehicleConfiguration, VehicleIdentity

__all__ = [
    "VIN_LENGTH",
    "CanonicalField",
    "Confidence",
    "DataSource",
    "EnrichmentMetadata",
    "FieldKind",
    "FieldOrigin",
    "RawProviderResponse",
    "ReconciliationResult",
    "RearWheels",
    "RoofHeight",
    "SourceRole",
    "VehicleConfiguration",
    "VehicleIdentity",
    "Vin",
    "VinValidationError",
    "validate_vin",
]
