"""Audit trail attached to every reconciled vehicle record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import DataSource, FieldOrigin, SourceRole

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import Confidence
    from .primitives import CanonicalField, Vin
    from .vehicle import VehicleConfiguration, VehicleIdentity


@dataclass(frozen=True, slots=True, kw_only=True)
class EnrichmentMetadata:
    """Field-level provenance for one reconciliation call.

    Every populated canonical field is listed in exactly one of the four
    ``fields_*`` tuples. ``fields_manually_overridden`` stays empty until a
    downstream caller applies user corrections.
    """

    vehicle_identifier: Vin
    confidence: Confidence
    decoded_at: datetime
    sources_used: frozenset[SourceRole] = frozenset()
    fields_from_primary: tuple[CanonicalField, ...] = ()
    fields_from_secondary: tuple[CanonicalField, ...] = ()
    fields_derived: tuple[CanonicalField, ...] = ()
    fields_manually_overridden: tuple[CanonicalField, ...] = ()

    @property
    def data_source(self) -> DataSource:
        primary = SourceRole.PRIMARY in self.sources_used
        secondary = SourceRole.SECONDARY in self.sources_used
        if primary and secondary:
            return DataSource.BOTH
        if primary:
            return DataSource.PRIMARY
        if secondary:
            return DataSource.SECONDARY
        return DataSource.MANUAL_ENTRY

    def origin_of(self, field: CanonicalField) -> FieldOrigin | None:
        if field in self.fields_manually_overridden:
            return FieldOrigin.MANUAL
        if field in self.fields_derived:
            return FieldOrigin.DERIVED
        if field in self.fields_from_secondary:
            return FieldOrigin.SECONDARY
        if field in self.fields_from_primary:
            return FieldOrigin.PRIMARY
        return None

    def as_dict(self) -> dict[str, object]:
        return {
            "vehicle_identifier": self.vehicle_identifier,
            "confidence": str(self.confidence),
            "data_source": str(self.data_source),
            "sources_used": sorted(str(source) for source in self.sources_used),
            "decoded_at": self.decoded_at.isoformat(),
            "fields_from_primary": list(self.fields_from_primary),
            "fields_from_secondary": list(self.fields_from_secondary),
            "fields_derived": list(self.fields_derived),
            "fields_manually_overridden": list(self.fields_manually_overridden),
        }


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    identity: VehicleIdentity
    configuration: VehicleConfiguration
    metadata: EnrichmentMetadata

    def as_dict(self) -> dict[str, object]:
        """JSON-ready rendering: identity record, configuration record, metadata blob."""

        return {
            "identity": self.identity.as_dict(),
            "configuration": self.configuration.as_dict(),
            "metadata": self.metadata.as_dict(),
        }
