"""Orchestrator for the reconciliation subsystem.

The engine composes the stage functions but does not prescribe providers:
the mapping tables of the primary (decode) and secondary (fuel economy)
sources are injected, so adapters own all provider-specific naming.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from vinrecon.domain.model import (
    EnrichmentMetadata,
    ReconciliationResult,
    SourceRole,
    VehicleConfiguration,
    VehicleIdentity,
    validate_vin,
)

from .confidence import classify
from .derive import DEFAULT_ROOF_BANDS, RoofBands, derive_fields
from .extract import extract, extract_provider
from .merge import SECONDARY_AUTHORITATIVE_FIELDS, merge_configurations

if TYPE_CHECKING:
    from vinrecon.domain.model import CanonicalField, Vin

    from .mappings import ProviderTables

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Turn raw provider responses into one canonical, auditable record."""

    primary: ProviderTables
    secondary: ProviderTables
    roof_bands: RoofBands = DEFAULT_ROOF_BANDS
    secondary_authoritative: frozenset[CanonicalField] = SECONDARY_AUTHORITATIVE_FIELDS

    def reconcile(
        self,
        vin: Vin,
        primary_raw: object,
        secondary_raw: object | None = None,
        *,
        decoded_at: datetime | None = None,
    ) -> ReconciliationResult:
        """Run all reconciliation stages for one vehicle.

        Raises ``VinValidationError`` for a malformed ``vin`` before any other
        work. Every other problem (missing keys, unreadable values, an unusable
        secondary response, a primary response with nothing in it) is absorbed
        and only shows up as sparser fields and lower confidence.
        """

        validate_vin(vin)

        primary = extract_provider(primary_raw, self.primary)
        secondary = (
            extract(secondary_raw, self.secondary.configuration)
            if secondary_raw is not None
            else None
        )

        merged = merge_configurations(
            primary.configuration,
            secondary,
            secondary_authoritative=self.secondary_authoritative,
        )
        derivation = derive_fields(
            VehicleConfiguration.from_values(merged.values),
            roof_bands=self.roof_bands,
        )

        fields_from_primary = primary.identity.fields_populated + merged.from_primary
        fields_from_secondary = merged.from_secondary
        confidence = classify(
            (*fields_from_primary, *fields_from_secondary, *derivation.derived_fields)
        )

        sources_used: set[SourceRole] = set()
        if fields_from_primary:
            sources_used.add(SourceRole.PRIMARY)
        else:
            log.warning(
                "Primary source yielded no usable fields for vin=%s; manual entry needed",
                vin,
            )
        if fields_from_secondary:
            sources_used.add(SourceRole.SECONDARY)
        elif secondary_raw is not None:
            log.info("Secondary source contributed no fields for vin=%s", vin)

        metadata = EnrichmentMetadata(
            vehicle_identifier=vin,
            confidence=confidence,
            decoded_at=decoded_at or datetime.now(tz=UTC),
            sources_used=frozenset(sources_used),
            fields_from_primary=fields_from_primary,
            fields_from_secondary=fields_from_secondary,
            fields_derived=derivation.derived_fields,
        )
        log.info(
            "Reconciled vin=%s: confidence=%s, primary=%d, secondary=%d, derived=%d",
            vin,
            confidence,
            len(fields_from_primary),
            len(fields_from_secondary),
            len(derivation.derived_fields),
        )
        return ReconciliationResult(
            identity=VehicleIdentity.from_values(primary.identity.values),
            configuration=derivation.configuration,
            metadata=metadata,
        )
