"""Manual corrections applied by a caller after reconciliation.

The engine never writes ``fields_manually_overridden``; a dealer editing a
listing form does. Overriding a field moves it out of every other provenance
list so that each value keeps exactly one origin.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from vinrecon.domain.model import ReconciliationResult, VehicleConfiguration, VehicleIdentity

if TYPE_CHECKING:
    from vinrecon.domain.model import CanonicalField


def apply_manual_overrides(
    result: ReconciliationResult,
    **values: object,
) -> ReconciliationResult:
    """Return a copy of ``result`` with ``values`` set and recorded as manual.

    Field names may belong to either the identity or the configuration record.
    Confidence is left as computed from the provider data.
    """

    identity_fields = set(VehicleIdentity.field_names())
    configuration_fields = set(VehicleConfiguration.field_names())
    unknown = sorted(set(values) - identity_fields - configuration_fields)
    if unknown:
        raise ValueError(f"Unknown vehicle fields: {', '.join(unknown)}")

    identity_changes = {name: value for name, value in values.items() if name in identity_fields}
    configuration_changes = {
        name: value for name, value in values.items() if name in configuration_fields
    }
    overridden = tuple(values)
    metadata = result.metadata
    manual = metadata.fields_manually_overridden + tuple(
        name for name in overridden if name not in metadata.fields_manually_overridden
    )
    return ReconciliationResult(
        identity=result.identity.replace(**identity_changes),
        configuration=result.configuration.replace(**configuration_changes),
        metadata=replace(
            metadata,
            fields_from_primary=_without(metadata.fields_from_primary, overridden),
            fields_from_secondary=_without(metadata.fields_from_secondary, overridden),
            fields_derived=_without(metadata.fields_derived, overridden),
            fields_manually_overridden=manual,
        ),
    )


def _without(
    names: tuple[CanonicalField, ...], removed: tuple[CanonicalField, ...]
) -> tuple[CanonicalField, ...]:
    return tuple(name for name in names if name not in removed)
