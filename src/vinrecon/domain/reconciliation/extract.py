"""Apply a mapping table to one raw provider response.

Extraction is provider-agnostic: it only knows the table it is given, so the
decode registry and the fuel-economy registry share this code path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .coerce import coerce
from .mappings import lookup

if TYPE_CHECKING:
    from vinrecon.domain.model import CanonicalField

    from .coerce import CoercedValue
    from .mappings import FieldMapping, MappingTable, ProviderTables

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Extraction:
    """Partial canonical record built from one table."""

    values: dict[CanonicalField, CoercedValue] = field(default_factory=dict)
    fields_populated: tuple[CanonicalField, ...] = ()


@dataclass(frozen=True, slots=True)
class ProviderExtraction:
    identity: Extraction
    configuration: Extraction

    @property
    def fields_populated(self) -> tuple[CanonicalField, ...]:
        return self.identity.fields_populated + self.configuration.fields_populated


def extract(raw: object, table: MappingTable) -> Extraction:
    """Look up, coerce and normalise every entry of ``table`` against ``raw``.

    Entries whose value is missing or unreadable are left out of both the
    values and ``fields_populated``. When several entries target the same
    canonical field the first populated one wins.
    """

    if not isinstance(raw, Mapping):
        log.warning("Ignoring provider response of type %s", type(raw).__name__)
        return Extraction()

    values: dict[CanonicalField, CoercedValue] = {}
    populated: list[CanonicalField] = []
    for mapping in table:
        if mapping.canonical in values:
            continue
        value = _extract_value(raw, mapping)
        if value is None:
            continue
        values[mapping.canonical] = value
        populated.append(mapping.canonical)
    return Extraction(values=values, fields_populated=tuple(populated))


def extract_provider(raw: object, tables: ProviderTables) -> ProviderExtraction:
    return ProviderExtraction(
        identity=extract(raw, tables.identity),
        configuration=extract(raw, tables.configuration),
    )


def _extract_value(raw: Mapping[str, object], mapping: FieldMapping) -> CoercedValue | None:
    found = lookup(raw, mapping)
    if found is None:
        return None
    key, raw_value = found
    if mapping.prepare is not None:
        raw_value = mapping.prepare(raw_value)
    value = coerce(raw_value, mapping.kind)
    if value is None:
        log.debug("Dropped %s from key %r: unreadable as %s", mapping.canonical, key, mapping.kind)
        return None
    if mapping.normalize is not None and isinstance(value, str):
        value = mapping.normalize(value)
    return value
