"""Reconciliation of raw provider responses into one canonical vehicle record.

Layered flow:
1) look up and coerce provider fields through declarative mapping tables
2) merge the primary fragment with the secondary one
3) derive fields computable from the merged record
4) classify confidence from field presence
5) assemble the record with per-field provenance
"""

from __future__ import annotations

from .coerce import CoercedValue, coerce, is_sentinel
from .confidence import CRITICAL_FIELDS, IMPORTANT_FIELDS, classify
from .derive import DEFAULT_ROOF_BANDS, KW_TO_HP, Derivation, RoofBands, derive_fields
from .engine import ReconciliationEngine
from .extract import Extraction, ProviderExtraction, extract, extract_provider
from .mappings import FieldMapping, MappingTable, ProviderTables, lookup, table_fields
from .merge import SECONDARY_AUTHORITATIVE_FIELDS, MergeOutcome, merge_configurations
from .overrides import apply_manual_overrides
from .vocabulary import normalize_drive_type, normalize_fuel_type, normalize_rear_wheels

__all__ = [
    "CRITICAL_FIELDS",
    "DEFAULT_ROOF_BANDS",
    "IMPORTANT_FIELDS",
    "KW_TO_HP",
    "SECONDARY_AUTHORITATIVE_FIELDS",
    "CoercedValue",
    "Derivation",
    "Extraction",
    "FieldMapping",
    "MappingTable",
    "MergeOutcome",
    "ProviderExtraction",
    "ProviderTables",
    "ReconciliationEngine",
    "RoofBands",
    "apply_manual_overrides",
    "classify",
    "coerce",
    "derive_fields",
    "extract",
    "extract_provider",
    "is_sentinel",
    "lookup",
    "merge_configurations",
    "normalize_drive_type",
    "normalize_fuel_type",
    "normalize_rear_wheels",
    "table_fields",
]
