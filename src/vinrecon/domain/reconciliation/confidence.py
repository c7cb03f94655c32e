"""Confidence classification from field presence.

Confidence summarises how completely a record was populated. It never looks
at values, so an implausible horsepower counts the same as a plausible one.

A record with every critical field is at least medium even when no important
field is known; otherwise medium needs three quarters of the critical fields
and half of the important ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from vinrecon.domain.model import Confidence

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vinrecon.domain.model import CanonicalField

CRITICAL_FIELDS: Final[frozenset[str]] = frozenset(
    {"model_year", "make_name", "model_name", "gross_vehicle_weight_rating"}
)
IMPORTANT_FIELDS: Final[frozenset[str]] = frozenset(
    {"body_style", "drive_type", "engine_description", "fuel_type"}
)


def classify(fields_populated: Iterable[CanonicalField]) -> Confidence:
    present = set(fields_populated)
    critical = _ratio(present, CRITICAL_FIELDS)
    important = _ratio(present, IMPORTANT_FIELDS)
    if critical == 1.0 and important >= 0.75:
        return Confidence.HIGH
    if critical == 1.0 or (critical >= 0.75 and important >= 0.5):
        return Confidence.MEDIUM
    return Confidence.LOW


def _ratio(present: set[str], required: frozenset[str]) -> float:
    return len(present & required) / len(required)
