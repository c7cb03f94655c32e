"""Precedence rules for combining primary and secondary configuration fragments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from vinrecon.domain.model import CanonicalField

    from .extract import Extraction

SECONDARY_AUTHORITATIVE_FIELDS: Final[frozenset[str]] = frozenset({"mpg_city", "mpg_highway"})


@dataclass(frozen=True, slots=True)
class MergeOutcome:
    values: dict[CanonicalField, object]
    from_primary: tuple[CanonicalField, ...]
    from_secondary: tuple[CanonicalField, ...]


def merge_configurations(
    primary: Extraction,
    secondary: Extraction | None,
    *,
    secondary_authoritative: Iterable[CanonicalField] = SECONDARY_AUTHORITATIVE_FIELDS,
) -> MergeOutcome:
    """Overlay ``secondary`` onto ``primary``.

    A secondary value is taken when the primary fragment lacks the field or
    the field is secondary-authoritative. Only fields actually taken are
    reported as coming from the secondary source; a primary field replaced by
    an authoritative secondary value is no longer reported as primary.
    """

    authoritative = frozenset(secondary_authoritative)
    values: dict[CanonicalField, object] = dict(primary.values)
    from_secondary: list[CanonicalField] = []
    if secondary is not None:
        for name in secondary.fields_populated:
            if _secondary_wins(name, primary.values, authoritative):
                values[name] = secondary.values[name]
                from_secondary.append(name)
    taken = set(from_secondary)
    from_primary = tuple(name for name in primary.fields_populated if name not in taken)
    return MergeOutcome(
        values=values,
        from_primary=from_primary,
        from_secondary=tuple(from_secondary),
    )


def _secondary_wins(
    name: CanonicalField,
    primary_values: Mapping[CanonicalField, object],
    authoritative: frozenset[CanonicalField],
) -> bool:
    return name not in primary_values or name in authoritative
