"""Declarative provider-field -> canonical-field mapping tables.

Providers are observed to vary key casing, spacing and punctuation between
API versions and even within one response. Each canonical field therefore
declares one preferred provider key plus an ordered list of aliases, and a
single lookup function resolves them in a fixed order:

1. the provider key, exact (case-sensitive) match
2. the provider key, case-insensitive scan over the response keys
3. each alias in declared order, exact match first, then case-insensitive

A key matches when it is present and its value is not a sentinel (see
:func:`~vinrecon.domain.reconciliation.coerce.is_sentinel`); blank keys fall
through to the next candidate. The first match wins and no later key is
consulted, so two differently-cased keys carrying different values always
resolve the same way.
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from vinrecon.domain.model import FieldKind

from .coerce import is_sentinel

Normalizer: TypeAlias = Callable[[str], str]
RawValueHook: TypeAlias = Callable[[object], object]


@dataclass(frozen=True, slots=True)
class FieldMapping:
    canonical: str
    provider_field: str
    aliases: tuple[str, ...] = ()
    kind: FieldKind = FieldKind.STRING
    normalize: Normalizer | None = field(default=None, compare=False)
    prepare: RawValueHook | None = field(default=None, compare=False)

    @property
    def candidate_keys(self) -> tuple[str, ...]:
        return (self.provider_field, *self.aliases)


MappingTable: TypeAlias = tuple[FieldMapping, ...]


@dataclass(frozen=True, slots=True)
class ProviderTables:
    """The two mapping tables of one provider."""

    name: str
    identity: MappingTable
    configuration: MappingTable


def lookup(raw: Mapping[str, object], mapping: FieldMapping) -> tuple[str, object] | None:
    """Return the ``(key, value)`` pair that satisfies ``mapping`` or ``None``."""

    for candidate in mapping.candidate_keys:
        if candidate in raw and not is_sentinel(raw[candidate]):
            return candidate, raw[candidate]
        folded = candidate.casefold()
        for key, value in raw.items():
            if isinstance(key, str) and key.casefold() == folded and not is_sentinel(value):
                return key, value
    return None


def table_fields(table: MappingTable) -> tuple[str, ...]:
    """Canonical names declared by ``table`` in order, without duplicates."""

    return tuple(dict.fromkeys(mapping.canonical for mapping in table))
