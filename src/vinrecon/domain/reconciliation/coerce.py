"""Value coercion for raw provider scalars.

Every provider value passes through :func:`coerce` before it can reach a
canonical record. This is the only place that knows about sentinel strings
such as ``"Not Applicable"``; nothing downstream special-cases them.

Coercion never raises. Anything that cannot be read as the requested kind
becomes ``None`` so that one malformed field never aborts a reconciliation.
"""

from __future__ import annotations

from typing import TypeAlias

import math
import re

from vinrecon.domain.model import FieldKind

_SENTINELS = frozenset({"not applicable"})
_AFFIRMATIVE = frozenset({"yes", "true"})

_RANGE_SEPARATOR = re.compile(r"-|–|\bto\b", re.IGNORECASE)
_LEADING_NON_DIGITS = re.compile(r"^\D+")
_INTEGER_RUN = re.compile(r"\d+")
_FLOAT_RUN = re.compile(r"\d+(?:\.\d+)?")

CoercedValue: TypeAlias = str | int | float | bool


def coerce(raw: object, kind: FieldKind) -> CoercedValue | None:
    """Return ``raw`` as ``kind`` or ``None`` when it is absent or unreadable."""

    if is_sentinel(raw):
        return None
    match kind:
        case FieldKind.STRING:
            return _coerce_string(raw)
        case FieldKind.INTEGER:
            return _coerce_integer(raw)
        case FieldKind.FLOAT:
            return _coerce_float(raw)
        case FieldKind.BOOLEAN:
            return _coerce_boolean(raw)
    return None


def is_sentinel(raw: object) -> bool:
    """True for values that mean "not provided" regardless of target kind."""

    if raw is None:
        return True
    if isinstance(raw, str):
        stripped = raw.strip()
        return not stripped or stripped.casefold() in _SENTINELS
    return False


def _coerce_string(raw: object) -> str | None:
    if isinstance(raw, str):
        return raw.strip()
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, float):
        return str(raw) if math.isfinite(raw) else None
    return None


def _coerce_integer(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _INTEGER_RUN.match(_first_component(raw))
        return int(match.group()) if match else None
    return None


def _coerce_float(raw: object) -> float | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return float(raw)
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _FLOAT_RUN.match(_first_component(raw))
        return float(match.group()) if match else None
    return None


def _coerce_boolean(raw: object) -> bool | None:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return raw.strip().casefold() in _AFFIRMATIVE
    return None


def _first_component(text: str) -> str:
    """Reduce ranges and comma lists to their first entry, then drop leading non-digits.

    ``"6001 - 7000 lb"`` -> ``"6001"``; ``"26001, 7000"`` -> ``"26001"``.
    The first listed value wins; components are never averaged.
    """

    head = _RANGE_SEPARATOR.split(text, maxsplit=1)[0]
    head = head.split(",", 1)[0]
    return _LEADING_NON_DIGITS.sub("", head.strip())
