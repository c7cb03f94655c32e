"""vPIC value formats that need rewriting before generic coercion.

Weight ratings arrive as class bands ("Class 2H: 9,001 - 10,000 lb
(4,082 - 4,536 kg)") and equipment fields as availability words
("Standard", "Direct"). Both are rewritten into forms the coercion layer
reads correctly; anything unrecognised is returned unchanged.
"""

from __future__ import annotations

import re

_WEIGHT_CLASS_PREFIX = re.compile(r"^\s*class\s+[^:]*:\s*", re.IGNORECASE)
_THOUSANDS_SEPARATOR = re.compile(r"\b(\d{1,3}),(\d{3})\b")

_FEATURE_PRESENT = frozenset({"yes", "true", "standard", "direct", "indirect"})
_FEATURE_UNKNOWN = frozenset({"optional"})


def clean_weight_rating(raw: object) -> object:
    """Drop the ``Class ...:`` band label and thousands separators.

    ``"Class 2H: 9,001 - 10,000 lb"`` -> ``"9001 - 10000 lb"``
    """

    if not isinstance(raw, str):
        return raw
    text = _WEIGHT_CLASS_PREFIX.sub("", raw)
    return _THOUSANDS_SEPARATOR.sub(r"\1\2", text)


def feature_availability(raw: object) -> object:
    """Map equipment availability words onto ``"yes"``.

    ``"Optional"`` says nothing about one specific vehicle and becomes ``None``.
    """

    if not isinstance(raw, str):
        return raw
    word = raw.strip().casefold()
    if word in _FEATURE_PRESENT:
        return "yes"
    if word in _FEATURE_UNKNOWN:
        return None
    return raw
