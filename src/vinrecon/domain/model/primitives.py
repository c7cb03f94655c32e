"""Domain primitives: scalar aliases + identifier validation."""

from __future__ import annotations

from typing import TypeAlias

import re
from collections.abc import Mapping

Vin: TypeAlias = str
CanonicalField: TypeAlias = str
RawProviderResponse: TypeAlias = Mapping[str, object]

VIN_LENGTH = 17
_VIN_PATTERN = re.compile(r"[0-9A-HJ-NPR-Z]{17}")


class VinValidationError(ValueError):
    """Raised when a vehicle identification number is malformed."""


def validate_vin(vin: object) -> Vin:
    """Return ``vin`` unchanged or raise ``VinValidationError``.

    A valid VIN is exactly 17 characters of digits and upper-case letters,
    excluding ``I``, ``O`` and ``Q``. No case folding or trimming happens here;
    callers normalise user input before handing it to the engine.
    """

    if not isinstance(vin, str):
        raise VinValidationError(f"VIN must be a string, got {type(vin).__name__}")
    if len(vin) != VIN_LENGTH:
        raise VinValidationError(f"VIN must be exactly {VIN_LENGTH} characters, got {len(vin)}")
    if _VIN_PATTERN.fullmatch(vin) is None:
        raise VinValidationError("Invalid VIN format. VINs cannot contain I, O, or Q")
    return vin
