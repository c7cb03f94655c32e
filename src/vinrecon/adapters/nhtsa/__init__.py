"""NHTSA vPIC decode adapter (primary source)."""

from __future__ import annotations

from .mappings import NHTSA_CONFIGURATION, NHTSA_IDENTITY, NHTSA_TABLES
from .schema import NhtsaDecodeEnvelope
from .translator import is_fatal_error_code, parse_decode_envelope, primary_payload
from .values import clean_weight_rating, feature_availability

__all__ = [
    "NHTSA_CONFIGURATION",
    "NHTSA_IDENTITY",
    "NHTSA_TABLES",
    "NhtsaDecodeEnvelope",
    "clean_weight_rating",
    "feature_availability",
    "is_fatal_error_code",
    "parse_decode_envelope",
    "primary_payload",
]
