"""Translate NHTSA vPIC envelopes into a raw primary payload for reconciliation."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .schema import NhtsaDecodeEnvelope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vinrecon.domain.model import RawProviderResponse

log = getLogger(__name__)

_CLEAN_ERROR_CODE = "0"
_FATAL_ERROR_PREFIXES = ("1", "2")


def parse_decode_envelope(payload: Mapping[str, object]) -> NhtsaDecodeEnvelope:
    return NhtsaDecodeEnvelope.model_validate(payload)


def is_fatal_error_code(error_code: object) -> bool:
    """Return True for vPIC error codes that mean the VIN could not be decoded.

    ``ErrorCode`` may hold several comma-separated codes ("1,11,400"); vPIC
    treats codes starting with 1 or 2 as decode failures and everything else
    as warnings about an otherwise usable row.
    """

    if not isinstance(error_code, str):
        return False
    code = error_code.strip()
    if not code or code == _CLEAN_ERROR_CODE:
        return False
    return code.startswith(_FATAL_ERROR_PREFIXES)


def primary_payload(envelope: NhtsaDecodeEnvelope) -> RawProviderResponse:
    """Return the first result row, or an empty payload when it is unusable."""

    if not envelope.results:
        log.warning("NHTSA returned no result rows: %s", envelope.message)
        return {}
    row = envelope.results[0]
    error_code = row.get("ErrorCode")
    if is_fatal_error_code(error_code):
        log.warning(
            "NHTSA decode failed for %s: ErrorCode=%s, ErrorText=%s",
            envelope.search_criteria,
            error_code,
            row.get("ErrorText"),
        )
        return {}
    if error_code not in (None, "", _CLEAN_ERROR_CODE):
        log.info(
            "NHTSA decode warning: ErrorCode=%s, ErrorText=%s", error_code, row.get("ErrorText")
        )
    return row
