"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from vinrecon.adapters.epa import EPA_TABLES, secondary_payload
from vinrecon.adapters.nhtsa import NHTSA_TABLES, parse_decode_envelope, primary_payload
from vinrecon.config import ReconciliationConfig, get_reconciliation_config
from vinrecon.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from datetime import datetime

    from vinrecon.domain.model import RawProviderResponse, ReconciliationResult, Vin

log = getLogger(__name__)

_NHTSA_ENVELOPE_KEY = "Results"


def build_engine(config: ReconciliationConfig | None = None) -> ReconciliationEngine:
    """Wire the NHTSA and EPA tables into an engine tuned by ``config``."""

    effective_config = config or get_reconciliation_config()
    return ReconciliationEngine(
        primary=NHTSA_TABLES,
        secondary=EPA_TABLES,
        roof_bands=effective_config.roof_bands,
        secondary_authoritative=effective_config.secondary_authoritative,
    )


def reconcile_vehicle(
    vin: Vin,
    primary_raw: object,
    secondary_raw: object | None = None,
    *,
    decoded_at: datetime | None = None,
    config: ReconciliationConfig | None = None,
) -> ReconciliationResult:
    """Reconcile one NHTSA decode row with an optional EPA vehicle record."""

    return build_engine(config).reconcile(
        vin,
        primary_raw,
        secondary_raw,
        decoded_at=decoded_at,
    )


def unwrap_primary_response(payload: object) -> object:
    """Accept either a full ``DecodeVinValues`` envelope or its flat result row."""

    if isinstance(payload, Mapping) and _NHTSA_ENVELOPE_KEY in payload:
        return primary_payload(parse_decode_envelope(payload))
    return payload


def unwrap_secondary_response(payload: object) -> RawProviderResponse | None:
    if payload is None:
        return None
    return secondary_payload(payload)
