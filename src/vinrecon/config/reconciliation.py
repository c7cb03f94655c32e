"""Reconciliation tuning values."""

from __future__ import annotations

from dataclasses import dataclass

from vinrecon.domain.reconciliation import (
    DEFAULT_ROOF_BANDS,
    SECONDARY_AUTHORITATIVE_FIELDS,
    RoofBands,
)

from .env import env_float
from .errors import ConfigurationError

ROOF_LOW_BELOW_ENV_VAR = "VINRECON_ROOF_LOW_BELOW"
ROOF_MEDIUM_BELOW_ENV_VAR = "VINRECON_ROOF_MEDIUM_BELOW"


@dataclass(frozen=True, slots=True)
class ReconciliationConfig:
    roof_bands: RoofBands = DEFAULT_ROOF_BANDS
    secondary_authoritative: frozenset[str] = SECONDARY_AUTHORITATIVE_FIELDS


def get_reconciliation_config() -> ReconciliationConfig:
    low_below = env_float(ROOF_LOW_BELOW_ENV_VAR, DEFAULT_ROOF_BANDS.low_below)
    medium_below = env_float(ROOF_MEDIUM_BELOW_ENV_VAR, DEFAULT_ROOF_BANDS.medium_below)
    try:
        roof_bands = RoofBands(low_below=low_below, medium_below=medium_below)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    return ReconciliationConfig(roof_bands=roof_bands)
