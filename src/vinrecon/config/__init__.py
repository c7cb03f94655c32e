"""Application configuration helpers."""

from __future__ import annotations

from .env import env_float, optional_env_var
from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV_VAR, configure_logging, get_log_level
from .reconciliation import (
    ROOF_LOW_BELOW_ENV_VAR,
    ROOF_MEDIUM_BELOW_ENV_VAR,
    ReconciliationConfig,
    get_reconciliation_config,
)

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "ROOF_LOW_BELOW_ENV_VAR",
    "ROOF_MEDIUM_BELOW_ENV_VAR",
    "ConfigurationError",
    "ReconciliationConfig",
    "configure_logging",
    "env_float",
    "get_log_level",
    "get_reconciliation_config",
    "optional_env_var",
]
