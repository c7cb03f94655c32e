from __future__ import annotations

import logging

import pytest

from vinrecon.config import (
    LOG_LEVEL_ENV_VAR,
    ROOF_LOW_BELOW_ENV_VAR,
    ROOF_MEDIUM_BELOW_ENV_VAR,
    ConfigurationError,
    ReconciliationConfig,
    env_float,
    get_log_level,
    get_reconciliation_config,
    optional_env_var,
)
from vinrecon.domain.reconciliation import DEFAULT_ROOF_BANDS, RoofBands


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (LOG_LEVEL_ENV_VAR, ROOF_LOW_BELOW_ENV_VAR, ROOF_MEDIUM_BELOW_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = get_reconciliation_config()

    assert config == ReconciliationConfig()
    assert config.roof_bands == DEFAULT_ROOF_BANDS
    assert config.secondary_authoritative == frozenset({"mpg_city", "mpg_highway"})


def test_roof_band_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ROOF_LOW_BELOW_ENV_VAR, "75")
    monkeypatch.setenv(ROOF_MEDIUM_BELOW_ENV_VAR, " 95.5 ")

    config = get_reconciliation_config()

    assert config.roof_bands == RoofBands(low_below=75.0, medium_below=95.5)


def test_unparseable_override_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ROOF_LOW_BELOW_ENV_VAR, "eighty")

    with pytest.raises(ConfigurationError, match=ROOF_LOW_BELOW_ENV_VAR):
        get_reconciliation_config()


def test_non_increasing_bands_raise(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ROOF_LOW_BELOW_ENV_VAR, "95")

    with pytest.raises(ConfigurationError, match="strictly increasing"):
        get_reconciliation_config()


def test_blank_values_count_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VINRECON_EXAMPLE", "   ")

    assert optional_env_var("VINRECON_EXAMPLE") is None
    assert env_float("VINRECON_EXAMPLE", 1.5) == 1.5


def test_log_level_default_and_override(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_log_level() == logging.INFO

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

    assert get_log_level() == logging.DEBUG


def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

    with pytest.raises(ConfigurationError, match="not a logging level"):
        get_log_level()


def test_configuration_error_is_runtime_error() -> None:
    assert issubclass(ConfigurationError, RuntimeError)
