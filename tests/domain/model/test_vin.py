from __future__ import annotations

import pytest

from vinrecon.domain.model import VinValidationError, validate_vin


@pytest.mark.parametrize(
    "vin",
    [
        "1FTBW9CK5PKA12345",
        "00000000000000000",
        "ZZZZZZZZZZZZZZZZZ",
        "1HGCM82633A004352",
    ],
)
def test_valid_vins_are_returned_unchanged(vin: str) -> None:
    assert validate_vin(vin) == vin


@pytest.mark.parametrize(
    "vin",
    [
        "",
        "1FTBW9CK5PKA1234",
        "1FTBW9CK5PKA123456",
    ],
)
def test_wrong_length_is_rejected(vin: str) -> None:
    with pytest.raises(VinValidationError, match="exactly 17 characters"):
        validate_vin(vin)


@pytest.mark.parametrize(
    "vin",
    [
        "1FTBW9CK5PKI12345",
        "1FTBW9CK5PKO12345",
        "1FTBW9CK5PKQ12345",
        "1ftbw9ck5pka12345",
        "1FTBW9CK5PK-12345",
        " FTBW9CK5PKA12345",
    ],
)
def test_forbidden_characters_are_rejected(vin: str) -> None:
    with pytest.raises(VinValidationError, match="cannot contain I, O, or Q"):
        validate_vin(vin)


def test_non_string_is_rejected() -> None:
    with pytest.raises(VinValidationError, match="must be a string"):
        validate_vin(12345678901234567)


def test_validation_error_is_a_value_error() -> None:
    assert issubclass(VinValidationError, ValueError)
