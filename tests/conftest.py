from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

DATA_DIR = Path(__file__).resolve().parent / "data"

E_TRANSIT_VIN = "1FTBW9CK5PKA12345"

JsonObject: TypeAlias = dict[str, object]


def load_json(relative_path: str) -> JsonObject:
    with (DATA_DIR / relative_path).open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def vin() -> str:
    return E_TRANSIT_VIN


@pytest.fixture
def decoded_at() -> datetime:
    return datetime(2025, 3, 14, 9, 30, tzinfo=UTC)


@pytest.fixture
def data_file() -> Callable[[str], Path]:
    def _path(relative_path: str) -> Path:
        return DATA_DIR / relative_path

    return _path


@pytest.fixture
def nhtsa_envelope() -> JsonObject:
    return load_json("nhtsa/decode_e_transit.json")


@pytest.fixture
def nhtsa_row(nhtsa_envelope: JsonObject) -> JsonObject:
    results = nhtsa_envelope["Results"]
    assert isinstance(results, list)
    return results[0]


@pytest.fixture
def epa_vehicle() -> JsonObject:
    return load_json("epa/vehicle_e_transit.json")


@pytest.fixture
def minimal_primary() -> JsonObject:
    """The smallest decode row that still carries every critical field."""

    return {
        "ModelYear": "2024",
        "Make": "Ford",
        "Model": "E-Transit",
        "GVWR": "9500",
        "CurbWeightLB": "5620",
    }
