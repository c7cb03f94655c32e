from __future__ import annotations

from vinrecon.domain.model import FieldKind
from vinrecon.domain.reconciliation import FieldMapping, lookup, table_fields

YEAR = FieldMapping("model_year", "ModelYear", ("Model_Year", "Model Year"), kind=FieldKind.INTEGER)


def test_exact_key_wins() -> None:
    raw = {"modelyear": "2023", "ModelYear": "2024"}

    assert lookup(raw, YEAR) == ("ModelYear", "2024")


def test_case_insensitive_scan_follows_response_order() -> None:
    raw = {"MODELYEAR": "2023", "modelyear": "2024"}

    assert lookup(raw, YEAR) == ("MODELYEAR", "2023")


def test_provider_key_beats_aliases() -> None:
    raw = {"Model Year": "2022", "modelYEAR": "2024"}

    assert lookup(raw, YEAR) == ("modelYEAR", "2024")


def test_aliases_are_tried_in_declared_order() -> None:
    raw = {"Model Year": "2022", "Model_Year": "2023"}

    assert lookup(raw, YEAR) == ("Model_Year", "2023")


def test_alias_matches_case_insensitively() -> None:
    raw = {"model year": "2022"}

    assert lookup(raw, YEAR) == ("model year", "2022")


def test_blank_key_falls_through_to_alias() -> None:
    raw = {"ModelYear": "", "Model_Year": "2023"}

    assert lookup(raw, YEAR) == ("Model_Year", "2023")


def test_sentinel_values_are_skipped_in_case_insensitive_scan() -> None:
    raw = {"modelyear": "Not Applicable", "MODEL YEAR": None, "model_year": "2021"}

    assert lookup(raw, YEAR) == ("model_year", "2021")


def test_only_blank_candidates_return_none() -> None:
    raw = {"ModelYear": "", "Model_Year": "  ", "Model Year": "not applicable"}

    assert lookup(raw, YEAR) is None


def test_missing_key_returns_none() -> None:
    assert lookup({"Make": "Ford"}, YEAR) is None


def test_non_string_keys_are_skipped() -> None:
    raw = {1: "x", "Model_Year": "2023"}

    assert lookup(raw, YEAR) == ("Model_Year", "2023")  # type: ignore[arg-type]


def test_table_fields_deduplicates_in_order() -> None:
    table = (
        FieldMapping("gross_vehicle_weight_rating", "GVWR"),
        FieldMapping("curb_weight", "CurbWeightLB"),
        FieldMapping("gross_vehicle_weight_rating", "GVWR_to"),
    )

    assert table_fields(table) == ("gross_vehicle_weight_rating", "curb_weight")


def test_normalizer_does_not_affect_equality() -> None:
    assert FieldMapping("fuel_type", "FuelTypePrimary", normalize=str.lower) == FieldMapping(
        "fuel_type", "FuelTypePrimary"
    )
