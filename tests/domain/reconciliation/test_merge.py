from __future__ import annotations

from vinrecon.domain.reconciliation import Extraction, merge_configurations


def _extraction(**values: object) -> Extraction:
    return Extraction(values=dict(values), fields_populated=tuple(values))


def test_primary_only() -> None:
    primary = _extraction(fuel_type="diesel", curb_weight=5620)

    outcome = merge_configurations(primary, None)

    assert outcome.values == {"fuel_type": "diesel", "curb_weight": 5620}
    assert outcome.from_primary == ("fuel_type", "curb_weight")
    assert outcome.from_secondary == ()


def test_primary_wins_shared_fields() -> None:
    primary = _extraction(fuel_type="diesel", drive_type="RWD")
    secondary = _extraction(fuel_type="gasoline", drive_type="4WD", mpg_combined=20)

    outcome = merge_configurations(primary, secondary)

    assert outcome.values == {"fuel_type": "diesel", "drive_type": "RWD", "mpg_combined": 20}
    assert outcome.from_primary == ("fuel_type", "drive_type")
    assert outcome.from_secondary == ("mpg_combined",)


def test_secondary_is_authoritative_for_city_and_highway_mpg() -> None:
    primary = _extraction(mpg_city=15, mpg_highway=19, fuel_type="gasoline")
    secondary = _extraction(mpg_city=16, mpg_highway=21)

    outcome = merge_configurations(primary, secondary)

    assert outcome.values == {"mpg_city": 16, "mpg_highway": 21, "fuel_type": "gasoline"}
    assert outcome.from_primary == ("fuel_type",)
    assert outcome.from_secondary == ("mpg_city", "mpg_highway")


def test_shadowed_secondary_fields_are_not_reported() -> None:
    primary = _extraction(fuel_type="electric", transmission="Automatic")
    secondary = _extraction(
        mpg_city=28, mpg_highway=32, fuel_type="electric", transmission="Automatic (A1)"
    )

    outcome = merge_configurations(primary, secondary)

    assert outcome.from_secondary == ("mpg_city", "mpg_highway")
    assert outcome.values["transmission"] == "Automatic"


def test_each_field_has_exactly_one_source() -> None:
    primary = _extraction(mpg_city=15, doors=3)
    secondary = _extraction(mpg_city=16, doors=4, mpge=90)

    outcome = merge_configurations(primary, secondary)

    assert not set(outcome.from_primary) & set(outcome.from_secondary)
    assert set(outcome.from_primary) | set(outcome.from_secondary) == set(outcome.values)


def test_custom_authoritative_fields() -> None:
    primary = _extraction(fuel_type="gasoline", mpg_city=15)
    secondary = _extraction(fuel_type="flex_fuel", mpg_city=16)

    outcome = merge_configurations(primary, secondary, secondary_authoritative={"fuel_type"})

    assert outcome.values == {"fuel_type": "flex_fuel", "mpg_city": 15}
    assert outcome.from_secondary == ("fuel_type",)
