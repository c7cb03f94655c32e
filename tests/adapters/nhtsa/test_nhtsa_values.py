from __future__ import annotations

import pytest

from vinrecon.adapters.nhtsa import clean_weight_rating, feature_availability


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Class 2H: 9,001 - 10,000 lb (4,082 - 4,536 kg)", "9001 - 10000 lb (4082 - 4536 kg)"),
        ("Class 1C: 4,001 - 5,000 lb (1,814 - 2,268 kg)", "4001 - 5000 lb (1814 - 2268 kg)"),
        ("class 3:10,001 - 14,000 lb", "10001 - 14000 lb"),
        ("9500", "9500"),
        ("26001, 7000", "26001, 7000"),
        (9500, 9500),
    ],
)
def test_clean_weight_rating(raw: object, expected: object) -> None:
    assert clean_weight_rating(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Standard", "yes"),
        ("Direct", "yes"),
        (" indirect ", "yes"),
        ("Yes", "yes"),
        ("Optional", None),
        ("No", "No"),
        (True, True),
    ],
)
def test_feature_availability(raw: object, expected: object) -> None:
    assert feature_availability(raw) == expected
