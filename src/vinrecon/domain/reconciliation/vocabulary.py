"""Controlled vocabularies for categorical vehicle attributes.

Providers describe the same fuel or drivetrain in different words
("Regular Gasoline" vs "Gasoline", "4WD/4-Wheel Drive/4x4" vs "4-Wheel Drive").
These normalizers map known spellings onto one value. Unknown drive and
rear-wheel wording passes through unchanged; unknown fuel types are kept but
lower-cased.
"""

from __future__ import annotations

from vinrecon.domain.model import RearWheels

_FUEL_TYPE_MAP: dict[str, str] = {
    "gasoline": "gasoline",
    "regular gasoline": "gasoline",
    "premium gasoline": "gasoline",
    "midgrade gasoline": "gasoline",
    "regular": "gasoline",
    "premium": "gasoline",
    "midgrade": "gasoline",
    "diesel": "diesel",
    "electric": "electric",
    "electricity": "electric",
    "compressed natural gas (cng)": "cng",
    "compressed natural gas": "cng",
    "cng": "cng",
    "liquefied petroleum gas (propane or lpg)": "propane",
    "propane": "propane",
    "hydrogen": "hydrogen",
    "e85": "flex_fuel",
    "ethanol (e85)": "flex_fuel",
    "flexible fuel vehicle (ffv)": "flex_fuel",
    "hybrid": "hybrid",
}

_DRIVE_TYPE_MAP: dict[str, str] = {
    "rwd": "RWD",
    "rear wheel drive": "RWD",
    "rear-wheel drive": "RWD",
    "rwd/rear-wheel drive": "RWD",
    "4x2": "RWD",
    "fwd": "FWD",
    "front wheel drive": "FWD",
    "front-wheel drive": "FWD",
    "fwd/front-wheel drive": "FWD",
    "awd": "AWD",
    "all wheel drive": "AWD",
    "all-wheel drive": "AWD",
    "awd/all-wheel drive": "AWD",
    "4-wheel or all-wheel drive": "AWD",
    "4wd": "4WD",
    "4-wheel drive": "4WD",
    "four-wheel drive": "4WD",
    "part-time 4-wheel drive": "4WD",
    "4wd/4-wheel drive/4x4": "4WD",
    "4x4": "4WD",
}


def normalize_fuel_type(value: str) -> str:
    key = value.strip().casefold()
    return _FUEL_TYPE_MAP.get(key, key)


def normalize_drive_type(value: str) -> str:
    return _DRIVE_TYPE_MAP.get(value.strip().casefold(), value)


def normalize_rear_wheels(value: str) -> str:
    """Collapse rear-axle wording to ``SRW``/``DRW`` when it is recognisable."""

    lowered = value.casefold()
    if "single" in lowered or "srw" in lowered:
        return RearWheels.SINGLE
    if "dual" in lowered or "double" in lowered or "drw" in lowered:
        return RearWheels.DUAL
    return value
