"""Canonical vehicle records produced by reconciliation.

Both records are flat, frozen and independently nullable: ``None`` means the
value is unknown, which is different from a coerced ``0`` or ``False``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .primitives import CanonicalField


class _CanonicalRecord:
    """Shared helpers for the flat canonical records."""

    __slots__ = ()

    @classmethod
    def field_names(cls) -> tuple[CanonicalField, ...]:
        return tuple(field.name for field in dataclasses.fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_values(cls, values: Mapping[CanonicalField, object]) -> Self:
        """Build a record from a canonical-name mapping; unknown names raise ``TypeError``."""

        return cls(**values)

    def populated_fields(self) -> tuple[CanonicalField, ...]:
        """Names holding a non-``None`` value, in declaration order."""

        return tuple(name for name in self.field_names() if getattr(self, name) is not None)

    def values(self) -> dict[CanonicalField, object]:
        """Populated values only."""

        return {name: getattr(self, name) for name in self.populated_fields()}

    def as_dict(self) -> dict[CanonicalField, object]:
        return {name: getattr(self, name) for name in self.field_names()}

    def replace(self, **changes: object) -> Self:
        return dataclasses.replace(self, **changes)  # type: ignore[type-var]


@dataclass(frozen=True, slots=True, kw_only=True)
class VehicleIdentity(_CanonicalRecord):
    """The base vehicle, independent of any specific configuration."""

    model_year: int | None = None
    make_name: str | None = None
    model_name: str | None = None
    series_or_trim: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class VehicleConfiguration(_CanonicalRecord):
    """One concrete configuration of a vehicle.

    Dimensions are inches, weights pounds, efficiency figures miles per gallon
    (or gallon equivalent), ranges miles.
    """

    # body / classification
    body_style: str | None = None
    vehicle_type: str | None = None
    cab_type: str | None = None
    doors: int | None = None
    drive_type: str | None = None
    height_type: str | None = None

    # dimensions
    wheelbase: float | None = None
    wheelbase_type: str | None = None
    bed_length: float | None = None
    overall_length: float | None = None
    overall_width: float | None = None
    overall_height: float | None = None

    # weights
    curb_weight: int | None = None
    gross_vehicle_weight_rating: int | None = None
    gawr_front: int | None = None
    gawr_rear: int | None = None
    payload_capacity: int | None = None

    # powertrain
    engine_description: str | None = None
    engine_configuration: str | None = None
    engine_cylinders: int | None = None
    displacement_liters: float | None = None
    transmission: str | None = None
    transmission_speeds: int | None = None
    horsepower: int | None = None
    engine_kw: float | None = None
    fuel_type: str | None = None
    electrification_level: str | None = None
    ev_drive_unit: str | None = None
    battery_kwh: float | None = None
    battery_voltage: float | None = None

    # capacity
    seating_capacity: int | None = None
    seat_rows: int | None = None
    fuel_tank_gallons: float | None = None
    towing_capacity: int | None = None

    # efficiency
    mpg_city: int | None = None
    mpg_highway: int | None = None
    mpg_combined: int | None = None
    mpge: int | None = None
    electric_range_miles: int | None = None
    annual_fuel_cost: int | None = None
    co2_grams_per_mile: float | None = None

    # axle / wheels
    axle_description: str | None = None
    axles: int | None = None
    rear_wheels: str | None = None

    # features
    bluetooth_capable: bool | None = None
    backup_camera: bool | None = None
    tpms: bool | None = None
