"""Mapping tables for the fueleconomy.gov ``/ws/rest/vehicle/{id}`` record."""

from __future__ import annotations

from vinrecon.domain.model import FieldKind
from vinrecon.domain.reconciliation.mappings import FieldMapping, ProviderTables
from vinrecon.domain.reconciliation.vocabulary import normalize_drive_type, normalize_fuel_type

_INT = FieldKind.INTEGER
_FLOAT = FieldKind.FLOAT

EPA_IDENTITY: tuple[FieldMapping, ...] = (
    FieldMapping("model_year", "year", kind=_INT),
    FieldMapping("make_name", "make"),
    FieldMapping("model_name", "model"),
)

EPA_CONFIGURATION: tuple[FieldMapping, ...] = (
    FieldMapping("mpg_city", "city08", kind=_INT),
    FieldMapping("mpg_highway", "highway08", kind=_INT),
    FieldMapping("mpg_combined", "comb08", kind=_INT),
    FieldMapping("mpge", "cityE", kind=_INT),
    FieldMapping("electric_range_miles", "rangeElectric", ("range",), kind=_INT),
    FieldMapping("fuel_type", "fuelType", ("fuelType1",), normalize=normalize_fuel_type),
    FieldMapping("transmission", "trany"),
    FieldMapping("drive_type", "drive", normalize=normalize_drive_type),
    FieldMapping("engine_cylinders", "cylinders", kind=_INT),
    FieldMapping("displacement_liters", "displ", kind=_FLOAT),
    FieldMapping("battery_kwh", "batteryA", kind=_FLOAT),
    FieldMapping("engine_description", "evMotor", ("eng_dscr",)),
    FieldMapping("annual_fuel_cost", "fuelCostA08", ("fuelCost08",), kind=_INT),
    FieldMapping("co2_grams_per_mile", "co2TailpipeGpm", kind=_FLOAT),
    FieldMapping("vehicle_type", "VClass"),
)

EPA_TABLES = ProviderTables(
    name="epa",
    identity=EPA_IDENTITY,
    configuration=EPA_CONFIGURATION,
)
