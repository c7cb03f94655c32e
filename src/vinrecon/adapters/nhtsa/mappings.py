"""Mapping tables for the NHTSA vPIC ``DecodeVinValues`` flat result row.

vPIC has shipped the same variable under CamelCase, underscore and
human-readable spellings ("ModelYear", "Model_Year", "Model Year"), so each
entry lists the spellings seen in the wild after its preferred key.
"""

from __future__ import annotations

from vinrecon.domain.model import FieldKind
from vinrecon.domain.reconciliation.mappings import FieldMapping, ProviderTables
from vinrecon.domain.reconciliation.vocabulary import (
    normalize_drive_type,
    normalize_fuel_type,
    normalize_rear_wheels,
)

from .values import clean_weight_rating, feature_availability

_INT = FieldKind.INTEGER
_FLOAT = FieldKind.FLOAT
_BOOL = FieldKind.BOOLEAN

NHTSA_IDENTITY: tuple[FieldMapping, ...] = (
    FieldMapping("model_year", "ModelYear", ("Model_Year", "Model Year"), kind=_INT),
    FieldMapping("make_name", "Make"),
    FieldMapping("model_name", "Model"),
    FieldMapping("series_or_trim", "Series", ("Trim",)),
)

NHTSA_CONFIGURATION: tuple[FieldMapping, ...] = (
    # body / classification
    FieldMapping("body_style", "BodyClass", ("Body_Class", "Body Class", "BodyType", "Body Type")),
    FieldMapping("vehicle_type", "VehicleType", ("Vehicle_Type", "Vehicle Type")),
    FieldMapping("cab_type", "CabType", ("Cab_Type", "Cab Type")),
    FieldMapping("doors", "Doors", kind=_INT),
    FieldMapping(
        "drive_type", "DriveType", ("Drive_Type", "Drive Type"), normalize=normalize_drive_type
    ),
    # dimensions
    FieldMapping(
        "wheelbase",
        "WheelBaseLong",
        ("WheelBaseShort", "Wheelbase", "Wheelbase_inches", "Wheelbase (inches)"),
        kind=_FLOAT,
    ),
    FieldMapping("wheelbase_type", "WheelBaseType", ("Wheelbase_Type", "Wheelbase Type")),
    FieldMapping("bed_length", "BedLengthIN", ("BedLength", "Bed Length (inches)"), kind=_FLOAT),
    FieldMapping(
        "overall_length",
        "OverallLength",
        ("Overall_Length", "Overall Length (inches)"),
        kind=_FLOAT,
    ),
    FieldMapping(
        "overall_width", "OverallWidth", ("Overall_Width", "Overall Width (inches)"), kind=_FLOAT
    ),
    FieldMapping(
        "overall_height",
        "OverallHeight",
        ("Overall_Height", "Overall Height (inches)"),
        kind=_FLOAT,
    ),
    # weights
    FieldMapping(
        "curb_weight", "CurbWeightLB", ("CurbWeight", "Curb_Weight", "Curb Weight (lbs)"), kind=_INT
    ),
    FieldMapping(
        "gross_vehicle_weight_rating",
        "GVWR",
        ("Gross_Vehicle_Weight_Rating_GVWR", "Gross Vehicle Weight Rating (GVWR)"),
        kind=_INT,
        prepare=clean_weight_rating,
    ),
    # ranged ratings sometimes only carry the upper bound
    FieldMapping(
        "gross_vehicle_weight_rating", "GVWR_to", kind=_INT, prepare=clean_weight_rating
    ),
    FieldMapping(
        "gawr_front",
        "GAWR_Front",
        ("GAWRFront", "Gross Axle Weight Rating (GAWR) - Front"),
        kind=_INT,
    ),
    FieldMapping(
        "gawr_rear",
        "GAWR_Rear",
        ("GAWRRear", "Gross Axle Weight Rating (GAWR) - Rear"),
        kind=_INT,
    ),
    # powertrain
    FieldMapping("engine_description", "EngineModel", ("Engine_Model", "Engine Model")),
    FieldMapping(
        "engine_configuration",
        "EngineConfiguration",
        ("Engine_Configuration", "Engine Configuration"),
    ),
    FieldMapping(
        "engine_cylinders",
        "EngineCylinders",
        ("Engine_Number_of_Cylinders", "Engine Number of Cylinders"),
        kind=_INT,
    ),
    FieldMapping(
        "displacement_liters", "DisplacementL", ("Displacement_L", "Displacement (L)"), kind=_FLOAT
    ),
    FieldMapping("transmission", "TransmissionStyle", ("Transmission_Style", "Transmission Style")),
    FieldMapping(
        "transmission_speeds",
        "TransmissionSpeeds",
        ("Transmission_Speeds", "Transmission Speeds"),
        kind=_INT,
    ),
    FieldMapping(
        "horsepower", "EngineHP", ("Engine_Brake_hp_From", "Engine Brake (hp) From"), kind=_INT
    ),
    FieldMapping("engine_kw", "EngineKW", ("Engine_Power_kW", "Engine Power (kW)"), kind=_FLOAT),
    FieldMapping(
        "fuel_type",
        "FuelTypePrimary",
        ("Fuel_Type_Primary", "Fuel Type - Primary"),
        normalize=normalize_fuel_type,
    ),
    FieldMapping(
        "electrification_level",
        "ElectrificationLevel",
        ("Electrification_Level", "Electrification Level"),
    ),
    FieldMapping("ev_drive_unit", "EVDriveUnit", ("EV_Drive_Unit", "EV Drive Unit")),
    FieldMapping(
        "battery_kwh",
        "BatteryKWh",
        ("BatteryEnergy", "Battery_Energy_kWh", "Battery Energy (kWh)"),
        kind=_FLOAT,
    ),
    FieldMapping(
        "battery_voltage",
        "BatteryV",
        ("BatteryVoltage", "Battery_Voltage_V", "Battery Voltage (V)"),
        kind=_FLOAT,
    ),
    # capacity
    FieldMapping(
        "seating_capacity",
        "Seats",
        ("SeatingCapacity", "Seating_Capacity", "Seating Capacity"),
        kind=_INT,
    ),
    FieldMapping(
        "seat_rows", "SeatRows", ("Number_of_Seat_Rows", "Number of Seat Rows"), kind=_INT
    ),
    FieldMapping(
        "fuel_tank_gallons",
        "FuelTankCapacity",
        ("Fuel_Tank_Capacity_gallons", "Fuel Tank Capacity (gallons)"),
        kind=_FLOAT,
    ),
    FieldMapping(
        "towing_capacity",
        "TowingCapacity",
        ("Towing Capacity", "Maximum Towing Capacity (lbs)"),
        kind=_INT,
    ),
    # axle / wheels
    FieldMapping(
        "axle_description",
        "AxleConfiguration",
        ("Axle_Configuration", "Axle Configuration"),
    ),
    FieldMapping("axles", "Axles", ("Number_of_Axles", "Number of Axles"), kind=_INT),
    FieldMapping(
        "rear_wheels",
        "RearAxle",
        ("RearAxleType", "Rear_Axle_Type", "GAWR Rear (lbs) Dual/Single"),
        normalize=normalize_rear_wheels,
    ),
    # features
    FieldMapping(
        "bluetooth_capable",
        "BluetoothCapable",
        ("Bluetooth", "BluetoothCapability", "Bluetooth Capability", "Bluetooth Enabled"),
        kind=_BOOL,
        prepare=feature_availability,
    ),
    FieldMapping(
        "backup_camera",
        "BackupCamera",
        ("Backup_Camera", "Backup Camera", "Rear View Camera", "Backup Camera System"),
        kind=_BOOL,
        prepare=feature_availability,
    ),
    FieldMapping(
        "tpms",
        "TPMS",
        (
            "Tire_Pressure_Monitoring_System_TPMS",
            "Tire Pressure Monitoring System (TPMS)",
            "Tire Pressure Monitoring",
        ),
        kind=_BOOL,
        prepare=feature_availability,
    ),
)

NHTSA_TABLES = ProviderTables(
    name="nhtsa",
    identity=NHTSA_IDENTITY,
    configuration=NHTSA_CONFIGURATION,
)
