"""fueleconomy.gov adapter (secondary source)."""

from __future__ import annotations

from .mappings import EPA_CONFIGURATION, EPA_IDENTITY, EPA_TABLES
from .schema import EpaMenuItem, EpaMenuOptions
from .translator import epa_vehicle_id, parse_menu_options, secondary_payload

__all__ = [
    "EPA_CONFIGURATION",
    "EPA_IDENTITY",
    "EPA_TABLES",
    "EpaMenuItem",
    "EpaMenuOptions",
    "epa_vehicle_id",
    "parse_menu_options",
    "secondary_payload",
]
