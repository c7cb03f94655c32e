"""Derived attributes that no provider supplies directly.

Rules run in a fixed order and each one only writes a field that is still
unset, so a derived guess never replaces a sourced value and running the
calculator on its own output is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from vinrecon.domain.model import RoofHeight

if TYPE_CHECKING:
    from collections.abc import Callable

    from vinrecon.domain.model import CanonicalField, VehicleConfiguration

log = logging.getLogger(__name__)

KW_TO_HP = 1.34102


@dataclass(frozen=True, slots=True)
class RoofBands:
    """Overall-height thresholds (inches) separating low, medium and high roofs."""

    low_below: float = 80.0
    medium_below: float = 90.0

    def __post_init__(self) -> None:
        if self.low_below >= self.medium_below:
            raise ValueError("Roof band thresholds must be strictly increasing")

    def classify(self, overall_height: float) -> RoofHeight:
        if overall_height < self.low_below:
            return RoofHeight.LOW
        if overall_height < self.medium_below:
            return RoofHeight.MEDIUM
        return RoofHeight.HIGH


DEFAULT_ROOF_BANDS = RoofBands()


@dataclass(frozen=True, slots=True)
class Derivation:
    configuration: VehicleConfiguration
    derived_fields: tuple[CanonicalField, ...] = ()


_Rule: TypeAlias = "Callable[[VehicleConfiguration, RoofBands], tuple[CanonicalField, object] | None]"


def derive_fields(
    configuration: VehicleConfiguration,
    *,
    roof_bands: RoofBands = DEFAULT_ROOF_BANDS,
) -> Derivation:
    """Fill derived fields on ``configuration`` and report which were written."""

    derived: list[CanonicalField] = []
    current = configuration
    for rule in _RULES:
        outcome = rule(current, roof_bands)
        if outcome is None:
            continue
        name, value = outcome
        current = current.replace(**{name: value})
        derived.append(name)
        log.debug("Derived %s=%r", name, value)
    return Derivation(configuration=current, derived_fields=tuple(derived))


def _payload_capacity(
    config: VehicleConfiguration, _bands: RoofBands
) -> tuple[CanonicalField, object] | None:
    if config.payload_capacity is not None:
        return None
    gvwr = config.gross_vehicle_weight_rating
    curb = config.curb_weight
    if gvwr is None or curb is None:
        return None
    payload = gvwr - curb
    if payload < 0:
        log.debug("Suppressed negative payload: gvwr=%s curb_weight=%s", gvwr, curb)
        return None
    return "payload_capacity", payload


def _height_type(
    config: VehicleConfiguration, bands: RoofBands
) -> tuple[CanonicalField, object] | None:
    if config.height_type is not None or config.overall_height is None:
        return None
    return "height_type", bands.classify(config.overall_height)


def _engine_description(
    config: VehicleConfiguration, _bands: RoofBands
) -> tuple[CanonicalField, object] | None:
    if config.engine_description is not None:
        return None
    parts: list[str] = []
    if config.engine_configuration:
        parts.append(config.engine_configuration)
    if config.engine_cylinders is not None:
        parts.append(f"{config.engine_cylinders} cyl")
    if config.displacement_liters is not None:
        parts.append(f"{config.displacement_liters:g}L")
    if not parts:
        return None
    return "engine_description", " ".join(parts)


def _horsepower(
    config: VehicleConfiguration, _bands: RoofBands
) -> tuple[CanonicalField, object] | None:
    if config.horsepower is not None or config.engine_kw is None:
        return None
    return "horsepower", round(config.engine_kw * KW_TO_HP)


_RULES: tuple[_Rule, ...] = (
    _payload_capacity,
    _height_type,
    _engine_description,
    _horsepower,
)
