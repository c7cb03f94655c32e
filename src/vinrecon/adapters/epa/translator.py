"""Translate fueleconomy.gov responses into a raw secondary payload."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from .schema import EpaMenuOptions

if TYPE_CHECKING:
    from vinrecon.domain.model import RawProviderResponse

log = getLogger(__name__)


def parse_menu_options(payload: Mapping[str, object]) -> EpaMenuOptions:
    return EpaMenuOptions.model_validate(payload)


def epa_vehicle_id(menu: EpaMenuOptions) -> int | None:
    """Pick the vehicle id of the first (most common) configuration on offer."""

    if not menu.menu_items:
        log.info("EPA has no configurations for this year/make/model")
        return None
    first = menu.menu_items[0]
    try:
        return int(first.value)
    except ValueError:
        log.warning("EPA menu option %r has a non-numeric value %r", first.text, first.value)
        return None


def secondary_payload(payload: object) -> RawProviderResponse | None:
    if not isinstance(payload, Mapping):
        log.warning("Ignoring EPA vehicle record of type %s", type(payload).__name__)
        return None
    return payload
