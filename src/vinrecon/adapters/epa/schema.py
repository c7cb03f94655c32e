"""Pydantic models for the fueleconomy.gov menu endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)


class EpaBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[dict[str, set[str]]] = {}

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        logged = self._logged_extra_keys.setdefault(type(self).__qualname__, set())
        new_keys = set(extras).difference(logged)
        if not new_keys:
            return
        logged.update(new_keys)
        log.warning(
            "EPA %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class EpaMenuItem(EpaBaseModel):
    text: str
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value


class EpaMenuOptions(EpaBaseModel):
    """``/vehicle/menu/options`` response.

    The service collapses a one-element list into a bare object, so
    ``menuItem`` is normalised to a list either way.
    """

    menu_items: list[EpaMenuItem] = Field(default_factory=list, alias="menuItem")

    @field_validator("menu_items", mode="before")
    @classmethod
    def _wrap_single(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, Mapping):
            return [value]
        return value
