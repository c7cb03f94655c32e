"""Pydantic models describing the NHTSA vPIC ``DecodeVinValues`` envelope."""

from __future__ import annotations

import logging
from typing import ClassVar, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)

ResultRow: TypeAlias = dict[str, object]


class NhtsaBaseModel(BaseModel):
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
            "NHTSA %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class NhtsaDecodeEnvelope(NhtsaBaseModel):
    """Top level of a ``DecodeVinValues`` response.

    Result rows stay untyped: vPIC adds variables between releases and the
    mapping tables are the only place that interprets them.
    """

    count: int = Field(default=0, alias="Count")
    message: str | None = Field(default=None, alias="Message")
    search_criteria: str | None = Field(default=None, alias="SearchCriteria")
    results: list[ResultRow] = Field(default_factory=list, alias="Results")

    @field_validator("count", mode="before")
    @classmethod
    def _parse_count(cls, value: int | str | None) -> int:
        return int(value) if value not in (None, "") else 0
