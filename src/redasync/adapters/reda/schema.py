"""Pydantic models describing the REDA integration API payloads."""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# Commas are only accepted as thousands separators ("1,200,000.50").
_GROUPED_NUMBER = re.compile(r"[-+]?\d{1,3}(?:,\d{3})+(?:\.\d+)?")


def _text_or_none(value: object) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, str):
        return value or None
    return None


def _finite_or_none(value: int | float) -> int | float | None:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _number_or_none(value: object) -> int | float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return _finite_or_none(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        if "," in stripped:
            if not _GROUPED_NUMBER.fullmatch(stripped):
                return None
            stripped = stripped.replace(",", "")
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            return _finite_or_none(float(stripped))
        except ValueError:
            return None
    return None


def _timestamp_or_none(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class RedaBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class InventoryPayload(RedaBaseModel):
    unit_name: str | None = Field(default=None, alias="nombreUnidad")
    status: str | None = Field(default=None, alias="estatus")
    area: int | float | None = Field(default=None, alias="m2")
    price: int | float | None = Field(default=None, alias="precio")
    lock_date: str | None = Field(default=None, alias="fechaBloqueo")
    formalized_date: str | None = Field(default=None, alias="fechaFormalizado")

    _normalize_text = field_validator("unit_name", "status", mode="before")(_text_or_none)
    _normalize_numbers = field_validator("area", "price", mode="before")(_number_or_none)
    _normalize_dates = field_validator("lock_date", "formalized_date", mode="before")(
        _timestamp_or_none
    )


class FundingPayload(RedaBaseModel):
    unit_name: str | None = Field(default=None, alias="unidad")
    amount_collected: int | float | None = Field(default=None, alias="cobrado")

    _normalize_text = field_validator("unit_name", mode="before")(_text_or_none)
    _normalize_numbers = field_validator("amount_collected", mode="before")(_number_or_none)


InventoryListAdapter = TypeAdapter(list[InventoryPayload])
FundingListAdapter = TypeAdapter(list[FundingPayload])
