"""Translate REDA payloads into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from redasync.domain.model import FundingRecord, InventoryRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import FundingPayload, InventoryPayload


def parse_inventory_record(payload: InventoryPayload) -> InventoryRecord:
    return InventoryRecord(
        unit_name=payload.unit_name,
        status=payload.status,
        area=payload.area,
        price=payload.price,
        lock_date=payload.lock_date,
        formalized_date=payload.formalized_date,
    )


def parse_funding_record(payload: FundingPayload) -> FundingRecord:
    return FundingRecord(unit_name=payload.unit_name, amount_collected=payload.amount_collected)


def parse_inventory(payloads: Iterable[InventoryPayload]) -> tuple[InventoryRecord, ...]:
    return tuple(parse_inventory_record(payload) for payload in payloads)


def parse_funding(payloads: Iterable[FundingPayload]) -> tuple[FundingRecord, ...]:
    return tuple(parse_funding_record(payload) for payload in payloads)
