"""Join inventory and funding records for one project.

Records are matched on a normalized unit key. Every inventory record yields
exactly one merged row, in input order; funding records only contribute the
collected amount. Missing values degrade to display defaults instead of
failing the project.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .dates import format_display_date
from .model import MISSING_NUMBER, MISSING_TEXT, MergedRow

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .model import FundingRecord, InventoryRecord, Number

type JoinKey = str

log = getLogger(__name__)


def normalize_unit_key(value: str | None) -> JoinKey:
    """Trim and case-fold a unit identifier; absent input maps to ``""``."""

    if not value:
        return ""
    return value.strip().casefold()


def index_funding(funding: Iterable[FundingRecord]) -> dict[JoinKey, FundingRecord]:
    """Map join keys to funding records; the last record seen for a key wins."""

    index: dict[JoinKey, FundingRecord] = {}
    discarded = 0
    for record in funding:
        key = normalize_unit_key(record.unit_name)
        if not key:
            discarded += 1
            continue
        index[key] = record
    if discarded:
        log.debug("Discarded %s funding records without a unit identifier", discarded)
    return index


def _number_or_default(value: Number | None) -> Number:
    return value if value else MISSING_NUMBER


def _text_or_default(value: str | None) -> str:
    return value if value else MISSING_TEXT


def merge_record(
    project_name: str,
    record: InventoryRecord,
    funding_by_key: Mapping[JoinKey, FundingRecord],
) -> MergedRow:
    match = funding_by_key.get(normalize_unit_key(record.unit_name))
    collected = match.amount_collected if match is not None else None
    return MergedRow(
        project=project_name,
        unit_name=_text_or_default(record.unit_name),
        status=_text_or_default(record.status),
        area=_number_or_default(record.area),
        price=_number_or_default(record.price),
        lock_date_display=format_display_date(record.lock_date),
        formalized_date_display=format_display_date(record.formalized_date),
        amount_collected=_number_or_default(collected),
    )


def reconcile(
    project_name: str,
    inventory: Iterable[InventoryRecord],
    funding: Iterable[FundingRecord],
) -> list[MergedRow]:
    """Produce one merged row per inventory record, preserving inventory order."""

    funding_by_key = index_funding(funding)
    return [merge_record(project_name, record, funding_by_key) for record in inventory]


__all__ = ["JoinKey", "index_funding", "merge_record", "normalize_unit_key", "reconcile"]
