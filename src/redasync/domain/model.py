"""Records flowing through one reconciliation pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

type Number = int | float
type DateDisplay = str | Literal[0]

MISSING_TEXT = "N/A"
MISSING_NUMBER = 0
MISSING_DATE: Literal[0] = 0


@dataclass(frozen=True, slots=True)
class ProjectRef:
    """A real-estate project: its sheet title and its id in the source API."""

    display_name: str
    external_id: int


@dataclass(frozen=True, slots=True)
class InventoryRecord:
    unit_name: str | None = None
    status: str | None = None
    area: Number | None = None
    price: Number | None = None
    lock_date: str | None = None
    formalized_date: str | None = None


@dataclass(frozen=True, slots=True)
class FundingRecord:
    unit_name: str | None = None
    amount_collected: Number | None = None


@dataclass(frozen=True, slots=True)
class ProjectDataset:
    """Raw collections fetched for one project."""

    inventory: tuple[InventoryRecord, ...]
    funding: tuple[FundingRecord, ...]


@dataclass(frozen=True, slots=True)
class MergedRow:
    """One inventory unit joined with its funding, ready to publish."""

    project: str
    unit_name: str
    status: str
    area: Number
    price: Number
    lock_date_display: DateDisplay
    formalized_date_display: DateDisplay
    amount_collected: Number


__all__ = [
    "MISSING_DATE",
    "MISSING_NUMBER",
    "MISSING_TEXT",
    "DateDisplay",
    "FundingRecord",
    "InventoryRecord",
    "MergedRow",
    "Number",
    "ProjectDataset",
    "ProjectRef",
]
