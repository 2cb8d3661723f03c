"""Public interface for the REDA adapter."""

from __future__ import annotations

from .client import RedaFetcher
from .schema import FundingPayload, InventoryPayload
from .translator import parse_funding, parse_inventory

__all__ = [
    "FundingPayload",
    "InventoryPayload",
    "RedaFetcher",
    "parse_funding",
    "parse_inventory",
]
