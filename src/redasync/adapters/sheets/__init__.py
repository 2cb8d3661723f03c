"""Public interface for the Google Sheets adapter."""

from __future__ import annotations

from .client import build_sheets_service, load_credentials
from .layout import HEADER, build_sheet_values
from .publisher import SheetsPublisher

__all__ = [
    "HEADER",
    "SheetsPublisher",
    "build_sheet_values",
    "build_sheets_service",
    "load_credentials",
]
