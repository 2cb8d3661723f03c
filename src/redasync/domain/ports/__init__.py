"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import ProjectDataFetcher
from .publishing import RowPublisher

__all__ = ["ProjectDataFetcher", "RowPublisher"]
