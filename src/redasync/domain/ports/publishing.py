"""Ports for publishing merged rows to the destination store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from redasync.domain.model import MergedRow


@runtime_checkable
class RowPublisher(Protocol):
    """Callable port replacing a project's published rows.

    ``rows`` is never empty. Implementations raise ``PublishError`` on failure.
    """

    def __call__(self, project_name: str, rows: Sequence[MergedRow]) -> int: ...


__all__ = ["RowPublisher"]
