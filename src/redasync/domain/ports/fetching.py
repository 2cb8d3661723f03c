"""Ports for fetching project data from the source API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from redasync.domain.model import ProjectDataset, ProjectRef


@runtime_checkable
class ProjectDataFetcher(Protocol):
    """Callable port returning the inventory and funding collections of a project.

    Implementations raise ``TransportError`` instead of returning partial data.
    """

    def __call__(self, project: ProjectRef) -> ProjectDataset: ...


__all__ = ["ProjectDataFetcher"]
