"""Run the fetch, reconcile and publish pipeline over the configured projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .reconciliation import reconcile

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import ProjectRef
    from .ports import ProjectDataFetcher, RowPublisher

log = getLogger(__name__)


class ProjectStatus(StrEnum):
    PUBLISHED = "published"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class ProjectSyncResult:
    """Outcome of syncing one project."""

    project: ProjectRef
    status: ProjectStatus
    rows: int = 0
    error: str | None = None


@dataclass(slots=True)
class SyncRunResult:
    """Outcome of one pass over every configured project."""

    projects: list[ProjectSyncResult] = field(default_factory=list)

    def _with_status(self, status: ProjectStatus) -> list[ProjectSyncResult]:
        return [result for result in self.projects if result.status is status]

    @property
    def published(self) -> list[ProjectSyncResult]:
        return self._with_status(ProjectStatus.PUBLISHED)

    @property
    def skipped(self) -> list[ProjectSyncResult]:
        return self._with_status(ProjectStatus.SKIPPED)

    @property
    def failed(self) -> list[ProjectSyncResult]:
        return self._with_status(ProjectStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed


def sync_project(
    project: ProjectRef,
    *,
    fetcher: ProjectDataFetcher,
    publisher: RowPublisher,
) -> ProjectSyncResult:
    """Fetch, join and publish a single project. Errors propagate to the caller."""

    dataset = fetcher(project)
    rows = reconcile(project.display_name, dataset.inventory, dataset.funding)
    if not rows:
        log.info("No inventory for project %s; nothing to publish", project.display_name)
        return ProjectSyncResult(project=project, status=ProjectStatus.SKIPPED)

    written = publisher(project.display_name, rows)
    return ProjectSyncResult(project=project, status=ProjectStatus.PUBLISHED, rows=written)


def sync_projects(
    projects: Iterable[ProjectRef],
    *,
    fetcher: ProjectDataFetcher,
    publisher: RowPublisher,
) -> SyncRunResult:
    """Sync projects in configuration order.

    A failure in one project is logged and recorded; the remaining projects are
    still attempted.
    """

    run = SyncRunResult()
    for project in projects:
        log.info("Processing project %s (id=%s)", project.display_name, project.external_id)
        try:
            result = sync_project(project, fetcher=fetcher, publisher=publisher)
        except Exception as exc:  # noqa: BLE001
            log.exception("Sync failed for project %s", project.display_name)
            result = ProjectSyncResult(
                project=project,
                status=ProjectStatus.FAILED,
                error=str(exc) or type(exc).__name__,
            )
        run.projects.append(result)
    return run


__all__ = [
    "ProjectStatus",
    "ProjectSyncResult",
    "SyncRunResult",
    "sync_project",
    "sync_projects",
]
