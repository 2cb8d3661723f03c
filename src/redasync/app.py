"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from redasync.adapters.reda import RedaFetcher
from redasync.adapters.sheets import SheetsPublisher
from redasync.domain.sync import SyncRunResult, sync_projects

if TYPE_CHECKING:
    from redasync.config import AppConfig
    from redasync.domain.ports import ProjectDataFetcher, RowPublisher


log = getLogger(__name__)


def run_once(
    config: AppConfig,
    *,
    fetcher: ProjectDataFetcher | None = None,
    publisher: RowPublisher | None = None,
) -> SyncRunResult:
    """Reconcile and publish every configured project once."""

    effective_fetcher = fetcher or RedaFetcher(config=config.reda)
    effective_publisher = publisher or SheetsPublisher(
        config.sheets, timezone=config.schedule.tzinfo
    )
    log.info("Starting sync run: projects=%s", len(config.projects))

    result = sync_projects(
        config.projects,
        fetcher=effective_fetcher,
        publisher=effective_publisher,
    )

    log.info(
        "Finished sync run: published=%s, skipped=%s, failed=%s",
        len(result.published),
        len(result.skipped),
        len(result.failed),
    )
    for failure in result.failed:
        log.warning("Project %s failed: %s", failure.project.display_name, failure.error)

    return result
