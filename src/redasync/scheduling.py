"""Calendar trigger keeping the sync service resident between runs."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from apscheduler.schedulers.blocking import BlockingScheduler

from redasync.app import run_once

if TYPE_CHECKING:
    from collections.abc import Callable

    from redasync.config import AppConfig
    from redasync.domain.sync import SyncRunResult

log = getLogger(__name__)

SYNC_JOB_ID = "reda-sheets-sync"
MISFIRE_GRACE_SECONDS = 3600


def build_scheduler(
    config: AppConfig,
    *,
    job: Callable[[AppConfig], SyncRunResult] = run_once,
) -> BlockingScheduler:
    """Register the sync job on the configured cron trigger.

    ``max_instances=1`` with ``coalesce`` drops a trigger that fires while a
    run is still in progress instead of starting an overlapping run. A trigger
    delayed by up to ``MISFIRE_GRACE_SECONDS`` (host asleep, busy process) still runs.
    """

    scheduler = BlockingScheduler(timezone=config.schedule.tzinfo)
    scheduler.add_job(
        job,
        trigger=config.schedule.trigger(),
        args=(config,),
        id=SYNC_JOB_ID,
        name="REDA to Google Sheets sync",
        max_instances=1,
        coalesce=True,
        misfire_grace_time=MISFIRE_GRACE_SECONDS,
        replace_existing=True,
    )
    return scheduler


def serve(config: AppConfig, *, scheduler: BlockingScheduler | None = None) -> None:
    """Block forever, running the sync on every scheduled trigger."""

    active = scheduler or build_scheduler(config)
    log.info(
        "Scheduler started: cron=%r, timezone=%s, projects=%s",
        config.schedule.cron,
        config.schedule.timezone,
        len(config.projects),
    )
    try:
        active.start()
    except (KeyboardInterrupt, SystemExit):
        log.info("Scheduler stopped")
