from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from redasync.domain.sync import SyncRunResult
from redasync.scheduling import MISFIRE_GRACE_SECONDS, SYNC_JOB_ID, build_scheduler, serve
from tests.helpers.config import make_app_config


def test_job_is_weekly_and_not_reentrant() -> None:
    config = make_app_config()
    calls: list[object] = []

    def job(app_config: object) -> SyncRunResult:
        calls.append(app_config)
        return SyncRunResult()

    scheduler = build_scheduler(config, job=job)
    scheduled = scheduler.get_job(SYNC_JOB_ID)

    assert scheduled is not None
    assert scheduled.max_instances == 1
    assert scheduled.coalesce is True
    assert scheduled.misfire_grace_time == MISFIRE_GRACE_SECONDS == 3600
    assert scheduled.args == (config,)

    tz = ZoneInfo("America/Mexico_City")
    wednesday = datetime(2025, 1, 8, 12, 0, tzinfo=tz)
    fire_time = scheduled.trigger.get_next_fire_time(None, wednesday)
    assert fire_time == datetime(2025, 1, 13, 0, 0, tzinfo=tz)
    assert calls == []


def test_serve_starts_the_scheduler() -> None:
    class FakeScheduler:
        started = False

        def start(self) -> None:
            self.started = True

    scheduler = FakeScheduler()

    serve(make_app_config(), scheduler=scheduler)  # type: ignore[arg-type]

    assert scheduler.started
