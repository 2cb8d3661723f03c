"""Schedule and timezone settings for the resident sync service."""

from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from apscheduler.triggers.cron import CronTrigger

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_SCHEDULE = "0 0 * * 1"
DEFAULT_TIMEZONE = "America/Mexico_City"


@dataclass(frozen=True, slots=True)
class ScheduleConfig:
    cron: str = DEFAULT_SCHEDULE
    timezone: str = DEFAULT_TIMEZONE

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def trigger(self) -> CronTrigger:
        return CronTrigger.from_crontab(self.cron, timezone=self.tzinfo)


def get_schedule_config() -> ScheduleConfig:
    config = ScheduleConfig(
        cron=optional_env_var("REDASYNC_SCHEDULE", DEFAULT_SCHEDULE) or DEFAULT_SCHEDULE,
        timezone=optional_env_var("REDASYNC_TIMEZONE", DEFAULT_TIMEZONE) or DEFAULT_TIMEZONE,
    )
    try:
        config.trigger()
    except ZoneInfoNotFoundError as exc:
        raise ConfigurationError(f"Unknown timezone: {config.timezone}") from exc
    except ValueError as exc:
        raise ConfigurationError(f"Invalid schedule {config.cron!r}: {exc}") from exc
    return config
