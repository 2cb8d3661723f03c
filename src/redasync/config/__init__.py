"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass

from redasync.domain.model import ProjectRef

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http import HttpClientConfig, RateLimit
from .logging import LOG_LEVEL_ENV, configure_logging
from .projects import DEFAULT_PROJECTS, get_projects, parse_projects
from .reda import RedaConfig, get_reda_config
from .schedule import ScheduleConfig, get_schedule_config
from .sheets import (
    ServiceAccountCredentials,
    SheetsConfig,
    get_service_account_credentials,
    get_sheets_config,
)


@dataclass(frozen=True)
class AppConfig:
    """Everything one process needs, built once at start-up and passed down."""

    reda: RedaConfig
    sheets: SheetsConfig
    projects: tuple[ProjectRef, ...]
    schedule: ScheduleConfig


def get_app_config() -> AppConfig:
    return AppConfig(
        reda=get_reda_config(),
        sheets=get_sheets_config(),
        projects=get_projects(),
        schedule=get_schedule_config(),
    )


__all__ = [
    "DEFAULT_PROJECTS",
    "LOG_LEVEL_ENV",
    "AppConfig",
    "ConfigurationError",
    "HttpClientConfig",
    "MissingConfigurationError",
    "RateLimit",
    "RedaConfig",
    "ScheduleConfig",
    "ServiceAccountCredentials",
    "SheetsConfig",
    "configure_logging",
    "get_app_config",
    "get_projects",
    "get_reda_config",
    "get_schedule_config",
    "get_service_account_credentials",
    "get_sheets_config",
    "optional_env_var",
    "parse_projects",
    "require_env_vars",
]
