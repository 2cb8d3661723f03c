"""Configuration objects for tests that must not read the environment."""

from __future__ import annotations

from redasync.config import (
    AppConfig,
    HttpClientConfig,
    RedaConfig,
    ScheduleConfig,
    ServiceAccountCredentials,
    SheetsConfig,
)
from redasync.domain.model import ProjectRef


def make_app_config(*projects: ProjectRef) -> AppConfig:
    return AppConfig(
        reda=RedaConfig(api_key="key", http=HttpClientConfig(name="reda", base_url="http://x/")),
        sheets=SheetsConfig(
            spreadsheet_id="sheet",
            credentials=ServiceAccountCredentials(file_path="/dev/null"),
        ),
        projects=projects or (ProjectRef("LAGRAND", 35),),
        schedule=ScheduleConfig(),
    )
