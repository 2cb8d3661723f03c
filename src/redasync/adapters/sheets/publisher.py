"""Full-replace publishing of merged rows into per-project tabs."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from redasync.domain.errors import PublishError

from .client import build_sheets_service
from .layout import build_sheet_values, data_range, full_columns_range

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import tzinfo

    from redasync.config.sheets import SheetsConfig
    from redasync.domain.model import MergedRow

    from .client import ServiceFactory, SheetsService
    from .layout import SheetValues

log = getLogger(__name__)

_PUBLISH_FAILURES = (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError)


class SheetsPublisher:
    """Replace a project's tab with a header row plus the merged rows.

    The tab is created when missing, then its columns are cleared before the
    write so a shrinking project leaves no stale trailing rows.
    """

    def __init__(
        self,
        config: SheetsConfig,
        *,
        timezone: tzinfo = UTC,
        service_factory: ServiceFactory | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self._timezone = timezone
        self._service_factory = service_factory or build_sheets_service
        self._clock = clock or (lambda: datetime.now(self._timezone))
        self._service: SheetsService | None = None

    def __call__(self, project_name: str, rows: Sequence[MergedRow]) -> int:
        values = build_sheet_values(rows, queried_at=self._clock())
        try:
            service = self._get_service()
            self.ensure_sheet(service, project_name)
            self.clear(service, project_name)
            self.write(service, project_name, values)
        except _PUBLISH_FAILURES as exc:
            raise PublishError(f"Publishing {project_name!r} failed: {exc}") from exc
        log.info("Replaced data in sheet %s: rows=%s", project_name, len(rows))
        return len(rows)

    def _get_service(self) -> SheetsService:
        if self._service is None:
            try:
                self._service = self._service_factory(self._config)
            except ValueError as exc:
                raise PublishError(f"Invalid Google service-account credentials: {exc}") from exc
        return self._service

    def sheet_titles(self, service: SheetsService) -> set[str]:
        metadata = (
            service.spreadsheets()
            .get(spreadsheetId=self._config.spreadsheet_id, fields="sheets.properties.title")
            .execute()
        )
        return {sheet["properties"]["title"] for sheet in metadata.get("sheets", [])}

    def ensure_sheet(self, service: SheetsService, title: str) -> bool:
        """Create the tab when no tab has exactly ``title``; return whether it was created."""

        if title in self.sheet_titles(service):
            return False
        service.spreadsheets().batchUpdate(
            spreadsheetId=self._config.spreadsheet_id,
            body={"requests": [{"addSheet": {"properties": {"title": title}}}]},
        ).execute()
        log.info("Created sheet %s", title)
        return True

    def clear(self, service: SheetsService, title: str) -> None:
        service.spreadsheets().values().clear(
            spreadsheetId=self._config.spreadsheet_id,
            range=full_columns_range(title),
            body={},
        ).execute()

    def write(self, service: SheetsService, title: str, values: SheetValues) -> None:
        service.spreadsheets().values().update(
            spreadsheetId=self._config.spreadsheet_id,
            range=data_range(title, len(values) - 1),
            valueInputOption="RAW",
            body={"values": values},
        ).execute()
