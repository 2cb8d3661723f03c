"""Google Sheets API service construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

if TYPE_CHECKING:
    from collections.abc import Callable

    from redasync.config.sheets import ServiceAccountCredentials, SheetsConfig

type SheetsService = Any
type ServiceFactory = Callable[[SheetsConfig], SheetsService]


def load_credentials(
    material: ServiceAccountCredentials, *, scopes: tuple[str, ...]
) -> Credentials:
    if material.info is not None:
        return Credentials.from_service_account_info(dict(material.info), scopes=list(scopes))
    return Credentials.from_service_account_file(material.file_path, scopes=list(scopes))


def build_sheets_service(config: SheetsConfig) -> SheetsService:
    credentials = load_credentials(config.credentials, scopes=config.scopes)
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)
