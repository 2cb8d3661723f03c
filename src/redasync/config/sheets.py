"""Google Sheets destination configuration values."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

SHEETS_SCOPES = ("https://www.googleapis.com/auth/spreadsheets",)
CREDENTIALS_FILE_ENV = "GOOGLE_APPLICATION_CREDENTIALS"
CREDENTIALS_JSON_ENV = "GOOGLE_SERVICE_ACCOUNT_JSON"


@dataclass(frozen=True)
class ServiceAccountCredentials:
    """Service-account material, either as a key file path or as parsed JSON."""

    file_path: str | None = None
    info: Mapping[str, object] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.file_path is None and self.info is None:
            raise MissingConfigurationError(
                f"Missing configuration for: {CREDENTIALS_FILE_ENV} or {CREDENTIALS_JSON_ENV}"
            )


@dataclass(frozen=True)
class SheetsConfig:
    spreadsheet_id: str
    credentials: ServiceAccountCredentials
    scopes: tuple[str, ...] = SHEETS_SCOPES


def _parse_inline_credentials(raw: str) -> dict[str, object]:
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{CREDENTIALS_JSON_ENV} is not valid JSON") from exc
    if not isinstance(info, dict):
        raise ConfigurationError(f"{CREDENTIALS_JSON_ENV} must be a JSON object")
    return info


def get_service_account_credentials() -> ServiceAccountCredentials:
    inline = optional_env_var(CREDENTIALS_JSON_ENV)
    if inline is not None:
        return ServiceAccountCredentials(info=_parse_inline_credentials(inline))
    return ServiceAccountCredentials(file_path=optional_env_var(CREDENTIALS_FILE_ENV))


def get_sheets_config() -> SheetsConfig:
    values = require_env_vars(("SHEETS_SPREADSHEET_ID",))
    return SheetsConfig(
        spreadsheet_id=values["SHEETS_SPREADSHEET_ID"],
        credentials=get_service_account_credentials(),
    )
