from __future__ import annotations

import json

import pytest

from redasync.config import (
    DEFAULT_PROJECTS,
    ConfigurationError,
    MissingConfigurationError,
    get_app_config,
    get_projects,
    get_reda_config,
    get_schedule_config,
    get_sheets_config,
    require_env_vars,
)

_ENV_VARS = (
    "REDA_API_KEY",
    "REDA_BASE_URL",
    "REDA_TIMEOUT_SECONDS",
    "REDA_PROJECTS",
    "SHEETS_SPREADSHEET_ID",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GOOGLE_SERVICE_ACCOUNT_JSON",
    "REDASYNC_SCHEDULE",
    "REDASYNC_TIMEZONE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDA_API_KEY", "key-123")
    monkeypatch.setenv("SHEETS_SPREADSHEET_ID", "sheet-123")
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "/secrets/credentials.json")


def test_require_env_vars_reports_every_missing_name() -> None:
    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["REDA_API_KEY", "SHEETS_SPREADSHEET_ID"])

    assert "REDA_API_KEY" in str(exc.value)
    assert "SHEETS_SPREADSHEET_ID" in str(exc.value)


@pytest.mark.usefixtures("required_env")
def test_app_config_defaults() -> None:
    config = get_app_config()

    assert config.reda.api_key == "key-123"
    assert config.reda.headers == {"x-api-key": "key-123", "Content-Type": "application/json"}
    assert config.reda.http.base_url == "https://api.reda.mx/integracion/"
    assert config.reda.http.timeout_seconds == 30.0
    assert config.sheets.spreadsheet_id == "sheet-123"
    assert config.sheets.credentials.file_path == "/secrets/credentials.json"
    assert config.projects == DEFAULT_PROJECTS
    assert config.schedule.cron == "0 0 * * 1"
    assert config.schedule.timezone == "America/Mexico_City"


def test_default_projects_keep_their_order() -> None:
    assert [(p.display_name, p.external_id) for p in get_projects()] == [
        ("Colina D Santiago", 10),
        ("Puerto D Marqués", 30),
        ("Hacienda D San Gabriel", 32),
        ("LAGRAND", 35),
        ("Senda D Santino", 57),
        ("Villa D Nogal", 16),
        ("Cerrada D Melocotón", 17),
        ("MooD 08", 179),
    ]


def test_projects_override_preserves_order(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDA_PROJECTS", '{"Zeta": 2, "Alfa": 1}')

    assert [p.display_name for p in get_projects()] == ["Zeta", "Alfa"]


@pytest.mark.parametrize("raw", ["not json", "[]", "{}", '{"A": "10"}', '{"A": true}', '{" ": 1}'])
def test_invalid_projects_are_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("REDA_PROJECTS", raw)

    with pytest.raises(ConfigurationError):
        get_projects()


def test_reda_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDA_API_KEY", "k")
    monkeypatch.setenv("REDA_BASE_URL", "https://staging.reda.test/api/")
    monkeypatch.setenv("REDA_TIMEOUT_SECONDS", "12.5")

    config = get_reda_config()

    assert config.http.base_url == "https://staging.reda.test/api/"
    assert config.http.timeout_seconds == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("REDA_API_KEY", "k")
    monkeypatch.setenv("REDA_TIMEOUT_SECONDS", raw)

    with pytest.raises(ConfigurationError):
        get_reda_config()


def test_inline_credentials_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHEETS_SPREADSHEET_ID", "sheet")
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "/secrets/credentials.json")
    monkeypatch.setenv(
        "GOOGLE_SERVICE_ACCOUNT_JSON", json.dumps({"type": "service_account", "client_email": "x"})
    )

    credentials = get_sheets_config().credentials

    assert credentials.info == {"type": "service_account", "client_email": "x"}
    assert credentials.file_path is None


def test_missing_credentials_are_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHEETS_SPREADSHEET_ID", "sheet")

    with pytest.raises(MissingConfigurationError, match="GOOGLE_APPLICATION_CREDENTIALS"):
        get_sheets_config()


@pytest.mark.parametrize("raw", ["{not json", '["a"]'])
def test_malformed_inline_credentials(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("SHEETS_SPREADSHEET_ID", "sheet")
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", raw)

    with pytest.raises(ConfigurationError):
        get_sheets_config()


def test_schedule_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDASYNC_SCHEDULE", "30 6 * * 1-5")
    monkeypatch.setenv("REDASYNC_TIMEZONE", "UTC")

    config = get_schedule_config()

    assert config.cron == "30 6 * * 1-5"
    assert config.tzinfo.key == "UTC"


@pytest.mark.parametrize(
    ("name", "value"),
    [("REDASYNC_SCHEDULE", "every monday"), ("REDASYNC_TIMEZONE", "Mars/Olympus_Mons")],
)
def test_invalid_schedule_is_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        get_schedule_config()
