from __future__ import annotations

import pytest

from redasync import main as main_module
from redasync.config import ConfigurationError
from redasync.domain.sync import SyncRunResult
from tests.helpers.config import make_app_config


@pytest.fixture
def config_loaded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "get_app_config", make_app_config)


@pytest.mark.usefixtures("config_loaded")
def test_default_mode_serves_on_schedule(monkeypatch: pytest.MonkeyPatch) -> None:
    served: list[object] = []
    monkeypatch.setattr(main_module, "serve", served.append)
    monkeypatch.setattr(main_module, "run_once", lambda _config: pytest.fail("ran eagerly"))

    main_module.main([])

    assert len(served) == 1


@pytest.mark.usefixtures("config_loaded")
def test_once_runs_a_single_pass(monkeypatch: pytest.MonkeyPatch) -> None:
    runs: list[object] = []

    def fake_run_once(config: object) -> SyncRunResult:
        runs.append(config)
        return SyncRunResult()

    monkeypatch.setattr(main_module, "run_once", fake_run_once)
    monkeypatch.setattr(main_module, "serve", lambda _config: pytest.fail("served"))

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--once"])

    assert excinfo.value.code == 0
    assert len(runs) == 1


def test_invalid_configuration_exits_with_usage_code(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken() -> None:
        raise ConfigurationError("Missing configuration for: REDA_API_KEY")

    monkeypatch.setattr(main_module, "get_app_config", broken)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 2
