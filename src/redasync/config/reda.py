"""REDA integration API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .http import HttpClientConfig, RateLimit

REDA_BASE_URL = "https://api.reda.mx/integracion"
REDA_TIMEOUT_SECONDS = 30.0
INVENTORY_PATH = "recupera-inventario-proyecto"
FUNDING_PATH = "recupera-ventas-proyecto"


@dataclass(frozen=True)
class RedaConfig:
    """Holds REDA API configuration values."""

    api_key: str
    http: HttpClientConfig
    inventory_path: str = INVENTORY_PATH
    funding_path: str = FUNDING_PATH

    @property
    def headers(self) -> dict[str, str]:
        return {"x-api-key": self.api_key, "Content-Type": "application/json"}


def get_reda_config(*, http: HttpClientConfig | None = None) -> RedaConfig:
    values = require_env_vars(("REDA_API_KEY",))
    base_url = optional_env_var("REDA_BASE_URL", REDA_BASE_URL) or REDA_BASE_URL
    timeout = optional_float_env_var("REDA_TIMEOUT_SECONDS", REDA_TIMEOUT_SECONDS)
    return RedaConfig(
        api_key=values["REDA_API_KEY"],
        http=http
        or HttpClientConfig(
            name="reda",
            base_url=base_url.rstrip("/") + "/",
            timeout_seconds=timeout,
            ratelimit=RateLimit(max_calls=4, per_seconds=1.0),
        ),
    )
