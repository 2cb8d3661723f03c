"""HTTP client for the REDA integration API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from redasync.adapters.http_client import build_limiter, default_client_factory
from redasync.config.reda import get_reda_config
from redasync.domain.errors import TransportError
from redasync.domain.model import ProjectDataset

from .schema import FundingListAdapter, InventoryListAdapter
from .translator import parse_funding, parse_inventory

if TYPE_CHECKING:
    from aiolimiter import AsyncLimiter
    from pydantic import TypeAdapter

    from redasync.adapters.http_client import ClientFactory, RateLimitedClient
    from redasync.config.reda import RedaConfig
    from redasync.domain.model import ProjectRef
    from redasync.domain.ports.fetching import ProjectDataFetcher

    from .schema import FundingPayload, InventoryPayload

log = getLogger(__name__)

PROJECT_ID_PARAM = "IdProyecto"


@dataclass(slots=True)
class RedaFetcher:
    """Retrieve the inventory and funding collections of one project.

    Both requests run concurrently. If either fails the other is cancelled and
    the first failure is raised as ``TransportError``; no partial data is returned.
    One rate limiter is shared by every project fetched through this instance.
    """

    config: RedaConfig = field(default_factory=get_reda_config)
    client_factory: ClientFactory = field(default=default_client_factory)
    limiter: AsyncLimiter | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.limiter = build_limiter(self.config.http)

    def __call__(self, project: ProjectRef) -> ProjectDataset:
        return asyncio.run(self.fetch_project(project))

    async def fetch_project(self, project: ProjectRef) -> ProjectDataset:
        async with self.client_factory(self.config.http, limiter=self.limiter) as client:
            try:
                async with asyncio.TaskGroup() as group:
                    inventory_task = group.create_task(self.fetch_inventory(client, project))
                    funding_task = group.create_task(self.fetch_funding(client, project))
            except ExceptionGroup as failures:
                raise failures.exceptions[0] from None

        inventory = inventory_task.result()
        funding = funding_task.result()
        log.info(
            "Fetched project %s: inventory=%s, funding=%s",
            project.display_name,
            len(inventory),
            len(funding),
        )
        return ProjectDataset(inventory=parse_inventory(inventory), funding=parse_funding(funding))

    async def fetch_inventory(
        self, client: RateLimitedClient, project: ProjectRef
    ) -> list[InventoryPayload]:
        return await self._fetch_list(
            client,
            path=self.config.inventory_path,
            project=project,
            adapter=InventoryListAdapter,
        )

    async def fetch_funding(
        self, client: RateLimitedClient, project: ProjectRef
    ) -> list[FundingPayload]:
        return await self._fetch_list(
            client,
            path=self.config.funding_path,
            project=project,
            adapter=FundingListAdapter,
        )

    async def _fetch_list[T](
        self,
        client: RateLimitedClient,
        *,
        path: str,
        project: ProjectRef,
        adapter: TypeAdapter[list[T]],
    ) -> list[T]:
        payload = await self._perform_request(client, path=path, project=project)
        if not isinstance(payload, list):
            raise TransportError(f"Unexpected REDA payload from {path}: expected a JSON array")
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise TransportError(f"Unexpected REDA payload from {path}: {exc}") from exc

    async def _perform_request(
        self,
        client: RateLimitedClient,
        *,
        path: str,
        project: ProjectRef,
    ) -> object:
        params = {PROJECT_ID_PARAM: str(project.external_id)}
        try:
            async with asyncio.timeout(self.config.http.timeout_seconds):
                response = await client.get(path, params=params, headers=self.config.headers)
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise TransportError(f"REDA request to {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"REDA request to {path} failed: {exc}") from exc

        if not response.is_success:
            log.error(
                "REDA %s returned HTTP %s for project %s",
                path,
                response.status_code,
                project.display_name,
            )
            raise TransportError(
                f"Error HTTP {response.status_code} from {path}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"REDA {path} returned a non-JSON body", status_code=response.status_code
            ) from exc


if TYPE_CHECKING:
    _fetcher_check: ProjectDataFetcher = RedaFetcher()
