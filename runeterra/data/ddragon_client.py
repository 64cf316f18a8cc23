"""Client for Riot's Data Dragon static data CDN."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from .config import DataDragonConfig

logger = logging.getLogger(__name__)


class DataDragonError(RuntimeError):
    """Raised when a Data Dragon request fails or returns a non-2xx status."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


@dataclass(frozen=True)
class FetchFailure:
    """Tagged failure returned by ``fetch_json_tolerant`` instead of raising."""

    url: str
    message: str
    status_code: int | None = None


class DataDragonClient:
    """Async HTTP client for Data Dragon."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout_s: float | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = DataDragonConfig()
        self._base_url = (base_url or config.base_url).rstrip("/")
        self._timeout_s = timeout_s or config.timeout_s
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "DataDragonClient":
        self._client = httpx.AsyncClient(
            timeout=self._timeout_s,
            headers={"Accept-Encoding": "gzip, deflate"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client:
            await self._client.aclose()

    @property
    def base_url(self) -> str:
        return self._base_url

    def versions_url(self) -> str:
        return f"{self._base_url}/api/versions.json"

    def data_url(self, version: str, language: str, document: str) -> str:
        """Build a versioned document URL, e.g. ``data_url("14.1.1", "pt_BR", "item")``."""
        return f"{self._base_url}/cdn/{version}/data/{language}/{document}.json"

    async def fetch_json(self, url: str) -> Any:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        logger.info("[DDragon] GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise DataDragonError(f"Request failed for {url}: {exc}", url=url) from exc
        return self._handle_response(response, url)

    async def fetch_json_tolerant(self, url: str) -> Any | FetchFailure:
        try:
            return await self.fetch_json(url)
        except DataDragonError as exc:
            logger.info("[DDragon] Tolerated failure: %s", exc)
            return FetchFailure(url=url, message=str(exc), status_code=exc.status_code)

    def _handle_response(self, response: httpx.Response, url: str) -> Any:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DataDragonError(
                f"HTTP {response.status_code} at {url}",
                url=url,
                status_code=response.status_code,
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise DataDragonError(
                f"Invalid JSON at {url}",
                url=url,
                status_code=response.status_code,
            ) from exc
