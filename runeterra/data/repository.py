"""Cached access to versioned Data Dragon catalogs.

Every accessor follows the same read-through policy: serve a fresh cache
record if one exists, otherwise resolve the current patch version, fetch the
versioned document, write it through, and return it. The version itself is
cached with a shorter TTL so all catalogs fetched within a window share one
patch. Remote failures are absorbed here and surface as ``None``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .cache import CacheStore
from .config import (
    CATALOG_TTL_MS,
    DETAIL_TTL_MS,
    VERSION_TTL_MS,
    DataDragonConfig,
)
from .ddragon_client import DataDragonClient, DataDragonError, FetchFailure
from .entities import Champion, Item, RuneTree, SummonerSpell

logger = logging.getLogger(__name__)

VERSION_KEY = "dd_versions"


class DataDragonRepository:
    """Read-through catalog accessors over ``CacheStore`` and ``DataDragonClient``."""

    def __init__(
        self,
        *,
        cache: CacheStore,
        language: str | None = None,
        fallback_language: str | None = None,
        base_url: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = DataDragonConfig()
        self._cache = cache
        self._language = language or config.language
        self._fallback_language = fallback_language or config.fallback_language
        self._base_url = base_url or config.base_url
        self._timeout_s = timeout_s or config.timeout_s
        self._transport = transport

    def _client(self) -> DataDragonClient:
        return DataDragonClient(base_url=self._base_url, timeout_s=self._timeout_s, transport=self._transport)

    # ------------------------------------------------------------------
    # Raw documents
    # ------------------------------------------------------------------

    async def get_version(self) -> str | None:
        cached = await self._cache.aread_valid(VERSION_KEY, VERSION_TTL_MS)
        if isinstance(cached, str) and cached:
            return cached

        try:
            async with self._client() as client:
                versions = await client.fetch_json(client.versions_url())
        except DataDragonError as exc:
            logger.warning("[Repository] Version lookup failed: %s", exc)
            return None

        if not isinstance(versions, list) or not versions or not isinstance(versions[0], str):
            logger.warning("[Repository] Unexpected versions payload: %r", type(versions))
            return None

        latest = versions[0]
        await self._cache.awrite(VERSION_KEY, latest)
        return latest

    async def _get_document(self, key: str, ttl_ms: int, document: str) -> Any | None:
        cached = await self._cache.aread_valid(key, ttl_ms)
        if cached is not None:
            return cached

        version = await self.get_version()
        if not version:
            return None

        try:
            async with self._client() as client:
                data = await client.fetch_json(client.data_url(version, self._language, document))
        except DataDragonError as exc:
            logger.warning("[Repository] Fetch of %s failed: %s", document, exc)
            return None

        await self._cache.awrite(key, data)
        return data

    async def get_champion_index(self) -> dict[str, Any] | None:
        return await self._get_document(f"champs_{self._language}", CATALOG_TTL_MS, "champion")

    async def get_champion_full(self, champ_id: str) -> dict[str, Any] | None:
        return await self._get_document(
            f"champ_{self._language}_{champ_id}", DETAIL_TTL_MS, f"champion/{champ_id}"
        )

    async def get_items(self) -> dict[str, Any] | None:
        return await self._get_document(f"items_{self._language}", CATALOG_TTL_MS, "item")

    async def get_summoner_spells(self) -> dict[str, Any] | None:
        return await self._get_document(f"spells_{self._language}", CATALOG_TTL_MS, "summoner")

    async def get_rune_trees(self) -> list[Any] | None:
        """Fetch runesReforged, falling back to the default locale when missing."""
        key = f"runesReforged_{self._language}"
        cached = await self._cache.aread_valid(key, DETAIL_TTL_MS)
        if cached is not None:
            return cached

        version = await self.get_version()
        if not version:
            return None

        languages = [self._language]
        if self._fallback_language and self._fallback_language != self._language:
            languages.append(self._fallback_language)

        async with self._client() as client:
            for language in languages:
                data = await client.fetch_json_tolerant(client.data_url(version, language, "runesReforged"))
                if isinstance(data, FetchFailure):
                    continue
                if language != self._language:
                    logger.info("[Repository] Runes unavailable in %s, using %s", self._language, language)
                await self._cache.awrite(key, data)
                return data

        logger.warning("[Repository] Rune trees unavailable in %s", ", ".join(languages))
        return None

    # ------------------------------------------------------------------
    # Typed views
    # ------------------------------------------------------------------

    async def champions(self) -> list[Champion]:
        index = await self.get_champion_index()
        return [
            Champion.from_dict(entry)
            for entry in _data_section(index).values()
            if isinstance(entry, dict) and entry.get("id")
        ]

    async def champion_detail(self, champ_id: str) -> Champion | None:
        full = await self.get_champion_full(champ_id)
        entry = _data_section(full).get(champ_id)
        if not isinstance(entry, dict):
            return None
        return Champion.from_dict(entry)

    async def items(self) -> list[Item]:
        data = _data_section(await self.get_items())
        return [
            Item.from_dict(str(item_id), entry)
            for item_id, entry in data.items()
            if isinstance(entry, dict) and entry.get("name")
        ]

    async def summoner_spells(self) -> list[SummonerSpell]:
        data = _data_section(await self.get_summoner_spells())
        return [SummonerSpell.from_dict(entry) for entry in data.values() if isinstance(entry, dict)]

    async def rune_trees(self) -> list[RuneTree]:
        trees = await self.get_rune_trees()
        if not isinstance(trees, list):
            return []
        return [RuneTree.from_dict(tree) for tree in trees if isinstance(tree, dict)]


def _data_section(document: Any) -> dict[str, Any]:
    if isinstance(document, dict) and isinstance(document.get("data"), dict):
        return document["data"]
    return {}
