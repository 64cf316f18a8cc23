"""Configuration for Data Dragon access and the local cache."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

DEFAULT_BASE_URL = "https://ddragon.leagueoflegends.com"
DEFAULT_LANG = "pt_BR"
FALLBACK_LANG = "en_US"

_HOUR_MS = 60 * 60 * 1000

# TTL tiers (milliseconds)
VERSION_TTL_MS = 6 * _HOUR_MS
CATALOG_TTL_MS = 24 * _HOUR_MS  # champion index, items, summoner spells
DETAIL_TTL_MS = 7 * 24 * _HOUR_MS  # per-champion detail, rune trees


@dataclass(frozen=True)
class DataDragonConfig:
    base_url: str = field(default_factory=lambda: os.getenv("DD_BASE_URL", DEFAULT_BASE_URL))
    language: str = field(default_factory=lambda: os.getenv("DD_LANG") or DEFAULT_LANG)
    fallback_language: str = field(default_factory=lambda: os.getenv("DD_FALLBACK_LANG") or FALLBACK_LANG)
    timeout_s: float = field(default_factory=lambda: float(os.getenv("DD_TIMEOUT_S", "15")))


@dataclass(frozen=True)
class CacheConfig:
    dir: Path = field(default_factory=lambda: Path(os.getenv("CACHE_DIR", "cache")))


@dataclass(frozen=True)
class AssistantConfig:
    mention_cooldown_s: float = field(default_factory=lambda: float(os.getenv("MENTION_COOLDOWN_S", "1.2")))
