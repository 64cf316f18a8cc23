"""Data access utilities for Runeterra Helper."""

from .cache import CacheEntry, CacheStore
from .config import CacheConfig, DataDragonConfig
from .ddragon_client import DataDragonClient, DataDragonError, FetchFailure
from .entities import (
    Answer,
    Champion,
    ChampionAbility,
    EntityType,
    Item,
    Region,
    ResolutionQuery,
    Rune,
    RuneTree,
    SummonerSpell,
)
from .repository import DataDragonRepository

__all__ = [
    "CacheEntry",
    "CacheStore",
    "CacheConfig",
    "DataDragonConfig",
    "DataDragonClient",
    "DataDragonError",
    "FetchFailure",
    "Answer",
    "Champion",
    "ChampionAbility",
    "EntityType",
    "Item",
    "Region",
    "ResolutionQuery",
    "Rune",
    "RuneTree",
    "SummonerSpell",
    "DataDragonRepository",
]
