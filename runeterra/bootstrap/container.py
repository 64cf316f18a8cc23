"""Dependency composition root."""

from __future__ import annotations

from dataclasses import dataclass

from runeterra.application import AssistantService, IntentClassifier, MentionCooldown
from runeterra.data import CacheConfig, CacheStore, DataDragonRepository
from runeterra.data.config import AssistantConfig


@dataclass(frozen=True)
class AppContainer:
    """Wired application dependencies."""

    assistant: AssistantService


_CONTAINER: AppContainer | None = None


def get_container() -> AppContainer:
    global _CONTAINER
    if _CONTAINER is not None:
        return _CONTAINER

    cache = CacheStore(CacheConfig().dir)
    repository = DataDragonRepository(cache=cache)
    assistant = AssistantService(
        repository=repository,
        classifier=IntentClassifier(),
        cooldown=MentionCooldown(AssistantConfig().mention_cooldown_s),
    )

    _CONTAINER = AppContainer(assistant=assistant)
    return _CONTAINER
