"""Application service that answers questions about Runeterra."""

from __future__ import annotations

import logging
import re
import time
from typing import Callable

from runeterra.data.config import AssistantConfig
from runeterra.data.entities import Answer, EntityType, ResolutionQuery
from runeterra.data.entity_resolver import (
    resolve_champion,
    resolve_item,
    resolve_rune,
    resolve_summoner_spell,
)
from runeterra.data.formatter import (
    CHAMPION_NOT_FOUND,
    CLARIFICATION_TEXT,
    HELP_TEXT,
    ITEM_NOT_FOUND,
    REGION_NOT_FOUND,
    RETRY_TEXT,
    format_champion,
    format_item,
    format_region,
    format_rune,
    format_summoner_spell,
)
from runeterra.data.regions import find_region
from runeterra.data.repository import DataDragonRepository

from .intent import FALLBACK_ORDER, IntentClassifier

logger = logging.getLogger(__name__)

_MENTION_RE_TEMPLATE = r"<@!?{bot_id}>"
_ANY_MENTION_RE = re.compile(r"<@!?\d+>")


class MentionCooldown:
    """Per-user minimum spacing for mention-triggered questions.

    Questions that arrive too early are dropped, not queued.
    """

    def __init__(self, interval_s: float, *, clock: Callable[[], float] | None = None) -> None:
        self._interval_s = interval_s
        self._clock = clock or time.monotonic
        self._last_served: dict[str, float] = {}

    def allow(self, user_id: str) -> bool:
        now = self._clock()
        last = self._last_served.get(user_id)
        if last is not None and now - last < self._interval_s:
            return False
        self._last_served[user_id] = now
        return True


def strip_mentions(content: str, bot_id: str | None) -> str:
    if not bot_id:
        return _ANY_MENTION_RE.sub("", content).strip()
    return re.sub(_MENTION_RE_TEMPLATE.format(bot_id=re.escape(bot_id)), "", content).strip()


class AssistantService:
    """Routes questions through classification, resolution and formatting."""

    def __init__(
        self,
        *,
        repository: DataDragonRepository,
        classifier: IntentClassifier | None = None,
        cooldown: MentionCooldown | None = None,
    ) -> None:
        self._repository = repository
        self._classifier = classifier or IntentClassifier()
        self._cooldown = cooldown or MentionCooldown(AssistantConfig().mention_cooldown_s)

    # ------------------------------------------------------------------
    # Per-type lookups
    # ------------------------------------------------------------------

    async def _answer_champion(self, name: str) -> Answer | None:
        base = resolve_champion(await self._repository.champions(), name)
        if base is None:
            return None
        champ = await self._repository.champion_detail(base.id)
        if champ is None:
            return None
        return Answer(text=format_champion(champ), source_type=EntityType.CHAMPION, found=True)

    async def _answer_item(self, name: str) -> Answer | None:
        item = resolve_item(await self._repository.items(), name)
        if item is None:
            return None
        return Answer(text=format_item(item), source_type=EntityType.ITEM, found=True)

    async def _answer_rune(self, name: str) -> Answer | None:
        rune = resolve_rune(await self._repository.rune_trees(), name)
        if rune is None:
            return None
        return Answer(text=format_rune(rune), source_type=EntityType.RUNE, found=True)

    async def _answer_summoner_spell(self, name: str) -> Answer | None:
        spell = resolve_summoner_spell(await self._repository.summoner_spells(), name)
        if spell is None:
            return None
        return Answer(text=format_summoner_spell(spell), source_type=EntityType.SUMMONER_SPELL, found=True)

    @staticmethod
    def _answer_region(name: str) -> Answer | None:
        region = find_region(name)
        if region is None:
            return None
        return Answer(text=format_region(region), source_type=EntityType.REGION, found=True)

    async def _answer_for(self, entity_type: EntityType, text: str) -> Answer | None:
        if entity_type is EntityType.REGION:
            return self._answer_region(text)
        if entity_type is EntityType.CHAMPION:
            return await self._answer_champion(text)
        if entity_type is EntityType.ITEM:
            return await self._answer_item(text)
        if entity_type is EntityType.RUNE:
            return await self._answer_rune(text)
        return await self._answer_summoner_spell(text)

    async def _resolve(self, query: ResolutionQuery) -> Answer:
        if query.is_help:
            return self.help()

        attempted: set[EntityType] = set()
        for entity_type in (*query.candidate_types, *FALLBACK_ORDER):
            if entity_type in attempted:
                continue
            attempted.add(entity_type)
            answer = await self._answer_for(entity_type, query.search_text)
            if answer:
                logger.info("[Assistant] %r answered as %s", query.raw_text, entity_type.value)
                return answer

        logger.info("[Assistant] No match for %r (candidates=%s)", query.raw_text, list(query.candidate_types))
        return Answer(text=CLARIFICATION_TEXT)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def help(self) -> Answer:
        return Answer(text=HELP_TEXT)

    async def ask(self, question: str) -> Answer:
        try:
            return await self._resolve(self._classifier.classify(question))
        except Exception:
            logger.exception("[Assistant] Failed to answer %r", question)
            return Answer(text=RETRY_TEXT)

    async def champion(self, name: str) -> Answer:
        try:
            answer = await self._answer_champion(name)
        except Exception:
            logger.exception("[Assistant] Champion lookup failed for %r", name)
            return Answer(text=RETRY_TEXT)
        return answer or Answer(text=CHAMPION_NOT_FOUND, source_type=EntityType.CHAMPION)

    async def item(self, name: str) -> Answer:
        try:
            answer = await self._answer_item(name)
        except Exception:
            logger.exception("[Assistant] Item lookup failed for %r", name)
            return Answer(text=RETRY_TEXT)
        return answer or Answer(text=ITEM_NOT_FOUND, source_type=EntityType.ITEM)

    def region(self, name: str) -> Answer:
        return self._answer_region(name) or Answer(text=REGION_NOT_FOUND, source_type=EntityType.REGION)

    async def mention(self, user_id: str, content: str, bot_id: str | None = None) -> Answer | None:
        """Answer a free-text mention, or return ``None`` when the cooldown drops it."""
        question = strip_mentions(content, bot_id)
        if not question:
            return self.help()
        if not self._cooldown.allow(user_id):
            logger.debug("[Assistant] Cooldown dropped mention from %s", user_id)
            return None
        return await self.ask(question)
