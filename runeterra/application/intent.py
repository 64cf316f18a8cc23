"""Keyword-based intent classification for free-text questions."""

from __future__ import annotations

import re

from runeterra.data.entities import EntityType, ResolutionQuery
from runeterra.data.entity_resolver import normalize_text
from runeterra.data.regions import find_region

# Keyword fragments matched as substrings of the normalized (accent-free) query.
INTENT_KEYWORDS: dict[EntityType, tuple[str, ...]] = {
    EntityType.CHAMPION: ("quem e", "campeao", "champ", "personagem"),
    EntityType.ITEM: ("item", "itens", "gume", "lamina", "cajado"),
    EntityType.RUNE: ("runa", "runas", "colheita", "eletrocutar", "precisao", "domina"),
    EntityType.SUMMONER_SPELL: ("feiti", "flash", "ignite", "barreira", "curar", "teleporte"),
}

# Order tried when the query carries no keyword signal, and the order in which
# signaled types are attempted.
FALLBACK_ORDER = (
    EntityType.CHAMPION,
    EntityType.ITEM,
    EntityType.RUNE,
    EntityType.SUMMONER_SPELL,
)

HELP_WORDS = {"help", "ajuda"}

_STOP_WORDS_RE = re.compile(
    r"\b(quem e|fala|sobre|do|da|de|a|o|os|as|um|uma|no|na|nos|nas|por favor|pfv|pls"
    r"|item|itens|campeao|campeoes|runa|runas|feitico|feiticos|regiao)\b"
)
_WHITESPACE_RE = re.compile(r"\s+")


def strip_stop_words(normalized: str) -> str:
    cleaned = _STOP_WORDS_RE.sub(" ", normalized)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


class IntentClassifier:
    """Turns a raw question into an ordered list of entity types to try.

    Region wins outright when the query names a region; otherwise every type
    with a keyword hit is returned in ``FALLBACK_ORDER``. An empty result means
    the query is ambiguous and the caller should try all catalogs.
    """

    def classify(self, raw_query: str) -> ResolutionQuery:
        normalized = normalize_text(raw_query)
        if not normalized or normalized in HELP_WORDS:
            return ResolutionQuery(raw_text=raw_query, normalized_text=normalized, search_text="", is_help=True)

        if find_region(normalized):
            return ResolutionQuery(
                raw_text=raw_query,
                normalized_text=normalized,
                search_text=normalized,
                candidate_types=(EntityType.REGION,),
            )

        candidates = tuple(
            entity_type
            for entity_type in FALLBACK_ORDER
            if any(keyword in normalized for keyword in INTENT_KEYWORDS[entity_type])
        )
        return ResolutionQuery(
            raw_text=raw_query,
            normalized_text=normalized,
            search_text=strip_stop_words(normalized) or normalized,
            candidate_types=candidates,
        )
