"""Typed snapshots of Data Dragon entities.

Only the fields the answer formatter reads are kept; everything else in the
upstream documents is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class EntityType(StrEnum):
    REGION = "region"
    CHAMPION = "champion"
    ITEM = "item"
    RUNE = "rune"
    SUMMONER_SPELL = "summoner_spell"


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _str_list(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value if v)


@dataclass(frozen=True)
class ChampionAbility:
    name: str
    description: str  # HTML

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChampionAbility":
        return cls(name=_str(data.get("name")), description=_str(data.get("description")))


@dataclass(frozen=True)
class Champion:
    id: str
    name: str
    title: str = ""
    tags: tuple[str, ...] = ()
    blurb: str = ""
    lore: str = ""
    passive: ChampionAbility | None = None
    spells: tuple[ChampionAbility, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Champion":
        passive = data.get("passive")
        spells = data.get("spells")
        return cls(
            id=_str(data.get("id")),
            name=_str(data.get("name")),
            title=_str(data.get("title")),
            tags=_str_list(data.get("tags")),
            blurb=_str(data.get("blurb")),
            lore=_str(data.get("lore")),
            passive=ChampionAbility.from_dict(passive) if isinstance(passive, dict) else None,
            spells=tuple(
                ChampionAbility.from_dict(s) for s in (spells if isinstance(spells, list) else [])
                if isinstance(s, dict)
            ),
        )


@dataclass(frozen=True)
class Item:
    id: str
    name: str
    description: str = ""  # HTML
    plaintext: str = ""
    gold_total: int | None = None
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, item_id: str, data: dict[str, Any]) -> "Item":
        gold = data.get("gold")
        total = gold.get("total") if isinstance(gold, dict) else None
        return cls(
            id=item_id,
            name=_str(data.get("name")),
            description=_str(data.get("description")),
            plaintext=_str(data.get("plaintext")),
            gold_total=total if isinstance(total, int) and not isinstance(total, bool) else None,
            tags=_str_list(data.get("tags")),
        )


@dataclass(frozen=True)
class SummonerSpell:
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SummonerSpell":
        return cls(
            id=_str(data.get("id")),
            name=_str(data.get("name")),
            description=_str(data.get("description")),
        )


@dataclass(frozen=True)
class Rune:
    id: int | None
    key: str
    name: str
    short_desc: str = ""
    long_desc: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rune":
        rune_id = data.get("id")
        return cls(
            id=rune_id if isinstance(rune_id, int) else None,
            key=_str(data.get("key")),
            name=_str(data.get("name")),
            short_desc=_str(data.get("shortDesc")),
            long_desc=_str(data.get("longDesc")),
        )


@dataclass(frozen=True)
class RuneTree:
    id: int | None
    key: str
    name: str
    short_desc: str = ""
    long_desc: str = ""
    slots: tuple[tuple[Rune, ...], ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuneTree":
        tree_id = data.get("id")
        slots: list[tuple[Rune, ...]] = []
        for slot in data.get("slots") or []:
            if not isinstance(slot, dict):
                continue
            runes = slot.get("runes") or []
            slots.append(tuple(Rune.from_dict(r) for r in runes if isinstance(r, dict)))
        return cls(
            id=tree_id if isinstance(tree_id, int) else None,
            key=_str(data.get("key")),
            name=_str(data.get("name")),
            short_desc=_str(data.get("shortDesc")),
            long_desc=_str(data.get("longDesc")),
            slots=tuple(slots),
        )


@dataclass(frozen=True)
class Region:
    key: str
    name: str
    lore: str


@dataclass(frozen=True)
class ResolutionQuery:
    """A classified user query; lives for a single request."""

    raw_text: str
    normalized_text: str
    search_text: str
    candidate_types: tuple[EntityType, ...] = field(default_factory=tuple)
    is_help: bool = False

    @property
    def is_ambiguous(self) -> bool:
        return not self.candidate_types


@dataclass(frozen=True)
class Answer:
    text: str
    source_type: EntityType | None = None
    found: bool = False
