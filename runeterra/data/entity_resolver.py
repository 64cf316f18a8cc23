"""Deterministic fuzzy name matching against Data Dragon catalogs.

Resolution stages, first hit wins:

1. exact match on the normalized name or identifier
2. normalized name contains the query
3. normalized secondary field (title, description) contains the query
4. every whitespace token of the query appears in the normalized name

Normalization strips diacritics, so "Ahrí" and "ahri" resolve alike.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Iterable, Sequence, TypeVar

from .entities import Champion, Item, Rune, RuneTree, SummonerSpell
from .formatter import html_to_text

T = TypeVar("T")


def normalize_text(text: str | None) -> str:
    decomposed = unicodedata.normalize("NFD", text or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower().strip()


def resolve(
    candidates: Sequence[T],
    query: str,
    *,
    name: Callable[[T], str],
    ident: Callable[[T], str] | None = None,
    secondary: Callable[[T], str] | None = None,
) -> T | None:
    q = normalize_text(query)
    if not q:
        return None

    names = [normalize_text(name(c)) for c in candidates]

    for candidate, candidate_name in zip(candidates, names):
        if candidate_name == q:
            return candidate
    if ident is not None:
        for candidate in candidates:
            if normalize_text(ident(candidate)) == q:
                return candidate

    for candidate, candidate_name in zip(candidates, names):
        if q in candidate_name:
            return candidate

    if secondary is not None:
        for candidate in candidates:
            if q in normalize_text(secondary(candidate)):
                return candidate

    tokens = q.split()
    for candidate, candidate_name in zip(candidates, names):
        if all(token in candidate_name for token in tokens):
            return candidate
    return None


def resolve_champion(champions: Sequence[Champion], query: str) -> Champion | None:
    return resolve(champions, query, name=lambda c: c.name, ident=lambda c: c.id, secondary=lambda c: c.title)


def resolve_item(items: Sequence[Item], query: str) -> Item | None:
    return resolve(items, query, name=lambda i: i.name, ident=lambda i: i.id)


def resolve_summoner_spell(spells: Sequence[SummonerSpell], query: str) -> SummonerSpell | None:
    return resolve(
        spells,
        query,
        name=lambda s: s.name,
        ident=lambda s: s.id,
        secondary=lambda s: html_to_text(s.description),
    )


def _walk_runes(trees: Iterable[RuneTree]) -> Iterable[RuneTree | Rune]:
    for tree in trees:
        yield tree
        for slot in tree.slots:
            yield from slot


def resolve_rune(trees: Sequence[RuneTree], query: str) -> RuneTree | Rune | None:
    """Search rune trees and the runes nested in their slots in a single pass.

    A tree name and a rune name compete on equal footing; whichever matches
    at the earliest stage (in document order) is returned.
    """
    q = normalize_text(query)
    if not q:
        return None

    nodes = [(node, normalize_text(node.name)) for node in _walk_runes(trees)]
    nodes = [(node, node_name) for node, node_name in nodes if node_name]
    tokens = q.split()

    stages: list[Callable[[str], bool]] = [
        lambda n: n == q,
        lambda n: q in n,
        lambda n: n in q,
        lambda n: all(token in n for token in tokens),
    ]
    for matches in stages:
        for node, node_name in nodes:
            if matches(node_name):
                return node
    return None
