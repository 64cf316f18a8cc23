"""Plain-text answer rendering for resolved entities.

Every field is clipped before the answer is assembled, and the longest
free-text field is sized to whatever room the rest of the answer leaves, so
the result stays under ``MAX_ANSWER_LENGTH`` without cutting a label line in
half. Nothing is truncated after assembly.
"""

from __future__ import annotations

import re
from typing import Callable

from .entities import Champion, ChampionAbility, Item, Region, Rune, RuneTree, SummonerSpell

MAX_ANSWER_LENGTH = 1800
ELLIPSIS = "..."

ABILITY_SLOTS = ("Q", "W", "E", "R")

LORE_LIMIT = 700
BLURB_LIMIT = 500
PASSIVE_LIMIT = 400
ABILITY_LIMIT = 260
ITEM_DESCRIPTION_LIMIT = 900
SPELL_DESCRIPTION_LIMIT = 1200
RUNE_DESCRIPTION_LIMIT = 1400
NAME_LIMIT = 60
TAGS_LIMIT = 120
PLAINTEXT_LIMIT = 300

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
_ENTITIES = (
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&nbsp;", " "),
    ("&amp;", "&"),  # last, so "&amp;lt;" stays "&lt;"
)

HELP_TEXT = (
    "RUNETERRA • Ajuda\n\n"
    "Use:\n"
    "- /ask pergunta\n"
    "- /champ nome\n"
    "- /item nome\n"
    "- /region nome\n\n"
    "Ou me marque: @RUNETERRA 'quem é jinx', 'item gume do infinito', 'runa eletrocutar', "
    "'feitiço flash', 'fala de noxus'."
)

CLARIFICATION_TEXT = (
    "Entendi, mas preciso de um detalhe.\n"
    "Você quer: campeão, item, runa, feitiço ou região?\n"
    "Exemplos: 'campeão jinx', 'item gume do infinito', 'runa eletrocutar', 'feitiço flash', 'região noxus'."
)

CHAMPION_NOT_FOUND = "Não encontrei esse campeão. Tente outro nome."
ITEM_NOT_FOUND = "Não encontrei esse item. Tente outro nome."
REGION_NOT_FOUND = "Não reconheci essa região. Tente: Noxus, Demacia, Ionia, etc."
RETRY_TEXT = "Deu erro aqui. Tenta de novo em alguns segundos."


def html_to_text(text: str | None) -> str:
    if not text:
        return ""
    text = _BR_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def clip(text: str | None, limit: int = SPELL_DESCRIPTION_LIMIT) -> str:
    text = text or ""
    if len(text) <= limit:
        return text
    if limit <= len(ELLIPSIS):
        return ELLIPSIS[:max(limit, 0)]
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def _fit(build: Callable[[str], str], body: str, limit: int) -> str:
    """Render ``build(body)``, shrinking ``body`` until the whole stays within the cap.

    Callers keep every other field short enough that ``build("")`` fits.
    """
    body = clip(body, limit)
    text = build(body)
    while len(text) > MAX_ANSWER_LENGTH and body:
        body = clip(body, max(len(body) - (len(text) - MAX_ANSWER_LENGTH), 0))
        text = build(body)
    return text


def _ability_lines(spells: tuple[ChampionAbility, ...], limit: int) -> str:
    return "\n".join(
        f"{slot}: {clip(spell.name, NAME_LIMIT)} — {clip(html_to_text(spell.description), limit)}"
        for slot, spell in zip(ABILITY_SLOTS, spells)
    )


def format_champion(champ: Champion) -> str:
    header = f"{clip(champ.name, NAME_LIMIT)} — {clip(champ.title, NAME_LIMIT)}"
    tags = clip(", ".join(champ.tags), TAGS_LIMIT) if champ.tags else "—"
    passive = ""
    if champ.passive:
        passive = (
            f"Passiva: {clip(champ.passive.name, NAME_LIMIT)} — "
            f"{clip(html_to_text(champ.passive.description), PASSIVE_LIMIT)}"
        )
    story, story_limit = (champ.lore, LORE_LIMIT) if champ.lore else (champ.blurb, BLURB_LIMIT)

    def render(abilities: str, blurb: str) -> str:
        text = (
            f"{header}\n"
            f"Classes: {tags}\n\n"
            f"{blurb}\n\n"
            f"{passive}\n"
            f"{abilities}"
        )
        return _EXCESS_NEWLINES_RE.sub("\n\n", text).rstrip()

    # Ability descriptions give way when the fixed fields alone overflow.
    ability_limit = ABILITY_LIMIT
    while True:
        spells = _ability_lines(champ.spells, ability_limit)
        abilities = f"\nHabilidades:\n{spells}" if spells else ""
        if ability_limit == 0 or len(render(abilities, "")) <= MAX_ANSWER_LENGTH:
            break
        ability_limit = max(ability_limit - 20, 0)

    return _fit(lambda blurb: render(abilities, blurb), story, story_limit)


def format_item(item: Item) -> str:
    name = clip(item.name, NAME_LIMIT)
    gold = f"Custo: {item.gold_total}" if item.gold_total else ""
    tags = f"Tags: {clip(', '.join(item.tags), TAGS_LIMIT)}" if item.tags else ""
    plaintext = clip(item.plaintext, PLAINTEXT_LIMIT)

    def build(desc: str) -> str:
        text = f"{name}\n{gold}\n{tags}\n\n{plaintext}\n\n{desc}"
        return _EXCESS_NEWLINES_RE.sub("\n\n", text).strip()

    return _fit(build, html_to_text(item.description), ITEM_DESCRIPTION_LIMIT)


def format_summoner_spell(spell: SummonerSpell) -> str:
    name = clip(spell.name, NAME_LIMIT)
    return _fit(lambda desc: f"{name}\n\n{desc}", html_to_text(spell.description), SPELL_DESCRIPTION_LIMIT)


def format_rune(rune: Rune | RuneTree) -> str:
    desc = html_to_text(rune.long_desc or rune.short_desc)
    # Data Dragon trees carry no description; list the keystones instead.
    if not desc and isinstance(rune, RuneTree) and rune.slots and rune.slots[0]:
        desc = "Pedras angulares: " + ", ".join(keystone.name for keystone in rune.slots[0])
    name = clip(rune.name, NAME_LIMIT)
    return _fit(lambda d: f"{name}\n\n{d}".rstrip(), desc, RUNE_DESCRIPTION_LIMIT)


def format_region(region: Region) -> str:
    return _fit(lambda lore: f"{region.name}\n\n{lore}", region.lore, MAX_ANSWER_LENGTH)
