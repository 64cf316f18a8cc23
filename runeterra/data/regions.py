"""Static lore for the regions of Runeterra."""

from __future__ import annotations

import re

from .entities import Region
from .entity_resolver import normalize_text

REGIONS = {
    "noxus": (
        "Noxus é um império expansionista que valoriza força, mérito e ambição. Origem não importa: "
        "quem prova valor sobe. É uma potência militar e política, cheia de intriga, conquista e pragmatismo."
    ),
    "demacia": (
        "Demacia valoriza honra, disciplina e tradição. Sua cultura é fortemente militar e desconfiada "
        "de magia. Ótima para histórias de dever, segredo e conflito ideológico."
    ),
    "ionia": (
        "Ionia é espiritual e ligada ao equilíbrio natural. Tradições antigas, ordens e facções diversas. "
        "Perfeita para histórias de harmonia, resistência e poder espiritual."
    ),
    "freljord": (
        "Freljord é um território gelado de clãs, sobrevivência e deuses antigos. Conflitos tribais e a "
        "brutalidade do inverno moldam tudo."
    ),
    "shurima": (
        "Shurima é deserto, ruínas de impérios e lendas de Ascensão. Exploração, relíquias e forças "
        "antigas são o coração da região."
    ),
    "targon": (
        "Targon trata de fé, provações e o domínio celestial. A montanha e seus Aspectos conectam mortais "
        "ao cosmo e a forças superiores."
    ),
    "ixtal": (
        "Ixtal é isolada e dominadora de magias elementais e tradição. Selva, segredo e maestria elemental "
        "definem sua identidade."
    ),
    "piltover": (
        "Piltover é a cidade do progresso: ciência, invenção, comércio e influência. Brilho, status e "
        "tecnologia movem suas histórias."
    ),
    "zaun": (
        "Zaun é a cidade subterrânea: química, risco e desigualdade. Onde Piltover brilha, Zaun sobrevive "
        "e se transforma."
    ),
    "bandópolis": (
        "Bandópolis é o lar yordle: magia leve, atalhos impossíveis e travessuras. Realidade flexível e "
        "humor perigoso."
    ),
    "ilhas das sombras": (
        "As Ilhas das Sombras são ruína e névoa: mortos-vivos, maldições e horror. Histórias de perda, "
        "vingança e sobrevivência."
    ),
    "vazio": (
        "O Vazio é uma ameaça alienígena que consome e corrompe. Terror cósmico, invasão e mutação "
        "definem essa força."
    ),
}

# Shorter fragments ("a", "io") would match unrelated regions.
MIN_PARTIAL_LENGTH = 3


def _mentions(query: str, key: str) -> bool:
    return re.search(rf"\b{re.escape(key)}\b", query) is not None


def _title(key: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in key.split(" "))


def find_region(text: str) -> Region | None:
    """Match exact key, then key containing the query, then the key as a whole word of the query."""
    query = normalize_text(text)
    if not query:
        return None

    keys = list(REGIONS)
    key = next((k for k in keys if normalize_text(k) == query), None)
    if key is None and len(query) >= MIN_PARTIAL_LENGTH:
        key = (
            next((k for k in keys if query in normalize_text(k)), None)
            or next((k for k in keys if _mentions(query, normalize_text(k))), None)
        )
    if key is None:
        return None
    return Region(key=key, name=_title(key), lore=REGIONS[key])
