"""Shared fixtures: a tiny Data Dragon corpus served through httpx.MockTransport."""

from __future__ import annotations

import copy
from typing import Any

import httpx
import pytest

from runeterra.data.cache import CacheStore
from runeterra.data.repository import DataDragonRepository

BASE_URL = "https://ddragon.test"
VERSION = "14.1.1"

CHAMPION_INDEX = {
    "type": "champion",
    "data": {
        "Jinx": {"id": "Jinx", "name": "Jinx", "title": "a Gatilho Desenfreado", "tags": ["Marksman"]},
        "MissFortune": {
            "id": "MissFortune",
            "name": "Miss Fortune",
            "title": "a Caçadora de Recompensas",
            "tags": ["Marksman"],
        },
        "Ahri": {"id": "Ahri", "name": "Ahri", "title": "a Raposa de Nove Caudas", "tags": ["Mage", "Assassin"]},
    },
}

JINX_FULL = {
    "data": {
        "Jinx": {
            "id": "Jinx",
            "name": "Jinx",
            "title": "a Gatilho Desenfreado",
            "tags": ["Marksman"],
            "lore": "Uma criminosa maníaca e impulsiva de Zaun.",
            "blurb": "Criminosa de Zaun.",
            "passive": {"name": "Vamo Detoná!", "description": "Jinx ganha <b>Velocidade</b>."},
            "spells": [
                {"name": "Zap!", "description": "Dispara um raio.<br>Causa dano."},
                {"name": "Trocando!", "description": "Troca de arma."},
                {"name": "Mandíbulas Flamejantes!", "description": "Lança granadas."},
                {"name": "Super Mega Míssil da Morte!", "description": "Dispara um míssil."},
            ],
        }
    }
}

AHRI_FULL = {
    "data": {
        "Ahri": {
            "id": "Ahri",
            "name": "Ahri",
            "title": "a Raposa de Nove Caudas",
            "tags": ["Mage", "Assassin"],
            "blurb": "Ahri é uma vastaya.",
            "passive": {"name": "Roubo de Essência", "description": "Cura."},
            "spells": [],
        }
    }
}

MISS_FORTUNE_FULL = {
    "data": {
        "MissFortune": {
            "id": "MissFortune",
            "name": "Miss Fortune",
            "title": "a Caçadora de Recompensas",
            "tags": ["Marksman"],
            "blurb": "Capitã de Águas de Sentina.",
        }
    }
}

ITEMS = {
    "data": {
        "3031": {
            "name": "Gume do Infinito",
            "description": "<mainText><stats>80 Dano de Ataque</stats></mainText>",
            "plaintext": "Aumenta muito o dano crítico",
            "gold": {"total": 3400},
            "tags": ["Damage", "CriticalStrike"],
        },
        "1001": {
            "name": "Botas",
            "description": "<stats>25 Velocidade de Movimento</stats>",
            "gold": {"total": 300},
            "tags": ["Boots"],
        },
    }
}

SUMMONER_SPELLS = {
    "data": {
        "SummonerFlash": {
            "id": "SummonerFlash",
            "name": "Flash",
            "description": "Teleporta seu campeão a uma curta distância.",
        },
        "SummonerBarrier": {
            "id": "SummonerBarrier",
            "name": "Barreira",
            "description": "Protege seu campeão temporariamente.",
        },
    }
}


def rune_trees(tree_name: str = "Dominação", rune_name: str = "Eletrocutar") -> list[dict[str, Any]]:
    return [
        {
            "id": 8100,
            "key": "Domination",
            "name": tree_name,
            "slots": [
                {
                    "runes": [
                        {
                            "id": 8112,
                            "key": "Electrocute",
                            "name": rune_name,
                            "shortDesc": "Acertar 3 ataques causa dano adicional.",
                            "longDesc": "Acertar um campeão com 3 ataques <b>separados</b> causa dano.",
                        },
                        {
                            "id": 9923,
                            "key": "HailOfBlades",
                            "name": "Chuva de Lâminas",
                            "shortDesc": "Ganha velocidade de ataque.",
                        },
                    ]
                }
            ],
        },
        {
            "id": 8000,
            "key": "Precision",
            "name": "Precisão",
            "slots": [
                {"runes": [{"id": 8005, "key": "PressTheAttack", "name": "Pressione o Ataque", "shortDesc": "..."}]}
            ],
        },
    ]


def default_routes() -> dict[str, Any]:
    root = f"{BASE_URL}/cdn/{VERSION}/data"
    return {
        f"{BASE_URL}/api/versions.json": [VERSION, "14.0.1"],
        f"{root}/pt_BR/champion.json": CHAMPION_INDEX,
        f"{root}/pt_BR/champion/Jinx.json": JINX_FULL,
        f"{root}/pt_BR/champion/Ahri.json": AHRI_FULL,
        f"{root}/pt_BR/champion/MissFortune.json": MISS_FORTUNE_FULL,
        f"{root}/pt_BR/item.json": ITEMS,
        f"{root}/pt_BR/summoner.json": SUMMONER_SPELLS,
        f"{root}/pt_BR/runesReforged.json": rune_trees(),
    }


class FakeDataDragon:
    """Serves canned JSON by URL and records every request.

    An int route value is answered with that bare status code.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes = copy.deepcopy(routes if routes is not None else default_routes())
        self.requests: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url not in self.routes:
            return httpx.Response(404, json={"error": "not found"})
        body = self.routes[url]
        if isinstance(body, int):
            return httpx.Response(body)
        return httpx.Response(200, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def count(self, suffix: str) -> int:
        return sum(1 for url in self.requests if url.endswith(suffix))


class FakeClock:
    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(tmp_path, clock) -> CacheStore:
    return CacheStore(tmp_path / "cache", clock=clock)


@pytest.fixture
def ddragon() -> FakeDataDragon:
    return FakeDataDragon()


@pytest.fixture
def repository(cache, ddragon) -> DataDragonRepository:
    return DataDragonRepository(
        cache=cache,
        language="pt_BR",
        fallback_language="en_US",
        base_url=BASE_URL,
        timeout_s=5,
        transport=ddragon.transport,
    )


@pytest.fixture
def data_url():
    def build(language: str, document: str) -> str:
        return f"{BASE_URL}/cdn/{VERSION}/data/{language}/{document}.json"

    return build


@pytest.fixture
def make_rune_trees():
    return rune_trees
