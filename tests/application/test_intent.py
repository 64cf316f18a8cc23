"""Tests for keyword intent classification."""

import pytest

from runeterra.application.intent import IntentClassifier, strip_stop_words
from runeterra.data.entities import EntityType


@pytest.fixture
def classifier() -> IntentClassifier:
    return IntentClassifier()


def test_champion_question_strips_stop_words(classifier):
    query = classifier.classify("quem é jinx")

    assert query.raw_text == "quem é jinx"
    assert query.normalized_text == "quem e jinx"
    assert query.candidate_types[0] == EntityType.CHAMPION
    assert query.search_text == "jinx"


def test_item_question(classifier):
    query = classifier.classify("item gume do infinito")
    assert query.candidate_types == (EntityType.ITEM,)
    assert query.search_text == "gume infinito"


def test_rune_question(classifier):
    query = classifier.classify("runa eletrocutar")
    assert query.candidate_types == (EntityType.RUNE,)
    assert query.search_text == "eletrocutar"


def test_summoner_spell_question(classifier):
    query = classifier.classify("Feitiço Flash")
    assert query.candidate_types == (EntityType.SUMMONER_SPELL,)
    assert query.search_text == "flash"


def test_multiple_signals_keep_priority_order(classifier):
    query = classifier.classify("runa ou item do campeão")
    assert query.candidate_types == (EntityType.CHAMPION, EntityType.ITEM, EntityType.RUNE)


def test_region_short_circuits(classifier):
    query = classifier.classify("fala de Noxus")
    assert query.candidate_types == (EntityType.REGION,)


def test_region_wins_over_item_keywords(classifier):
    query = classifier.classify("item da dama de sangue de Noxus")
    assert query.candidate_types == (EntityType.REGION,)


def test_region_inside_a_longer_word_is_not_a_region(classifier):
    query = classifier.classify("item botas ionianas da lucidez")
    assert query.candidate_types == (EntityType.ITEM,)
    assert query.search_text == "botas ionianas lucidez"


def test_no_signal_is_ambiguous(classifier):
    query = classifier.classify("ahri")
    assert query.is_ambiguous
    assert query.search_text == "ahri"


def test_only_stop_words_falls_back_to_normalized_text(classifier):
    query = classifier.classify("Item")
    assert query.search_text == "item"


@pytest.mark.parametrize("text", ["", "   ", "help", "AJUDA"])
def test_help_requests(classifier, text):
    query = classifier.classify(text)
    assert query.is_help


def test_strip_stop_words_respects_word_boundaries():
    assert strip_stop_words("sobre a dama do lago") == "dama lago"
    assert strip_stop_words("darius") == "darius"
