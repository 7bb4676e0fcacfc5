import random

from conftest import make_task
from engines.options import OptionBuilder, dedupe_options
from models.deck import Corpus, Deck


def folded(options):
    return [o.casefold() for o in options]


def test_dedupe_keeps_first_occurrence():
    assert dedupe_options(["Lo", "la", "lo", "LA", "le"]) == ["Lo", "la", "le"]


def test_sufficient_options_are_deduped_but_not_shuffled():
    task = make_task("t", options=["me", "te", "Me", "se", "nos"])
    builder = OptionBuilder(random.Random(1))

    assert builder.build(task, Corpus(), 4) == ["me", "te", "se", "nos"]


def test_pads_from_theme_pool_without_duplicates():
    task = make_task("t", group="pronouns", options=["lo", "la"])
    other = make_task("o", group="pronouns", options=["le", "les", "los", "LO", "Le", "las", "se"])
    corpus = Corpus.of(Deck(id="d", tasks=(task, other)))

    options = OptionBuilder(random.Random(3)).build(task, corpus, 6)

    assert len(options) == 6
    assert len(set(folded(options))) == 6
    assert "lo" in options and "la" in options


def test_other_themes_are_not_pooled():
    task = make_task("t", group="pronouns", options=["lo"])
    same = make_task("s", group="pronouns", options=["la"])
    foreign = make_task("f", group="verbs", options=["as", "es"])
    corpus = Corpus.of(Deck(id="d", tasks=(task, same, foreign)))

    options = OptionBuilder(random.Random(3)).build(task, corpus, 4)

    assert sorted(options) == ["la", "lo"]


def test_type_is_theme_when_group_blank():
    task = make_task("t", group=" ", type="pronouns.object", options=["lo"])
    same = make_task("s", type="pronouns.object", options=["le"])
    grouped = make_task("g", group="x", type="pronouns.object", options=["la"])
    corpus = Corpus.of(Deck(id="d", tasks=(task, same, grouped)))

    options = OptionBuilder(random.Random(5)).build(task, corpus, 4)

    assert sorted(options) == ["le", "lo"]


def test_insufficient_pool_returns_everything_available():
    task = make_task("t", group="g", options=["uno"])
    other = make_task("o", group="g", options=["dos", "tres", "", "  ", "DOS"])
    corpus = Corpus.of(Deck(id="d", tasks=(task, other)))

    options = OptionBuilder(random.Random(2)).build(task, corpus, 6)

    assert sorted(options) == ["dos", "tres", "uno"]


def test_blank_theme_gets_only_own_options():
    task = make_task("t", options=["a"])
    other = make_task("o", options=["b", "c"])
    corpus = Corpus.of(Deck(id="d", tasks=(task, other)))

    assert OptionBuilder(random.Random(2)).build(task, corpus, 3) == ["a"]


def test_result_is_shuffled_when_padded():
    task = make_task("t", group="g", options=["own"])
    pool = make_task("o", group="g", options=[f"d{i}" for i in range(10)])
    corpus = Corpus.of(Deck(id="d", tasks=(task, pool)))
    builder = OptionBuilder(random.Random(0))

    positions = {builder.build(task, corpus, 4).index("own") for _ in range(40)}

    assert len(positions) > 1
