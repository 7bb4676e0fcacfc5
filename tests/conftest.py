import random

import pytest

from models.deck import Corpus, Deck, Task


def make_task(task_id: str, **kwargs) -> Task:
    kwargs.setdefault("prompt_template", "___")
    kwargs.setdefault("acceptable_answers", (task_id,))
    for key in ("options", "acceptable_answers"):
        if key in kwargs:
            kwargs[key] = tuple(kwargs[key])
    return Task(id=task_id, **kwargs)


def make_deck(deck_id: str, *task_ids: str) -> Deck:
    return Deck(id=deck_id, title=deck_id.title(), tasks=tuple(make_task(t) for t in task_ids))


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def pronoun_corpus():
    """A Spanish pronoun deck and a verb-ending deck."""
    dative = make_task(
        "dative-1",
        group="pronouns",
        type="pronouns.object",
        prompt_native="Дай это ему",
        prompt_template="Dáselo ___",
        options=["lo", "a él", "a ella"],
        acceptable_answers=["a él"],
    )
    reflexive = make_task(
        "reflexive-1",
        group="pronouns",
        type="pronouns.reflexive",
        prompt_native="Я встаю",
        prompt_template="Yo ___ levanto.",
        options=["me", "yo mismo", "a mí"],
        acceptable_answers=["me"],
    )
    endings = make_task(
        "endings-1",
        group="verbs",
        type="verbs.endings.present",
        prompt_native="Ты говоришь",
        prompt_template="Tú habl ___",
        options=["as", "es", "a"],
        acceptable_answers=["as"],
    )
    return Corpus.of(
        Deck(id="pronouns", title="Pronombres", tasks=(dative, reflexive)),
        Deck(id="verbs", title="Verbos", tasks=(endings,)),
    )
