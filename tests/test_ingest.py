from core.errors import ErrorCode
from ingest.decks import load_decks, parse_deck


LEGACY_DECK = {
    "DeckId": "es-pronouns",
    "Title": "Pronombres",
    "Tasks": [
        {
            "Id": "p1",
            "Group": "pronouns",
            "Type": "pronouns.object",
            "PromptRu": "Дай это ему",
            "PromptEsTemplate": "Dáselo ___",
            "Options": ["lo", "a él"],
            "AcceptableAnswers": ["a él"],
            "Note": None,
        }
    ],
}


def test_legacy_keys_are_accepted():
    deck = parse_deck(LEGACY_DECK).unwrap()

    assert deck.id == "es-pronouns"
    assert deck.title == "Pronombres"
    task = deck.tasks[0]
    assert task.prompt_native == "Дай это ему"
    assert task.prompt_template == "Dáselo ___"
    assert task.options == ("lo", "a él")
    assert task.acceptable_answers == ("a él",)


def test_snake_and_camel_keys_are_accepted():
    record = {
        "id": "d",
        "tasks": [
            {"id": "a", "promptTemplate": "x ___", "acceptable_answers": ["y"], "options": None, "group": None},
        ],
    }
    task = parse_deck(record).unwrap().tasks[0]

    assert task.prompt_template == "x ___"
    assert task.acceptable_answers == ("y",)
    assert task.options == ()
    assert task.group == ""


def test_malformed_deck_is_err():
    result = parse_deck({"deckId": "broken", "tasks": [{"options": ["a"]}]})

    assert result.is_err()
    error = result.unwrap_err()
    assert error.code is ErrorCode.E2030_INVALID_DECK
    assert error.metadata["deck_id"] == "broken"
    assert error.metadata["errors"]


def test_blank_task_id_is_rejected():
    assert parse_deck({"id": "d", "tasks": [{"id": "  "}]}).is_err()


def test_non_mapping_is_err():
    assert parse_deck(["not", "a", "deck"]).is_err()


def test_load_decks_skips_and_counts():
    records = [
        LEGACY_DECK,
        {"deckId": "broken", "tasks": "nope"},
        42,
        {"deckId": "verbs", "tasks": [{"id": "v1", "promptTemplate": "habl___", "acceptableAnswers": ["as"]}]},
    ]

    report = load_decks(records)

    assert report.loaded == 2
    assert report.skipped == 2
    assert [d.id for d in report.corpus.decks] == ["es-pronouns", "verbs"]
    assert report.corpus.task_count == 2


def test_defective_tasks_are_still_loaded():
    record = {
        "id": "d",
        "tasks": [
            {"id": "dup", "promptTemplate": "no blank", "acceptableAnswers": []},
            {"id": "dup", "promptTemplate": "___", "acceptableAnswers": ["x"]},
        ],
    }

    report = load_decks([record])

    assert report.skipped == 0
    assert report.corpus.task_count == 2
