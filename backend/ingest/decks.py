"""Deck Record Ingestion

Turns already-parsed deck records (dicts from JSON/YAML decoded by the host)
into immutable Deck values. Keys are matched case-insensitively and the
legacy desktop names (deckId, promptRu, promptEsTemplate) are accepted.

A malformed record is skipped and counted, never fatal: one broken deck must
not keep the others from loading.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from core.config import settings
from core.errors import AppError, Ok, Result, collect_results, invalid_deck
from core.logging import ingest_logger
from models.deck import Corpus, Deck, Task

log = ingest_logger()

# Lowercased, underscore-free key -> field name
TASK_KEYS = {
    "id": "id",
    "group": "group",
    "type": "type",
    "promptnative": "prompt_native",
    "promptru": "prompt_native",
    "prompttemplate": "prompt_template",
    "promptestemplate": "prompt_template",
    "options": "options",
    "acceptableanswers": "acceptable_answers",
    "note": "note",
}

DECK_KEYS = {
    "id": "id",
    "deckid": "id",
    "title": "title",
    "tasks": "tasks",
}


def _canonical_keys(data: Any, names: dict[str, str]) -> Any:
    if not isinstance(data, Mapping):
        return data
    out: dict[str, Any] = {}
    for key, value in data.items():
        name = names.get(str(key).replace("_", "").lower())
        if name is not None:
            out[name] = value
    return out


class TaskRecord(BaseModel):
    """One exercise as found in a deck file."""
    model_config = ConfigDict(extra="ignore")

    id: str
    group: str = ""
    type: str = ""
    prompt_native: str = ""
    prompt_template: str = ""
    options: list[str] = []
    acceptable_answers: list[str] = []
    note: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _keys(cls, data: Any) -> Any:
        return _canonical_keys(data, TASK_KEYS)

    @field_validator("group", "type", "prompt_native", "prompt_template", mode="before")
    @classmethod
    def _null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("options", "acceptable_answers", mode="before")
    @classmethod
    def _null_to_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("task id must not be blank")
        return v.strip()

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            group=self.group,
            type=self.type,
            prompt_native=self.prompt_native,
            prompt_template=self.prompt_template,
            options=tuple(self.options),
            acceptable_answers=tuple(self.acceptable_answers),
            note=self.note,
        )


class DeckRecord(BaseModel):
    """A deck: id, title and its tasks."""
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    tasks: list[TaskRecord] = []

    @model_validator(mode="before")
    @classmethod
    def _keys(cls, data: Any) -> Any:
        return _canonical_keys(data, DECK_KEYS)

    @field_validator("id", "title", mode="before")
    @classmethod
    def _null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_deck(self) -> Deck:
        return Deck(id=self.id, title=self.title, tasks=tuple(t.to_task() for t in self.tasks))


@dataclass(slots=True)
class DeckLoadReport:
    """Decks that loaded and the records that were skipped."""
    corpus: Corpus
    errors: list[AppError] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return len(self.corpus.decks)

    @property
    def skipped(self) -> int:
        return len(self.errors)


def _record_deck_id(record: Any) -> str | None:
    if isinstance(record, Mapping):
        value = _canonical_keys(record, DECK_KEYS).get("id")
        return value if isinstance(value, str) and value else None
    return None


def parse_deck(record: Any) -> Result[Deck, AppError]:
    """Validate one deck record.

    Returns:
        Ok(Deck) on success
        Err(AppError) with E2030_INVALID_DECK if the record is malformed
    """
    if not isinstance(record, Mapping):
        return invalid_deck(f"expected a mapping, got {type(record).__name__}", origin="ingest")
    try:
        return Ok(DeckRecord.model_validate(record).to_deck())
    except ValidationError as e:
        return invalid_deck(
            f"{e.error_count()} validation error(s)",
            deck_id=_record_deck_id(record),
            origin="ingest",
            cause=e,
            errors=[f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()],
        )


def _warn_defects(decks: list[Deck], blank_marker: str) -> None:
    """Log content defects the engine tolerates but an author should fix."""
    seen: dict[str, str] = {}
    for deck in decks:
        for task in deck.tasks:
            if task.id in seen:
                log.warning("duplicate_task_id", task_id=task.id, deck_id=deck.id, first_deck_id=seen[task.id])
            else:
                seen[task.id] = deck.id
            if not task.is_answerable:
                log.warning("task_without_answers", task_id=task.id, deck_id=deck.id)
            if blank_marker not in task.prompt_template:
                log.warning("task_without_blank", task_id=task.id, deck_id=deck.id)


def load_decks(records: Iterable[Any], blank_marker: str | None = None) -> DeckLoadReport:
    """Build a Corpus from parsed deck records, skipping malformed ones."""
    decks, errors = collect_results([parse_deck(r) for r in records])

    for error in errors:
        log.warning(
            "deck_record_skipped",
            error_code=error.code.name,
            message=error.message,
            deck_id=error.metadata.get("deck_id"),
            errors=error.metadata.get("errors"),
        )

    _warn_defects(decks, blank_marker or settings.BLANK_MARKER)
    report = DeckLoadReport(corpus=Corpus(decks=tuple(decks)), errors=errors)
    log.info("decks_loaded", loaded=report.loaded, skipped=report.skipped, tasks=report.corpus.task_count)
    return report
