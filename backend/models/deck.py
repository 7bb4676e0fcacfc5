"""Exercise content value objects: Task, Deck, Corpus.

Loaded once, never mutated. The engine shares Task references with the
caller instead of copying them.
"""
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Task:
    """A single exercise: prompt, fill-in template, options, accepted answers."""
    id: str
    group: str = ""
    type: str = ""
    prompt_native: str = ""
    prompt_template: str = ""   # "Quiero ___ ahora." (one blank marker)
    options: tuple[str, ...] = ()
    acceptable_answers: tuple[str, ...] = ()
    note: str | None = None

    @property
    def theme_key(self) -> str:
        """Key used to pool distractors: group if set, else type."""
        return self.group if self.group.strip() else self.type

    @property
    def is_answerable(self) -> bool:
        return bool(self.acceptable_answers)


@dataclass(frozen=True, slots=True)
class Deck:
    """A named, ordered collection of tasks loaded as one unit."""
    id: str
    title: str = ""
    tasks: tuple[Task, ...] = ()

    def __len__(self) -> int:
        return len(self.tasks)


CorpusSignature = tuple[tuple[str, int], ...]


@dataclass(frozen=True, slots=True)
class Corpus:
    """The set of decks currently active. Replaced wholesale on reload."""
    decks: tuple[Deck, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *decks: Deck) -> "Corpus":
        return cls(decks=tuple(decks))

    @property
    def task_count(self) -> int:
        return sum(len(d.tasks) for d in self.decks)

    def iter_tasks(self) -> Iterator[Task]:
        for deck in self.decks:
            yield from deck.tasks

    def signature(self) -> CorpusSignature:
        """Deck ids and task counts, in order. Changes trigger sampler rebuilds."""
        return tuple((d.id, len(d.tasks)) for d in self.decks)

    def tasks_with_theme(self, theme_key: str) -> list[Task]:
        return [t for t in self.iter_tasks() if t.theme_key == theme_key]
