"""Multiple-choice option synthesis.

Pads a task's own options with distractors pooled from tasks of the same
theme (group, else type). Options are unique case-insensitively.
"""
import random
from typing import Iterable

from core.config import settings
from core.logging import engine_logger
from models.deck import Corpus, Task

log = engine_logger()


def _append_unique(result: list[str], seen: set[str], values: Iterable[str], limit: int | None = None) -> None:
    for value in values:
        if limit is not None and len(result) >= limit:
            return
        if not value or not value.strip():
            continue
        key = value.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(value)


def dedupe_options(options: Iterable[str]) -> list[str]:
    """Case-insensitive dedup keeping the first occurrence, order preserved."""
    result: list[str] = []
    _append_unique(result, set(), options)
    return result


class OptionBuilder:
    """Builds shuffled, deduplicated multiple-choice sets."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def build(self, task: Task, corpus: Corpus, target_count: int | None = None) -> list[str]:
        """Options for a task, padded from same-theme tasks up to target_count.

        Never pads with placeholders: if fewer unique options exist, all of
        them are returned.
        """
        target = settings.OPTION_COUNT if target_count is None else target_count

        if len(task.options) >= target:
            return dedupe_options(task.options)

        result: list[str] = []
        seen: set[str] = set()
        _append_unique(result, seen, task.options)

        pool = self._theme_pool(task, corpus)
        self._rng.shuffle(pool)
        _append_unique(result, seen, pool, limit=target)

        self._rng.shuffle(result)
        if len(result) < target:
            log.debug("option_pool_exhausted", task_id=task.id, available=len(result), target=target)
        return result

    def _theme_pool(self, task: Task, corpus: Corpus) -> list[str]:
        """Non-blank options of every task sharing the task's theme key."""
        theme = task.theme_key
        if not theme.strip():
            return []
        return [
            opt
            for other in corpus.tasks_with_theme(theme)
            for opt in other.options
            if opt and opt.strip()
        ]
