"""Exercise Session Engine

Ties the engines together for one drill surface: pick a task, build its
choice list, hide fused clitics, judge the submitted answer and render the
resolved phrase. Results are plain value objects; a UI layer can subscribe
through the on_result callback.
"""
from dataclasses import dataclass
from typing import Callable

from core.config import settings
from core.logging import bind_context, clear_context, engine_logger
from engines.affixes import AffixSuppressor, BlockedAnswerSet
from engines.options import OptionBuilder, dedupe_options
from engines.sampler import Sampler
from engines.validator import AnswerValidator
from models.deck import Corpus, Task

log = engine_logger()


@dataclass(frozen=True, slots=True)
class PhraseParts:
    """Template rendered around an inserted answer."""
    prefix: str
    insert: str
    suffix: str

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.insert}{self.suffix}"


@dataclass(frozen=True, slots=True)
class Presentation:
    """What the drill surface shows for one task."""
    task: Task
    options: list[str]
    blocked: BlockedAnswerSet
    prompt_prefix: str
    prompt_suffix: str
    join_without_space: bool

    @property
    def prompt_native(self) -> str:
        return self.task.prompt_native


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Outcome of one submitted answer."""
    task_id: str
    answer: str
    correct: bool
    accepted_answers: list[str]
    phrase: PhraseParts

    @property
    def accepted_text(self) -> str:
        """Hint shown after an incorrect answer."""
        return "" if self.correct else "Accepted: " + ", ".join(self.accepted_answers)


class ExerciseSession:
    """One active exercise at a time, fed by the sampler."""

    __slots__ = ("_sampler", "_builder", "_affixes", "_validator", "_option_count", "_current", "_on_result")

    def __init__(
        self,
        sampler: Sampler | None = None,
        option_builder: OptionBuilder | None = None,
        suppressor: AffixSuppressor | None = None,
        validator: AnswerValidator | None = None,
        option_count: int | None = None,
        on_result: Callable[[SubmissionResult], None] | None = None,
    ):
        self._sampler = sampler or Sampler()
        self._builder = option_builder or OptionBuilder()
        self._affixes = suppressor or AffixSuppressor()
        self._validator = validator or AnswerValidator()
        self._option_count = settings.OPTION_COUNT if option_count is None else option_count
        self._current: Presentation | None = None
        self._on_result = on_result

    @property
    def current(self) -> Presentation | None:
        return self._current

    def recent_ids(self) -> list[str]:
        """Recency history for the host to persist between runs."""
        return self._sampler.recent_ids()

    def next_exercise(self, corpus: Corpus) -> Presentation:
        """Pick and present the next task.

        Raises:
            EmptyCorpusError: no deck holds any task.
        """
        task = self._sampler.pick_next(corpus)
        return self.present(task, corpus)

    def present(self, task: Task, corpus: Corpus | None = None) -> Presentation:
        """Prepare a task for display. Without a corpus only its own options are shown."""
        bind_context(task_id=task.id)

        if corpus is not None:
            options = self._builder.build(task, corpus, self._option_count)
        else:
            options = dedupe_options(task.options)
        # Pooled distractors can carry the fused clitic too
        blocked = self._affixes.compute_blocked(task, [*task.options, *options])
        visible = [o for o in options if o not in blocked]

        join = self._affixes.should_join_without_space(task)
        parts = self._affixes.split_template(task.prompt_template)
        prefix = parts.prefix
        if parts.has_blank:
            prefix = self._affixes.trim_duplicate_leading_token(prefix, task.options)
            if join:
                prefix = prefix.rstrip()

        self._current = Presentation(
            task=task,
            options=visible,
            blocked=blocked,
            prompt_prefix=prefix,
            prompt_suffix=parts.suffix,
            join_without_space=join,
        )
        log.debug("task_presented", options=len(visible), blocked=len(blocked), join=join)
        return self._current

    def submit(self, answer: str) -> SubmissionResult | None:
        """Judge an answer for the current task. None if nothing is presented."""
        current = self._current
        if current is None:
            return None

        task = current.task
        if answer in current.blocked:
            correct = False
        else:
            correct = self._validator.is_correct(task, answer)

        result = SubmissionResult(
            task_id=task.id,
            answer=answer,
            correct=correct,
            accepted_answers=self._affixes.allowed_answers(task, current.blocked),
            phrase=self._render_phrase(current, answer, correct),
        )
        log.info("answer_submitted", correct=correct)

        if self._on_result is not None:
            self._on_result(result)
        return result

    def reset(self) -> None:
        """Drop the current exercise, e.g. when the drill surface closes."""
        self._current = None
        clear_context()

    def _render_phrase(self, current: Presentation, answer: str, correct: bool) -> PhraseParts:
        task = current.task
        if not correct and task.acceptable_answers:
            answer = task.acceptable_answers[0]

        parts = self._affixes.split_template(task.prompt_template)
        if not parts.has_blank:
            return PhraseParts(prefix=parts.prefix, insert=answer, suffix="")

        prefix = self._affixes.trim_duplicate_leading_token(parts.prefix, [answer])
        if current.join_without_space:
            prefix = prefix.rstrip()
        return PhraseParts(prefix=prefix, insert=answer, suffix=parts.suffix)
