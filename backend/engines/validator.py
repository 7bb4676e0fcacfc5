"""Answer validation: binary exact match after normalization."""
from core.logging import engine_logger
from engines.normalizer import normalize
from models.deck import Task

log = engine_logger()


class AnswerValidator:
    """Judges submitted answers against a task's accepted answers."""

    __slots__ = ()

    def is_correct(self, task: Task, user_answer: str | None) -> bool:
        """True if the normalized answer equals any normalized accepted answer.

        Fails closed: a task without accepted answers is never satisfied.
        """
        if not task.is_answerable:
            log.debug("task_without_answers", task_id=task.id)
            return False

        user_norm = normalize(user_answer)
        return any(user_norm == normalize(a) for a in task.acceptable_answers)


_default = AnswerValidator()


def is_correct(task: Task, user_answer: str | None) -> bool:
    """Module-level shortcut for AnswerValidator().is_correct."""
    return _default.is_correct(task, user_answer)
