"""Affix-Overlap Suppression Engine

Fill-in templates often end with a verb that already carries a pronoun
clitic ("Dáselo ___"). Showing "lo" again as a choice would duplicate it,
so such options are blocked. Also renders the resolved phrase: drops a
trailing template word equal to the inserted answer and decides whether an
ending is glued to its stem.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from core.config import settings
from core.logging import engine_logger
from languages import LanguageModule, get_module
from models.deck import Task

log = engine_logger()

# Options this short and alphabetic look like word endings
ENDING_MAX_LENGTH = 4
ENDING_MIN_OPTIONS = 2


class BlockedAnswerSet:
    """Options hidden for one task presentation. Membership ignores case."""

    __slots__ = ("_values", "_keys")

    def __init__(self, values: Iterable[str] = ()):
        self._values: list[str] = []
        self._keys: set[str] = set()
        for value in values:
            self.add(value)

    def add(self, value: str) -> None:
        key = value.casefold()
        if key not in self._keys:
            self._keys.add(key)
            self._values.append(value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.casefold() in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __repr__(self) -> str:
        return f"BlockedAnswerSet({self._values!r})"


@dataclass(frozen=True, slots=True)
class TemplateParts:
    """A template split around its blank marker."""
    prefix: str
    suffix: str
    has_blank: bool


def last_token(text: str) -> str:
    """Run of non-whitespace characters ending the text (trailing space ignored)."""
    trimmed = text.rstrip()
    if not trimmed:
        return ""
    parts = trimmed.split()
    return parts[-1]


def _last_whitespace_index(text: str) -> int:
    for i in range(len(text) - 1, -1, -1):
        if text[i].isspace():
            return i
    return -1


class AffixSuppressor:
    """Clitic-aware option filtering and phrase rendering for one language."""

    __slots__ = ("_lang", "_blank")

    def __init__(self, language: LanguageModule | str | None = None, blank_marker: str | None = None):
        if language is None or isinstance(language, str):
            language = get_module(language or settings.DRILL_LANGUAGE)
        self._lang = language
        self._blank = blank_marker or settings.BLANK_MARKER

    @property
    def language(self) -> LanguageModule:
        return self._lang

    @property
    def blank_marker(self) -> str:
        return self._blank

    def clean_token(self, value: str | None) -> str:
        """Trim whitespace, then surrounding punctuation."""
        if not value:
            return ""
        return value.strip().strip(self._lang.punctuation)

    def split_template(self, template: str | None) -> TemplateParts:
        template = template or ""
        index = template.find(self._blank)
        if index < 0:
            return TemplateParts(prefix=template, suffix="", has_blank=False)
        return TemplateParts(
            prefix=template[:index],
            suffix=template[index + len(self._blank):],
            has_blank=True,
        )

    def compute_blocked(self, task: Task, options: Iterable[str] | None = None) -> BlockedAnswerSet:
        """Options whose clitic is already fused onto the word before the blank.

        Checks the task's own options unless the list actually shown (e.g.
        padded with distractors from other tasks) is passed in.
        """
        blocked = BlockedAnswerSet()
        parts = self.split_template(task.prompt_template)
        if not parts.has_blank:
            return blocked

        token = self.clean_token(last_token(parts.prefix))
        if not token:
            return blocked

        folded_token = token.casefold()
        for option in task.options if options is None else options:
            candidate = self.clean_token(option)
            if not candidate or not self._lang.is_clitic(candidate):
                continue
            if len(token) > len(candidate) and folded_token.endswith(candidate.casefold()):
                blocked.add(option)
                blocked.add(candidate)

        if blocked:
            log.debug("clitic_options_blocked", task_id=task.id, token=token, blocked=list(blocked))
        return blocked

    def trim_duplicate_leading_token(self, prefix: str, candidates: Sequence[str]) -> str:
        """Drop the prefix's trailing word if it equals an answer about to be inserted.

        "Quiero ir ___" with answer "ir" renders as "Quiero ir", not "Quiero ir ir".
        """
        if not prefix or not prefix.strip():
            return prefix

        trimmed = prefix.rstrip()
        last_space = _last_whitespace_index(trimmed)
        token = self.clean_token(trimmed[last_space + 1:])
        if not token:
            return prefix

        folded = token.casefold()
        for c in candidates:
            candidate = self.clean_token(c)
            if candidate and candidate.casefold() == folded:
                return prefix[:last_space + 1] if last_space >= 0 else ""
        return prefix

    def should_join_without_space(self, task: Task) -> bool:
        """Whether the answer is glued to the stem (verb-ending drills)."""
        if self._lang.is_ending_drill(task.type):
            return True

        short_count = 0
        for option in task.options:
            t = self.clean_token(option)
            if 1 <= len(t) <= ENDING_MAX_LENGTH and t.isalpha():
                short_count += 1
        return short_count >= ENDING_MIN_OPTIONS

    def allowed_answers(self, task: Task, blocked: BlockedAnswerSet) -> list[str]:
        """Accepted answers minus blocked ones; all of them if none would remain."""
        allowed = [a for a in task.acceptable_answers if a not in blocked]
        return allowed or list(task.acceptable_answers)
