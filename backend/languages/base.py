"""Abstract base class for language modules."""
from abc import ABC, abstractmethod

# Surrounding punctuation stripped from tokens before comparison
DEFAULT_PUNCTUATION = ",.;:!?\"'"


class LanguageModule(ABC):
    """Abstract base for language-specific drill data."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'es')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @property
    @abstractmethod
    def clitics(self) -> frozenset[str]:
        """Pronoun tokens that can fuse onto the end of a verb (lowercase)."""
        ...

    @property
    def ending_drill_markers(self) -> tuple[str, ...]:
        """Task type fragments marking drills whose answer is a word ending.

        Override if the language has ending drills.
        """
        return ()

    @property
    def punctuation(self) -> str:
        """Characters stripped from both ends of a token. Override for
        languages with extra marks (inverted question marks etc.)."""
        return DEFAULT_PUNCTUATION

    def is_clitic(self, token: str) -> bool:
        return token.casefold() in self.clitics

    def is_ending_drill(self, task_type: str) -> bool:
        """True if the task type contains an ending-drill marker (case-insensitive)."""
        if not task_type or not task_type.strip():
            return False
        folded = task_type.casefold()
        return any(marker.casefold() in folded for marker in self.ending_drill_markers)
