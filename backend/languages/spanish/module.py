"""Spanish language module implementation."""
from languages.base import LanguageModule
from .clitics import CLITICS_ES, ENDING_DRILL_MARKERS_ES, PUNCTUATION_ES


class SpanishModule(LanguageModule):
    """Spanish drill data: pronoun clitics and verb-ending drills."""

    __slots__ = ()

    @property
    def code(self) -> str:
        return "es"

    @property
    def name(self) -> str:
        return "Spanish"

    @property
    def native_name(self) -> str:
        return "Español"

    @property
    def clitics(self) -> frozenset[str]:
        return CLITICS_ES

    @property
    def ending_drill_markers(self) -> tuple[str, ...]:
        return ENDING_DRILL_MARKERS_ES

    @property
    def punctuation(self) -> str:
        return PUNCTUATION_ES
