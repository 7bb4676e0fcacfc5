"""Text normalization for answer comparison.

Folds case, strips diacritics and collapses whitespace so that
"  Vás " and "vas" compare equal.
"""
import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """Drop combining marks: "áéíóúüñ" -> "aeiouun"."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def collapse_whitespace(text: str) -> str:
    """Replace each whitespace run with one ASCII space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def normalize(text: str | None) -> str:
    """Canonical form of a string for equality comparison.

    Total and idempotent: normalize(normalize(s)) == normalize(s).
    """
    if not text or not text.strip():
        return ""
    s = text.strip().lower()
    s = strip_diacritics(s)
    return collapse_whitespace(s)
