"""Language modules for multi-language support.

Provides factory/registry pattern for language-specific drill data
(clitic vocabulary, ending-drill markers, token punctuation).
"""
from .registry import get_module, register, list_languages
from .base import LanguageModule

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "LanguageModule",
]
