"""Spanish language module."""
from .module import SpanishModule

__all__ = ["SpanishModule"]
