"""Monadic Error Handling System

Type-safe error handling for the exercise engine, inspired by Haskell's
Either monad and Rust's Result type.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- AppErrorException: Bridge to exception-based callers

Usage:
    from core.errors import Ok, Err, EmptyCorpusError

    match sampler.pick_next_result(corpus):
        case Ok(task):
            show(task)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Combinators
    collect_results,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    invalid_deck,
    # Business (E5xxx)
    business_error,
    empty_corpus,
)

from .handlers import (
    AppErrorException,
    EmptyCorpusError,
    exception_for,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Combinators
    "collect_results",
    # Validation (E2xxx)
    "validation_error",
    "invalid_deck",
    # Business (E5xxx)
    "business_error",
    "empty_corpus",
    # Exceptions
    "AppErrorException",
    "EmptyCorpusError",
    "exception_for",
    "raise_error",
    "raise_result",
]
