"""Exception Bridge

Converts AppErrors into exceptions for callers that don't use the Result
monad (the host's UI loop, timer callbacks).
"""
from __future__ import annotations

from core.logging import get_logger

from .types import AppError, ErrorCode, Result, T

log = get_logger("errors.handlers")


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class EmptyCorpusError(AppErrorException):
    """No task is available in any loaded deck."""


_EXCEPTIONS_BY_CODE: dict[ErrorCode, type[AppErrorException]] = {
    ErrorCode.E5030_EMPTY_CORPUS: EmptyCorpusError,
}


def exception_for(error: AppError) -> AppErrorException:
    """Build the most specific exception for an AppError."""
    return _EXCEPTIONS_BY_CODE.get(error.code, AppErrorException)(error)


def raise_error(error: AppError) -> None:
    """Raise AppError as exception.

    Usage:
        if not corpus.task_count:
            raise_error(empty_corpus(len(corpus.decks)).error)
    """
    log.warning(
        "error_raised",
        error_code=error.code.name,
        message=error.message,
        category=error.code.category,
        correlation_id=error.context.correlation_id,
        origin=error.context.origin,
    )
    raise exception_for(error)


def raise_result(result: Result[T, AppError]) -> T:
    """Return the Ok value or raise the Err as exception.

    Usage:
        task = raise_result(sampler.pick_next_result(corpus))
    """
    if result.is_err():
        raise_error(result.unwrap_err())
    return result.unwrap()
