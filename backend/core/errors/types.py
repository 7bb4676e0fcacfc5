"""Monadic Error Handling Types

Result/Either types for deterministic, composable error propagation through
the exercise engine. Engines that can fail expose a Result-returning variant
next to the exception-raising one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors (malformed deck records)
    E5xxx: Business logic errors (exercise selection)
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2030_INVALID_DECK = 2030

    # Business Logic (E5xxx)
    E5000_BUSINESS_GENERIC = 5000
    E5030_EMPTY_CORPUS = 5030

    @property
    def category(self) -> str:
        """Human-readable error category."""
        return "validation" if self.value < 5000 else "business"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Base application error with full context.

    All errors carry:
    - Typed error code from taxonomy
    - Human-readable message
    - Structured metadata for debugging
    - Tracing context
    - Optional cause for error chaining
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result monad."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Extract the value. Safe because Ok always contains a value."""
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result monad."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        """Extract the error."""
        return self.error


# Type alias for Result monad
Result = Union[Ok[T], Err[E]]


def collect_results(results: list[Result[T, AppError]]) -> tuple[list[T], list[AppError]]:
    """Split Results into successful values and errors, preserving order."""
    values: list[T] = []
    errors: list[AppError] = []

    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                errors.append(e)

    return values, errors
