"""Domain-Specific Error Builders

Ergonomic constructors for typed errors raised or returned by the engine.
Each builder creates AppError with appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def invalid_deck(
    reason: str,
    *,
    deck_id: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    msg = "Invalid deck record"
    if deck_id:
        msg += f" '{deck_id}'"
    return validation_error(
        f"{msg}: {reason}",
        code=ErrorCode.E2030_INVALID_DECK,
        origin=origin,
        cause=cause,
        deck_id=deck_id,
        **metadata,
    )


# =============================================================================
# Business Logic Errors (E5xxx)
# =============================================================================

def business_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E5000_BUSINESS_GENERIC,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create business logic error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
    ))


def empty_corpus(deck_count: int, origin: str = "") -> Err[AppError]:
    return business_error(
        f"No tasks available across {deck_count} deck(s)",
        code=ErrorCode.E5030_EMPTY_CORPUS,
        origin=origin,
        deck_count=deck_count,
    )
