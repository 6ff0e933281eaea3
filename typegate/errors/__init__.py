"""Monadic Error Handling System

Validators never raise for bad input; they return a Result.

Key components:
- Result[T, E]: Monadic container for success/failure
- ValidationFailure: classified failure with message, path and metadata
- ErrorKind: validation failure taxonomy
- Builder functions: ergonomic failure construction

Usage:
    from typegate.errors import Ok, Err

    match validator(payload):
        case Ok(value):
            handle(value)
        case Err(failure):
            log.info("rejected", kind=failure.kind.label, path=failure.location)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    ErrorKind,
    ValidationFailure,
    format_path,
    # Constructors
    ok,
    err,
    # Combinators
    sequence_results,
)

from .builders import (
    validation_error,
    required,
    wrong_type,
    too_small,
    too_large,
    too_short,
    too_long,
    invalid_format,
    non_integer,
    unknown_property,
)

from .handlers import (
    ValidationException,
    ConfigurationError,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "ErrorKind",
    "ValidationFailure",
    "format_path",
    "ok",
    "err",
    "sequence_results",
    # Builders
    "validation_error",
    "required",
    "wrong_type",
    "too_small",
    "too_large",
    "too_short",
    "too_long",
    "invalid_format",
    "non_integer",
    "unknown_property",
    # Handlers
    "ValidationException",
    "ConfigurationError",
    "raise_result",
]
