"""Validation Failure Builders

Ergonomic constructors for each failure kind. Each builder returns an
``Err`` wrapping a ValidationFailure with the matching kind and message.
"""
from typing import Any

from .types import ErrorKind, Err, ValidationFailure


def validation_error(
    message: str,
    *,
    kind: ErrorKind,
    **metadata: Any,
) -> Err[ValidationFailure]:
    """Create validation failure."""
    return Err(ValidationFailure(
        kind=kind,
        message=message,
        metadata={k: v for k, v in metadata.items() if v is not None},
    ))


def required() -> Err[ValidationFailure]:
    return validation_error("input is required.", kind=ErrorKind.REQUIRED)


def wrong_type(expected: str, value: Any) -> Err[ValidationFailure]:
    return validation_error(
        f"input is not {expected}.",
        kind=ErrorKind.WRONG_TYPE,
        expected=expected,
        actual=type(value).__name__,
    )


# =============================================================================
# Range Errors (E2003)
# =============================================================================

def too_small(minimum: float, actual: Any) -> Err[ValidationFailure]:
    return validation_error(
        "input is too small.",
        kind=ErrorKind.OUT_OF_RANGE,
        bound="min",
        limit=minimum,
        actual=actual,
    )


def too_large(maximum: float, actual: Any) -> Err[ValidationFailure]:
    return validation_error(
        "input is too large.",
        kind=ErrorKind.OUT_OF_RANGE,
        bound="max",
        limit=maximum,
        actual=actual,
    )


def too_short(minimum: int, length: int) -> Err[ValidationFailure]:
    return validation_error(
        "input is too short.",
        kind=ErrorKind.OUT_OF_RANGE,
        bound="min_length",
        limit=minimum,
        actual=length,
    )


def too_long(maximum: int, length: int) -> Err[ValidationFailure]:
    return validation_error(
        "input is too long.",
        kind=ErrorKind.OUT_OF_RANGE,
        bound="max_length",
        limit=maximum,
        actual=length,
    )


def invalid_format(pattern: str, value: str) -> Err[ValidationFailure]:
    return validation_error(
        "input format is invalid.",
        kind=ErrorKind.INVALID_FORMAT,
        pattern=pattern,
        actual=value[:50] + ("..." if len(value) > 50 else ""),
    )


def non_integer(value: float) -> Err[ValidationFailure]:
    return validation_error(
        "input is only accepted integer.",
        kind=ErrorKind.NON_INTEGER,
        actual=value,
    )


def unknown_property(name: Any) -> Err[ValidationFailure]:
    return validation_error(
        f"unknown property '{name}'.",
        kind=ErrorKind.UNKNOWN_PROPERTY,
        property=name,
    )
