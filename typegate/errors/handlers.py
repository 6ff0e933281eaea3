"""Exception Channel

Bridges the Result-based validators to code that prefers exceptions.
``raise_result`` unwraps a Result or raises ``ValidationException``.
"""
from __future__ import annotations

from typing import Any, TypeVar

from .types import Err, Ok, Result, ValidationFailure

T = TypeVar("T")


class ValidationException(Exception):
    """Exception wrapper for ValidationFailure.

    Use this when you need to surface a failure in code that
    doesn't use the Result monad.
    """

    def __init__(self, failure: ValidationFailure):
        self.failure = failure
        super().__init__(str(failure))

    @property
    def kind(self):
        return self.failure.kind


class ConfigurationError(ValueError):
    """Raised when a validator factory receives invalid options."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, target: str, exc: Exception) -> ConfigurationError:
        """Create from a pydantic ValidationError raised while parsing options."""
        errors = exc.errors() if hasattr(exc, "errors") else []
        if not errors:
            return cls(f"Invalid {target} options: {exc}")
        summary = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ())) or '$'}: {e.get('msg', 'invalid')}"
            for e in errors
        )
        return cls(f"Invalid {target} options: {summary}", errors=errors)


def raise_result(result: Result[T, ValidationFailure]) -> T:
    """Unwrap a Result, raising ValidationException on Err."""
    match result:
        case Ok(value):
            return value
        case Err(failure):
            raise ValidationException(failure)
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
