"""Combinators

Validator-to-validator transformations altering control flow:
- Or: alternation, the only recovery point in a validator tree
- OptionalValidator: defaulting for absent input
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from typegate.config import get_settings
from typegate.errors import Err, Ok, Result, ValidationFailure
from typegate.logging import validation_logger
from .base import Validator

T = TypeVar("T")
U = TypeVar("U")
D = TypeVar("D")

log = validation_logger()


@dataclass(frozen=True, slots=True)
class Or(Validator[T | U], Generic[T, U]):
    """Try ``first``; on any failure try ``second`` and return its outcome.

    The first branch's failure is discarded, so when both fail the caller
    sees the second branch's failure.
    """
    first: Validator[T]
    second: Validator[U]
    trace: bool = field(default_factory=lambda: get_settings().TRACE, compare=False)

    @property
    def constraint_name(self) -> str:
        return f"({self.first.constraint_name} OR {self.second.constraint_name})"

    def validate(self, value: Any) -> Result[T | U, ValidationFailure]:
        match self.first.validate(value):
            case Ok() as result:
                return result
            case Err(failure):
                if self.trace:
                    log.debug("alternation_fallback", constraint=self.constraint_name,
                        discarded=failure.kind.label, message=failure.message)
                return self.second.validate(value)


@dataclass(frozen=True, slots=True)
class OptionalValidator(Validator[T | D], Generic[T, D]):
    """Return ``default`` for absent input without invoking the wrapped validator."""
    validator: Validator[T]
    default: D | None = None

    @property
    def constraint_name(self) -> str:
        return f"optional({self.validator.constraint_name})"

    def validate(self, value: Any) -> Result[T | D | None, ValidationFailure]:
        if value is None:
            return Ok(self.default)
        return self.validator.validate(value)
