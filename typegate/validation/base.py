"""Validator Base

Every validator is an immutable object with a single ``validate`` method
returning ``Result[T, ValidationFailure]``. Validators compose:
- ``a | b`` builds the alternation combinator
- combinators accept validators or plain functions returning a Result
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from typegate.errors import (
    ErrorKind, Result, ValidationFailure, raise_result, validation_error,
)

T = TypeVar("T")
U = TypeVar("U")

ValidatorFn = Callable[[Any], Result[Any, ValidationFailure]]


class Validator(ABC, Generic[T]):
    """Base class for validators.

    Subclasses are frozen dataclasses: configuration is fixed at construction
    and no per-call state is kept, so one instance may be shared across trees
    and threads.
    """

    @abstractmethod
    def validate(self, value: Any) -> Result[T, ValidationFailure]:
        """Validate a value. Returns Ok(output) or Err(ValidationFailure)."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Short description of the validator for logs and reprs."""

    def __call__(self, value: Any) -> Result[T, ValidationFailure]: return self.validate(value)

    def parse(self, value: Any) -> T:
        """Validate and return the output, raising ValidationException on failure."""
        return raise_result(self.validate(value))

    def __or__(self, other: Validator[U] | ValidatorFn) -> Validator[T | U]:
        from .combinators import Or
        return Or(self, as_validator(other))


@dataclass(frozen=True, slots=True)
class CustomValidator(Validator[Any]):
    """Validator from a function returning a Result.

    A ValueError raised by the function is reported as an INVALID_FORMAT
    failure; other exceptions propagate.

    Usage:
        def even(n) -> Result[int, ValidationFailure]:
            if n % 2:
                return validation_error("input is odd.", kind=ErrorKind.INVALID_FORMAT)
            return Ok(n)

        v = CustomValidator(even, name="even")
    """
    validator_fn: ValidatorFn
    name: str = "custom"

    @property
    def constraint_name(self) -> str:
        return self.name

    def validate(self, value: Any) -> Result[Any, ValidationFailure]:
        try:
            return self.validator_fn(value)
        except ValueError as e:
            return validation_error(str(e) or "input is invalid.", kind=ErrorKind.INVALID_FORMAT,
                constraint=self.name)


def custom(name: str) -> Callable[[ValidatorFn], CustomValidator]:
    """Decorator to create a validator from a function.

    Usage:
        @custom("even")
        def even(n):
            ...
    """
    return lambda fn: CustomValidator(fn, name=name)


def as_validator(candidate: Validator[T] | ValidatorFn) -> Validator[T]:
    """Accept a Validator as is, wrap a plain callable in CustomValidator."""
    if isinstance(candidate, Validator):
        return candidate
    if callable(candidate):
        return CustomValidator(candidate, name=getattr(candidate, "__name__", "custom"))
    raise TypeError(f"Expected a validator or callable, got {type(candidate).__name__}")
