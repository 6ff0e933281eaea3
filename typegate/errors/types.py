"""Monadic Error Handling Types

Result/Either types for deterministic, composable failure propagation.
Every validator returns a Result; the alternation combinator inspects the
tag instead of catching exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any, Callable, Generic, Iterable, Iterator, NoReturn,
    TypeVar, Union, final,
)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class ErrorKind(Enum):
    """Validation failure taxonomy.

    Numbered in the E2xxx validation band:
    E2001 absent input, E2002-E2006 constraint violations.
    """
    REQUIRED = 2001
    INVALID_FORMAT = 2002
    OUT_OF_RANGE = 2003
    WRONG_TYPE = 2004
    NON_INTEGER = 2005
    UNKNOWN_PROPERTY = 2006

    @property
    def code(self) -> str:
        return f"E{self.value}_{self.name}"

    @property
    def label(self) -> str:
        """CamelCase label, e.g. ``WrongType``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """Classified validation failure.

    - kind: which constraint family was violated
    - message: human-readable description
    - path: keys/indices locating the failing value, empty at the root
    - metadata: constraint details (bound, limit, property name, ...)
    """
    kind: ErrorKind
    message: str
    path: tuple[str | int, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        return format_path(self.path)

    def at(self, segment: str | int) -> ValidationFailure:
        """Return a copy located one level deeper, under ``segment``."""
        return ValidationFailure(
            kind=self.kind,
            message=self.message,
            path=(segment, *self.path),
            metadata=self.metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize failure for API responses."""
        return {
            "error": {
                "code": self.kind.code,
                "kind": self.kind.label,
                "message": self.message,
                "path": self.location,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.location}: {self.message}"


def format_path(path: Iterable[str | int]) -> str:
    """Format a location tuple as a JSON path (``items[0].name``)."""
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int): parts.append(f"[{segment}]")
        elif parts: parts.append(f".{segment}")
        else: parts.append(str(segment))
    return "".join(parts) if parts else "$"


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
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def expect(self, msg: str) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, Any]:
        """Transform the success value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self  # type: ignore

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain operations that may fail."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], Result[T, F]]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self  # type: ignore

    def match(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


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

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def expect(self, msg: str) -> NoReturn:
        raise ValueError(f"{msg}: {self.error}")

    def map(self, f: Callable[[Any], U]) -> Result[U, E]:
        """No-op for Err variant."""
        return self  # type: ignore

    def map_err(self, f: Callable[[E], F]) -> Result[Any, F]:
        """Transform the error."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Result[U, E]]) -> Result[U, E]:
        """No-op for Err variant."""
        return self  # type: ignore

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Try to recover from error."""
        return f(self.error)

    def match(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return err(self.error)

    def __iter__(self) -> Iterator:
        return iter([])


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)


def sequence_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Sequence Results, failing fast on first error.

    ``results`` is consumed lazily, so a generator stops being evaluated at
    the first Err.
    """
    values: list[T] = []

    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                return Err(e)

    return Ok(values)
