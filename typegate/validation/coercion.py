"""Input Coercion Rules

Explicit coercion rules used by the primitive validators:
- StringToNumber: longest numeric prefix after leading whitespace
- LenientBool: truthiness for the boolean validator's leniency mode

Rules return a Result; they never raise for bad input.
"""
from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typegate.errors import Ok, Result, ValidationFailure, wrong_type

S = TypeVar("S")
T = TypeVar("T")

# sign, then Infinity or a decimal literal with optional exponent
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

FALSY_STRINGS = frozenset({"", "false", "0"})


def is_number(value: Any) -> bool:
    """True for int/float values; bool is excluded."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_float_prefix(text: str) -> float | None:
    """Parse the numeric prefix of ``text`` after leading whitespace.

    Returns None when no prefix parses. ``"12px"`` → 12.0, ``" .5e1x"`` → 5.0.
    """
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return None
    literal = match.group(0)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


@dataclass(frozen=True, slots=True)
class CoercionRule(ABC, Generic[S, T]):
    """Base class for coercion rules."""

    @abstractmethod
    def coerce(self, value: Any) -> Result[T, ValidationFailure]:
        """Coerce value to target type. Returns Result."""

    def __call__(self, value: Any) -> Result[T, ValidationFailure]:
        return self.coerce(value)


@dataclass(frozen=True, slots=True)
class StringToNumber(CoercionRule[Any, float]):
    """Accept native numbers, or strings whose numeric prefix is finite."""

    def coerce(self, value: Any) -> Result[int | float, ValidationFailure]:
        if is_number(value):
            if isinstance(value, float) and math.isnan(value):
                return wrong_type("number", value)
            return Ok(value)
        if isinstance(value, str):
            parsed = parse_float_prefix(value)
            if parsed is None or not math.isfinite(parsed):
                return wrong_type("number", value)
            return Ok(parsed)
        return wrong_type("number", value)


@dataclass(frozen=True, slots=True)
class LenientBool(CoercionRule[Any, bool]):
    """Truthiness coercion.

    Numbers: falsy iff == 0. Strings: falsy iff "", "false" or "0".
    Everything else is truthy.
    """

    def coerce(self, value: Any) -> Result[bool, ValidationFailure]:
        if isinstance(value, bool):
            return Ok(value)
        if is_number(value):
            return Ok(value != 0)
        if isinstance(value, str):
            return Ok(value not in FALSY_STRINGS)
        return Ok(True)


STRING_TO_NUMBER = StringToNumber()
LENIENT_BOOL = LenientBool()
