"""Primitive Validators

Terminal validators for scalar values: numbers, strings and booleans.
Checks run in a fixed order and the first violated condition wins.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from typegate.errors import (
    Ok, Result, ValidationFailure,
    invalid_format, non_integer, required, too_large, too_long, too_short, too_small, wrong_type,
)
from .base import Validator
from .coercion import LENIENT_BOOL, STRING_TO_NUMBER
from .options import IntegerMode, NumberOptions, StringOptions


def _round_half_up(value: float) -> int:
    # halves go toward +infinity: 2.5 -> 3, -2.5 -> -2
    lower = math.floor(value)
    return lower + 1 if value - lower >= 0.5 else lower


_ROUNDERS = {
    IntegerMode.FLOOR: math.floor,
    IntegerMode.CEIL: math.ceil,
    IntegerMode.ROUND: _round_half_up,
}


@dataclass(frozen=True, slots=True)
class NumberValidator(Validator[int | float]):
    """Numbers, or strings with a parseable numeric prefix.

    Only int and float count as numbers; bool, Decimal and Fraction are
    WRONG_TYPE.

    With ``only_int`` set the output is always an int; bounds are checked
    against the rounded value.
    """
    options: NumberOptions = field(default_factory=NumberOptions)

    @property
    def constraint_name(self) -> str:
        parts = []
        if self.options.only_int is not None:
            parts.append(f"int:{self.options.only_int.value}")
        if self.options.min is not None:
            parts.append(f">={self.options.min}")
        if self.options.max is not None:
            parts.append(f"<={self.options.max}")
        return f"number[{', '.join(parts)}]" if parts else "number"

    def validate(self, value: Any) -> Result[int | float, ValidationFailure]:
        if value is None:
            return required()
        result = STRING_TO_NUMBER(value)
        if self.options.only_int is not None:
            result = result.and_then(self._to_int)
        return result.and_then(self._check_bounds)

    def _check_bounds(self, number: int | float) -> Result[int | float, ValidationFailure]:
        if self.options.min is not None and number < self.options.min:
            return too_small(self.options.min, number)
        if self.options.max is not None and number > self.options.max:
            return too_large(self.options.max, number)
        return Ok(number)

    def _to_int(self, number: int | float) -> Result[int, ValidationFailure]:
        if isinstance(number, int):
            return Ok(number)
        if not math.isfinite(number):
            return non_integer(number)
        if number.is_integer():
            return Ok(int(number))
        if self.options.only_int is IntegerMode.ERROR:
            return non_integer(number)
        return Ok(_ROUNDERS[self.options.only_int](number))


@dataclass(frozen=True, slots=True)
class StringValidator(Validator[str]):
    """Strings only; no coercion from other types.

    ``regexp`` uses search semantics: a match anywhere in the value passes.
    """
    options: StringOptions = field(default_factory=StringOptions)

    @property
    def constraint_name(self) -> str:
        parts = []
        if self.options.min is not None:
            parts.append(f"min_length={self.options.min}")
        if self.options.max is not None:
            parts.append(f"max_length={self.options.max}")
        if self.options.regexp is not None:
            parts.append(f"pattern={self.options.regexp.pattern}")
        return f"string[{', '.join(parts)}]" if parts else "string"

    def validate(self, value: Any) -> Result[str, ValidationFailure]:
        if value is None:
            return required()
        if not isinstance(value, str):
            return wrong_type("string", value)

        length = len(value)
        if self.options.min is not None and length < self.options.min:
            return too_short(self.options.min, length)
        if self.options.max is not None and length > self.options.max:
            return too_long(self.options.max, length)
        if self.options.regexp is not None and self.options.regexp.search(value) is None:
            return invalid_format(self.options.regexp.pattern, value)
        return Ok(value)


@dataclass(frozen=True, slots=True)
class BoolValidator(Validator[bool]):
    """Booleans; in leniency mode any present value is coerced by truthiness."""
    is_leniency: bool = False
    optional_accept: bool = False

    @property
    def constraint_name(self) -> str:
        flags = [name for name, on in (("lenient", self.is_leniency), ("optional", self.optional_accept)) if on]
        return f"bool[{', '.join(flags)}]" if flags else "bool"

    def validate(self, value: Any) -> Result[bool, ValidationFailure]:
        if value is None:
            return Ok(False) if self.optional_accept else required()
        if isinstance(value, bool):
            return Ok(value)
        if not self.is_leniency:
            return wrong_type("boolean", value)
        return LENIENT_BOOL(value)
