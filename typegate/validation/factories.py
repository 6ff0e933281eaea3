"""Validator Factories

Functions building validators from options. Options may be given as an
options model, a mapping, or keyword arguments:

    number(only_int="floor", min=0)
    number({"onlyInt": "floor", "min": 0})
    obj({"name": string()}, unknown_properties="error")

The ``validator`` namespace exposes the same factories under their short
names, including ``validator.bool``.
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Mapping, TypeVar

from typegate.config import get_settings
from typegate.logging import validation_logger
from .base import Validator, ValidatorFn, as_validator
from .combinators import Or, OptionalValidator
from .options import ArrayOptions, NumberOptions, ObjectOptions, StringOptions, build_options
from .primitives import BoolValidator, NumberValidator, StringValidator
from .structural import ArrayValidator, ObjectValidator

T = TypeVar("T")
U = TypeVar("U")
D = TypeVar("D")
V = TypeVar("V", bound=Validator)

log = validation_logger()


def _built(validator: V) -> V:
    if get_settings().TRACE:
        log.debug("validator_built", kind=type(validator).__name__, constraint=validator.constraint_name)
    return validator


def number(options: NumberOptions | Mapping[str, Any] | None = None, /, **kwargs: Any) -> NumberValidator:
    """Number validator. Options: ``only_int`` (floor|ceil|round|error), ``min``, ``max``."""
    return _built(NumberValidator(build_options(NumberOptions, options, kwargs)))


def string(options: StringOptions | Mapping[str, Any] | None = None, /, **kwargs: Any) -> StringValidator:
    """String validator. Options: ``min``, ``max`` (length), ``regexp``."""
    return _built(StringValidator(build_options(StringOptions, options, kwargs)))


def boolean(is_leniency: bool = False, optional_accept: bool = False) -> BoolValidator:
    return _built(BoolValidator(is_leniency=is_leniency, optional_accept=optional_accept))


def or_(first: Validator[T] | ValidatorFn, second: Validator[U] | ValidatorFn) -> Or[T, U]:
    return _built(Or(as_validator(first), as_validator(second)))


def obj(
    schema: Mapping[Any, Validator[Any] | ValidatorFn],
    options: ObjectOptions | Mapping[str, Any] | None = None,
    /,
    **kwargs: Any,
) -> ObjectValidator:
    """Object validator.

    Options: ``unknown_properties`` (accept|only-remove|error), ``in_place``.
    """
    if not isinstance(schema, Mapping):
        raise TypeError(f"Expected schema mapping, got {type(schema).__name__}")
    children = {name: as_validator(child) for name, child in schema.items()}
    return _built(ObjectValidator(children, build_options(ObjectOptions, options, kwargs)))


def array(
    element: Validator[T] | ValidatorFn,
    options: ArrayOptions | Mapping[str, Any] | None = None,
    /,
    **kwargs: Any,
) -> ArrayValidator[T]:
    """Array validator. Options: ``min``, ``max`` (length)."""
    return _built(ArrayValidator(as_validator(element), build_options(ArrayOptions, options, kwargs)))


def optional(validator: Validator[T] | ValidatorFn, default: D | None = None) -> OptionalValidator[T, D]:
    return _built(OptionalValidator(as_validator(validator), default))


validator = SimpleNamespace(
    number=number,
    string=string,
    bool=boolean,
    or_=or_,
    obj=obj,
    array=array,
    optional=optional,
)
