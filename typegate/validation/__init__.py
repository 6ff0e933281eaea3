"""Composable Validation System

Validators turn untrusted, loosely typed input into typed values that
satisfy their constraints, or return a classified failure.

Key Features:
- Primitive validators: number, string, boolean
- Combinators: or_ (alternation), optional (defaulting)
- Structural validators: obj (mapping fields), array (sequence elements)
- Result-based failures; ``parse`` for the exception channel
- Immutable validators, safe to share across trees and threads

Usage:
    from typegate.validation import array, number, obj, optional, string

    user = obj({
        "name": string(min=1, max=64),
        "age": optional(number(only_int="error", min=0)),
        "tags": array(string(), max=10),
    }, unknown_properties="error")

    match user(payload):
        case Ok(value):
            ...
        case Err(failure):
            print(failure)  # tags[2]: input is not string.
"""
from .base import Validator, CustomValidator, custom, as_validator
from .options import (
    IntegerMode,
    UnknownProperties,
    ValidatorOptions,
    NumberOptions,
    StringOptions,
    ArrayOptions,
    ObjectOptions,
)
from .coercion import CoercionRule, StringToNumber, LenientBool, parse_float_prefix
from .primitives import NumberValidator, StringValidator, BoolValidator
from .combinators import Or, OptionalValidator
from .structural import ObjectValidator, ArrayValidator
from .factories import number, string, boolean, or_, obj, array, optional, validator

__all__ = [
    # Base
    "Validator",
    "CustomValidator",
    "custom",
    "as_validator",
    # Options
    "IntegerMode",
    "UnknownProperties",
    "ValidatorOptions",
    "NumberOptions",
    "StringOptions",
    "ArrayOptions",
    "ObjectOptions",
    # Coercion
    "CoercionRule",
    "StringToNumber",
    "LenientBool",
    "parse_float_prefix",
    # Validators
    "NumberValidator",
    "StringValidator",
    "BoolValidator",
    "Or",
    "OptionalValidator",
    "ObjectValidator",
    "ArrayValidator",
    # Factories
    "number",
    "string",
    "boolean",
    "or_",
    "obj",
    "array",
    "optional",
    "validator",
]
