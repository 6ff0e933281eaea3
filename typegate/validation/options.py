"""Validator Options

Frozen pydantic models holding each validator kind's configuration.
Options are parsed once at construction; both snake_case names and the
camelCase names (``onlyInt``, ``unknownProperties``, ``inPlace``) are
accepted.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from typegate.errors import ConfigurationError

O = TypeVar("O", bound="ValidatorOptions")


class IntegerMode(str, Enum):
    """How the number validator treats non-integer values."""
    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"
    ERROR = "error"


class UnknownProperties(str, Enum):
    """What the object validator does with fields missing from its schema."""
    ACCEPT = "accept"
    ONLY_REMOVE = "only-remove"
    ERROR = "error"


class ValidatorOptions(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    @model_validator(mode="after")
    def check_bounds(self) -> ValidatorOptions:
        lower, upper = getattr(self, "min", None), getattr(self, "max", None)
        if lower is not None and upper is not None and lower > upper:
            raise ValueError(f"min ({lower}) must not exceed max ({upper})")
        return self


class NumberOptions(ValidatorOptions):
    only_int: IntegerMode | None = Field(default=None, alias="onlyInt")
    min: int | float | None = None
    max: int | float | None = None


class StringOptions(ValidatorOptions):
    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)
    regexp: re.Pattern | None = None


class ArrayOptions(ValidatorOptions):
    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)


class ObjectOptions(ValidatorOptions):
    unknown_properties: UnknownProperties = Field(
        default=UnknownProperties.ACCEPT, alias="unknownProperties"
    )
    in_place: bool = Field(default=True, alias="inPlace")


def build_options(
    model: type[O],
    options: O | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> O:
    """Parse factory arguments into an options model.

    ``options`` may be a model instance, a mapping, or None; keyword
    overrides are merged on top. Raises ConfigurationError on bad input.
    """
    if isinstance(options, model) and not overrides:
        return options
    if isinstance(options, model):
        data: dict[str, Any] = {name: getattr(options, name) for name in model.model_fields}
    elif options is None:
        data = {}
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise ConfigurationError(
            f"Invalid {model.__name__}: expected mapping, got {type(options).__name__}"
        )
    data.update(overrides)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError.from_pydantic(model.__name__, e) from e
