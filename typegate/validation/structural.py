"""Structural Validators

Recursive validators applying child validators across a mapping's fields
or a sequence's elements. Both fail fast: the first child failure aborts
the walk and is returned with its location extended by the key or index.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, TypeVar

from typegate.errors import (
    Ok, Result, ValidationFailure,
    required, sequence_results, too_large, too_small, unknown_property, wrong_type,
)
from .base import Validator
from .options import ArrayOptions, ObjectOptions, UnknownProperties

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ObjectValidator(Validator[MutableMapping[Any, Any]]):
    """Validate a mapping field by field, rewriting values in place.

    Only fields present on the input are visited. A schema field missing
    from the input is never validated, even if its validator would reject
    an absent value. Callers that need required fields must check for them
    separately.
    """
    schema: Mapping[Any, Validator[Any]]
    options: ObjectOptions = field(default_factory=ObjectOptions)

    @property
    def constraint_name(self) -> str:
        return f"object[{', '.join(str(k) for k in self.schema)}]"

    def validate(self, value: Any) -> Result[MutableMapping[Any, Any], ValidationFailure]:
        if value is None:
            return required()
        if not isinstance(value, Mapping):
            return wrong_type("object", value)

        target = value
        if not self.options.in_place or not isinstance(value, MutableMapping):
            target = dict(value)

        for name in list(target.keys()):
            child = self.schema.get(name)
            if child is not None:
                result = child.validate(target[name])
                if result.is_err():
                    return result.map_err(lambda failure: failure.at(name))
                target[name] = result.unwrap()
                continue

            match self.options.unknown_properties:
                case UnknownProperties.ERROR:
                    return unknown_property(name).map_err(lambda failure: failure.at(name))
                case UnknownProperties.ONLY_REMOVE:
                    del target[name]
                case UnknownProperties.ACCEPT:
                    pass
        return Ok(target)


@dataclass(frozen=True, slots=True)
class ArrayValidator(Validator[list[T]]):
    """Validate every element of a list or tuple into a new list.

    Length bounds are checked before any element is visited.
    """
    element: Validator[T]
    options: ArrayOptions = field(default_factory=ArrayOptions)

    @property
    def constraint_name(self) -> str:
        parts = []
        if self.options.min is not None:
            parts.append(f"min={self.options.min}")
        if self.options.max is not None:
            parts.append(f"max={self.options.max}")
        suffix = f", {', '.join(parts)}" if parts else ""
        return f"array[{self.element.constraint_name}{suffix}]"

    def validate(self, value: Any) -> Result[list[T], ValidationFailure]:
        if value is None:
            return required()
        if not isinstance(value, (list, tuple)):
            return wrong_type("array", value)

        length = len(value)
        if self.options.max is not None and length > self.options.max:
            return too_large(self.options.max, length)
        if self.options.min is not None and length < self.options.min:
            return too_small(self.options.min, length)

        return sequence_results(
            self.element.validate(item).map_err(lambda failure: failure.at(index))
            for index, item in enumerate(value)
        )
