"""Cross-cutting behaviour shared by every validator."""
import re
from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError as PydanticValidationError

from typegate import ErrorKind
from typegate.validation import array, boolean, number, obj, optional, or_, string, validator

ALL_VALIDATORS = [
    number(),
    number(only_int="floor", min=0, max=100),
    string(),
    string(min=1, regexp=re.compile("x")),
    boolean(),
    boolean(True),
    or_(number(), string()),
    obj({"a": number()}),
    array(number()),
]


@pytest.mark.parametrize("v", ALL_VALIDATORS, ids=lambda v: v.constraint_name)
def test_absent_input_fails_required(v):
    assert v(None).unwrap_err().kind is ErrorKind.REQUIRED


def test_absent_input_exceptions():
    assert boolean(optional_accept=True)(None).unwrap() is False
    assert optional(number(), 7)(None).unwrap() == 7


@pytest.mark.parametrize(
    "v,value",
    [
        (number(), "3.5"),
        (number(only_int="round"), "2.5"),
        (string(max=5), "abc"),
        (boolean(True), "yes"),
        (array(number()), ["1", 2.5]),
        (array(array(string())), [["a"], []]),
    ],
)
def test_reapplying_to_output_is_idempotent(v, value):
    once = v(value).unwrap()
    assert v(once).unwrap() == once


def test_validators_are_reusable_and_stateless():
    v = obj({"n": number()})
    assert v({"n": "1"}).unwrap() == {"n": 1}
    assert v({"n": "2"}).unwrap() == {"n": 2}
    assert v({"n": "x"}).is_err()
    assert v({"n": 3}).unwrap() == {"n": 3}


def test_child_validators_can_be_shared():
    shared = string(min=1)
    a = obj({"x": shared})
    b = array(shared)
    assert a({"x": "ok"}).is_ok()
    assert b(["ok"]).is_ok()
    assert b([""]).unwrap_err().message == "input is too short."


def test_validators_are_immutable():
    v = number(min=1)
    with pytest.raises(FrozenInstanceError):
        v.options = None
    with pytest.raises(PydanticValidationError):
        v.options.min = 5


def test_namespace_builds_full_tree():
    payload = {"id": "7", "tags": ["a"], "active": "0", "note": None}
    v = validator.obj({
        "id": validator.number(onlyInt="error"),
        "tags": validator.array(validator.string(), max=3),
        "active": validator.bool(True),
        "note": validator.optional(validator.string(), ""),
    }, unknownProperties="error")
    assert v(payload).unwrap() == {"id": 7, "tags": ["a"], "active": False, "note": ""}
