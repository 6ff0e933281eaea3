from types import MappingProxyType

import pytest

from typegate import ErrorKind, ValidationException
from typegate.validation import UnknownProperties, array, number, obj, optional, string


def test_accepts_unknown_properties_by_default():
    data = {"name": "x", "extra": 1}
    result = obj({"name": string()})(data).unwrap()
    assert result == {"name": "x", "extra": 1}


def test_result_is_the_input_mapping():
    data = {"age": "42"}
    result = obj({"age": number()})(data).unwrap()
    assert result is data
    assert data["age"] == 42


def test_unknown_property_error():
    failure = obj({"name": string()}, {"unknownProperties": "error"})({"name": "x", "extra": 1}).unwrap_err()
    assert failure.kind is ErrorKind.UNKNOWN_PROPERTY
    assert "extra" in failure.message
    assert failure.path == ("extra",)


def test_only_remove_deletes_unknown_fields_in_place():
    data = {"a": 1, "b": 2, "c": 3}
    result = obj({"b": number()}, unknown_properties=UnknownProperties.ONLY_REMOVE)(data).unwrap()
    assert result is data
    assert data == {"b": 2}


def test_schema_field_absent_from_input_is_not_validated():
    # Known gap: a required child is never invoked for a missing field.
    v = obj({"name": string(), "age": number()})
    assert v({"name": "x"}).unwrap() == {"name": "x"}
    assert v({}).unwrap() == {}


def test_explicit_none_field_is_validated():
    failure = obj({"name": string()})({"name": None}).unwrap_err()
    assert failure.kind is ErrorKind.REQUIRED
    assert failure.path == ("name",)


def test_child_failure_propagates_verbatim_with_location():
    failure = obj({"name": string(max=2)})({"name": "long"}).unwrap_err()
    assert failure.kind is ErrorKind.OUT_OF_RANGE
    assert failure.message == "input is too long."
    assert str(failure) == "name: input is too long."


def test_first_failure_aborts_remaining_fields():
    data = {"a": "1", "b": "bad", "c": "3"}
    failure = obj({"a": number(), "b": number(), "c": number()})(data).unwrap_err()
    assert failure.path == ("b",)
    assert data == {"a": 1, "b": "bad", "c": "3"}


def test_fields_visited_in_insertion_order():
    v = obj({"b": number()}, unknown_properties="error")
    failure = v({"b": "oops", "z": 1}).unwrap_err()
    assert failure.kind is ErrorKind.WRONG_TYPE


@pytest.mark.parametrize("value", [[1, 2], "text", 5, True])
def test_rejects_non_mappings(value):
    failure = obj({})(value).unwrap_err()
    assert failure.kind is ErrorKind.WRONG_TYPE
    assert failure.message == "input is not object."


def test_absent_input_is_required():
    assert obj({})(None).unwrap_err().kind is ErrorKind.REQUIRED


def test_copy_mode_leaves_input_untouched():
    data = {"n": "1", "extra": True}
    result = obj({"n": number()}, in_place=False, unknown_properties="only-remove")(data).unwrap()
    assert result == {"n": 1}
    assert result is not data
    assert data == {"n": "1", "extra": True}


def test_read_only_mapping_is_copied():
    data = MappingProxyType({"n": "2"})
    assert obj({"n": number()})(data).unwrap() == {"n": 2}


def test_nested_paths():
    v = obj({"user": obj({"tags": array(string())})})
    failure = v({"user": {"tags": ["a", 3]}}).unwrap_err()
    assert failure.path == ("user", "tags", 1)
    assert failure.location == "user.tags[1]"


def test_optional_child_fills_default_for_explicit_none():
    data = {"limit": None}
    assert obj({"limit": optional(number(), 10)})(data).unwrap() == {"limit": 10}


def test_reapplication_is_noop_on_same_reference():
    v = obj({"n": number(only_int="round")}, unknown_properties="only-remove")
    data = {"n": "2.6", "x": 1}
    first = v(data).unwrap()
    second = v(first).unwrap()
    assert second is first
    assert second == {"n": 3}


def test_parse_raises_with_failure():
    with pytest.raises(ValidationException) as excinfo:
        obj({"n": number()}).parse({"n": "x"})
    assert excinfo.value.failure.path == ("n",)
    assert str(excinfo.value) == "n: input is not number."
