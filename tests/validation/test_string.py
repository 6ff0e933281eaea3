import re

import pytest

from typegate import ConfigurationError, ErrorKind
from typegate.validation import string


def test_returns_string_unchanged():
    assert string({"min": 2, "max": 4})("ab").unwrap() == "ab"


def test_absent_input_is_required():
    assert string()(None).unwrap_err().kind is ErrorKind.REQUIRED


@pytest.mark.parametrize("value", [123, 1.5, True, ["a"], b"bytes"])
def test_no_coercion_from_other_types(value):
    failure = string()(value).unwrap_err()
    assert failure.kind is ErrorKind.WRONG_TYPE
    assert failure.message == "input is not string."


def test_length_bounds():
    v = string(min=2, max=4)
    short = v("a").unwrap_err()
    long = v("abcde").unwrap_err()
    assert (short.kind, short.message) == (ErrorKind.OUT_OF_RANGE, "input is too short.")
    assert (long.kind, long.message) == (ErrorKind.OUT_OF_RANGE, "input is too long.")


def test_empty_string_is_present():
    assert string()("").unwrap() == ""


def test_pattern_mismatch():
    failure = string({"regexp": re.compile(r"^a")})("ba").unwrap_err()
    assert failure.kind is ErrorKind.INVALID_FORMAT
    assert failure.message == "input format is invalid."


def test_pattern_uses_search_semantics():
    assert string(regexp=r"\d+")("abc123def").unwrap() == "abc123def"


def test_pattern_flags_are_kept():
    assert string(regexp=re.compile("hello", re.IGNORECASE))("HELLO").is_ok()


def test_length_checked_before_pattern():
    failure = string(min=5, regexp=r"^z")("ab").unwrap_err()
    assert failure.message == "input is too short."


def test_negative_length_rejected():
    with pytest.raises(ConfigurationError):
        string(min=-1)
