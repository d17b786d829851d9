"""Tests for capture extraction and positional field binding."""

import re

from jander.exceptions import MissingCaptureError, NoMatchError
from jander.pipeline.content_parser import Err, Ok, bind_fields, extract_captures


def test_extract_captures_returns_groups_in_order():
    out = extract_captures("a=1;b=2", r"(\w)=(\d);(\w)=(\d)")
    assert out == Ok(["a", "1", "b", "2"])


def test_extract_captures_excludes_full_match():
    out = extract_captures("key: value", r"key: (\w+)")
    assert out.unwrap() == ["value"]


def test_extract_captures_without_groups_is_empty_list():
    assert extract_captures("abc", r"b").unwrap() == []


def test_extract_captures_no_match():
    out = extract_captures("abc", r"^z")
    assert isinstance(out, Err)
    assert isinstance(out.error, NoMatchError)
    assert out.error.pattern == "^z"
    assert out.error.text == "abc"


def test_extract_captures_string_patterns_are_dotall():
    out = extract_captures("one\ntwo", r"^(.*)$")
    assert out.unwrap() == ["one\ntwo"]


def test_extract_captures_compiled_pattern_used_as_given():
    out = extract_captures("one\ntwo", re.compile(r"^(.*)$", re.MULTILINE))
    assert out.unwrap() == ["one"]


def test_bind_fields_zips_names_by_position():
    out = bind_fields("Ada 1815", ["name", "year"], r"^(\w+) (\d+)$")
    assert out.unwrap() == {"name": "Ada", "year": "1815"}


def test_bind_fields_missing_optional_group_reports_index():
    out = bind_fields("Ada", ["name", "year"], r"^(\w+)(?: (\d+))?$")
    assert isinstance(out, Err)
    error = out.error
    assert isinstance(error, MissingCaptureError)
    assert error.index == 1
    assert error.text == "Ada"
    assert error.pattern == r"^(\w+)(?: (\d+))?$"


def test_bind_fields_empty_capture_is_missing():
    out = bind_fields("=value", ["key", "value"], r"^(\w*)=(\w*)$")
    assert isinstance(out.error, MissingCaptureError)
    assert out.error.index == 0


def test_bind_fields_more_names_than_groups_is_missing():
    out = bind_fields("abc", ["first", "second"], r"(a)")
    assert out.error.index == 1


def test_bind_fields_propagates_no_match():
    out = bind_fields("abc", ["x"], r"^(z)$")
    assert isinstance(out.error, NoMatchError)


def test_missing_capture_message_layout():
    out = bind_fields("line one\nline two", ["a", "b"], r"^(line one)\n(x)?")
    message = out.error.message
    assert "Missing capture 1" in message
    assert "in string...\n    line one\n    line two" in message
    assert "with regex...\n    ^(line one)\\n(x)?" in message
