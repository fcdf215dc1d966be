"""Tests for the emptiness, prefix/suffix, list and JSON helpers."""

from __future__ import annotations

import json
import logging

import pytest

from auth_token_utils.string_utils import (
    ends_with,
    is_empty,
    json_parse_helper,
    remove_empty_strings_from_array,
    starts_with,
    trim_array_entries,
)


@pytest.mark.parametrize("value", [None, "", [], (), b""])
def test_is_empty_true(value) -> None:
    assert is_empty(value) is True


@pytest.mark.parametrize("value", ["a", " ", "\t", "0", ["x"], 0, {}, set()])
def test_is_empty_false(value) -> None:
    assert is_empty(value) is False


class _Blank:
    def __str__(self) -> str:
        return ""


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text form")


def test_is_empty_uses_text_form_of_other_objects() -> None:
    assert is_empty(_Blank()) is True


def test_is_empty_does_not_raise_when_str_fails() -> None:
    assert is_empty(_Unprintable()) is False


@pytest.mark.parametrize(
    ("text", "search", "expected"),
    [
        ("hello", "he", True),
        ("hello", "", True),
        ("", "", True),
        ("hello", "lo", False),
        ("hello", "Hello", False),
        ("he", "hello", False),
    ],
)
def test_starts_with(text: str, search: str, expected: bool) -> None:
    assert starts_with(text, search) is expected


@pytest.mark.parametrize(
    ("text", "search", "expected"),
    [
        ("hello", "lo", True),
        ("hello", "", True),
        ("hello", "hello", True),
        ("hello", "he", False),
        ("hello", "LO", False),
        ("lo", "hello", False),
        ("", "a", False),
    ],
)
def test_ends_with(text: str, search: str, expected: bool) -> None:
    assert ends_with(text, search) is expected


def test_trim_array_entries() -> None:
    assert trim_array_entries(["  x ", "y"]) == ["x", "y"]


def test_trim_array_entries_keeps_length_and_input() -> None:
    entries = ["\ta\n", "", " b c ", " d "]
    result = trim_array_entries(entries)
    assert result == ["a", "", "b c", "d"]
    assert entries == ["\ta\n", "", " b c ", " d "]
    assert result is not entries


def test_remove_empty_strings_from_array() -> None:
    assert remove_empty_strings_from_array(["x", "", "y", " "]) == ["x", "y", " "]


def test_remove_empty_strings_preserves_order_and_input() -> None:
    entries = ["", "b", None, "a", "", "c"]
    result = remove_empty_strings_from_array(entries)
    assert result == ["b", "a", "c"]
    assert entries == ["", "b", None, "a", "", "c"]


def test_remove_empty_strings_from_empty_list() -> None:
    assert remove_empty_strings_from_array([]) == []


@pytest.mark.parametrize(
    "value",
    [{"k": 1}, [1, "two", None, True], "text", 3.5, 0, False, {"nested": {"a": []}}],
)
def test_json_parse_helper_round_trip(value) -> None:
    assert json_parse_helper(json.dumps(value)) == value


def test_json_parse_helper_parses_object() -> None:
    assert json_parse_helper('{"k":1}') == {"k": 1}


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "",
        "{'k': 1}",
        "[1, 2",
        None,
        42,
        "NaN",
        "Infinity",
        "-Infinity",
        "[1, NaN]",
    ],
)
def test_json_parse_helper_returns_none_on_failure(raw) -> None:
    assert json_parse_helper(raw) is None


def test_json_parse_helper_null_is_none() -> None:
    assert json_parse_helper("null") is None


def test_json_parse_helper_logs_failure(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="auth_token_utils.string_utils"):
        json_parse_helper("not json")
    assert "Could not parse JSON" in caplog.text
