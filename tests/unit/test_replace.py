"""Unit tests for tidykit.replace."""

import re

import pytest

from tidykit.errors import InvalidArgumentTypeError, PatternSyntaxError
from tidykit.options import ReplaceOptions
from tidykit.replace import replace_string

cases = [
    ("Hello :name!", {":name": "John"}, {}, "Hello John!"),
    ("price: $price tax: $tax", {"$price": 100, "$tax": 10}, {}, "price: 100 tax: 10"),
    ("TEST test", {"test": "done"}, {"ignore_case": False}, "TEST done"),
    ("TEST test", {"test": "done"}, {}, "done done"),
    ("TEST test", {"test": "done"}, {"replace_all": False}, "done test"),
    ("1 + 1 = 2", {"+": "plus"}, {}, "1 plus 1 = 2"),
    ("a.b.c", {".": "/"}, {}, "a/b/c"),
    ("[x] (y)", {"[x]": "X", "(y)": "Y"}, {}, "X Y"),
    ("enabled: $on", {"$on": True}, {}, "enabled: true"),
    ("total: $n", {"$n": 100.0}, {}, "total: 100"),
    ("ratio: $r", {"$r": 0.5}, {}, "ratio: 0.5"),
    ("cat dog", {"cat": "dog", "dog": "cat"}, {}, "dog cat"),
    ("Hi X", {"x": "you"}, {}, "Hi you"),
]


@pytest.mark.parametrize(
    "text, replacements, options, expected",
    cases,
    ids=[f"{c[0]}|{sorted(c[2])}" for c in cases],
)
def test_replace_string(text, replacements, options, expected):
    """Keys are matched literally (by default) and replaced in one pass."""
    assert replace_string(text, replacements, **options) == expected


def test_raw_pattern_keys_match_as_regex():
    """With escape_regex=False keys are regular expressions."""
    assert replace_string("a1b22", {"b": "B"}, escape_regex=False) == "a1B22"


def test_unresolved_raw_match_is_left_unchanged():
    """A regex match that equals no key keeps its text."""
    assert replace_string("Order 42", {r"\d+": "N"}, escape_regex=False) == "Order 42"


def test_first_case_insensitive_key_wins():
    """With ignore_case the first matching key in map order is used."""
    assert replace_string("Hello", {"HELLO": "first", "hello": "second"}) == "first"


def test_case_sensitive_lookup_uses_exact_key():
    """With ignore_case=False each match maps to its own key."""
    result = replace_string(
        "Name name", {"Name": "A", "name": "b"}, ignore_case=False
    )
    assert result == "A b"


@pytest.mark.parametrize("replacements", [{}, {"a": "b"}])
def test_empty_text_is_returned(replacements):
    """Empty text is returned unchanged."""
    assert replace_string("", replacements) == ""


def test_no_replacements_returns_text():
    """An empty replacement map leaves the text unchanged."""
    assert replace_string("unchanged", {}) == "unchanged"


@pytest.mark.parametrize("escape_regex", [True, False])
@pytest.mark.parametrize(
    "replacements, expected", [({"": "X"}, "abc"), ({"": "X", "b": "B"}, "aBc")]
)
def test_empty_keys_are_ignored(replacements, expected, escape_regex):
    """An empty key never matches, so nothing is inserted between characters."""
    assert replace_string("abc", replacements, escape_regex=escape_regex) == expected


def test_bare_plus_without_escaping_raises_pattern_error():
    """An invalid raw pattern raises PatternSyntaxError chained from re.error."""
    with pytest.raises(PatternSyntaxError) as exc_info:
        replace_string("1 + 1 = 2", {"+": "plus"}, escape_regex=False)
    assert exc_info.value.pattern == "+"
    assert isinstance(exc_info.value.__cause__, re.error)


def test_pattern_error_is_value_error():
    """PatternSyntaxError can be caught as ValueError."""
    with pytest.raises(ValueError):
        replace_string("x", {"(": "y"}, {"escapeRegex": False})


def test_options_dataclass():
    """A ReplaceOptions instance is accepted."""
    opts = ReplaceOptions(ignore_case=False, replace_all=False)
    assert replace_string("a A a", {"a": "b"}, opts) == "b A a"


@pytest.mark.parametrize("text", [None, 1, b"bytes"])
def test_non_string_text_raises_type_error(text):
    """Non-string text raises a TypeError."""
    with pytest.raises(TypeError, match="'text' must be a string"):
        replace_string(text, {"a": "b"})


@pytest.mark.parametrize("replacements", [None, [("a", "b")], "a=b"])
def test_non_mapping_replacements_raise_type_error(replacements):
    """Replacements that are not a mapping raise a TypeError."""
    with pytest.raises(InvalidArgumentTypeError, match="'replacements' must be a mapping"):
        replace_string("abc", replacements)


def test_does_not_mutate_replacements():
    """The replacement map is not modified."""
    replacements = {"$n": 1}
    replace_string("n=$n", replacements)
    assert replacements == {"$n": 1}
