#!/usr/bin/env python3
"""
Tests for constants tables.

Tests verify:
1. Casing names parse with or without the "case" suffix
2. Casing renames keys split on underscores and camel-case boundaries
3. The builder reads the value and type columns
4. A missing value column is fatal, a missing type column is not
5. Redefined constants (same type and key) keep the later definition
"""

import pytest

from stringweave.constants import Casing, ConstantsBuilder, split_words
from stringweave.entries import ConstantEntry, HeaderEntry, SourceLocator
from stringweave.errors import ConfigError, IllegalKeyCharacterError, MissingColumnError
from stringweave.table import WarningKind
from stringweave.validation import validate_constants

HEADER = ["key", "type", "value", "platforms"]


def constant(key, value, line, type=""):
    return ConstantEntry(key, value, SourceLocator("Analytics", line), type)


@pytest.fixture
def builder():
    return ConstantsBuilder(type_column="type")


@pytest.mark.parametrize("name,expected", [
    ("camel", Casing.CAMEL_CASE),
    ("camelCase", Casing.CAMEL_CASE),
    ("Pascal", Casing.PASCAL_CASE),
    ("SNAKE_CASE", Casing.SNAKE_CASE),
    ("caps", Casing.CAPS),
    ("none", Casing.NONE),
])
def test_casing_parse(name, expected):
    """Test 1: Casing names are case-insensitive and the suffix is optional."""
    assert Casing.parse(name) == expected


def test_unknown_casing():
    """Test 2: An unknown casing name is a config error."""
    with pytest.raises(ConfigError, match="Unknown casing 'kebab'"):
        Casing.parse("kebab")


@pytest.mark.parametrize("casing,expected", [
    (Casing.NONE, "sign_in_button"),
    (Casing.CAMEL_CASE, "signInButton"),
    (Casing.PASCAL_CASE, "SignInButton"),
    (Casing.SNAKE_CASE, "sign_in_button"),
    (Casing.CAPS, "SIGN_IN_BUTTON"),
])
def test_casing_apply(casing, expected):
    """Test 3: Each casing renames a snake_case key."""
    assert casing.apply("sign_in_button") == expected


def test_split_words_on_camel_boundaries():
    """Test 4: Acronyms and camel humps split into words."""
    assert split_words("HTTPServer_error") == ["HTTP", "Server", "error"]
    assert Casing.SNAKE_CASE.apply("signInButton") == "sign_in_button"
    assert Casing.CAMEL_CASE.apply("HTTPServer_error") == "httpServerError"


def test_builder_reads_type_and_value(builder):
    """Test 5: Values and types are trimmed; headers and platforms work as in strings tables."""
    rows = [
        ["### Events", None, None, None],
        ["sign_in", " event ", " Sign In ", "android"],
        ["home", None, "Home", None],
    ]
    result = builder.build(HEADER, rows, origin="Analytics")

    assert result.entries == [
        HeaderEntry("Events", SourceLocator("Analytics", 2)),
        ConstantEntry("sign_in", "Sign In", SourceLocator("Analytics", 3), "event", frozenset({"android"})),
        ConstantEntry("home", "Home", SourceLocator("Analytics", 4)),
    ]
    assert result.warnings == []


def test_rows_without_key_or_value_are_dropped(builder):
    """Test 6: Missing key -> NO_KEY, missing value -> NO_VALUE, both dropped."""
    rows = [
        ["no_value", "event", None, None],
        [None, "event", "Orphan", None],
        ["blank_value", "event", "   ", None],
    ]
    result = builder.build(HEADER, rows, origin="Analytics")

    assert result.entries == []
    assert [(w.kind, w.line_number) for w in result.warnings] == [
        (WarningKind.NO_VALUE, 2),
        (WarningKind.NO_KEY, 3),
        (WarningKind.NO_VALUE, 4),
    ]
    assert result.warnings[0].message == "Line 2 from Analytics has no value and will not be parsed"


def test_missing_value_column_is_fatal(builder):
    """Test 7: Without the value column nothing is built."""
    with pytest.raises(MissingColumnError) as excinfo:
        builder.build(["key", "type", "tag"], [["a", None, "A"]], origin="Analytics")

    assert str(excinfo.value) == "Column 'value' not found in Analytics"


def test_missing_type_column_means_no_groups(builder):
    """Test 8: A configured type column absent from the header leaves constants ungrouped."""
    result = builder.build(["key", "value"], [["home", "Home"]], origin="Analytics")

    assert result.entries == [ConstantEntry("home", "Home", SourceLocator("Analytics", 2))]


def test_type_column_ignored_when_not_configured():
    """Test 9: Without a configured type column a 'type' header is just another column."""
    result = ConstantsBuilder().build(HEADER, [["home", "screen", "Home", None]], origin="Analytics")

    assert result.entries[0].type == ""


def test_custom_value_column():
    """Test 10: The value column name is configurable and matched case-insensitively."""
    result = ConstantsBuilder(value_column="tag").build(["Key", "TAG"], [["home", "Home"]])

    assert result.entries[0].value == "Home"


def test_duplicate_type_and_key_keeps_later():
    """Test 11: Same type (any casing) and key: the earlier one is dropped with a warning."""
    entries = [
        constant("open", "Open", 2, "event"),
        constant("open", "Open again", 3, "Event"),
        constant("open", "Open screen", 4, "screen"),
        constant("open", "Open", 5),
    ]
    kept, warnings = validate_constants(entries)

    assert kept == entries[1:]
    assert len(warnings) == 1
    assert warnings[0].kind == WarningKind.DUPLICATE_CONSTANT
    assert warnings[0].line_number == 2
    assert warnings[0].message == (
        "Line 2 from Analytics and Line 3 from Analytics have the same key and type. "
        "The second one will be used"
    )


def test_triple_definition_keeps_last():
    """Test 12: Every earlier definition is dropped, each pointing at the next one."""
    entries = [constant("open", str(line), line, "event") for line in (2, 3, 4)]
    kept, warnings = validate_constants(entries)

    assert kept == [entries[2]]
    assert [w.line_number for w in warnings] == [2, 3]
    assert "Line 3 from Analytics and Line 4 from Analytics" in warnings[1].message


def test_constant_keys_are_checked():
    """Test 13: Constant keys follow the same character rules as string keys."""
    entries = [HeaderEntry("Events", SourceLocator("Analytics", 2)), constant("sign-in", "Sign In", 3)]

    with pytest.raises(IllegalKeyCharacterError) as excinfo:
        validate_constants(entries)

    assert str(excinfo.value) == "Line 3 from Analytics contains some illegal characters."


def test_headers_survive_validation():
    """Test 14: Headers are kept in place by validation."""
    header = HeaderEntry("Events", SourceLocator("Analytics", 2))
    kept, warnings = validate_constants([header, constant("a", "A", 3)])

    assert kept[0] == header
    assert warnings == []
