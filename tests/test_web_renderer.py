#!/usr/bin/env python3
"""
Tests for WebRenderer.

Tests verify:
1. Trailing commas on every entry but the last rendered one
2. Headers are never emitted
3. Absent values are emitted as empty strings
4. A failing entry is skipped with a warning and the comma rule still holds
5. Non-text values are reported as RenderError values
"""

import pytest

from stringweave.entries import HeaderEntry, SourceLocator, TranslationEntry
from stringweave.languages import Language
from stringweave.renderers import PlatformRegistry, RenderError, WebRenderer
from stringweave.table import WarningKind

EN = Language("en")


def string(key, value, line=2, platforms=()):
    return TranslationEntry(key, {"en": value}, SourceLocator("Strings", line), frozenset(platforms))


@pytest.fixture
def renderer():
    return WebRenderer()


def test_trailing_comma_with_filtered_middle_entry(renderer):
    """Test 1: Middle entry filtered out: comma after 1, none after 3, 2 absent."""
    entries = [
        string("first", "First", 2),
        string("second", "Second", 3, platforms={"android"}),
        string("third", "Third", 4),
    ]

    assert renderer.render(entries, EN) == (
        '{\n'
        '    "first": "First",\n'
        '    "third": "Third"\n'
        '}\n'
    )


def test_filtered_last_entry_moves_comma(renderer):
    """Test 2: When the last entry is filtered, the one before it has no comma."""
    entries = [
        string("first", "First", 2),
        string("second", "Second", 3),
        string("third", "Third", 4, platforms={"ios"}),
    ]
    lines = renderer.render(entries, EN).splitlines()

    assert lines[1] == '    "first": "First",'
    assert lines[2] == '    "second": "Second"'


def test_headers_are_suppressed(renderer):
    """Test 3: Header entries never appear and never take the last position."""
    entries = [
        HeaderEntry("Top", SourceLocator("Strings", 2)),
        string("only", "Only", 3),
        HeaderEntry("Bottom", SourceLocator("Strings", 4)),
    ]

    assert renderer.render(entries, EN) == '{\n    "only": "Only"\n}\n'


def test_absent_value_rendered_empty(renderer):
    """Test 4: Web keeps keys with no value for the language."""
    entries = [
        TranslationEntry("missing", {"en": None, "fr": "Manquant"}, SourceLocator("Strings", 2)),
        string("hello", "Hello", 3),
    ]

    assert renderer.render(entries, EN) == '{\n    "missing": "",\n    "hello": "Hello"\n}\n'


def test_html_tags_removed(renderer):
    """Test 5: HTML markers are stripped on Web."""
    assert renderer.render([string("hi", "<html><i>Hi</i></html>")], EN) == '{\n    "hi": "<i>Hi</i>"\n}\n'


def test_empty_table(renderer):
    """Test 6: No entries gives an empty object."""
    assert renderer.render([], EN) == '{\n}\n'


def test_render_error_skips_entry(renderer):
    """Test 7: A malformed value is skipped with a located warning; the rest renders."""
    entries = [
        string("first", "First", 2),
        TranslationEntry("broken", {"en": 42}, SourceLocator("Strings", 3)),
    ]
    document = renderer.render_document(entries, EN)

    assert document.text == '{\n    "first": "First"\n}\n'
    assert len(document.warnings) == 1
    assert document.warnings[0].kind == WarningKind.RENDER_ERROR
    assert document.warnings[0].line_number == 3
    assert document.warnings[0].message.startswith("Error on Line 3 from Strings")


def test_registry_lookup():
    """Test 8: The registry resolves Web by name."""
    renderer = PlatformRegistry.get_renderer("web")

    assert isinstance(renderer, WebRenderer)
    assert renderer.renders_blank_values


def test_registry_lists_all_platforms():
    """Test 9: All three renderers are registered; only Web keeps blank values."""
    platforms = {item['name']: item['renders_blank_values'] for item in PlatformRegistry.list_platforms()}

    assert platforms == {'Android': False, 'iOS': False, 'Web': True}


def test_html_tags_removed_in_any_casing(renderer):
    """Test 10: Mixed-case HTML markers are stripped too."""
    assert renderer.render([string("hi", "<Html><i>Hi</i></HTML>")], EN) == '{\n    "hi": "<i>Hi</i>"\n}\n'


def test_non_text_value_is_a_render_error(renderer):
    """Test 11: A non-text value comes back as a RenderError, not an exception."""
    entry = TranslationEntry("count", {"en": 42}, SourceLocator("Strings", 5))

    error = renderer.render_value(entry, "en")

    assert isinstance(error, RenderError)
    assert error.message == "en value is a int, not text"

    document = renderer.render_document([entry], EN)
    assert document.text == '{\n}\n'
    assert document.warnings[0].message == "Error on Line 5 from Strings: en value is a int, not text"


def test_unknown_entry_type_is_reported(renderer):
    """Test 12: Something that is not an entry is skipped with a warning."""
    document = renderer.render_document(["not an entry", string("ok", "OK", 3)], EN)

    assert document.text == '{\n    "ok": "OK"\n}\n'
    assert document.warnings[0].kind == WarningKind.RENDER_ERROR
    assert document.warnings[0].line_number == 0
    assert document.warnings[0].message == "Error on unlocated entry: Unknown entry type: str"
