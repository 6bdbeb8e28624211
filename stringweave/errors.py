#!/usr/bin/env python3
"""
Error taxonomy for the string parser.

Configuration errors are raised before any row is read. Validation errors
are raised after the whole table is built and before anything is rendered.
Both abort the run: no document is produced for any language.

Row-level and render-level problems are not exceptions; they are collected
as ParseWarning values (see table.py).
"""


class StringParserError(Exception):
    """Base class for every fatal error raised by stringweave."""


class ConfigError(StringParserError):
    """Invalid configuration: unknown platform, no languages, bad document."""


class MissingKeyColumnError(ConfigError):
    """The CSV header has no key column."""

    def __init__(self, origin: str = "", column_name: str = "key"):
        self.origin = origin
        self.column_name = column_name
        message = f"There must be a column marked '{column_name}' with the String keys"
        if origin:
            message += f" in {origin}"
        super().__init__(message)


class MissingLanguageColumnError(ConfigError):
    """A declared language has no column in the CSV header."""

    def __init__(self, language_id: str, origin: str = ""):
        self.language_id = language_id
        self.origin = origin
        where = f" in {origin}" if origin else ""
        super().__init__(f"{language_id}{where} does not have any translations.")


class ValidationError(StringParserError):
    """Key integrity violation found over the built table."""


class IllegalKeyCharacterError(ValidationError):
    """A translation key contains whitespace or a character outside [A-Za-z0-9_]."""

    def __init__(self, entry, reason: str = "contains some illegal characters"):
        self.entry = entry
        self.reason = reason
        super().__init__(f"{entry.locator} {reason}.")


class DuplicateKeyError(ValidationError):
    """Two translation entries share the same key."""

    def __init__(self, entry, other):
        self.entry = entry
        self.other = other
        super().__init__(f"{entry.locator} and {other.locator} have the same key.")


class MissingColumnError(ConfigError):
    """A required named column (e.g. the constants value column) is not in the header."""

    def __init__(self, column_name: str, origin: str = ""):
        self.column_name = column_name
        self.origin = origin
        where = f" in {origin}" if origin else ""
        super().__init__(f"Column '{column_name}' not found{where}")
