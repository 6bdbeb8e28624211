#!/usr/bin/env python3
"""
Constants tables.

A constants table is a sheet of named values (analytics events, screen
names, remote config keys...) turned into one source file: a Kotlin
object on Android, a Swift class on iOS, a JSON object on Web.

It shares the strings table layout: a key column, "###" header rows and
an optional platforms column. On top of that it has a value column and
an optional type column used to nest constants into groups.

Example sheet:
```
key,       type,   value
### Events
sign_in,   event,  Sign In
home,      screen, Home Screen
```
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .entries import ConstantEntry, SourceLocator
from .errors import ConfigError, MissingColumnError
from .languages import KEY_COLUMN, PLATFORMS_COLUMN, find_column
from .table import HEADER_MARKER, TableBuilder, WarningKind, cell_at, is_absent, parse_platforms

logger = logging.getLogger(__name__)

VALUE_COLUMN = "value"

_WORD_BOUNDARIES = [
    re.compile(r'([A-Z]+)([A-Z][a-z])'),
    re.compile(r'([a-z0-9])([A-Z])'),
]
_WORD_SEPARATOR = re.compile(r'[^A-Za-z0-9]+')


def split_words(name: str) -> list[str]:
    """Split an identifier on separators and camel-case boundaries."""
    for boundary in _WORD_BOUNDARIES:
        name = boundary.sub(r'\1 \2', name)
    return [word for word in _WORD_SEPARATOR.split(name) if word]


class Casing(Enum):
    """Naming style applied to constant keys and type names."""
    NONE = "none"
    CAMEL_CASE = "camel"
    PASCAL_CASE = "pascal"
    SNAKE_CASE = "snake"
    CAPS = "caps"

    @classmethod
    def parse(cls, value) -> "Casing":
        """
        Parse a casing name: none, camel, pascal, snake or caps.

        The "case" suffix is optional ("camelCase", "snake_case").

        Raises:
            ConfigError: Unknown casing name
        """
        if isinstance(value, Casing):
            return value
        if isinstance(value, str):
            name = value.strip().lower().replace('_', '').replace(' ', '')
            if name.endswith('case') and name != 'case':
                name = name[:-len('case')]
            for casing in cls:
                if casing.value == name:
                    return casing
        choices = ', '.join(casing.value for casing in cls)
        raise ConfigError(f"Unknown casing {value!r}. Choose one of: {choices}")

    def apply(self, name: str) -> str:
        """Rename an identifier. NONE returns it untouched."""
        if self is Casing.NONE:
            return name

        words = split_words(name)
        if self is Casing.SNAKE_CASE:
            return '_'.join(word.lower() for word in words)
        if self is Casing.CAPS:
            return '_'.join(word.upper() for word in words)

        capitalized = [word[:1].upper() + word[1:].lower() for word in words]
        if self is Casing.PASCAL_CASE:
            return ''.join(capitalized)
        if not words:
            return ''
        return words[0].lower() + ''.join(capitalized[1:])


@dataclass(frozen=True)
class ConstantsLayout:
    """
    Column positions of a constants table.

    Attributes:
        key_column: Index of the key column
        platforms_column: Index of the platforms column, None if absent
        value_column: Index of the value column
        type_column: Index of the type column, None if not configured or absent
    """
    key_column: int
    platforms_column: Optional[int]
    value_column: int
    type_column: Optional[int]


class ConstantsBuilder(TableBuilder):
    """
    Builds ConstantEntry sequences from decoded CSV tables.

    Rows without a key are dropped and header rows kept exactly as in a
    strings table; a keyed row without a value is dropped with a NO_VALUE
    warning.
    """

    def __init__(
        self,
        key_column: str = KEY_COLUMN,
        platforms_column: str = PLATFORMS_COLUMN,
        header_marker: str = HEADER_MARKER,
        value_column: str = VALUE_COLUMN,
        type_column: Optional[str] = None,
    ):
        """
        Args:
            key_column: Name of the header cell marking the key column
            platforms_column: Name of the header cell marking the platforms column
            header_marker: Key prefix marking a section header row
            value_column: Name of the header cell marking the value column
            type_column: Name of the header cell marking the type column, None for no grouping
        """
        super().__init__([], key_column, platforms_column, header_marker)
        self.value_column = value_column
        self.type_column = type_column

    def resolve(self, header_row: Sequence[Optional[str]], origin: str = "") -> ConstantsLayout:
        """
        Raises:
            MissingKeyColumnError: No key column in the header
            MissingColumnError: No value column in the header
        """
        columns = super().resolve(header_row, origin)

        value_index = find_column(header_row, self.value_column)
        if value_index is None:
            raise MissingColumnError(self.value_column, origin)

        type_index = None
        if self.type_column:
            type_index = find_column(header_row, self.type_column)
            if type_index is None:
                logger.warning(
                    "No '%s' column in %s, constants will not be grouped",
                    self.type_column, origin or "<source>",
                )

        return ConstantsLayout(
            key_column=columns.key_column,
            platforms_column=columns.platforms_column,
            value_column=value_index,
            type_column=type_index,
        )

    def build_entry(
        self,
        layout: ConstantsLayout,
        key: str,
        row: Sequence[Optional[str]],
        locator: SourceLocator,
        warnings: list,
    ) -> Optional[ConstantEntry]:
        value = cell_at(row, layout.value_column)
        if is_absent(value) or not value.strip():
            self.warn(
                warnings, WarningKind.NO_VALUE, locator,
                f"{locator} has no value and will not be parsed",
            )
            return None

        group = cell_at(row, layout.type_column) or ''
        return ConstantEntry(
            key=key,
            value=value.strip(),
            locator=locator,
            type=group.strip(),
            platforms=parse_platforms(cell_at(row, layout.platforms_column)),
        )
