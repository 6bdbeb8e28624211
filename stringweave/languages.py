#!/usr/bin/env python3
"""
Language registry: binds declared languages to CSV columns.

Declared languages start unresolved (Language). Scanning a CSV header
produces a ColumnLayout holding the key column, the optional platforms
column and one ResolvedLanguage per declared language.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .errors import ConfigError, MissingKeyColumnError, MissingLanguageColumnError

KEY_COLUMN = "key"
PLATFORMS_COLUMN = "platforms"


@dataclass(frozen=True)
class Language:
    """One declared target language, not yet bound to a column."""
    id: str
    output_path: Optional[str] = None

    def resolve(self, column_index: int) -> "ResolvedLanguage":
        return ResolvedLanguage(self.id, self.output_path, column_index)


@dataclass(frozen=True)
class ResolvedLanguage:
    """A language bound to the CSV column holding its translations."""
    id: str
    output_path: Optional[str]
    column_index: int


@dataclass(frozen=True)
class ColumnLayout:
    """
    Column positions resolved from one CSV header.

    Attributes:
        key_column: Index of the key column
        platforms_column: Index of the platforms column, None if the
            header has none (platform filtering disabled for this source)
        languages: Resolved languages, in declaration order
    """
    key_column: int
    platforms_column: Optional[int]
    languages: tuple


def resolve_columns(
    header_row: Sequence[Optional[str]],
    languages: Iterable[Language],
    key_column: str = KEY_COLUMN,
    platforms_column: str = PLATFORMS_COLUMN,
    origin: str = "",
) -> ColumnLayout:
    """
    Resolve the key, platforms and language columns from a CSV header.

    Header cells are matched case-insensitively. The key and platforms
    names take precedence over language ids.

    Args:
        header_row: Header cells (None cells are ignored)
        languages: Declared languages, in order
        key_column: Name of the key column
        platforms_column: Name of the platforms column
        origin: Source title used in error messages

    Returns:
        ColumnLayout for this header

    Raises:
        MissingKeyColumnError: No header cell matches the key column name
        MissingLanguageColumnError: A declared language has no column
        ConfigError: Two declared languages differ only in casing
    """
    languages = list(languages)
    key_name = key_column.lower()
    platforms_name = platforms_column.lower()
    language_index: dict[str, Language] = {}
    for language in languages:
        if language.id.lower() in language_index:
            raise ConfigError(f"Language {language.id} is declared more than once")
        language_index[language.id.lower()] = language

    key_index = None
    platforms_index = None
    indexes: dict[str, int] = {}

    for index, cell in enumerate(header_row):
        if cell is None:
            continue

        name = cell.strip().lower()
        if name == key_name:
            if key_index is None:
                key_index = index
            continue

        if name == platforms_name:
            if platforms_index is None:
                platforms_index = index
            continue

        language = language_index.get(name)
        if language is not None:
            indexes[language.id] = index

    if key_index is None:
        raise MissingKeyColumnError(origin, key_column)

    resolved = []
    for language in languages:
        if language.id not in indexes:
            raise MissingLanguageColumnError(language.id, origin)
        resolved.append(language.resolve(indexes[language.id]))

    return ColumnLayout(
        key_column=key_index,
        platforms_column=platforms_index,
        languages=tuple(resolved),
    )


def find_column(header_row: Sequence[Optional[str]], name: str) -> Optional[int]:
    """Index of the first header cell matching name (case-insensitive), None if absent."""
    name = name.strip().lower()
    for index, cell in enumerate(header_row):
        if cell is not None and cell.strip().lower() == name:
            return index
    return None
