#!/usr/bin/env python3
"""
Table builder: turns decoded CSV rows into the ordered entry sequence.

Column resolution runs first and raises on a missing key or language
column. After that, a bad row never aborts the build: it is skipped (or
kept with gaps) and reported as a ParseWarning.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Optional, Sequence

from .entries import Entry, HeaderEntry, SourceLocator, TranslationEntry
from .languages import (
    KEY_COLUMN,
    PLATFORMS_COLUMN,
    ColumnLayout,
    Language,
    resolve_columns,
)

logger = logging.getLogger(__name__)

HEADER_MARKER = "###"


class WarningKind(Enum):
    NO_KEY = "NO_KEY"
    NO_TRANSLATIONS = "NO_TRANSLATIONS"
    PARTIAL_TRANSLATIONS = "PARTIAL_TRANSLATIONS"
    NO_VALUE = "NO_VALUE"
    DUPLICATE_CONSTANT = "DUPLICATE_CONSTANT"
    RENDER_ERROR = "RENDER_ERROR"


@dataclass
class ParseWarning:
    """Non-fatal problem on one row or one rendered entry."""
    kind: WarningKind
    origin: str
    line_number: int
    message: str

    def to_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "source": self.origin,
            "line": self.line_number,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"Warning: {self.message}"


@dataclass
class BuildResult:
    """Entries built from one or more sources plus the warnings collected."""
    entries: list = field(default_factory=list)
    warnings: list = field(default_factory=list)

    def extend(self, other: "BuildResult") -> None:
        self.entries.extend(other.entries)
        self.warnings.extend(other.warnings)


def is_absent(value: Optional[str]) -> bool:
    return value is None or value == ""


def cell_at(row: Sequence[Optional[str]], index: Optional[int]) -> Optional[str]:
    """Cell at index, None when the column is unresolved or the row is short."""
    if index is None or index >= len(row):
        return None
    return row[index]


def parse_platforms(platform_csv: Optional[str]) -> frozenset:
    """Parse a comma-separated platforms cell into lowercased ids."""
    if not platform_csv:
        return frozenset()
    tokens = (token.strip().lower() for token in platform_csv.split(","))
    return frozenset(token for token in tokens if token)


class TableBuilder:
    """
    Builds Entry sequences from decoded CSV tables.

    One builder can be reused across sources; each build() resolves the
    columns of its own header.
    """

    def __init__(
        self,
        languages: Iterable[Language],
        key_column: str = KEY_COLUMN,
        platforms_column: str = PLATFORMS_COLUMN,
        header_marker: str = HEADER_MARKER,
    ):
        """
        Args:
            languages: Declared languages, in output order
            key_column: Name of the header cell marking the key column
            platforms_column: Name of the header cell marking the platforms column
            header_marker: Key prefix marking a section header row
        """
        self.languages = list(languages)
        self.key_column = key_column
        self.platforms_column = platforms_column
        self.header_marker = header_marker

    def resolve(self, header_row: Sequence[Optional[str]], origin: str = "") -> ColumnLayout:
        layout = resolve_columns(
            header_row,
            self.languages,
            key_column=self.key_column,
            platforms_column=self.platforms_column,
            origin=origin,
        )
        logger.debug("Resolved columns for %s: %s", origin or "<source>", layout)
        return layout

    def build(
        self,
        header_row: Sequence[Optional[str]],
        data_rows: Iterable[Sequence[Optional[str]]],
        origin: str = "",
    ) -> BuildResult:
        """
        Build the entries of one CSV table.

        Args:
            header_row: Header cells
            data_rows: Data rows, one cell per header column (cells may be None)
            origin: Source title used in locators and warnings

        Returns:
            BuildResult with entries in row order and per-row warnings

        Raises:
            MissingKeyColumnError: No key column in the header
            MissingLanguageColumnError: A declared language has no column
        """
        layout = self.resolve(header_row, origin)
        result = BuildResult()

        # Line 1 is the header
        for line_number, row in enumerate(data_rows, start=2):
            locator = SourceLocator(origin, line_number)
            entry = self._build_row(layout, row, locator, result.warnings)
            if entry is not None:
                result.entries.append(entry)

        return result

    def _build_row(
        self,
        layout: ColumnLayout,
        row: Sequence[Optional[str]],
        locator: SourceLocator,
        warnings: list,
    ) -> Optional[Entry]:
        key = cell_at(row, layout.key_column)
        if key is None or not key.strip():
            self.warn(
                warnings, WarningKind.NO_KEY, locator,
                f"{locator} does not have a key and will not be parsed",
            )
            return None

        key = key.strip()
        if key.startswith(self.header_marker):
            return HeaderEntry(key[len(self.header_marker):].strip(), locator)

        return self.build_entry(layout, key, row, locator, warnings)

    def build_entry(
        self,
        layout: ColumnLayout,
        key: str,
        row: Sequence[Optional[str]],
        locator: SourceLocator,
        warnings: list,
    ) -> Optional[Entry]:
        """Build the entry of a keyed, non-header row. None drops the row."""
        translations = {}
        all_absent = True
        any_absent = False
        for language in layout.languages:
            value = cell_at(row, language.column_index)
            if is_absent(value):
                any_absent = True
                value = None
            else:
                all_absent = False
            translations[language.id] = value

        platforms = parse_platforms(cell_at(row, layout.platforms_column))

        if all_absent:
            self.warn(
                warnings, WarningKind.NO_TRANSLATIONS, locator,
                f"{locator} has no translations so it will not be parsed.",
            )
            return None

        if any_absent:
            self.warn(
                warnings, WarningKind.PARTIAL_TRANSLATIONS, locator,
                f"{locator} is missing at least one translation",
            )

        return TranslationEntry(
            key=key,
            translations=MappingProxyType(translations),
            locator=locator,
            platforms=platforms,
        )

    @staticmethod
    def warn(warnings: list, kind: WarningKind, locator: SourceLocator, message: str) -> None:
        warning = ParseWarning(kind, locator.origin, locator.line_number, message)
        logger.warning(message)
        warnings.append(warning)


def build_table(
    header_row: Sequence[Optional[str]],
    data_rows: Iterable[Sequence[Optional[str]]],
    languages: Iterable[Language],
    origin: str = "",
    **options,
) -> BuildResult:
    """Build one table with a throwaway TableBuilder. Options go to TableBuilder."""
    return TableBuilder(languages, **options).build(header_row, data_rows, origin)
