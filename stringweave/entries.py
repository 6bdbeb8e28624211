#!/usr/bin/env python3
"""
Entry model for the translation table.

Each CSV row becomes one of two immutable entry types:

- HeaderEntry: a section header (key column starts with "###"), rendered
  as a comment on platforms that support comments.
- TranslationEntry: a key with one value per declared language and an
  optional platform restriction.

Entry is the union of both. Consumers dispatch with isinstance.

Constants tables reuse HeaderEntry; their rows are ConstantEntry.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Union


@dataclass(frozen=True)
class SourceLocator:
    """
    Where an entry came from, for diagnostics only.

    Attributes:
        origin: Title of the CSV source
        line_number: 1-based CSV line, the header row being line 1
    """
    origin: str
    line_number: int

    def __str__(self) -> str:
        return f"Line {self.line_number} from {self.origin}"


@dataclass(frozen=True)
class HeaderEntry:
    """Section header. The key holds the comment text, not a lookup key."""
    key: str
    locator: SourceLocator


@dataclass(frozen=True)
class TranslationEntry:
    """
    One translatable key.

    Attributes:
        key: Resource key, unique across the whole table
        translations: Language id -> text (None when the cell was empty)
        platforms: Lowercased platform ids this entry is restricted to,
            empty for all platforms
        locator: Source location of the row

    Entries hash on key, locator and platforms; translations take part in
    equality only.
    """
    key: str
    translations: Mapping[str, Optional[str]] = field(hash=False)
    locator: SourceLocator
    platforms: frozenset = field(default_factory=frozenset)

    def get_string(self, language_id: str) -> Optional[str]:
        """Return the text for a language, None if absent."""
        return self.translations.get(language_id)

    def is_for_platform(self, platform_id: str) -> bool:
        """True if this entry renders on the given platform."""
        return not self.platforms or platform_id.lower() in self.platforms


@dataclass(frozen=True)
class ConstantEntry:
    """
    One row of a constants table.

    Attributes:
        key: Constant name as written in the sheet
        value: Constant value, trimmed
        locator: Source location of the row
        type: Group the constant is nested in, empty for top-level constants
        platforms: Lowercased platform ids this constant is restricted to,
            empty for all platforms
    """
    key: str
    value: str
    locator: SourceLocator
    type: str = ""
    platforms: frozenset = field(default_factory=frozenset)

    def is_for_platform(self, platform_id: str) -> bool:
        return not self.platforms or platform_id.lower() in self.platforms


Entry = Union[HeaderEntry, TranslationEntry]
