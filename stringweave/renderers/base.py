#!/usr/bin/env python3
"""
Base classes for platform renderers.

PlatformRenderer is the abstract base class every platform renderer
implements. It owns the document loop (platform filtering, blank-value
skipping, last-element detection, per-entry error recovery); subclasses
only describe their structure and escaping.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

from ..entries import HeaderEntry, TranslationEntry
from ..errors import ConfigError
from ..languages import Language, ResolvedLanguage
from ..platforms import Platform
from ..table import ParseWarning, WarningKind

logger = logging.getLogger(__name__)

HTML_START_TAG = re.compile(r'<html>', re.IGNORECASE)
HTML_END_TAG = re.compile(r'</html>', re.IGNORECASE)


def preprocess(value: str) -> str:
    """
    Escaping shared by every platform, applied before the platform rules.

    Escapes double quotes, turns "(c)" into the copyright sign and strips
    newlines (documents are line-oriented).
    """
    return (
        value.replace('"', '\\"')
        .replace('(c)', '©')
        .replace('\r', '')
        .replace('\n', '')
    )


def has_html_tag(value: str) -> bool:
    """True if the value holds an <html> marker, in any casing."""
    return HTML_START_TAG.search(value) is not None


def replace_html_tags(value: str, start: str, end: str) -> str:
    """Replace <html> and </html> markers (any casing) with start and end."""
    value = HTML_START_TAG.sub(lambda match: start, value)
    return HTML_END_TAG.sub(lambda match: end, value)


def strip_html_tags(value: str) -> str:
    """Remove <html> and </html> markers (any casing)."""
    return replace_html_tags(value, '', '')


@dataclass(frozen=True)
class RenderError:
    """Why one entry could not be rendered."""
    message: str


def render_warning(entry: Any, error: RenderError) -> ParseWarning:
    """RENDER_ERROR warning located at the entry's row."""
    locator = getattr(entry, 'locator', None)
    origin = locator.origin if locator else ''
    line_number = locator.line_number if locator else 0
    where = locator if locator else "unlocated entry"
    message = f"Error on {where}: {error.message}"
    logger.warning(message)
    return ParseWarning(WarningKind.RENDER_ERROR, origin, line_number, message)


@dataclass
class RenderedDocument:
    """One rendered file for one language."""
    language_id: str
    output_path: Optional[str]
    text: str
    warnings: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "language": self.language_id,
            "path": self.output_path,
            "text": self.text,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


class PlatformRenderer(ABC):
    """
    Abstract base class for platform-specific renderers.

    A renderer turns the validated entry sequence into the document text of
    one language. Rendering is a pure function of (entries, language,
    include_platform_filter): it never mutates the entries and the same
    inputs always give the same text.
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Platform this renderer produces documents for."""
        pass

    @property
    def renders_blank_values(self) -> bool:
        """
        Whether entries with an absent or blank value are still emitted.

        Android/iOS: False (the key is left out for that language)
        Web: True (the key is emitted with an empty string)
        """
        return False

    def header_lines(self) -> list[str]:
        """Lines opening the document."""
        return []

    def footer_lines(self) -> list[str]:
        """Lines closing the document."""
        return []

    def comment_lines(self, comment: str) -> list[str]:
        """Lines for a section header. Default: headers are not emitted."""
        return []

    @abstractmethod
    def escape(self, value: str) -> str:
        """
        Apply the platform escaping to an already preprocessed value.

        Args:
            value: Value after preprocess()

        Returns:
            Value ready to be placed in the document
        """
        pass

    @abstractmethod
    def string_line(self, key: str, value: str, is_last: bool) -> str:
        """
        Format one translation entry.

        Args:
            key: Entry key
            value: Escaped value
            is_last: True for the last translation entry of the document

        Returns:
            The document line for this entry
        """
        pass

    def is_rendered(self, entry: TranslationEntry, include_platform_filter: bool) -> bool:
        """True if the entry belongs in this platform's documents."""
        if not include_platform_filter:
            return True
        return entry.is_for_platform(self.platform.filter_id)

    def render_value(
        self, entry: TranslationEntry, language_id: str
    ) -> Union[str, RenderError, None]:
        """
        Escaped value of an entry for a language.

        Returns None if the entry is skipped for this language and a
        RenderError if the stored value is not text.
        """
        value = entry.get_string(language_id)
        if value is None:
            value = ''
        elif not isinstance(value, str):
            return RenderError(f"{language_id} value is a {type(value).__name__}, not text")

        if not value.strip() and not self.renders_blank_values:
            return None

        return self.escape(preprocess(value))

    def render_item(
        self,
        entry: Union[HeaderEntry, TranslationEntry],
        language_id: str,
        include_platform_filter: bool,
    ) -> Union[tuple, RenderError, None]:
        """
        Render one entry: (None, comment lines) for a header, (key, value)
        for a translation, None if skipped, RenderError if it cannot be rendered.
        """
        if isinstance(entry, HeaderEntry):
            return None, self.comment_lines(entry.key)

        if not isinstance(entry, TranslationEntry):
            return RenderError(f"Unknown entry type: {type(entry).__name__}")

        if not self.is_rendered(entry, include_platform_filter):
            return None

        value = self.render_value(entry, language_id)
        if value is None or isinstance(value, RenderError):
            return value
        return entry.key, value

    def render_document(
        self,
        entries: Sequence[Union[HeaderEntry, TranslationEntry]],
        language: Union[Language, ResolvedLanguage],
        include_platform_filter: bool = True,
    ) -> RenderedDocument:
        """
        Render the document for one language.

        An entry that cannot be rendered is skipped and reported as a
        RENDER_ERROR warning; the rest of the document is still rendered.

        Args:
            entries: Validated entry sequence
            language: Language to render
            include_platform_filter: Honour the entries' platforms column

        Returns:
            RenderedDocument with the text and render warnings
        """
        warnings = []

        # First pass, in sequence order: (None, comment lines) or (key, escaped value)
        items: list[tuple[Optional[str], Any]] = []
        for entry in entries:
            try:
                item = self.render_item(entry, language.id, include_platform_filter)
            except (TypeError, AttributeError, ValueError) as e:
                item = RenderError(str(e))

            if isinstance(item, RenderError):
                warnings.append(render_warning(entry, item))
            elif item is not None:
                items.append(item)

        # Last translation actually emitted; never a header
        last = None
        for position, (key, _) in enumerate(items):
            if key is not None:
                last = position

        lines = self.header_lines()
        for position, (key, payload) in enumerate(items):
            if key is None:
                lines.extend(payload)
            else:
                lines.append(self.string_line(key, payload, position == last))
        lines.extend(self.footer_lines())

        text = '\n'.join(lines) + '\n' if lines else ''
        return RenderedDocument(language.id, language.output_path, text, warnings)

    def render(
        self,
        entries: Sequence[Union[HeaderEntry, TranslationEntry]],
        language: Union[Language, ResolvedLanguage],
        include_platform_filter: bool = True,
    ) -> str:
        """Render the document text for one language."""
        return self.render_document(entries, language, include_platform_filter).text


class PlatformRegistry:
    """Registry of available platform renderers."""

    _renderers: dict[Platform, type[PlatformRenderer]] = {}

    @classmethod
    def register(cls, renderer_class: type[PlatformRenderer]) -> None:
        """Register a renderer class under its platform."""
        renderer = renderer_class()
        cls._renderers[renderer.platform] = renderer_class

    @classmethod
    def get_renderer(cls, platform: Union[Platform, str]) -> PlatformRenderer:
        """Get a renderer instance by Platform or case-insensitive name."""
        platform = Platform.parse(platform)
        if platform not in cls._renderers:
            available = ', '.join(p.value for p in cls._renderers)
            raise ConfigError(f"No renderer for {platform.value}. Available: {available}")
        return cls._renderers[platform]()

    @classmethod
    def list_platforms(cls) -> list[dict[str, Any]]:
        """List all registered platforms."""
        result = []
        for platform, renderer_class in cls._renderers.items():
            renderer = renderer_class()
            result.append({
                'name': platform.value,
                'renders_blank_values': renderer.renders_blank_values,
            })
        return result
