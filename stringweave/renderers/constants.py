#!/usr/bin/env python3
"""
Base classes for constants renderers.

ConstantsRenderer turns a validated constants table into one source file.
It owns the layout shared by every platform: platform filtering, casing,
top-level constants first, then one nested block per type in order of
first appearance. Subclasses describe the declarations of their language.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

from ..entries import ConstantEntry, HeaderEntry
from ..errors import ConfigError
from ..platforms import Platform
from .base import RenderError, render_warning

logger = logging.getLogger(__name__)

INDENT = '    '
CONSTANTS_HEADER = "List of Constants, auto-generated by stringweave"


@dataclass
class ConstantsDocument:
    """The rendered source file of one constants table."""
    title: str
    output_path: Optional[str]
    text: str
    warnings: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "path": self.output_path,
            "text": self.text,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


@dataclass
class ConstantGroup:
    """Constants sharing a type. name is the cased type name, '' for top level."""
    name: str
    constants: list = field(default_factory=list)


class ConstantsRenderer(ABC):
    """
    Abstract base class for platform-specific constants renderers.

    Rendering is driven by a ConstantsConfig (casing, class name, package,
    alignment) and is a pure function of (entries, config).
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Platform this renderer produces source files for."""
        pass

    @property
    def separates_groups(self) -> bool:
        """Whether a blank line separates the type blocks."""
        return True

    def has_top_level_class(self, config) -> bool:
        return config.top_level_class

    @abstractmethod
    def header_lines(self, config) -> list[str]:
        """Lines opening the file, including the top level class if any."""
        pass

    def footer_lines(self, config) -> list[str]:
        return ['}'] if self.has_top_level_class(config) else []

    @abstractmethod
    def group_open(self, name: str, indent: str) -> str:
        """Line opening the block of one type."""
        pass

    def group_close(self, indent: str, is_last: bool) -> str:
        return f'{indent}}}'

    @abstractmethod
    def declaration(self, name: str) -> str:
        """Left-hand side of a constant declaration."""
        pass

    @abstractmethod
    def quote(self, value: str) -> str:
        """The value as a string literal of the target language."""
        pass

    def constant_line(self, name: str, value: str, indent: str, is_last: bool, config) -> str:
        """
        Format one constant.

        The "=" is aligned to config.values_align_column, with at least one
        space before it.
        """
        prefix = indent + self.declaration(name)
        padding = max(1, config.values_align_column - len(prefix))
        return f"{prefix}{' ' * padding}= {self.quote(value)}"

    def render_constant(self, entry: ConstantEntry, config) -> Union[tuple, RenderError]:
        """(cased name, value) of one constant, or RenderError."""
        if not isinstance(entry.value, str):
            return RenderError(f"value is a {type(entry.value).__name__}, not text")
        name = config.key_casing.apply(entry.key)
        if not name:
            return RenderError(f"key '{entry.key}' gives an empty name")
        return name, entry.value

    def group(self, entries: Sequence[Any], config) -> tuple[list, list]:
        """
        Split the table into groups, top-level constants first.

        Headers are dropped: constants are regrouped by type, so section
        comments would end up in the wrong place.

        Returns:
            (groups, warnings)
        """
        top_level = ConstantGroup('')
        groups: dict[str, ConstantGroup] = {}
        warnings = []

        for entry in entries:
            if isinstance(entry, HeaderEntry):
                continue
            if not isinstance(entry, ConstantEntry):
                warnings.append(render_warning(
                    entry, RenderError(f"Unknown entry type: {type(entry).__name__}")
                ))
                continue
            if config.include_platform_filter and not entry.is_for_platform(self.platform.filter_id):
                continue

            try:
                item = self.render_constant(entry, config)
            except (TypeError, AttributeError, ValueError) as e:
                item = RenderError(str(e))
            if isinstance(item, RenderError):
                warnings.append(render_warning(entry, item))
                continue

            if not entry.type:
                top_level.constants.append(item)
                continue
            group = groups.get(entry.type.lower())
            if group is None:
                group = groups[entry.type.lower()] = ConstantGroup(config.type_casing.apply(entry.type))
            group.constants.append(item)

        return [top_level] + list(groups.values()), warnings

    def render_document(self, entries: Sequence[Any], config) -> ConstantsDocument:
        """
        Render the source file of one constants table.

        A table with nothing to render gives an empty text.

        Args:
            entries: Validated entries of the table
            config: ConstantsConfig of the table

        Returns:
            ConstantsDocument with the text and render warnings
        """
        groups, warnings = self.group(entries, config)
        top_level, typed = groups[0], groups[1:]

        if not top_level.constants and not typed:
            logger.warning("No %s constants to write", config.title)
            return ConstantsDocument(config.title, config.path, '', warnings)

        depth = 1 if self.has_top_level_class(config) else 0
        indent = INDENT * depth
        lines = self.header_lines(config)

        for position, (name, value) in enumerate(top_level.constants):
            is_last = position == len(top_level.constants) - 1 and not typed
            lines.append(self.constant_line(name, value, indent, is_last, config))

        if top_level.constants and typed and self.separates_groups:
            lines.append('')

        for position, group in enumerate(typed):
            is_last_group = position == len(typed) - 1
            lines.append(self.group_open(group.name, indent))
            for index, (name, value) in enumerate(group.constants):
                is_last = index == len(group.constants) - 1
                lines.append(self.constant_line(name, value, indent + INDENT, is_last, config))
            lines.append(self.group_close(indent, is_last_group))
            if not is_last_group and self.separates_groups:
                lines.append('')

        lines.extend(self.footer_lines(config))
        return ConstantsDocument(config.title, config.path, '\n'.join(lines) + '\n', warnings)

    def render(self, entries: Sequence[Any], config) -> str:
        """Render the source file text of one constants table."""
        return self.render_document(entries, config).text


class ConstantsRegistry:
    """Registry of available constants renderers."""

    _renderers: dict[Platform, type[ConstantsRenderer]] = {}

    @classmethod
    def register(cls, renderer_class: type[ConstantsRenderer]) -> None:
        """Register a renderer class under its platform."""
        renderer = renderer_class()
        cls._renderers[renderer.platform] = renderer_class

    @classmethod
    def get_renderer(cls, platform: Union[Platform, str]) -> ConstantsRenderer:
        """Get a renderer instance by Platform or case-insensitive name."""
        platform = Platform.parse(platform)
        if platform not in cls._renderers:
            available = ', '.join(p.value for p in cls._renderers)
            raise ConfigError(f"No constants renderer for {platform.value}. Available: {available}")
        return cls._renderers[platform]()
