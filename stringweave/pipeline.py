#!/usr/bin/env python3
"""
String and constants parsing pipelines.

StringParser runs the stages in order for one StringsConfig:

1. build: resolve columns and build the entries of every CSV source
2. validate: check keys across all sources (fatal on the first violation)
3. render: one document per declared language for the configured platform

ConstantsParser runs the same stages for one ConstantsConfig and produces a
single source file.

Configuration and validation errors raise and no document is produced.
Row and render problems are returned as warnings next to the documents.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .config import ConstantsConfig, StringsConfig
from .constants import ConstantsBuilder
from .csv_source import CsvSource
from .platforms import Platform
from .renderers import ConstantsDocument, ConstantsRegistry, PlatformRegistry, RenderedDocument
from .table import BuildResult, TableBuilder
from .validation import validate_constants, validate_keys

logger = logging.getLogger(__name__)


def build_sources(builder: TableBuilder, sources: Iterable[CsvSource]) -> BuildResult:
    """Build every source with one builder, concatenating entries and warnings in order."""
    result = BuildResult()
    for source in sources:
        built = builder.build(source.header, source.rows, origin=source.title)
        logger.info("Parsed %d entries from %s", len(built.entries), source.title)
        result.extend(built)
    return result


@dataclass
class ParseResult:
    """Rendered documents and every warning collected during the run."""
    platform: Platform
    documents: list = field(default_factory=list)
    warnings: list = field(default_factory=list)

    def document(self, language_id: str) -> Optional[RenderedDocument]:
        """Document for a language id (case-insensitive), None if not rendered."""
        for document in self.documents:
            if document.language_id.lower() == language_id.lower():
                return document
        return None

    def to_dict(self) -> dict:
        return {
            "status": "ok",
            "platform": self.platform.value,
            "documents": [document.to_dict() for document in self.documents],
            "warnings": [warning.to_dict() for warning in self.warnings],
            "summary": f"{len(self.documents)} documents rendered for {self.platform.value} "
                       f"with {len(self.warnings)} warnings",
        }


class StringParser:
    """
    Turns decoded CSV sources into rendered string resource documents.

    Each stage is exposed on its own so callers can stop after building or
    validating; run() chains all of them.
    """

    def __init__(self, config: StringsConfig):
        """
        Args:
            config: Run settings (platform, languages, column names)
        """
        self.config = config
        self.renderer = PlatformRegistry.get_renderer(config.platform)
        self.builder = TableBuilder(
            config.declared_languages(),
            key_column=config.key_column,
            platforms_column=config.platforms_column,
            header_marker=config.header_marker,
        )

    def build(self, sources: Iterable[CsvSource]) -> BuildResult:
        """
        Build the entries of every source, in order.

        Raises:
            MissingKeyColumnError: A source has no key column
            MissingLanguageColumnError: A source lacks a declared language
        """
        return build_sources(self.builder, sources)

    def validate(self, entries: Sequence) -> None:
        """Validate keys across all entries. Raises ValidationError."""
        validate_keys(entries)

    def render(self, entries: Sequence) -> list[RenderedDocument]:
        """Render one document per declared language."""
        documents = []
        for language in self.config.languages:
            document = self.renderer.render_document(
                entries,
                language.to_language(),
                include_platform_filter=self.config.include_platform_filter,
            )
            logger.info("Rendered %s for %s", language.id, self.config.platform.value)
            documents.append(document)
        return documents

    def run(self, sources: Iterable[CsvSource]) -> ParseResult:
        """
        Build, validate and render.

        Args:
            sources: Decoded CSV tables, in order

        Returns:
            ParseResult with one document per language; build warnings
            come before render warnings

        Raises:
            ConfigError: A source is missing the key or a language column
            ValidationError: A key is illegal or duplicated
        """
        built = self.build(sources)
        self.validate(built.entries)

        if not built.entries:
            logger.info("No Strings to write")

        documents = self.render(built.entries)

        warnings = list(built.warnings)
        for document in documents:
            warnings.extend(document.warnings)

        return ParseResult(
            platform=self.config.platform,
            documents=documents,
            warnings=warnings,
        )


def parse_strings(config: StringsConfig, sources: Iterable[CsvSource]) -> ParseResult:
    """Run the whole pipeline for one config."""
    return StringParser(config).run(sources)


@dataclass
class ConstantsResult:
    """Rendered constants file and every warning collected during the run."""
    platform: Platform
    document: ConstantsDocument
    warnings: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "status": "ok",
            "platform": self.platform.value,
            "document": self.document.to_dict(),
            "warnings": [warning.to_dict() for warning in self.warnings],
            "summary": f"{self.document.title} rendered for {self.platform.value} "
                       f"with {len(self.warnings)} warnings",
        }


class ConstantsParser:
    """Turns decoded CSV sources into the source file of one constants table."""

    def __init__(self, config: ConstantsConfig):
        self.config = config
        self.renderer = ConstantsRegistry.get_renderer(config.platform)
        self.builder = ConstantsBuilder(
            key_column=config.key_column,
            platforms_column=config.platforms_column,
            header_marker=config.header_marker,
            value_column=config.value_column,
            type_column=config.type_column,
        )

    def build(self, sources: Iterable[CsvSource]) -> BuildResult:
        """
        Build the entries of every source, in order.

        Raises:
            MissingKeyColumnError: A source has no key column
            MissingColumnError: A source has no value column
        """
        return build_sources(self.builder, sources)

    def validate(self, entries: Sequence) -> tuple[list, list]:
        """
        Check keys and drop redefined constants.

        Returns:
            (kept entries, DUPLICATE_CONSTANT warnings)
        """
        return validate_constants(entries)

    def render(self, entries: Sequence) -> ConstantsDocument:
        document = self.renderer.render_document(entries, self.config)
        logger.info("Rendered %s for %s", self.config.title, self.config.platform.value)
        return document

    def run(self, sources: Iterable[CsvSource]) -> ConstantsResult:
        """
        Build, validate and render.

        Returns:
            ConstantsResult; build warnings come first, then duplicate
            warnings, then render warnings

        Raises:
            ConfigError: A source is missing the key or the value column
            ValidationError: A key is illegal
        """
        built = self.build(sources)
        entries, duplicates = self.validate(built.entries)
        document = self.render(entries)

        return ConstantsResult(
            platform=self.config.platform,
            document=document,
            warnings=list(built.warnings) + duplicates + list(document.warnings),
        )


def parse_constants(config: ConstantsConfig, sources: Iterable[CsvSource]) -> ConstantsResult:
    """Run the constants pipeline for one config."""
    return ConstantsParser(config).run(sources)
