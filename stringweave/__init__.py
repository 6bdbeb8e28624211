"""
stringweave - spreadsheet translations to platform string resources

Turns a CSV export of a translation spreadsheet into one string resource
document per language for Android (strings.xml), iOS (.strings) or Web
(JSON). Rows are checked for missing keys and translations, keys are
validated across the whole table, and values are escaped per platform.
Constants sheets (key, value and optional type columns) become a Kotlin,
Swift or JSON constants file.

Quick start:
    config = load_config(config_text)
    source = CsvSource.from_text("Strings", csv_text)
    result = parse_strings(config, [source])
    for document in result.documents:
        Path(document.output_path).write_text(document.text, encoding="utf-8")

    for constants_config in load_constants_configs(config_text):
        constants = parse_constants(constants_config, [analytics_source])
"""

__version__ = "1.0.0"

from .config import ConstantsConfig, LanguageConfig, StringsConfig, load_config, load_constants_configs
from .constants import Casing, ConstantsBuilder
from .csv_source import CsvSource
from .entries import ConstantEntry, Entry, HeaderEntry, SourceLocator, TranslationEntry
from .errors import (
    ConfigError,
    DuplicateKeyError,
    IllegalKeyCharacterError,
    MissingColumnError,
    MissingKeyColumnError,
    MissingLanguageColumnError,
    StringParserError,
    ValidationError,
)
from .languages import ColumnLayout, Language, ResolvedLanguage, resolve_columns
from .pipeline import (
    ConstantsParser,
    ConstantsResult,
    ParseResult,
    StringParser,
    parse_constants,
    parse_strings,
)
from .platforms import Platform
from .renderers import (
    ConstantsDocument,
    ConstantsRegistry,
    ConstantsRenderer,
    PlatformRegistry,
    PlatformRenderer,
    RenderError,
    RenderedDocument,
)
from .table import BuildResult, ParseWarning, TableBuilder, WarningKind, build_table
from .validation import validate_constants, validate_keys

__all__ = [
    "BuildResult",
    "Casing",
    "ColumnLayout",
    "ConfigError",
    "ConstantEntry",
    "ConstantsBuilder",
    "ConstantsConfig",
    "ConstantsDocument",
    "ConstantsParser",
    "ConstantsRegistry",
    "ConstantsRenderer",
    "ConstantsResult",
    "CsvSource",
    "DuplicateKeyError",
    "Entry",
    "HeaderEntry",
    "IllegalKeyCharacterError",
    "Language",
    "LanguageConfig",
    "MissingColumnError",
    "MissingKeyColumnError",
    "MissingLanguageColumnError",
    "ParseResult",
    "ParseWarning",
    "Platform",
    "PlatformRegistry",
    "PlatformRenderer",
    "RenderError",
    "RenderedDocument",
    "ResolvedLanguage",
    "SourceLocator",
    "StringParser",
    "StringParserError",
    "StringsConfig",
    "TableBuilder",
    "TranslationEntry",
    "ValidationError",
    "WarningKind",
    "build_table",
    "load_config",
    "load_constants_configs",
    "parse_constants",
    "parse_strings",
    "resolve_columns",
    "validate_constants",
    "validate_keys",
]
