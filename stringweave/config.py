#!/usr/bin/env python3
"""
Configuration for a string parsing run.

A StringsConfig names the platform, the languages to write (with the path
each document should be written to) and the CSV column names. It is built
from a plain mapping (from_dict) or from a YAML/JSON document (load_config);
where that document comes from is up to the caller.

Example (YAML):
```yaml
platform: Android
languages:
  - id: en
    path: app/src/main/res/values/strings.xml
  - fr, app/src/main/res/values-fr/strings.xml
```

A ConstantsConfig describes one constants table (see constants.py); a
document lists them under "constants" (load_constants_configs).
"""

import posixpath
from dataclasses import dataclass, field, fields
from typing import Any, Optional

import yaml

from .constants import VALUE_COLUMN, Casing
from .errors import ConfigError
from .languages import KEY_COLUMN, PLATFORMS_COLUMN, Language
from .platforms import Platform
from .table import HEADER_MARKER


@dataclass
class LanguageConfig:
    """One language to write, with the path of its document."""
    id: str
    path: Optional[str] = None

    def to_language(self) -> Language:
        return Language(self.id, self.path)

    def to_dict(self) -> dict:
        return {"id": self.id, "path": self.path}

    @classmethod
    def from_value(cls, value: Any) -> "LanguageConfig":
        """
        Create from a mapping ({"id": ..., "path": ...}) or an "id, path" string.
        """
        if isinstance(value, dict):
            language_id = value.get("id")
            path = value.get("path")
        elif isinstance(value, str):
            parts = [part.strip() for part in value.split(",", 1)]
            language_id = parts[0]
            path = parts[1] if len(parts) > 1 and parts[1] else None
        else:
            raise ConfigError(f"Invalid language entry: {value!r}")

        if not isinstance(language_id, str) or not language_id.strip():
            raise ConfigError(f"Language entry has no id: {value!r}")

        return cls(id=language_id.strip(), path=path)


@dataclass
class StringsConfig:
    """Settings of one string parsing run."""
    platform: Platform
    languages: list = field(default_factory=list)
    key_column: str = KEY_COLUMN
    platforms_column: str = PLATFORMS_COLUMN
    header_marker: str = HEADER_MARKER
    include_platform_filter: bool = True

    def __post_init__(self):
        """Normalize the platform and languages, then verify the config."""
        self.platform = Platform.parse(self.platform)
        self.languages = [
            language if isinstance(language, LanguageConfig) else LanguageConfig.from_value(language)
            for language in self.languages
        ]
        self.verify()

    def verify(self) -> None:
        """Raise ConfigError if the config cannot drive a run."""
        if not self.languages:
            raise ConfigError("Please provide at least one language")

        seen = set()
        for language in self.languages:
            language_id = language.id.lower()
            if language_id in seen:
                raise ConfigError(f"Language {language.id} is declared more than once")
            seen.add(language_id)

        for name in ("key_column", "platforms_column", "header_marker"):
            if not getattr(self, name):
                raise ConfigError(f"{name} cannot be empty")

        if not isinstance(self.include_platform_filter, bool):
            raise ConfigError(
                f"include_platform_filter must be true or false, not {self.include_platform_filter!r}"
            )

    def declared_languages(self) -> list[Language]:
        return [language.to_language() for language in self.languages]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON/YAML serialization."""
        return {
            "platform": self.platform.value,
            "languages": [language.to_dict() for language in self.languages],
            "key_column": self.key_column,
            "platforms_column": self.platforms_column,
            "header_marker": self.header_marker,
            "include_platform_filter": self.include_platform_filter,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StringsConfig":
        """Create from dictionary. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping")

        if "platform" not in data:
            raise ConfigError("You need to input a platform (Android, iOS, Web)")

        languages = data.get("languages") or []
        if not isinstance(languages, list):
            raise ConfigError("languages must be a list")

        kwargs = {
            name: data[name]
            for name in ("key_column", "platforms_column", "header_marker", "include_platform_filter")
            if name in data
        }
        return cls(platform=data["platform"], languages=languages, **kwargs)


@dataclass
class ConstantsConfig:
    """
    Settings of one constants table.

    Attributes:
        title: Name of the table, used in logs and as the document title
        platform: Platform to generate the source file for
        path: Where the caller writes the document; its file name (without
            extension) names the top level class unless object_name is set
        package_name: Kotlin package, required on Android
        object_name: Name of the top level class, overrides the one from path
        value_column: Name of the column holding the values
        type_column: Name of the column holding the group names, None for no grouping
        values_align_column: Column the "=" of mobile declarations is aligned
            to, a multiple of 4; 0 keeps a single space
        type_casing: Casing of group names
        key_casing: Casing of constant names
        top_level_class: Wrap the constants in a class named after the file
            (mobile only; Web always writes one object)
    """
    title: str
    platform: Platform
    path: Optional[str] = None
    package_name: Optional[str] = None
    object_name: Optional[str] = None
    key_column: str = KEY_COLUMN
    platforms_column: str = PLATFORMS_COLUMN
    header_marker: str = HEADER_MARKER
    value_column: str = VALUE_COLUMN
    type_column: Optional[str] = None
    values_align_column: int = 0
    type_casing: Casing = Casing.PASCAL_CASE
    key_casing: Casing = Casing.CAMEL_CASE
    top_level_class: bool = True
    include_platform_filter: bool = True

    def __post_init__(self):
        self.platform = Platform.parse(self.platform)
        self.type_casing = Casing.parse(self.type_casing)
        self.key_casing = Casing.parse(self.key_casing)
        self.verify()

    def verify(self) -> None:
        """Raise ConfigError if the config cannot drive a run."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ConfigError("Constants config needs a title")

        for name in ("top_level_class", "include_platform_filter"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be true or false, not {getattr(self, name)!r}")

        if (
            isinstance(self.values_align_column, bool)
            or not isinstance(self.values_align_column, int)
            or self.values_align_column < 0
            or self.values_align_column % 4 != 0
        ):
            raise ConfigError(
                f"values_align_column must be a multiple of 4, not {self.values_align_column!r}"
            )

        for name in ("key_column", "platforms_column", "header_marker", "value_column"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{self.title}: {name} cannot be empty")
        if self.type_column is not None and not isinstance(self.type_column, str):
            raise ConfigError(f"{self.title}: type_column must be a column name")

        columns = [self.key_column, self.platforms_column, self.value_column]
        if self.type_column:
            columns.append(self.type_column)
        if len({column.strip().lower() for column in columns}) != len(columns):
            raise ConfigError(f"{self.title}: column names must all be different")

        if self.platform == Platform.ANDROID and not self.package_name:
            raise ConfigError("Please provide a package name for Android")

        if self.platform != Platform.WEB and self.top_level_class and not self.class_name():
            raise ConfigError(
                f"{self.title}: provide a path or an object_name to name the top level class"
            )

    def class_name(self) -> Optional[str]:
        """Name of the top level class: object_name, else the file name of path."""
        if self.object_name:
            return self.object_name
        if not self.path:
            return None
        name, _ = posixpath.splitext(posixpath.basename(self.path.replace('\\', '/')))
        return name or None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON/YAML serialization."""
        return {
            "title": self.title,
            "platform": self.platform.value,
            "path": self.path,
            "package_name": self.package_name,
            "object_name": self.object_name,
            "key_column": self.key_column,
            "platforms_column": self.platforms_column,
            "header_marker": self.header_marker,
            "value_column": self.value_column,
            "type_column": self.type_column,
            "values_align_column": self.values_align_column,
            "type_casing": self.type_casing.value,
            "key_casing": self.key_casing.value,
            "top_level_class": self.top_level_class,
            "include_platform_filter": self.include_platform_filter,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ConstantsConfig":
        """Create from dictionary. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigError("Constants config must be a mapping")

        for name in ("title", "platform"):
            if name not in data:
                raise ConfigError(f"Constants config is missing '{name}'")

        kwargs = {
            name: data[name]
            for name in (f.name for f in fields(cls))
            if name in data and name not in ("title", "platform")
        }
        return cls(title=data["title"], platform=data["platform"], **kwargs)


def _load_document(text: str) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config: {e}")

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping")
    return data


def _with_platform(section: dict, data: dict) -> dict:
    """Section copy with the top-level platform filled in when it has none."""
    section = dict(section)
    if "platform" not in section and "platform" in data:
        section["platform"] = data["platform"]
    return section


def load_config(text: str) -> StringsConfig:
    """
    Parse a YAML or JSON config document.

    The strings settings may sit at the top level or under a "strings" key,
    in which case a top-level "platform" applies when the section has none.

    Args:
        text: Document content

    Returns:
        StringsConfig

    Raises:
        ConfigError: If the document is not valid YAML or not a valid config
    """
    data = _load_document(text)

    section = data.get("strings")
    if section is None:
        return StringsConfig.from_dict(data)

    if not isinstance(section, dict):
        raise ConfigError("strings must be a mapping")

    return StringsConfig.from_dict(_with_platform(section, data))


def load_constants_configs(text: str) -> list[ConstantsConfig]:
    """
    Parse the "constants" list of a YAML or JSON config document.

    Each item inherits the top-level "platform" when it has none.

    Example:
    ```yaml
    platform: Android
    constants:
      - title: Analytics
        path: app/src/main/java/com/example/Analytics.kt
        package_name: com.example
        type_column: type
    ```

    Returns:
        One ConstantsConfig per item, empty if the document has no constants

    Raises:
        ConfigError: If the document is not valid YAML or an item is not a valid config
    """
    data = _load_document(text)

    sections = data.get("constants")
    if sections is None:
        return []
    if not isinstance(sections, list):
        raise ConfigError("constants must be a list")

    configs = []
    for section in sections:
        if not isinstance(section, dict):
            raise ConfigError("Each constants entry must be a mapping")
        configs.append(ConstantsConfig.from_dict(_with_platform(section, data)))
    return configs
