#!/usr/bin/env python3
"""
Tests for StringsConfig, ConstantsConfig and the config loaders.
"""

import pytest

from stringweave.config import (
    ConstantsConfig,
    LanguageConfig,
    StringsConfig,
    load_config,
    load_constants_configs,
)
from stringweave.constants import Casing
from stringweave.errors import ConfigError
from stringweave.languages import Language
from stringweave.platforms import Platform


def test_load_yaml_config():
    """Test 1: A YAML document with mapping and 'id, path' languages."""
    config = load_config("""
platform: android
languages:
  - id: en
    path: values/strings.xml
  - fr, values-fr/strings.xml
""")

    assert config.platform == Platform.ANDROID
    assert config.languages == [
        LanguageConfig("en", "values/strings.xml"),
        LanguageConfig("fr", "values-fr/strings.xml"),
    ]
    assert config.declared_languages()[1] == Language("fr", "values-fr/strings.xml")


def test_load_json_config_with_strings_section():
    """Test 2: JSON is accepted; a top-level platform applies to the strings section."""
    config = load_config("""
{
  "platform": "iOS",
  "strings": {
    "languages": [{"id": "en", "path": "en.lproj/Localizable.strings"}],
    "key_column": "id"
  }
}
""")

    assert config.platform == Platform.IOS
    assert config.key_column == "id"
    assert config.platforms_column == "platforms"
    assert config.header_marker == "###"


def test_round_trip_dict():
    """Test 3: to_dict output loads back to an equal config."""
    config = StringsConfig(platform="Web", languages=["en", "fr"], include_platform_filter=False)

    assert StringsConfig.from_dict(config.to_dict()) == config
    assert config.languages[0].path is None


@pytest.mark.parametrize("platform", ["Windows", "", None, 3])
def test_invalid_platform(platform):
    """Test 4: Only Android, iOS and Web are accepted."""
    with pytest.raises(ConfigError):
        StringsConfig(platform=platform, languages=["en"])


def test_platform_is_required():
    """Test 5: from_dict needs a platform."""
    with pytest.raises(ConfigError, match="platform"):
        StringsConfig.from_dict({"languages": ["en"]})


def test_at_least_one_language():
    """Test 6: An empty language list is rejected."""
    with pytest.raises(ConfigError, match="at least one language"):
        StringsConfig(platform="Android", languages=[])


def test_duplicate_language_ids():
    """Test 7: Language ids must be unique, ignoring case."""
    with pytest.raises(ConfigError, match="more than once"):
        StringsConfig(platform="Android", languages=["en", "EN"])


def test_language_without_id():
    """Test 8: Mapping languages need an id."""
    with pytest.raises(ConfigError):
        StringsConfig(platform="Android", languages=[{"path": "values/strings.xml"}])


def test_invalid_yaml():
    """Test 9: Unparseable or non-mapping documents raise ConfigError."""
    with pytest.raises(ConfigError):
        load_config("platform: [android")
    with pytest.raises(ConfigError):
        load_config("- just\n- a list\n")


@pytest.mark.parametrize("value", ['"false"', "0", "no-filter"])
def test_include_platform_filter_must_be_boolean(value):
    """Test 10: A quoted or non-boolean include_platform_filter is rejected."""
    with pytest.raises(ConfigError, match="include_platform_filter must be true or false"):
        load_config(f"platform: web\nlanguages: [en]\ninclude_platform_filter: {value}\n")


def test_include_platform_filter_false():
    """Test 11: A YAML boolean turns platform filtering off."""
    config = load_config("platform: web\nlanguages: [en]\ninclude_platform_filter: false\n")

    assert config.include_platform_filter is False


def test_load_constants_configs():
    """Test 12: Constants tables are listed under 'constants' and inherit the platform."""
    configs = load_constants_configs("""
platform: Android
strings:
  languages: [en]
constants:
  - title: Analytics
    path: app/src/main/java/com/example/Analytics.kt
    package_name: com.example
    type_column: type
    key_casing: snake_case
    values_align_column: 40
""")

    assert len(configs) == 1
    analytics = configs[0]
    assert analytics.platform == Platform.ANDROID
    assert analytics.class_name() == "Analytics"
    assert analytics.key_casing == Casing.SNAKE_CASE
    assert analytics.type_casing == Casing.PASCAL_CASE
    assert analytics.values_align_column == 40
    assert analytics.to_dict()["key_casing"] == "snake"


def test_no_constants_section():
    """Test 13: A document without constants gives an empty list."""
    assert load_constants_configs("platform: web\nlanguages: [en]\n") == []


@pytest.mark.parametrize("options,message", [
    ({"platform": "Android", "path": "A.kt"}, "package name for Android"),
    ({"platform": "iOS", "values_align_column": 6, "path": "A.swift"}, "multiple of 4"),
    ({"platform": "iOS"}, "provide a path or an object_name"),
    ({"platform": "Web", "value_column": "key"}, "column names must all be different"),
    ({"platform": "Web", "top_level_class": "yes"}, "top_level_class must be true or false"),
    ({"platform": "Web", "key_casing": "kebab"}, "Unknown casing"),
])
def test_invalid_constants_config(options, message):
    """Test 14: Settings that cannot produce a source file are rejected."""
    with pytest.raises(ConfigError, match=message):
        ConstantsConfig(title="Analytics", **options)


def test_constants_config_class_name():
    """Test 15: object_name wins over the file name; no class is needed without a top level class."""
    assert ConstantsConfig("A", "iOS", path="x/Events.swift", object_name="Tracking").class_name() == "Tracking"
    assert ConstantsConfig("A", "iOS", top_level_class=False).class_name() is None


def test_constants_config_requires_title():
    """Test 16: from_dict needs a title and a platform."""
    with pytest.raises(ConfigError, match="missing 'title'"):
        ConstantsConfig.from_dict({"platform": "Web"})
