#!/usr/bin/env python3
"""
Android strings.xml renderer.

Output structure:
```xml
<?xml version="1.0" encoding="utf-8"?>
<resources>

    <!-- Section -->
    <string name="app_name">My App</string>
    <string name="terms"><![CDATA[Read the <b>terms</b>]]></string>
</resources>
```
"""

from ..platforms import Platform
from .base import PlatformRenderer, has_html_tag, replace_html_tags
from .constants import CONSTANTS_HEADER, ConstantsRenderer

CDATA_START = '<![CDATA['
CDATA_END = ']]>'


class AndroidRenderer(PlatformRenderer):
    """
    Renderer for Android string resources.

    Values holding an <html> tag are wrapped in CDATA and keep their markup;
    any other value has its < and > escaped.
    """

    @property
    def platform(self) -> Platform:
        return Platform.ANDROID

    def header_lines(self) -> list[str]:
        return ['<?xml version="1.0" encoding="utf-8"?>', '<resources>']

    def footer_lines(self) -> list[str]:
        return ['</resources>']

    def comment_lines(self, comment: str) -> list[str]:
        return ['', f'    <!-- {comment} -->']

    def escape(self, value: str) -> str:
        value = (
            value.replace('&', '&amp;')
            .replace("'", "\\'")
            .replace('@', '\\@')
            .replace('...', '&#8230;')
        )

        if has_html_tag(value):
            # Markup stays as is inside CDATA
            return replace_html_tags(value, CDATA_START, CDATA_END)

        return value.replace('>', '&gt;').replace('<', '&lt;')

    def string_line(self, key: str, value: str, is_last: bool) -> str:
        return f'    <string name="{key}">{value}</string>'


class AndroidConstantsRenderer(ConstantsRenderer):
    """
    Renderer for Kotlin constants files.

    ```kotlin
    package com.example

    /**
     * List of Constants, auto-generated by stringweave
     */
    object Analytics {

        const val signIn = "Sign In"
        object Screen {
            const val home = "Home"
        }
    }
    ```
    """

    @property
    def platform(self) -> Platform:
        return Platform.ANDROID

    def header_lines(self, config) -> list[str]:
        lines = [f'package {config.package_name}', '', '/**', f' * {CONSTANTS_HEADER}', ' */']
        if self.has_top_level_class(config):
            lines.append(f'object {config.class_name()} {{')
        lines.append('')
        return lines

    def group_open(self, name: str, indent: str) -> str:
        return f'{indent}object {name} {{'

    def declaration(self, name: str) -> str:
        return f'const val {name}'

    def quote(self, value: str) -> str:
        # $ starts a string template in Kotlin
        value = value.replace('\\', '\\\\').replace('"', '\\"').replace('$', '\\$').replace('\n', '\\n')
        return f'"{value}"'
