#!/usr/bin/env python3
"""
Web JSON renderer.

Output structure:
```json
{
    "greeting": "Hello!",
    "farewell": ""
}
```
"""

import json

from ..platforms import Platform
from .base import PlatformRenderer, strip_html_tags
from .constants import ConstantsRenderer


class WebRenderer(PlatformRenderer):
    """
    Renderer for flat JSON string tables.

    Section headers are not emitted (JSON has no comments). Keys without a
    value for the language are still emitted, as empty strings, so every
    language file has the same keys.
    """

    @property
    def platform(self) -> Platform:
        return Platform.WEB

    @property
    def renders_blank_values(self) -> bool:
        return True

    def header_lines(self) -> list[str]:
        return ['{']

    def footer_lines(self) -> list[str]:
        return ['}']

    def escape(self, value: str) -> str:
        return strip_html_tags(value)

    def string_line(self, key: str, value: str, is_last: bool) -> str:
        line = f'    "{key}": "{value}"'
        return line if is_last else line + ','


class WebConstantsRenderer(ConstantsRenderer):
    """
    Renderer for JSON constants files.

    The whole table is one object; each type is a nested object.
    ```json
    {
        "signIn": "Sign In",
        "Screen": {
            "home": "Home"
        }
    }
    ```
    """

    @property
    def platform(self) -> Platform:
        return Platform.WEB

    @property
    def separates_groups(self) -> bool:
        return False

    def has_top_level_class(self, config) -> bool:
        return True

    def header_lines(self, config) -> list[str]:
        return ['{']

    def group_open(self, name: str, indent: str) -> str:
        return f'{indent}{self.quote(name)}: {{'

    def group_close(self, indent: str, is_last: bool) -> str:
        return f'{indent}}}' if is_last else f'{indent}}},'

    def declaration(self, name: str) -> str:
        return self.quote(name)

    def quote(self, value: str) -> str:
        return json.dumps(value, ensure_ascii=False)

    def constant_line(self, name: str, value: str, indent: str, is_last: bool, config) -> str:
        line = f'{indent}{self.declaration(name)}: {self.quote(value)}'
        return line if is_last else line + ','
