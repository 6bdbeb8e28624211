#!/usr/bin/env python3
"""
iOS .strings renderer.

Output structure:
```
/*  Section */
"greeting" = "Hello, %@!";
```
"""

from ..platforms import Platform
from .base import PlatformRenderer, strip_html_tags
from .constants import CONSTANTS_HEADER, ConstantsRenderer


class IosRenderer(PlatformRenderer):
    """
    Renderer for Apple .strings files.

    printf string specifiers are translated to their Objective-C form
    (%s -> %@, %1$s -> %1$@). The format has no CDATA, so <html> markers
    are dropped.
    """

    @property
    def platform(self) -> Platform:
        return Platform.IOS

    def comment_lines(self, comment: str) -> list[str]:
        return ['', f'/*  {comment} */']

    def escape(self, value: str) -> str:
        value = value.replace('%s', '%@').replace('$s', '$@')
        return strip_html_tags(value)

    def string_line(self, key: str, value: str, is_last: bool) -> str:
        return f'"{key}" = "{value}";'


class IosConstantsRenderer(ConstantsRenderer):
    """
    Renderer for Swift constants files.

    ```swift
    //  List of Constants, auto-generated by stringweave

    class Analytics {
        static let signIn = "Sign In"
        enum Screen {
            static let home = "Home"
        }
    }
    ```
    """

    @property
    def platform(self) -> Platform:
        return Platform.IOS

    def header_lines(self, config) -> list[str]:
        lines = [f'//  {CONSTANTS_HEADER}', '']
        if self.has_top_level_class(config):
            lines.append(f'class {config.class_name()} {{')
        return lines

    def group_open(self, name: str, indent: str) -> str:
        return f'{indent}enum {name} {{'

    def declaration(self, name: str) -> str:
        return f'static let {name}'

    def quote(self, value: str) -> str:
        value = value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')
        return f'"{value}"'
