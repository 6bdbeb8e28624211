#!/usr/bin/env python3
"""
Platform renderers for string resource and constants files.

Supported platforms:
- Android: res/values/strings.xml, Kotlin constants object
- iOS: Localizable.strings, Swift constants class
- Web: flat JSON object, nested JSON constants object
"""

from .base import (
    PlatformRegistry,
    PlatformRenderer,
    RenderError,
    RenderedDocument,
    has_html_tag,
    preprocess,
    replace_html_tags,
    strip_html_tags,
)
from .constants import ConstantsDocument, ConstantsRegistry, ConstantsRenderer
from .android import AndroidConstantsRenderer, AndroidRenderer
from .ios import IosConstantsRenderer, IosRenderer
from .web import WebConstantsRenderer, WebRenderer

PlatformRegistry.register(AndroidRenderer)
PlatformRegistry.register(IosRenderer)
PlatformRegistry.register(WebRenderer)

ConstantsRegistry.register(AndroidConstantsRenderer)
ConstantsRegistry.register(IosConstantsRenderer)
ConstantsRegistry.register(WebConstantsRenderer)

__all__ = [
    'PlatformRegistry',
    'PlatformRenderer',
    'RenderError',
    'RenderedDocument',
    'AndroidRenderer',
    'IosRenderer',
    'WebRenderer',
    'ConstantsDocument',
    'ConstantsRegistry',
    'ConstantsRenderer',
    'AndroidConstantsRenderer',
    'IosConstantsRenderer',
    'WebConstantsRenderer',
    'has_html_tag',
    'preprocess',
    'replace_html_tags',
    'strip_html_tags',
]
