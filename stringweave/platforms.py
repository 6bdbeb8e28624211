#!/usr/bin/env python3
"""
Target platforms for rendered string resources.
"""

from enum import Enum

from .errors import ConfigError


class Platform(Enum):
    """Platform the Strings are rendered for. Determines the formatting."""

    ANDROID = "Android"
    IOS = "iOS"
    WEB = "Web"

    @property
    def filter_id(self) -> str:
        """Lowercased identifier matched against an entry's platforms column."""
        return self.value.lower()

    @classmethod
    def parse(cls, text: str) -> "Platform":
        """
        Parse a platform name case-insensitively.

        Args:
            text: Platform name ("android", "iOS", "WEB", ...)

        Returns:
            Matching Platform member

        Raises:
            ConfigError: If the name is not one of Android, iOS, Web
        """
        if isinstance(text, cls):
            return text

        if isinstance(text, str):
            name = text.strip().lower()
            for platform in cls:
                if platform.filter_id == name:
                    return platform

        raise ConfigError(
            f"Platform must be either Android, iOS, or Web, got: {text!r}"
        )
