#!/usr/bin/env python3
"""
Key validation over the fully built table.

Runs once, after every source is built and before anything is rendered.
The first illegal or duplicated key raises; headers are never checked.
Constants tables only warn about redefined constants.
"""

import logging
import re
from typing import Iterable, Sequence

from .entries import ConstantEntry, TranslationEntry
from .errors import DuplicateKeyError, IllegalKeyCharacterError
from .table import ParseWarning, WarningKind

logger = logging.getLogger(__name__)

ILLEGAL_KEY_CHARACTER = re.compile(r"[^A-Za-z0-9_]")


def check_key(entry) -> None:
    """Raise IllegalKeyCharacterError if the entry's key is not [A-Za-z0-9_]+."""
    if " " in entry.key:
        raise IllegalKeyCharacterError(entry, "contains a space in its key")
    if not entry.key or ILLEGAL_KEY_CHARACTER.search(entry.key):
        raise IllegalKeyCharacterError(entry)


def validate_keys(entries: Iterable) -> None:
    """
    Validate translation keys across the whole entry sequence.

    Entries are checked in order. For each translation entry the key
    characters are checked first, then the key is compared with every
    later translation entry (exact, case-sensitive match).

    Args:
        entries: Ordered Entry sequence

    Raises:
        IllegalKeyCharacterError: A key has a space or a character outside [A-Za-z0-9_]
        DuplicateKeyError: A key is used again later in the sequence
    """
    strings = [entry for entry in entries if isinstance(entry, TranslationEntry)]

    # key -> positions, in sequence order
    positions: dict[str, list[int]] = {}
    for index, entry in enumerate(strings):
        positions.setdefault(entry.key, []).append(index)

    for index, entry in enumerate(strings):
        check_key(entry)

        # Any earlier occurrence would already have raised, so this entry is
        # the first one with its key and its partner is the next occurrence.
        same_key = positions[entry.key]
        if len(same_key) > 1 and same_key[0] == index:
            raise DuplicateKeyError(entry, strings[same_key[1]])


def validate_constants(entries: Sequence) -> tuple[list, list]:
    """
    Validate a constants table and drop redefined constants.

    Keys get the same character check as translation keys (fatal). A
    constant whose type and key are defined again later is dropped with a
    DUPLICATE_CONSTANT warning: the later definition wins. Types compare
    case-insensitively, as they are grouped that way when rendered; keys
    compare exactly.

    Args:
        entries: Ordered entry sequence of one constants table

    Returns:
        (kept entries in order, warnings)

    Raises:
        IllegalKeyCharacterError: A key has a space or a character outside [A-Za-z0-9_]
    """
    entries = list(entries)
    for entry in entries:
        if isinstance(entry, ConstantEntry):
            check_key(entry)

    # Walk backwards so each constant knows the next definition of its identity
    next_definition: dict[tuple[str, str], int] = {}
    replaced_by: dict[int, int] = {}
    for index in range(len(entries) - 1, -1, -1):
        entry = entries[index]
        if not isinstance(entry, ConstantEntry):
            continue
        identity = (entry.type.lower(), entry.key)
        if identity in next_definition:
            replaced_by[index] = next_definition[identity]
        next_definition[identity] = index

    kept = []
    warnings = []
    for index, entry in enumerate(entries):
        if index not in replaced_by:
            kept.append(entry)
            continue
        other = entries[replaced_by[index]]
        message = (
            f"{entry.locator} and {other.locator} have the same key and type. "
            f"The second one will be used"
        )
        logger.warning(message)
        warnings.append(ParseWarning(
            WarningKind.DUPLICATE_CONSTANT, entry.locator.origin, entry.locator.line_number, message,
        ))
    return kept, warnings
