#!/usr/bin/env python3
"""
Decoded CSV tables.

A CsvSource is one spreadsheet export: a title (used as the origin in
diagnostics), the header row and the data rows. Fetching the CSV is the
caller's job; from_text() only decodes text that was already retrieved.
"""

import csv
import io
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CsvSource:
    """One decoded CSV table."""
    title: str
    header: list
    rows: list = field(default_factory=list)

    @classmethod
    def from_text(cls, title: str, text: str, dialect: str = "excel") -> "CsvSource":
        """
        Decode RFC 4180 CSV text.

        Empty cells become None and blank lines are skipped. The first record
        is the header.

        Args:
            title: Source title
            text: CSV content
            dialect: csv module dialect name

        Returns:
            CsvSource

        Raises:
            ValueError: If the text has no header row
        """
        # Spreadsheet exports often start with a BOM
        if text.startswith('\ufeff'):
            text = text[1:]

        reader = csv.reader(io.StringIO(text, newline=''), dialect=dialect)
        records = [[_cell(value) for value in record] for record in reader if record]

        if not records:
            raise ValueError(f"CSV source '{title}' has no header row")

        return cls(title=title, header=records[0], rows=records[1:])


def _cell(value: str) -> Optional[str]:
    return value if value != '' else None
