"""CSV decoding for spreadsheet exports.

Turns the CSV text of a spreadsheet export into rows:

    - the first record holds the column headers
    - headers are passed through transform_header (default: strip)
    - columns whose header ends up empty are dropped
    - cells are typed dynamically: true/TRUE/false/FALSE become booleans,
      numeric literals become int or float, empty cells become None
    - records whose field count differs from the header are errors; all
      errors of one document are reported together
"""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass, field
from typing import Callable

from sheet_orm.domain.errors import ParseError
from sheet_orm.domain.value_objects import Row, Scalar, freeze_row

_INT_PATTERN = re.compile(r"^\s*-?\d+\s*$")
_FLOAT_PATTERN = re.compile(r"^\s*-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$")

_BOOLEANS = {"true": True, "TRUE": True, "false": False, "FALSE": False}


def _strip_header(header: str) -> str:
    return header.strip()


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling how CSV text is decoded.

    Attributes:
        skip_empty_lines: Drop records with no fields at all.
        transform_header: Applied to each header before use.
        delimiter: Single-character field separator.
    """

    skip_empty_lines: bool = True
    transform_header: Callable[[str], str] = field(default=_strip_header)
    delimiter: str = ","


def convert_cell(text: str) -> Scalar:
    """Convert one CSV cell into a typed scalar."""
    if text == "":
        return None
    if text in _BOOLEANS:
        return _BOOLEANS[text]
    if _INT_PATTERN.match(text):
        return int(text)
    if _FLOAT_PATTERN.match(text):
        return float(text)
    return text


class CSVDecoder:
    """Decodes spreadsheet CSV exports into rows."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self._options = options or ParseOptions()

    @property
    def options(self) -> ParseOptions:
        return self._options

    def decode(self, text: str) -> list[Row]:
        """Decode CSV text into rows.

        Args:
            text: The full CSV document.

        Returns:
            One row per data record. Empty if the document has no records.

        Raises:
            ParseError: If any record is malformed.
        """
        reader = csv.reader(io.StringIO(text), delimiter=self._options.delimiter)
        try:
            records = list(reader)
        except csv.Error as e:
            raise ParseError([f"line {reader.line_num}: {e}"]) from e

        if self._options.skip_empty_lines:
            records = [record for record in records if record and record != [""]]
        if not records:
            return []

        headers = [self._options.transform_header(h) for h in records[0]]
        keep = [i for i, header in enumerate(headers) if header.strip() != ""]

        rows: list[Row] = []
        errors: list[str] = []
        for number, record in enumerate(records[1:], start=1):
            if len(record) < len(headers):
                errors.append(
                    f"Row {number}: Too few fields: expected {len(headers)} fields "
                    f"but parsed {len(record)}"
                )
                continue
            if len(record) > len(headers):
                errors.append(
                    f"Row {number}: Too many fields: expected {len(headers)} fields "
                    f"but parsed {len(record)}"
                )
                continue
            rows.append(freeze_row({headers[i]: convert_cell(record[i]) for i in keep}))

        if errors:
            raise ParseError(errors)
        return rows
