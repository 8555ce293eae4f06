"""Reading a timeline CSV and checking its header row."""

from __future__ import annotations

import csv
from collections.abc import Callable, Iterable, Iterator, Sequence

from actionplot.rows import COLUMN_NAMES

_BOM = "\ufeff"


class HeaderError(ValueError):
    """The header row of a CSV could not be read or is not the expected one."""


Validator = Callable[[Sequence[str], Sequence[str]], None]


def _quoted(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _quoted_list(items: Sequence[str]) -> str:
    return "[" + ", ".join(_quoted(item) for item in items) + "]"


def validate_header(headers: Sequence[str], expected_headers: Sequence[str]) -> None:
    """Check that the headers start with the expected ones, ignoring case.

    Extra trailing headers are allowed. Raises HeaderError otherwise.
    """
    matches = len(headers) >= len(expected_headers) and all(
        header.lower() == expected.lower()
        for header, expected in zip(headers, expected_headers)
    )
    if not matches:
        raise HeaderError(
            f"Line 1: expected {_quoted_list(expected_headers)} "
            f"as the header row of csv but got {_quoted_list(headers)}"
        )


def _non_blank(records: Iterable[list[str]]) -> Iterator[list[str]]:
    return (record for record in records if record)


def apply_validation(reader: Iterable[list[str]], validate: Validator) -> None:
    """Read the header row from the reader and check it with ``validate``.

    Raises HeaderError when the row cannot be read or does not validate.
    """
    try:
        headers = next(_non_blank(reader), [])
    except (OSError, csv.Error, UnicodeDecodeError) as exc:
        raise HeaderError(str(exc)) from exc
    if headers and headers[0].startswith(_BOM):
        headers = [headers[0][len(_BOM):], *headers[1:]]
    validate(headers, COLUMN_NAMES)


def initialize_csv_reader(stream: Iterable[str]) -> Iterator[list[str]]:
    """Open a CSV over the stream, check its header, and return its records.

    Blank lines are skipped and records may have any number of fields.
    """
    reader = csv.reader(stream)
    try:
        apply_validation(reader, validate_header)
    except HeaderError as exc:
        raise HeaderError(f"Header parsing errors: {_quoted(str(exc))}") from exc
    return _non_blank(reader)