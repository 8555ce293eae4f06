"""Parsing of timestamps, stage names and action names."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from actionplot.structures import CsvRowTime
from actionplot.text import capitalize_words, normalize_whitespace

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_STAGE_NAME = re.compile(r"\s*\((\d+)\)\s*(.+?)\s*\(action\)\s*")
_SHOCK_VALUE = re.compile(r"(.*?)(\b\d+[Jj]\b)(.*)")

_NAME_CORRECTIONS = {
    "Ascultate Lungs": "Auscultate Lungs",
    "SYNCHRONIZED Shock": "Synchronized Shock",
}

_CATEGORIES = {
    "Select Amiodarone": "Medication",
    "Select Calcium": "Medication",
    "Select Epinephrine": "Medication",
    "Select Lidocaine": "Medication",
}


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def parse_time(text: str) -> CsvRowTime | None:
    """Parse an ``H:M:S`` timestamp into a row time dated today (UTC).

    Returns None when the text is not three unsigned numbers or the minutes
    or seconds are 60 or more.
    """
    parts = text.split(":")
    if len(parts) != 3:
        return None
    numbers = [_parse_unsigned(part) for part in parts]
    if any(number is None for number in numbers):
        return None
    hours, minutes, seconds = numbers
    if minutes >= 60 or seconds >= 60:
        return None

    today = datetime.now(timezone.utc)
    clock = f"{hours:02}:{minutes:02}:{seconds:02}"
    return CsvRowTime(
        total_seconds=hours * 3600 + minutes * 60 + seconds,
        date_string=f"{today.year}-{today.month:02}-{today.day:02} {clock}",
        timestamp=clock,
    )


def extract_stage_name(text: str) -> tuple[int, str] | None:
    """Extract ``(number, name)`` from text shaped like ``(N) name (action)``."""
    match = _STAGE_NAME.fullmatch(text)
    if match is None:
        return None
    number_text, name = match.groups()
    if not number_text.isascii():
        return None
    number = int(number_text)
    if number > _U32_MAX:
        return None
    return number, normalize_whitespace(name)


def extract_shock_value(text: str) -> tuple[str, str]:
    """Split the first joule value (such as ``200J``) out of the text.

    Returns the remaining text and the value, or the text unchanged and an
    empty string when there is no value.
    """
    match = _SHOCK_VALUE.search(text)
    if match is None:
        return text, ""
    before, value, after = (group.strip() for group in match.groups())
    return f"{before} {after}".strip(), value


def process_action_name(text: str) -> tuple[str, str, str]:
    """Normalise an action name into ``(name, category, shock value)``."""
    cleaned = capitalize_words(text).replace("UNAVAILABLE", "").strip()
    name, joule = extract_shock_value(cleaned)
    name = _NAME_CORRECTIONS.get(name, name)
    category = _CATEGORIES.get(name, name)
    full_name = f"{name} {joule}" if joule else name
    return full_name, category, joule