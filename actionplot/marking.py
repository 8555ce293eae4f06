"""Matching of error markers to actions, and CPR boundary locations."""

from __future__ import annotations

from typing import Any

from actionplot.structures import CsvRowTime, PlotLocation

ERROR_MARKER_TIME_THRESHOLD = 2


def check_cpr(row: Any) -> tuple[str, PlotLocation] | None:
    """Return the CPR boundary kind of the row and where it sits, if any."""
    if row.cpr_boundary is None:
        return None
    return row.cpr_boundary, PlotLocation.from_row(row)


def _seconds(row: Any) -> int:
    timestamp = row.timestamp if row.timestamp is not None else CsvRowTime.start_of_today()
    return timestamp.total_seconds


def can_mark_each_other(row1: Any, row2: Any) -> bool:
    """Whether the two rows are close enough in time for one to mark the other.

    A row without a timestamp counts as being at second zero.
    """
    return abs(_seconds(row1) - _seconds(row2)) <= ERROR_MARKER_TIME_THRESHOLD


def is_erroneous_action(row: Any, error_marker_row: Any) -> bool:
    """Whether the error marker row flags this action row as erroneous."""
    return (
        row.action_point
        and error_marker_row.username == row.action_vital_name
        and can_mark_each_other(row, error_marker_row)
    )