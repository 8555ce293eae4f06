"""Turning classified timeline rows into plot points."""

from __future__ import annotations

import dataclasses
import logging
from collections import deque

from actionplot.detection import is_error_action_marker, is_missed_action, is_stage_boundary
from actionplot.marking import can_mark_each_other, check_cpr, is_erroneous_action
from actionplot.rows import ActionCsvRow
from actionplot.state import CsvProcessingState
from actionplot.structures import (
    Action,
    ActionPlotPoint,
    ErroneousAction,
    MissedAction,
    Period,
    PeriodType,
    PlotLocation,
)

logger = logging.getLogger(__name__)


def check_pending_erroneous_action_marker(
    state: CsvProcessingState, row_idx: int, current_row: ActionCsvRow
) -> ErroneousAction | None:
    """Resolve a pending error marker against the current row.

    Returns the erroneous action when the current row is the one the marker
    flags. The marker is dropped once it is resolved or the current row is
    too far away in time for it to match.
    """
    if state.pending_error_marker is None:
        return None
    marker_idx, marker_row = state.pending_error_marker
    if is_erroneous_action(current_row, marker_row):
        logger.debug(
            "Error marker at row %d points to erroneous action at row %d",
            marker_idx + 2,
            row_idx + 2,
        )
        state.pending_error_marker = None
        return ErroneousAction.from_rows(current_row, marker_row)
    if not can_mark_each_other(current_row, marker_row):
        logger.debug(
            "Error marker at row %d could not find an erroneous action row "
            "within the time threshold",
            marker_idx + 2,
        )
        state.pending_error_marker = None
    return None


def seek_erroneous_action_in_visited_rows(
    visited_rows: deque[ActionCsvRow],
    error_marker_row: ActionCsvRow,
    error_marker_row_idx: int,
) -> ErroneousAction | None:
    """Find the most recent visited row the marker flags, and take it out.

    Returns the erroneous action built from that row, or None when no
    visited row matches.
    """
    for recent_index in reversed(range(len(visited_rows))):
        recent_row = visited_rows[recent_index]
        if is_erroneous_action(recent_row, error_marker_row):
            logger.debug(
                "Error marker at row %d points backward to erroneous action at row %d",
                error_marker_row_idx + 2,
                error_marker_row_idx - recent_index + 2,
            )
            del visited_rows[recent_index]
            return ErroneousAction.from_rows(recent_row, error_marker_row)
    return None


def process_erroneous_action(
    state: CsvProcessingState, row_idx: int, current_row: ActionCsvRow
) -> ActionPlotPoint | None:
    """Produce an erroneous or missed action point for the row, if any.

    An error marker that matches no recent row is kept pending so that a
    following row may still match it.
    """
    point = check_pending_erroneous_action_marker(state, row_idx, current_row)
    if point is not None:
        return point

    if is_error_action_marker(current_row):
        found = seek_erroneous_action_in_visited_rows(state.recent_rows, current_row, row_idx)
        if found is None:
            state.pending_error_marker = (row_idx, current_row)
        return found
    if is_missed_action(current_row):
        return MissedAction.from_row(current_row)
    return None


def process_action_point(row: ActionCsvRow) -> Action | None:
    """Return an action point for an action row, otherwise None."""
    return Action.from_row(row) if row.action_point else None


def process_stage_boundary(
    stage_boundaries: list[PlotLocation], row: ActionCsvRow
) -> Period | None:
    """Return a stage period for a stage boundary row, otherwise None.

    The last stored boundary becomes the start, relabelled with the row's
    stage, and the row's own location is stored as the next boundary.
    """
    if not is_stage_boundary(row):
        return None

    if stage_boundaries:
        start = dataclasses.replace(stage_boundaries.pop(), stage=row.parsed_stage)
    else:
        start = PlotLocation.from_row(row)

    stage_boundaries.append(PlotLocation.from_row(row))
    return Period(PeriodType.STAGE, start, PlotLocation.from_row(row))


def process_cpr_lines(
    cpr_points: list[tuple[PlotLocation, PlotLocation]], row: ActionCsvRow
) -> Period | None:
    """Pair CPR boundary rows into CPR periods.

    The first boundary row is stored and yields nothing; the next one closes
    the period that starts at the stored location.
    """
    if check_cpr(row) is None:
        return None
    location = PlotLocation.from_row(row)
    if cpr_points:
        start, _ = cpr_points.pop()
        return Period(PeriodType.CPR, start, location)
    cpr_points.append((location, location))
    return None