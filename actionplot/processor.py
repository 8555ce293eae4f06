"""Streaming a timeline CSV into plot points."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO, Union

from actionplot.csv_reader import initialize_csv_reader
from actionplot.plot_processors import (
    process_action_point,
    process_cpr_lines,
    process_erroneous_action,
    process_stage_boundary,
)
from actionplot.rows import ActionCsvRow, RowError
from actionplot.sources import create_reader
from actionplot.state import CsvProcessingState
from actionplot.structures import ActionPlotPoint, ErroneousAction

DEFAULT_MAX_ROWS_TO_CHECK = 5

PlotResult = Union[ActionPlotPoint, RowError]


def _update_recent_actions(current_row: ActionCsvRow, state: CsvProcessingState) -> None:
    if current_row.action_point:
        state.recent_rows.append(current_row)
    if len(state.recent_rows) > state.max_rows_to_check:
        state.recent_rows.popleft()


def process_csv_row(
    row_idx: int, record: Sequence[str], state: CsvProcessingState
) -> ActionPlotPoint | None:
    """Turn one CSV record into at most one plot point, updating the state.

    Action rows are held back in the state and reported when a later row
    produces no point of its own. Raises RowError when the record is invalid.
    """
    try:
        current_row = ActionCsvRow.from_record(record)
    except RowError as exc:
        raise RowError(f"Could not deserialize row: {exc}") from exc

    point = process_stage_boundary(state.stage_boundaries, current_row)
    if point is None:
        point = process_cpr_lines(state.cpr_points, current_row)
    if point is None:
        point = process_erroneous_action(state, row_idx, current_row)
    if point is None and state.recent_rows:
        point = process_action_point(state.recent_rows.popleft())

    if not isinstance(point, ErroneousAction):
        _update_recent_actions(current_row, state)
    return point


def _points(records: Iterator[list[str]], state: CsvProcessingState) -> Iterator[PlotResult]:
    row_idx = 0
    while True:
        try:
            record = next(records)
        except StopIteration:
            return
        except csv.Error as exc:
            yield RowError(f"Could not deserialize row: {exc}")
            row_idx += 1
            continue
        except (OSError, UnicodeDecodeError) as exc:
            yield RowError(f"Could not deserialize row: {exc}")
            return

        try:
            point = process_csv_row(row_idx, record, state)
        except RowError as exc:
            yield exc
        else:
            if point is not None:
                yield point
        row_idx += 1


def process_csv(stream: Iterable[str], max_rows_to_check: int) -> Iterator[PlotResult]:
    """Check the CSV header and return an iterator of plot points.

    Rows that cannot be read are yielded as RowError values and processing
    goes on. Raises HeaderError at once when the header is wrong.
    """
    records = initialize_csv_reader(stream)
    return _points(records, CsvProcessingState(max_rows_to_check))


def _closing(stream: TextIO, points: Iterator[PlotResult]) -> Iterator[PlotResult]:
    try:
        yield from points
    finally:
        stream.close()


def process(src: str) -> Iterator[PlotResult]:
    """Open a file path or http(s) URL and stream its plot points.

    Raises SourceError when the source cannot be opened and HeaderError when
    its header is wrong.
    """
    stream = create_reader(src)
    try:
        points = process_csv(stream, DEFAULT_MAX_ROWS_TO_CHECK)
    except BaseException:
        stream.close()
        raise
    return _closing(stream, points)