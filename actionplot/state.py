"""Mutable state carried across the rows of one CSV stream."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from actionplot.rows import ActionCsvRow
from actionplot.structures import PlotLocation


def _initial_stage_boundaries() -> list[PlotLocation]:
    return [PlotLocation()]


@dataclass
class CsvProcessingState:
    """Recent action rows, open stage and CPR periods, and a pending error marker."""

    max_rows_to_check: int
    recent_rows: deque[ActionCsvRow] = field(default_factory=deque)
    stage_boundaries: list[PlotLocation] = field(default_factory=_initial_stage_boundaries)
    cpr_points: list[tuple[PlotLocation, PlotLocation]] = field(default_factory=list)
    pending_error_marker: tuple[int, ActionCsvRow] | None = None