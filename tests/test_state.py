from collections import deque

from actionplot.rows import ActionCsvRow
from actionplot.state import CsvProcessingState
from actionplot.structures import PlotLocation


def test_new_state_defaults():
    state = CsvProcessingState(5)
    assert state.max_rows_to_check == 5
    assert state.recent_rows == deque()
    assert state.cpr_points == []
    assert state.pending_error_marker is None


def test_new_state_has_one_default_stage_boundary():
    state = CsvProcessingState(3)
    assert len(state.stage_boundaries) == 1
    assert state.stage_boundaries[0].stage == (0, "")
    assert state.stage_boundaries[0].timestamp.total_seconds == 0
    assert state.stage_boundaries[0].timestamp.timestamp == "00:00:00"


def test_states_do_not_share_containers():
    first = CsvProcessingState(2)
    second = CsvProcessingState(2)
    first.recent_rows.append(ActionCsvRow(action_vital_name="x"))
    first.stage_boundaries.append(PlotLocation())
    first.cpr_points.append((PlotLocation(), PlotLocation()))
    assert len(second.recent_rows) == 0
    assert len(second.stage_boundaries) == 1
    assert second.cpr_points == []


def test_pending_marker_can_be_set():
    row = ActionCsvRow(username="User1")
    state = CsvProcessingState(1)
    state.pending_error_marker = (7, row)
    assert state.pending_error_marker[0] == 7
    assert state.pending_error_marker[1].username == "User1"