import dataclasses
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from actionplot.structures import (
    Action,
    CsvRowTime,
    ErroneousAction,
    ErrorInfo,
    MissedAction,
    Period,
    PeriodType,
    PlotLocation,
)

TIME = CsvRowTime(
    total_seconds=3600,
    date_string="2024-12-24 01:00:00",
    timestamp="01:00:00",
)


def make_row(**overrides):
    values = dict(
        timestamp=TIME,
        parsed_stage=(1, "Stage 1"),
        action_vital_name="(1)Stage 1(action)",
        subaction_name="Pulse Check",
        score="Action-Was-Performed",
        speech_command="Check again",
        action_name="Pulse Check",
        action_category="Pulse Check",
        shock_value="",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_start_of_today_values():
    default = CsvRowTime.start_of_today()
    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    assert default.total_seconds == 0
    assert default.timestamp == "00:00:00"
    assert default.date_string == today + " 00:00:00"


def test_plot_location_default():
    location = PlotLocation()
    assert location.stage == (0, "")
    assert location.timestamp == CsvRowTime.start_of_today()


def test_plot_location_from_row_copies_fields():
    location = PlotLocation.from_row(make_row())
    assert location.timestamp == TIME
    assert location.stage == (1, "Stage 1")


def test_plot_location_from_row_without_values_falls_back_to_default():
    location = PlotLocation.from_row(make_row(timestamp=None, parsed_stage=None))
    assert location == PlotLocation()


def test_error_info_from_row():
    info = ErrorInfo.from_row(make_row())
    assert info == ErrorInfo(
        action_rule="Pulse Check",
        violation="Action-Was-Performed",
        advice="Check again",
    )


def test_action_from_row():
    row = make_row(action_name="Synchronized Shock 100J", action_category="Synchronized Shock", shock_value="100J")
    action = Action.from_row(row)
    assert action.name == "Synchronized Shock 100J"
    assert action.action_category == "Synchronized Shock"
    assert action.shock_value == "100J"
    assert action.location == PlotLocation.from_row(row)


def test_erroneous_action_takes_location_from_action_row():
    action_row = make_row()
    marker_row = make_row(
        timestamp=None,
        subaction_name="Rule",
        score="Violation",
        speech_command="Advice",
    )
    erroneous = ErroneousAction.from_rows(action_row, marker_row)
    assert erroneous.location.timestamp == TIME
    assert erroneous.name == action_row.action_name
    assert erroneous.error_info == ErrorInfo.from_row(marker_row)


def test_missed_action_uses_vital_name():
    row = make_row()
    missed = MissedAction.from_row(row)
    assert missed.name == "(1)Stage 1(action)"
    assert missed.error_info == ErrorInfo.from_row(row)
    assert missed.location.stage == (1, "Stage 1")


def test_period_holds_both_locations():
    start = PlotLocation.from_row(make_row())
    end = PlotLocation()
    period = Period(PeriodType.CPR, start, end)
    assert period.kind is PeriodType.CPR
    assert period.start == start
    assert period.end == end


def test_structures_are_immutable():
    location = PlotLocation.from_row(make_row())
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.stage = (2, "Stage 2")
    assert dataclasses.replace(location, stage=(2, "Stage 2")).stage == (2, "Stage 2")