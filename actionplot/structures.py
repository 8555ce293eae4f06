"""Plot point structures produced from timeline rows."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Union


@dataclass(frozen=True)
class CsvRowTime:
    """A row time as seconds since start, a full date string and HH:MM:SS."""

    total_seconds: int
    date_string: str
    timestamp: str

    @classmethod
    def start_of_today(cls) -> CsvRowTime:
        """Midnight of the current UTC day, the default time of a row."""
        today = datetime.now(timezone.utc)
        midnight = today.replace(hour=0, minute=0, second=0, microsecond=0)
        return cls(
            total_seconds=0,
            date_string=midnight.strftime("%Y-%m-%d %H:%M:%S"),
            timestamp="00:00:00",
        )


@dataclass(frozen=True)
class PlotLocation:
    """Where on the plot a point sits: its time and its stage."""

    timestamp: CsvRowTime = field(default_factory=CsvRowTime.start_of_today)
    stage: tuple[int, str] = (0, "")

    @classmethod
    def from_row(cls, row: Any) -> PlotLocation:
        timestamp = row.timestamp if row.timestamp is not None else CsvRowTime.start_of_today()
        stage = row.parsed_stage if row.parsed_stage is not None else (0, "")
        return cls(timestamp=timestamp, stage=stage)


@dataclass(frozen=True)
class ErrorInfo:
    """The rule an error marker row reports and the advice it gives."""

    action_rule: str
    violation: str
    advice: str

    @classmethod
    def from_row(cls, row: Any) -> ErrorInfo:
        return cls(
            action_rule=row.subaction_name,
            violation=row.score,
            advice=row.speech_command,
        )


@dataclass(frozen=True)
class Action:
    """An action performed during the session."""

    location: PlotLocation
    name: str
    action_category: str
    shock_value: str

    @classmethod
    def from_row(cls, row: Any) -> Action:
        return cls(
            location=PlotLocation.from_row(row),
            name=row.action_name,
            action_category=row.action_category,
            shock_value=row.shock_value,
        )


@dataclass(frozen=True)
class ErroneousAction:
    """An action that an error marker row flagged as wrong."""

    location: PlotLocation
    name: str
    action_category: str
    shock_value: str
    error_info: ErrorInfo

    @classmethod
    def from_rows(cls, action_row: Any, error_marker_row: Any) -> ErroneousAction:
        return cls(
            location=PlotLocation.from_row(action_row),
            name=action_row.action_name,
            action_category=action_row.action_category,
            shock_value=action_row.shock_value,
            error_info=ErrorInfo.from_row(error_marker_row),
        )


@dataclass(frozen=True)
class MissedAction:
    """An action that should have been performed but was not."""

    location: PlotLocation
    name: str
    error_info: ErrorInfo

    @classmethod
    def from_row(cls, row: Any) -> MissedAction:
        return cls(
            location=PlotLocation.from_row(row),
            name=row.action_vital_name,
            error_info=ErrorInfo.from_row(row),
        )


class PeriodType(enum.Enum):
    """The kind of a period spanning two plot locations."""

    CPR = "CPR"
    STAGE = "Stage"


@dataclass(frozen=True)
class Period:
    """A span of time on the plot, such as a stage or a CPR interval."""

    kind: PeriodType
    start: PlotLocation
    end: PlotLocation


ActionPlotPoint = Union[ErroneousAction, Action, MissedAction, Period]