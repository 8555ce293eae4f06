"""Timeline CSV rows and their derived fields."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from actionplot.detection import cpr_boundary, is_action_row, is_missed_action
from actionplot.parsing import extract_stage_name, parse_time, process_action_name
from actionplot.structures import CsvRowTime

COLUMN_NAMES = (
    "Time Stamp[Hr:Min:Sec]",
    "Action/Vital Name",
    "SubAction Time[Min:Sec]",
    "SubAction Name",
    "Score",
    "Old Value",
    "New Value",
    "Username",
    "Speech Command",
)

_TEXT_FIELDS = (
    "subaction_time",
    "subaction_name",
    "score",
    "old_value",
    "new_value",
    "username",
    "speech_command",
)


class RowError(ValueError):
    """A CSV record could not be turned into a row."""


@dataclass
class ActionCsvRow:
    """One row of a timeline CSV, with fields derived after reading."""

    timestamp: CsvRowTime | None = None
    action_vital_name: str = ""
    subaction_time: str = ""
    subaction_name: str = ""
    score: str = ""
    old_value: str = ""
    new_value: str = ""
    username: str = ""
    speech_command: str = ""

    parsed_stage: tuple[int, str] | None = None
    action_name: str = ""
    action_category: str = ""
    shock_value: str = ""
    action_point: bool = False
    cpr_boundary: str | None = None

    @classmethod
    def from_record(cls, record: Sequence[str]) -> ActionCsvRow:
        """Build a row from the fields of a record, in column order.

        The timestamp must be present and not blank, and the action/vital
        name must be present; missing later fields are empty and extra
        fields are ignored. Derived fields are filled in.
        """
        fields = list(record)
        if not fields or not fields[0].strip():
            raise RowError("Field cannot be empty")
        if len(fields) < 2:
            raise RowError(f"missing field `{COLUMN_NAMES[1]}`")

        texts = fields[2 : 2 + len(_TEXT_FIELDS)]
        texts += [""] * (len(_TEXT_FIELDS) - len(texts))
        row = cls(
            timestamp=parse_time(fields[0]),
            action_vital_name=fields[1],
            **dict(zip(_TEXT_FIELDS, texts)),
        )
        row.post_deserialize()
        return row

    def post_deserialize(self) -> None:
        """Fill in the stage, CPR boundary, action flag and action name."""
        source = self.username if is_missed_action(self) else self.action_vital_name
        self.parsed_stage = extract_stage_name(source)
        self.cpr_boundary = cpr_boundary(self)
        self.action_point = is_action_row(self)
        self.action_name, self.action_category, self.shock_value = process_action_name(
            self.subaction_name
        )