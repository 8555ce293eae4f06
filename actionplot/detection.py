"""Classification of timeline rows: actions, stage boundaries, CPR and errors."""

from __future__ import annotations

from typing import Any

from actionplot.text import normalize_whitespace

CPR_START_MARKERS = ("begin cpr", "enter cpr")
CPR_END_MARKERS = ("stop cpr", "end cpr")

_ERROR_TRIGGERED = "Error-Triggered"
_ACTION_PERFORMED = "Action-Was-Performed"
_ACTION_NOT_PERFORMED = "Action-Was-Not-Performed"


def is_action_row(row: Any) -> bool:
    """Whether the row records an action performed within a stage."""
    return (
        row.parsed_stage is not None
        and bool(row.subaction_time.strip())
        and bool(row.subaction_name)
        and not is_missed_action(row)
        and row.cpr_boundary is None
    )


def is_stage_boundary(row: Any) -> bool:
    """Whether the row marks the start of a stage and carries nothing else."""
    return (
        row.parsed_stage is not None
        and not row.subaction_time.strip()
        and not row.subaction_name
        and not row.score
        and not row.old_value
        and not row.new_value
    )


def cpr_boundary(row: Any) -> str | None:
    """Return ``"START"`` or ``"END"`` for a CPR marker row, otherwise None."""
    name = normalize_whitespace(row.subaction_name.lower())
    if name in CPR_START_MARKERS:
        return "START"
    if name in CPR_END_MARKERS:
        return "END"
    return None


def is_error_action_marker(row: Any) -> bool:
    """Whether the row flags a nearby action as performed in error."""
    return row.old_value.strip() == _ERROR_TRIGGERED and row.score.strip() == _ACTION_PERFORMED


def is_missed_action(row: Any) -> bool:
    """Whether the row reports an action that should have been performed."""
    return row.old_value.strip() == _ERROR_TRIGGERED and row.score.strip() == _ACTION_NOT_PERFORMED