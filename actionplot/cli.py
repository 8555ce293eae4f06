"""Command line entry point that prints the plot points of a timeline CSV."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from actionplot.csv_reader import HeaderError
from actionplot.processor import PlotResult, process
from actionplot.rows import RowError
from actionplot.sources import SourceError
from actionplot.structures import Action, ErroneousAction

DEFAULT_FILE = "timeline-multiplayer-09182024.csv"


def _read_line() -> str | None:
    try:
        return input()
    except EOFError:
        print("Failed to read line", file=sys.stderr)
        return None


def _display_menu() -> str | None:
    print(
        "No argument provided (give file url or path on command line when running). "
        "Please select an option:"
    )
    print("1. Enter file with path to parse")
    print("2. Enter URL for processing the streaming CSV text")
    print(f"3. Run with hard-coded {DEFAULT_FILE} file")

    choice = _read_line()
    if choice is None:
        return None
    choice = choice.strip()
    if choice == "1":
        print("Enter file path:")
        return _read_line()
    if choice == "2":
        print("Enter URL:")
        return _read_line()
    if choice == "3":
        return DEFAULT_FILE
    print("Invalid option")
    return None


def _report(results: Iterable[PlotResult]) -> None:
    for item_number, result in enumerate(results, start=1):
        if isinstance(result, ErroneousAction):
            print(f"{item_number} Error: {result!r}")
        elif isinstance(result, Action):
            print(f"{item_number} Action: {result!r}")
        elif isinstance(result, RowError):
            print(f"{item_number} error: {result}")


def main(argv: Sequence[str] | None = None) -> int:
    """Process the file or URL given as the one argument, or chosen from a menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    src = args[0] if len(args) == 1 else _display_menu()
    if src is None:
        return 1

    try:
        results = process(src.strip())
    except SourceError as exc:
        print(exc, file=sys.stderr)
        return 1
    except HeaderError as exc:
        print(f"1 error: {exc}")
        return 0

    _report(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())