# actionplot

`actionplot` reads the action timeline CSV that a resuscitation training
simulation writes. It turns the rows into a stream of plot points for a
dashboard:

- **actions** that a participant takes, each with a category and a shock
  energy (for example `Defib (Unsynchronized Shock) 200J`);
- **erroneous actions**, which are actions that an error marker row points
  at. The marker must be within two seconds of the action, before or after;
- **missed actions**, which are expected actions that were never performed;
- **periods**, which are simulation stages and CPR stretches. Each period has
  a start location and an end location.

## Installing

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## The input

The first row of the CSV must begin with these columns, in this order. Case
does not matter, and extra columns after them are allowed:

```
Time Stamp[Hr:Min:Sec], Action/Vital Name, SubAction Time[Min:Sec], SubAction Name,
Score, Old Value, New Value, Username, Speech Command
```

If the header does not match, `actionplot.csv_reader.HeaderError` is raised
before any row is read. Blank lines are skipped. Rows that cannot be read,
such as a row with an empty time stamp, come out of the stream as
`actionplot.rows.RowError` values, and processing continues.

## From the command line

```
actionplot timeline.csv
actionplot https://example.com/timeline.csv
```

The source can be a local path or an `http`/`https` URL. With no argument, a
menu offers three choices:

1. enter a file path;
2. enter a URL;
3. use `timeline-multiplayer-09182024.csv` in the current directory.

The command numbers every item in the stream. It prints only actions
(`N Action: ...`), erroneous actions (`N Error: ...`) and unreadable rows
(`N error: ...`). Missed actions and periods are counted in the numbering but
are not printed. A wrong header is printed as `1 error: ...`.

If the source cannot be opened, the command writes the reason to standard
error and exits with status 1. It also exits with status 1 when the menu
choice is not valid.

## From Python

```python
from actionplot.processor import process, process_csv

for item in process("timeline.csv"):
    print(item)

with open("timeline.csv", newline="") as stream:
    points = list(process_csv(stream, max_rows_to_check=10))
```

`process` opens the source with `actionplot.sources.create_reader`. It raises
`actionplot.sources.SourceError` if the source cannot be opened. It keeps the
five most recent action rows for matching against error markers. To choose a
different window, use `process_csv`.

The items are instances of the classes in `actionplot.structures`:

- `Action`
- `ErroneousAction`
- `MissedAction`
- `Period`

A `Period` has a `kind` of `PeriodType.CPR` or `PeriodType.STAGE`. Each item
carries a `PlotLocation`. It holds a `CsvRowTime` time stamp and the
`(number, name)` stage. A row time is dated today in UTC.

Action rows are held back briefly, so that a later error marker can still
claim them. Because of this, an action can come out of the stream after the
rows that follow it.

How error markers are matched is logged at debug level by the logger
`actionplot.plot_processors`.

## What it does not do

`actionplot` only produces plot points. It does not draw charts, serve a
dashboard, or store results anywhere.