# plotspecs

Small, chainable builders that produce gnuplot command fragments: line and
point styles, filled curves, visibility, minor tics, histogram styles, text and
font options, axis labels, titles with offsets, and complete plot elements.

Each builder collects options through methods that return the builder itself,
and renders them with `repr()`. Options that were never set produce no output,
and runs of whitespace in the result are collapsed to single spaces.

## Installation

```
pip install plotspecs
```

## Example

```python
from plotspecs.draw import DrawSpecs
from plotspecs.title import TitleSpecs
from plotspecs.tics import TicsSpecsMinor
from plotspecs.vec import linspace

specs = DrawSpecs("'file.dat'", "1:2", "lines").label("SuperData")
specs.line_width(3).line_color("orange")
print(specs.repr())
# 'file.dat' using 1:2 title 'SuperData' with lines linewidth 3 linecolor 'orange'

title = TitleSpecs().title("Hello").title_shift_along_x(1)
print(title.repr())
# title 'Hello' enhanced textcolor '#404040' offset 1, 0

mxtics = TicsSpecsMinor("x").number(5)
print(mxtics.repr())
# set mxtics 6

xs = linspace(0.0, 5.0, 4)  # five evenly spaced values from 0.0 to 5.0
```

## Modules

- `plotspecs.column`: `ColumnIndex`, a data column reference (an integer
  renders as itself, a header name renders quoted), and the `Extension` enum
  of output file formats (`emf`, `png`, `svg`, `pdf`, `eps`).
- `plotspecs.vec`: `linspace(x0, x1, numintervals)` returns
  `numintervals + 1` evenly spaced values and raises `ValueError` when
  `numintervals` is not positive; `int_range(x0, x1)` returns the values from
  `x0` to `x1` inclusive in unit steps, as floats, in either direction.
- `plotspecs.options`: `LineSpecs`, `PointSpecs`, `FilledCurvesSpecs`,
  `ShowSpecs` and `collapse_whitespace`.
- `plotspecs.tics`: `TicsSpecsMinor` (raises `ValueError` for an empty axis
  name) and `HistogramStyleSpecs`.
- `plotspecs.text`: `TextSpecs` (enhanced mode and text colour `#404040` by
  default) and `AxisLabelSpecs`.
- `plotspecs.title`: `OffsetSpecs` and `TitleSpecs`.
- `plotspecs.draw`: `DrawSpecs`, a plot element with line, point and
  filled-curve options, a legend label, and tic labels taken from data
  columns; its line width is 2 unless set otherwise.

## What it does not do

The package only builds text fragments. It does not assemble whole plot
scripts or figures, write data files, run gnuplot, show windows or save
images; `Extension` merely names the formats.

## Running the tests

```
pip install -e ".[test]"
pytest
```