"""Options of a single plotted element."""

from __future__ import annotations

from plotspecs.column import ColumnIndex
from plotspecs.options import (
    FilledCurvesSpecs,
    LineSpecs,
    PointSpecs,
    collapse_whitespace,
)

DEFAULT_LINEWIDTH = 2


def _option_value(option: str, value: str) -> str:
    return f"{option} {value} " if value else ""


class DrawSpecs(LineSpecs, PointSpecs, FilledCurvesSpecs):
    """What to plot, how its columns are used, its style and legend label."""

    def __init__(self, what: str, use: str, with_: str) -> None:
        super().__init__()
        self._what = what
        self._using = use
        self._with = with_
        self._title = ""
        self._xtic = ""
        self._ytic = ""
        self.line_width(DEFAULT_LINEWIDTH)

    def label(self, text: str) -> DrawSpecs:
        """Set the legend label."""
        self._title = f"title '{text}'"
        return self

    def label_from_column_header(self, icolumn: int | None = None) -> DrawSpecs:
        """Take the legend label from a column header, optionally of a given column."""
        if icolumn is None:
            self._title = "title columnheader"
        else:
            self._title = f"title columnheader({icolumn})"
        return self

    def label_none(self) -> DrawSpecs:
        """Leave the element out of the legend."""
        self._title = "notitle"
        return self

    def label_default(self) -> DrawSpecs:
        """Let the legend label be derived from the plot expression."""
        self._title = ""
        return self

    def xtics(self, icol: ColumnIndex | int | str) -> DrawSpecs:
        """Take the x tic labels from the given data column."""
        self._xtic = f"xtic(stringcolumn({ColumnIndex(icol).value}))"
        return self

    def ytics(self, icol: ColumnIndex | int | str) -> DrawSpecs:
        """Take the y tic labels from the given data column."""
        self._ytic = f"ytic(stringcolumn({ColumnIndex(icol).value}))"
        return self

    def repr(self) -> str:
        """Render the plot element clause."""
        use = ":".join(part for part in (self._using, self._xtic, self._ytic) if part)
        if not self._using and use:
            use = ":" + use
        return collapse_whitespace(
            " ".join(
                (
                    self._what,
                    _option_value("using", use),
                    self._title,
                    _option_value("with", self._with),
                    FilledCurvesSpecs.repr(self),
                    LineSpecs.repr(self),
                    PointSpecs.repr(self),
                )
            )
        )