"""Minor tics and histogram style options."""

from __future__ import annotations

from plotspecs.options import ShowSpecs, collapse_whitespace


def _number(value: float) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class TicsSpecsMinor(ShowSpecs):
    """Options for the minor tics of one axis."""

    def __init__(self, axis: str) -> None:
        if not axis:
            raise ValueError(
                "You have provided an empty string in `axis` argument of TicsSpecsMinor(axis)."
            )
        super().__init__()
        self._axis = axis
        self._frequency = ""

    @property
    def axis(self) -> str:
        """The name of the axis these tics belong to."""
        return self._axis

    def automatic(self) -> TicsSpecsMinor:
        """Let the number of minor tics between major tics be chosen automatically."""
        self._frequency = ""
        return self

    def number(self, value: int) -> TicsSpecsMinor:
        """Set the number of minor tics between major tics; negatives count as zero."""
        self._frequency = _number(max(value, 0) + 1)
        return self

    def repr(self) -> str:
        """Render the minor tics command."""
        if self.is_hidden():
            return f"unset m{self._axis}tics"
        return collapse_whitespace(f"set m{self._axis}tics {self._frequency}")


class HistogramStyleSpecs:
    """Options for the style of histograms."""

    def __init__(self) -> None:
        self._type = ""
        self._gap_clustered = ""
        self._gap_errorbars = ""
        self._linewidth = ""

    def clustered(self) -> HistogramStyleSpecs:
        """Use clustered histograms."""
        self._type = "clustered"
        return self

    def clustered_with_gap(self, value: float) -> HistogramStyleSpecs:
        """Use clustered histograms with the given gap size."""
        self._type = "clustered"
        self._gap_clustered = f"gap {_number(value)}"
        return self

    def row_stacked(self) -> HistogramStyleSpecs:
        """Stack histograms with groups formed from data along rows."""
        self._type = "rowstacked"
        return self

    def column_stacked(self) -> HistogramStyleSpecs:
        """Stack histograms with groups formed from data along columns."""
        self._type = "columnstacked"
        return self

    def error_bars(self) -> HistogramStyleSpecs:
        """Use histograms with error bars."""
        self._type = "errorbars"
        return self

    def error_bars_with_gap(self, value: float) -> HistogramStyleSpecs:
        """Use histograms with error bars and the given gap size."""
        self._type = "errorbars"
        self._gap_errorbars = f"gap {_number(value)}"
        return self

    def error_bars_with_line_width(self, value: float) -> HistogramStyleSpecs:
        """Use histograms with error bars of the given line width."""
        self._type = "errorbars"
        self._linewidth = f"linewidth {_number(value)}"
        return self

    def repr(self) -> str:
        """Render the histogram style command."""
        parts = ["set style histogram", self._type]
        if self._type == "clustered":
            parts.append(self._gap_clustered)
        elif self._type == "errorbars":
            parts.extend((self._gap_errorbars, self._linewidth))
        return collapse_whitespace(" ".join(parts))