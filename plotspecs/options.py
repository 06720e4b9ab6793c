"""Option groups for lines, points, filled curves and visibility.

Each class holds one group of gnuplot options and renders it with ``repr()``.
The classes are designed as cooperative mixins so that richer specs can
combine several groups; each setter returns ``self`` for chaining.
"""

from __future__ import annotations

from typing import TypeVar

_S = TypeVar("_S")


def collapse_whitespace(text: str) -> str:
    """Trim *text* and reduce every run of whitespace to a single space."""
    return " ".join(text.split())


def _number(value: float) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class LineSpecs:
    """Line style, type, width, colour and dash options."""

    def __init__(self) -> None:
        super().__init__()
        self._linestyle = ""
        self._linetype = ""
        self._linewidth = ""
        self._linecolor = ""
        self._dashtype = ""

    def line_style(self: _S, value: int) -> _S:
        """Set the line style."""
        self._linestyle = f"linestyle {_number(value)}"
        return self

    def line_type(self: _S, value: int) -> _S:
        """Set the line type."""
        self._linetype = f"linetype {_number(value)}"
        return self

    def line_width(self: _S, value: int) -> _S:
        """Set the line width."""
        self._linewidth = f"linewidth {_number(value)}"
        return self

    def line_color(self: _S, value: str) -> _S:
        """Set the line colour (e.g. ``"red"`` or ``"#404040"``)."""
        self._linecolor = f"linecolor '{value}'"
        return self

    def dash_type(self: _S, value: int) -> _S:
        """Set the dash type."""
        self._dashtype = f"dashtype {_number(value)}"
        return self

    def repr(self) -> str:
        """Render the line options; empty when none were given."""
        return collapse_whitespace(
            " ".join(
                (
                    self._linestyle,
                    self._linetype,
                    self._linewidth,
                    self._linecolor,
                    self._dashtype,
                )
            )
        )


class PointSpecs:
    """Point type and size options."""

    def __init__(self) -> None:
        super().__init__()
        self._pointtype = ""
        self._pointsize = ""

    def point_type(self: _S, value: int) -> _S:
        """Set the point type."""
        self._pointtype = f"pointtype {_number(value)}"
        return self

    def point_size(self: _S, value: int) -> _S:
        """Set the point size."""
        self._pointsize = f"pointsize {_number(value)}"
        return self

    def repr(self) -> str:
        """Render the point options; empty when none were given."""
        return collapse_whitespace(f"{self._pointtype} {self._pointsize}")


class FilledCurvesSpecs:
    """Which side of a curve a filled area is limited to."""

    def __init__(self) -> None:
        super().__init__()
        self._fill_mode = ""

    def above(self: _S) -> _S:
        """Limit the filled area to above the curves."""
        self._fill_mode = "above"
        return self

    def below(self: _S) -> _S:
        """Limit the filled area to below the curves."""
        self._fill_mode = "below"
        return self

    def repr(self) -> str:
        """Render the fill mode; empty when none was chosen."""
        return collapse_whitespace(f" {self._fill_mode}")


class ShowSpecs:
    """Visibility of a plot element."""

    def __init__(self) -> None:
        super().__init__()
        self._show = True

    def show(self: _S, value: bool = True) -> _S:
        """Show the element, or hide it when *value* is false."""
        self._show = bool(value)
        return self

    def hide(self: _S) -> _S:
        """Hide the element."""
        return self.show(False)

    def is_hidden(self) -> bool:
        """Return True if the element is hidden."""
        return not self._show

    def repr(self) -> str:
        """Render ``""`` when shown and ``"no"`` when hidden."""
        return "" if self._show else "no"