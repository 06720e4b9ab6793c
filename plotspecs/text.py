"""Text, font and axis label options."""

from __future__ import annotations

from typing import TypeVar

from plotspecs.options import collapse_whitespace

_S = TypeVar("_S")

DEFAULT_TEXTCOLOR = "#404040"


class TextSpecs:
    """Font, colour and enhanced-mode options of a text element."""

    def __init__(self) -> None:
        super().__init__()
        self._fontname = ""
        self._fontsize = ""
        self._color = ""
        self._enhanced = ""
        self.enhanced(True)
        self.text_color(DEFAULT_TEXTCOLOR)

    def font_name(self: _S, name: str) -> _S:
        """Set the font name (e.g. Helvetica, Georgia, Times)."""
        self._fontname = name
        return self

    def font_size(self: _S, size: int) -> _S:
        """Set the font point size."""
        self._fontsize = str(size)
        return self

    def font_repr(self) -> str:
        """Render the font option; empty when neither name nor size was given."""
        if not self._fontname and not self._fontsize:
            return ""
        return f"font '{self._fontname},{self._fontsize}'"

    def text_color(self: _S, color: str) -> _S:
        """Set the text colour (e.g. ``"blue"`` or ``"#404040"``)."""
        self._color = f"'{color}'"
        return self

    def enhanced(self: _S, value: bool = True) -> _S:
        """Turn enhanced text mode on or off."""
        self._enhanced = "enhanced" if value else "noenhanced"
        return self

    def repr(self) -> str:
        """Render the text options."""
        return collapse_whitespace(
            f"{self._enhanced} textcolor {self._color} {self.font_repr()}"
        )


class AxisLabelSpecs(TextSpecs):
    """Options for the label of one axis."""

    def __init__(self, axis: str) -> None:
        super().__init__()
        self._axis = axis
        self._text = ""
        self._rotate = ""

    def text(self, text: str) -> AxisLabelSpecs:
        """Set the label text."""
        self._text = f"'{text}'"
        return self

    def rotate_by(self, degrees: int) -> AxisLabelSpecs:
        """Rotate the label by the given angle in degrees."""
        self._rotate = f"rotate by {degrees}"
        return self

    def rotate_axis_parallel(self) -> AxisLabelSpecs:
        """Rotate the label to lie parallel to its axis (3D plots)."""
        self._rotate = "rotate parallel"
        return self

    def rotate_none(self) -> AxisLabelSpecs:
        """Do not rotate the label."""
        self._rotate = "norotate"
        return self

    def repr(self) -> str:
        """Render the label command; empty when no text or rotation was set."""
        if not self._text and not self._rotate:
            return ""
        return collapse_whitespace(
            f"set {self._axis}label {self._text} {super().repr()} {self._rotate}"
        )