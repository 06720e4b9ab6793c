"""Offset and title options."""

from __future__ import annotations

from typing import TypeVar

from plotspecs.options import collapse_whitespace
from plotspecs.text import TextSpecs

_S = TypeVar("_S")


def _number(value: float) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{float(value):g}"
    return str(value)


class OffsetSpecs:
    """A shift of an element along x and y, in characters or graph/screen units."""

    def __init__(self) -> None:
        super().__init__()
        self._xoffset = "0"
        self._yoffset = "0"
        self._changed = False

    def _set_x(self: _S, text: str) -> _S:
        self._xoffset = text
        self._changed = True
        return self

    def _set_y(self: _S, text: str) -> _S:
        self._yoffset = text
        self._changed = True
        return self

    def shift_along_x(self: _S, chars: float) -> _S:
        """Shift along x by a number of characters (fractions allowed)."""
        return self._set_x(_number(chars))

    def shift_along_y(self: _S, chars: float) -> _S:
        """Shift along y by a number of characters (fractions allowed)."""
        return self._set_y(_number(chars))

    def shift_along_graph_x(self: _S, val: float) -> _S:
        """Shift along x in the graph coordinate system."""
        return self._set_x(f"graph {_number(val)}")

    def shift_along_graph_y(self: _S, val: float) -> _S:
        """Shift along y in the graph coordinate system."""
        return self._set_y(f"graph {_number(val)}")

    def shift_along_screen_x(self: _S, val: float) -> _S:
        """Shift along x in the screen coordinate system."""
        return self._set_x(f"screen {_number(val)}")

    def shift_along_screen_y(self: _S, val: float) -> _S:
        """Shift along y in the screen coordinate system."""
        return self._set_y(f"screen {_number(val)}")

    def repr(self) -> str:
        """Render the offset option; empty when no shift was given."""
        if not self._changed:
            return ""
        return f"offset {self._xoffset}, {self._yoffset}"


class TitleSpecs:
    """Title text together with its text and offset options."""

    def __init__(self) -> None:
        super().__init__()
        self._title = "''"
        self._title_text_specs = TextSpecs()
        self._title_offset_specs = OffsetSpecs()

    def title(self: _S, title: str) -> _S:
        """Set the title text."""
        self._title = f"'{title}'"
        return self

    def title_shift_along_x(self: _S, chars: float) -> _S:
        """Shift the title along x by a number of characters."""
        self._title_offset_specs.shift_along_x(chars)
        return self

    def title_shift_along_y(self: _S, chars: float) -> _S:
        """Shift the title along y by a number of characters."""
        self._title_offset_specs.shift_along_y(chars)
        return self

    def title_shift_along_graph_x(self: _S, val: float) -> _S:
        """Shift the title along x in graph coordinates."""
        self._title_offset_specs.shift_along_graph_x(val)
        return self

    def title_shift_along_graph_y(self: _S, val: float) -> _S:
        """Shift the title along y in graph coordinates."""
        self._title_offset_specs.shift_along_graph_y(val)
        return self

    def title_shift_along_screen_x(self: _S, val: float) -> _S:
        """Shift the title along x in screen coordinates."""
        self._title_offset_specs.shift_along_screen_x(val)
        return self

    def title_shift_along_screen_y(self: _S, val: float) -> _S:
        """Shift the title along y in screen coordinates."""
        self._title_offset_specs.shift_along_screen_y(val)
        return self

    def title_text_color(self: _S, color: str) -> _S:
        """Set the colour of the title text."""
        self._title_text_specs.text_color(color)
        return self

    def title_font_name(self: _S, name: str) -> _S:
        """Set the font name of the title text."""
        self._title_text_specs.font_name(name)
        return self

    def title_font_size(self: _S, size: int) -> _S:
        """Set the font point size of the title text."""
        self._title_text_specs.font_size(size)
        return self

    def repr(self) -> str:
        """Render the title option; empty when the title text is empty."""
        if self._title == "''":
            return ""
        return collapse_whitespace(
            f"title {self._title} {self._title_text_specs.repr()} "
            f"{self._title_offset_specs.repr()}"
        )