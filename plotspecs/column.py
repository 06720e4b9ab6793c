"""Data column references and output file formats."""

from __future__ import annotations

from enum import Enum


class ColumnIndex:
    """A reference to a data column, either by position or by header name.

    An integer column ``1`` is rendered as ``1``; a named column ``"Name"``
    is rendered quoted as ``'Name'``.
    """

    __slots__ = ("value",)

    def __init__(self, col: int | str | ColumnIndex = 0) -> None:
        if isinstance(col, ColumnIndex):
            self.value: str = col.value
        elif isinstance(col, bool):
            raise TypeError("a column index must be an int or a str, not bool")
        elif isinstance(col, int):
            self.value = str(col)
        elif isinstance(col, str):
            self.value = f"'{col}'"
        else:
            raise TypeError(
                f"a column index must be an int or a str, not {type(col).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ColumnIndex({self.value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColumnIndex):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class Extension(Enum):
    """File formats a plot can be saved to."""

    EMF = "emf"
    PNG = "png"
    SVG = "svg"
    PDF = "pdf"
    EPS = "eps"