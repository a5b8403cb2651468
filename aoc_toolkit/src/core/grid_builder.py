"""Assemble a Grid row by row without knowing its final size."""

from __future__ import annotations

from typing import Generic, List, Sequence, TypeVar

from .grid import Grid

T = TypeVar("T")


class GridBuilder(Generic[T]):
    """Accumulate rows parsed one by one, typically from stdin.

    The first appended row fixes the width. Ragged input is a parsing bug
    in the caller, so any later row of a different length raises
    ``ValueError`` immediately.
    """

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._cells: List[T] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return self._height

    def append_row(self, row: Sequence[T]) -> None:
        """Add a new row at the end of the builder."""
        if self._height == 0:
            self._width = len(row)
        elif self._width != len(row):
            raise ValueError(
                f"Row of len {len(row)} appended to GridBuilder of width {self._width}"
            )
        self._height += 1
        self._cells.extend(row)

    def append_char_map(self, line: str) -> None:
        """Add ``line`` as a row of single characters."""
        self.append_row(list(line))

    def append_bool_map(self, line: str, true_char: str) -> None:
        """Add ``line`` as a row of booleans, ``True`` where it equals ``true_char``."""
        self.append_row([c == true_char for c in line])

    def append_digit_map(self, line: str) -> None:
        """Add ``line`` as a row of single-digit integers."""
        digits: List[int] = []
        for c in line:
            if not c.isdigit():
                raise ValueError(f"Expected a digit, got {c!r} in {line!r}")
            digits.append(int(c))
        self.append_row(digits)  # type: ignore[arg-type]

    def to_grid(self) -> Grid[T]:
        """Convert into the final ``Grid`` and reset the builder."""
        if not self._cells:
            raise ValueError("GridBuilder is still empty")
        grid: Grid[T] = Grid(self._width, self._height, None)  # type: ignore[arg-type]
        grid._cells = self._cells
        self._width = 0
        self._height = 0
        self._cells = []
        return grid


__all__ = ["GridBuilder"]
