"""Dense 2D grid storage for puzzle maps."""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")

Coord = Tuple[int, int]  # (x, y)


def _replicate(value: T, count: int) -> List[T]:
    """Return ``count`` cells holding ``value``, each its own copy if mutable."""
    try:
        hash(value)
    except TypeError:
        return [copy.deepcopy(value) for _ in range(count)]
    return [value] * count


class Grid(Generic[T]):
    """Fixed-size 2D array stored row-major in a flat list.

    Cell ``(x, y)`` lives at index ``x + y * width``. The dimensions never
    change after construction. Two access tiers are offered: ``get``/``set``
    raise ``IndexError`` outside the grid, while ``checked_get``/``update``
    return ``None`` so that edge-walking code needs no special cases.
    """

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int, fill: T) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[T] = _replicate(fill, width * height)

    # Construction ---------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """Build a grid from a list of rows.

        The first row gives the width. The grid is pre-filled with the very
        first element, so a shorter row leaves copies of it in its gaps; a
        longer row raises ``IndexError``.
        """
        if not rows or not rows[0]:
            raise ValueError("Grid cannot be empty")
        grid = cls(len(rows[0]), len(rows), rows[0][0])
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                grid.set(x, y, value)
        return grid

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid[Any]":
        """Build a grid from a 2D ``numpy`` array indexed ``[row, col]``."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {arr.ndim} dimensions")
        height, width = arr.shape
        grid: Grid[Any] = cls(width, height, None)
        grid._cells = arr.reshape(-1).tolist()
        return grid

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Return the grid contents as a ``(height, width)`` array."""
        return np.array(self._cells, dtype=dtype).reshape(self.height, self.width)

    def copy(self) -> "Grid[T]":
        """Return an independent duplicate of this grid."""
        dup: Grid[T] = Grid(self.width, self.height, None)  # type: ignore[arg-type]
        dup._cells = copy.deepcopy(self._cells)
        return dup

    # Access ---------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"array access {x},{y} out of bounds")
        return x + y * self.width

    def get(self, x: int, y: int) -> T:
        """Return the value at ``x``, ``y``; raise ``IndexError`` outside."""
        return self._cells[self._check(x, y)]

    def checked_get(self, x: int, y: int) -> Optional[T]:
        """Return the value at ``x``, ``y`` or ``None`` if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[x + y * self.width]

    def set(self, x: int, y: int, value: T) -> None:
        """Set the value at the specified cell."""
        self._cells[self._check(x, y)] = value

    def update(self, x: int, y: int, func: Callable[[T], T]) -> Optional[T]:
        """Replace the cell with ``func(cell)`` and return the new value.

        Out-of-bounds coordinates leave the grid untouched and return
        ``None``.
        """
        if not self.in_bounds(x, y):
            return None
        idx = x + y * self.width
        self._cells[idx] = func(self._cells[idx])
        return self._cells[idx]

    def row(self, y: int) -> Tuple[T, ...]:
        """Return a read-only copy of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"array row {y} out of bounds")
        start = y * self.width
        return tuple(self._cells[start : start + self.width])

    def rows(self) -> List[List[T]]:
        """Return a list-of-rows copy of the grid data."""
        return [list(self.row(y)) for y in range(self.height)]

    def fill(self, value: T) -> None:
        """Replace every cell by ``value``."""
        self._cells = _replicate(value, self.width * self.height)

    def values_equal(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Compare two cells; any out-of-bounds coordinate gives ``False``."""
        if not self.in_bounds(x1, y1) or not self.in_bounds(x2, y2):
            return False
        return self.get(x1, y1) == self.get(x2, y2)

    # Helpers --------------------------------------------------------------

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (width, height)."""
        return self.width, self.height

    def cells(self) -> Iterator[Tuple[Coord, T]]:
        """Yield ``((x, y), value)`` in row-major order."""
        for idx, value in enumerate(self._cells):
            yield (idx % self.width, idx // self.width), value

    def find(self, value: T) -> Optional[Coord]:
        """Return the first coordinate holding ``value``, if any."""
        for coord, v in self.cells():
            if v == value:
                return coord
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape() == other.shape() and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid", "Coord"]
