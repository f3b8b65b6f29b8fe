"""Rectangular cell-state grid with bounds-checked access.

Coordinates are zero-based ``(row, col)`` pairs. Negative indices are never
wrapped: any coordinate outside ``[0, height) x [0, width)`` raises
:class:`OutOfBoundsError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from contagion_grid.config.types import validate_dimensions


class CellState(IntEnum):
    """Epidemic state of one cell. Infection is permanent."""

    SUSCEPTIBLE = 0
    INFECTED = 1


class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(f"cell ({row}, {col}) is outside a {height}x{width} grid")
        self.row = row
        self.col = col
        self.height = height
        self.width = width


@dataclass(frozen=True)
class CellRecord:
    """One addressable cell of a flattened grid snapshot.

    ``cell_id`` is the row-major index ``row * width + col``.
    """

    cell_id: int
    state: CellState
    row: int
    col: int


class Grid:
    """Fixed-size 2-D container of :class:`CellState` values."""

    __slots__ = ("_height", "_width", "_cells")

    def __init__(
        self, height: int, width: int, fill: CellState = CellState.SUSCEPTIBLE
    ) -> None:
        validate_dimensions(height, width)
        self._height = height
        self._width = width
        fill = CellState(fill)
        self._cells: list[list[CellState]] = [[fill] * width for _ in range(height)]

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        return self._height, self._width

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._height, self._width)

    def get(self, row: int, col: int) -> CellState:
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, state: CellState) -> None:
        self._check(row, col)
        self._cells[row][col] = CellState(state)

    def clone(self) -> Grid:
        """Return an independent copy sharing no row storage with this grid."""
        other = Grid.__new__(Grid)
        other._height = self._height
        other._width = self._width
        other._cells = [list(row) for row in self._cells]
        return other

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self._cells)

    def count_around(
        self, row: int, col: int, offsets: Iterable[tuple[int, int]], state: CellState
    ) -> tuple[int, int]:
        """Count cells in *state* at ``(row, col) + offset`` for each offset.

        Returns ``(matches, skipped)``; *skipped* is the number of offsets
        landing outside the grid.
        """
        cells = self._cells
        height, width = self._height, self._width
        matches = 0
        skipped = 0
        for dy, dx in offsets:
            r, c = row + dy, col + dx
            if 0 <= r < height and 0 <= c < width:
                if cells[r][c] == state:
                    matches += 1
            else:
                skipped += 1
        return matches, skipped

    def infected_cells(self) -> list[tuple[int, int]]:
        """Return ``(row, col)`` of every infected cell in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, state in enumerate(row)
            if state == CellState.INFECTED
        ]

    def to_flat_snapshot(self) -> list[CellRecord]:
        """Flatten the grid into row-major :class:`CellRecord` entries."""
        return [
            CellRecord(cell_id=r * self._width + c, state=state, row=r, col=c)
            for r, row in enumerate(self._cells)
            for c, state in enumerate(row)
        ]

    def to_array(self) -> np.ndarray:
        """Return an ``(height, width)`` int8 array of state codes."""
        return np.array(self._cells, dtype=np.int8).reshape(self._height, self._width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        infected = self.count(CellState.INFECTED)
        return f"Grid(height={self._height}, width={self._width}, infected={infected})"
