"""Extended Moore neighborhood offsets and compass directions.

Offsets are ``(dy, dx)`` pairs relative to a target cell; ``dy`` moves along
rows and ``dx`` along columns.
"""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache

Offset = tuple[int, int]


class InvalidDirectionError(ValueError):
    """Raised for a direction outside the eight compass points."""


class Direction(IntEnum):
    """The eight radius-1 neighbor directions, clockwise from north."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    @classmethod
    def parse(cls, raw: int) -> Direction:
        """Convert a raw direction value, rejecting anything off the compass."""
        if isinstance(raw, bool):
            raise InvalidDirectionError(f"invalid neighbor direction: {raw!r}")
        try:
            return cls(raw)
        except ValueError as exc:
            raise InvalidDirectionError(f"invalid neighbor direction: {raw!r}") from exc

    @property
    def offset(self) -> Offset:
        return _DIRECTION_OFFSETS[self]


_DIRECTION_OFFSETS: dict[Direction, Offset] = {
    Direction.NORTH: (-1, 0),
    Direction.NORTH_EAST: (-1, 1),
    Direction.EAST: (0, 1),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH: (1, 0),
    Direction.SOUTH_WEST: (1, -1),
    Direction.WEST: (0, -1),
    Direction.NORTH_WEST: (-1, -1),
}


def neighbor_coords(direction: Direction | int, row: int, col: int) -> tuple[int, int]:
    """Return the coordinates one step from ``(row, col)`` toward *direction*.

    The result is not bounds-checked; it may lie off the grid.
    """
    dy, dx = Direction.parse(direction).offset
    return row + dy, col + dx


def _check_radius(radius: int) -> None:
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise ValueError(f"radius must be an integer, got {radius!r}")
    if radius < 1:
        raise ValueError("radius must be >= 1")


@lru_cache(maxsize=None)
def ring(radius: int) -> frozenset[Offset]:
    """Return all offsets at Chebyshev distance exactly *radius*.

    The ring at radius ``n`` holds ``8 * n`` offsets and shares none with any
    smaller radius.
    """
    _check_radius(radius)
    offsets: set[Offset] = set()
    for d in range(-radius, radius + 1):
        offsets.add((-radius, d))
        offsets.add((radius, d))
        offsets.add((d, -radius))
        offsets.add((d, radius))
    return frozenset(offsets)


@lru_cache(maxsize=None)
def moore_offsets(radius: int) -> frozenset[Offset]:
    """Return every offset within Chebyshev distance *radius*, origin excluded."""
    _check_radius(radius)
    return frozenset().union(*(ring(r) for r in range(1, radius + 1)))
