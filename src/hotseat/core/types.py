"""Square type alias, board geometry and coordinate helpers.

Board layout (row-major, row 0 is White's back rank):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Every direction step is expressed as a signed index offset.  An offset is
only meaningful together with :func:`squares_to_edge`, which tells how many
times it may be applied before leaving the board (and therefore prevents
wrapping from the h-file onto the a-file).
"""

from __future__ import annotations

from enum import IntEnum
from typing import TypeAlias

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 8
SQUARE_PIXEL_SIZE = 120


def row_of(sq: Square) -> int:
    """Row index 0–7 (rank 1–8)."""
    return sq // BOARD_SIZE


def column_of(sq: Square) -> int:
    """Column index 0–7 (file a–h)."""
    return sq % BOARD_SIZE


def make_square(row: int, column: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return row * BOARD_SIZE + column


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chr(ord("a") + column_of(sq)) + str(row_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(int(name[1]) - 1, ord(name[0]) - ord("a"))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < BOARD_SIZE * BOARD_SIZE


# ── Directions ──────────────────────────────────────────────────────────────


class Direction(IntEnum):
    """The eight rays and the eight knight leaps.

    North points towards Black's back rank, east towards the h-file.
    """

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    NORTH_WEST = 4
    NORTH_EAST = 5
    SOUTH_WEST = 6
    SOUTH_EAST = 7
    KNIGHT_NORTH_NORTH_EAST = 8
    KNIGHT_EAST_NORTH_EAST = 9
    KNIGHT_EAST_SOUTH_EAST = 10
    KNIGHT_SOUTH_SOUTH_EAST = 11
    KNIGHT_SOUTH_SOUTH_WEST = 12
    KNIGHT_WEST_SOUTH_WEST = 13
    KNIGHT_WEST_NORTH_WEST = 14
    KNIGHT_NORTH_NORTH_WEST = 15

    @property
    def is_knight_leap(self) -> bool:
        return self >= Direction.KNIGHT_NORTH_NORTH_EAST


# (row delta, column delta) per direction
_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
    Direction.EAST: (0, 1),
    Direction.NORTH_WEST: (1, -1),
    Direction.NORTH_EAST: (1, 1),
    Direction.SOUTH_WEST: (-1, -1),
    Direction.SOUTH_EAST: (-1, 1),
    Direction.KNIGHT_NORTH_NORTH_EAST: (2, 1),
    Direction.KNIGHT_EAST_NORTH_EAST: (1, 2),
    Direction.KNIGHT_EAST_SOUTH_EAST: (-1, 2),
    Direction.KNIGHT_SOUTH_SOUTH_EAST: (-2, 1),
    Direction.KNIGHT_SOUTH_SOUTH_WEST: (-2, -1),
    Direction.KNIGHT_WEST_SOUTH_WEST: (-1, -2),
    Direction.KNIGHT_WEST_NORTH_WEST: (1, -2),
    Direction.KNIGHT_NORTH_NORTH_WEST: (2, -1),
}

ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.WEST,
    Direction.EAST,
)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH_WEST,
    Direction.NORTH_EAST,
    Direction.SOUTH_WEST,
    Direction.SOUTH_EAST,
)
RAY_DIRECTIONS: tuple[Direction, ...] = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
KNIGHT_DIRECTIONS: tuple[Direction, ...] = tuple(
    d for d in Direction if d.is_knight_leap
)
LATERAL_DIRECTIONS: tuple[Direction, ...] = (Direction.WEST, Direction.EAST)


def _edge_distance(sq: Square, delta: tuple[int, int]) -> int:
    row, column = row_of(sq), column_of(sq)
    d_row, d_column = delta
    limits: list[int] = []
    if d_row > 0:
        limits.append((BOARD_SIZE - 1 - row) // d_row)
    elif d_row < 0:
        limits.append(row // -d_row)
    if d_column > 0:
        limits.append((BOARD_SIZE - 1 - column) // d_column)
    elif d_column < 0:
        limits.append(column // -d_column)
    return min(limits)


def _build_squares_to_edge() -> tuple[tuple[int, ...], ...]:
    table: list[tuple[int, ...]] = []
    for sq in range(BOARD_SIZE * BOARD_SIZE):
        counts: list[int] = []
        for direction in Direction:
            count = _edge_distance(sq, _DELTAS[direction])
            if direction.is_knight_leap:
                count = min(count, 1)
            counts.append(count)
        table.append(tuple(counts))
    return tuple(table)


_OFFSETS: tuple[int, ...] = tuple(
    _DELTAS[d][0] * BOARD_SIZE + _DELTAS[d][1] for d in Direction
)
_SQUARES_TO_EDGE = _build_squares_to_edge()


def direction_offset(direction: Direction) -> int:
    """Index delta for one step in *direction* (north = +8, east = +1)."""
    return _OFFSETS[direction]


def squares_to_edge(sq: Square, direction: Direction) -> int:
    """How many steps in *direction* stay on the board.

    For knight leaps the answer is 1 when the leap lands on the board and
    0 otherwise.
    """
    return _SQUARES_TO_EDGE[sq][direction]


# ── Screen mapping ──────────────────────────────────────────────────────────


def square_at_pixel(x: float, y: float, square_size: int = SQUARE_PIXEL_SIZE) -> Square:
    """Map a pixel inside the board widget to a square.

    Coordinates outside the board are clamped to the nearest edge square.
    Row 7 is drawn at the top.
    """
    column = min(max(int(x // square_size), 0), BOARD_SIZE - 1)
    screen_row = min(max(int(y // square_size), 0), BOARD_SIZE - 1)
    return make_square(BOARD_SIZE - 1 - screen_row, column)


def square_origin(sq: Square, square_size: int = SQUARE_PIXEL_SIZE) -> tuple[int, int]:
    """Top-left pixel (x, y) of *sq*."""
    return (
        column_of(sq) * square_size,
        (BOARD_SIZE - 1 - row_of(sq)) * square_size,
    )


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
