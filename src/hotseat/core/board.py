"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import BOARD_SIZE, Square, make_square

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board with a cached king square per color."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[int(old_piece.color)] == sq
        ):
            self._king_squares[int(old_piece.color)] = None

        self._squares[sq] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in index order."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Simulation ---------------------------------------------------------

    @contextmanager
    def simulate(self, changes: Mapping[Square, Piece | None]) -> Iterator[Board]:
        """Temporarily apply *changes*; the previous contents come back on exit.

        Squares are written in mapping order and restored in reverse, so
        nested simulations unwind cleanly even if the body raises.
        """
        saved = [(sq, self._squares[sq]) for sq in changes]
        try:
            for sq, piece in changes.items():
                self[sq] = piece
            yield self
        finally:
            for sq, piece in reversed(saved):
                self[sq] = piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column in range(BOARD_SIZE):
            b[make_square(1, column)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(6, column)] = Piece(Color.BLACK, PieceType.PAWN)

        for column, pt in enumerate(_BACK_RANK):
            b[make_square(0, column)] = Piece(Color.WHITE, pt)
            b[make_square(7, column)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_diagram(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight diagram rows, rank 8 first.

        Each row holds eight characters: a piece letter or ``.`` for an
        empty square.  Pawns off their home row and kings or rooks off
        their starting squares are marked as having moved.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for i, line in enumerate(rows):
            cells = line.replace(" ", "")
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"Invalid diagram row: {line!r}")
            row = BOARD_SIZE - 1 - i
            for column, char in enumerate(cells):
                if char == ".":
                    continue
                piece = Piece.from_char(char)
                if not _on_home_square(piece, row, column):
                    piece = piece.moved()
                b[make_square(row, column)] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for column in range(BOARD_SIZE):
                p = self[make_square(row, column)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _on_home_square(piece: Piece, row: int, column: int) -> bool:
    home_row = 0 if piece.color == Color.WHITE else BOARD_SIZE - 1
    if piece.piece_type == PieceType.PAWN:
        pawn_row = 1 if piece.color == Color.WHITE else BOARD_SIZE - 2
        return row == pawn_row
    return row == home_row and _BACK_RANK[column] == piece.piece_type
